"""
Slang Translator - Dialect term detection service
=================================================
Detects slang and dialect terms in free-text prompts and annotates each
with its category and canonical meaning:
1. A bundled dictionary compiled once into whole-word matchers
2. Learned terms registered at runtime and persisted in sqlite

Author: Slang Translator Team
Version: 1.0.0
"""
from slang_translator.config.constants import APP_VERSION

__version__ = APP_VERSION
__author__ = "Slang Translator Team"

from slang_translator.services.engine import LinguisticsEngine
from slang_translator.app import create_app, run_server

__all__ = ["LinguisticsEngine", "create_app", "run_server", "__version__"]
