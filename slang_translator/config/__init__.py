"""
Slang Translator - Configuration Module
"""
from slang_translator.config.settings import Config, config
from slang_translator.config.constants import Category, DiscoverySource
from slang_translator.config.dictionary import TERM_DICTIONARY

__all__ = [
    "Config",
    "config",
    "Category",
    "DiscoverySource",
    "TERM_DICTIONARY"
]
