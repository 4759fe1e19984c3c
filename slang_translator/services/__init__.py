"""
Slang Translator - Services
"""
from slang_translator.services.patterns import compile_pattern, compile_dictionary
from slang_translator.services.dynamic_store import DynamicTermStore
from slang_translator.services.engine import (
    LinguisticsEngine,
    build_translation_result,
    get_engine
)
from slang_translator.services.prompting import format_terms_for_prompt
from slang_translator.services.urban_dictionary import UrbanDictionaryClient
from slang_translator.services.discovery import SlangDiscoveryService

__all__ = [
    "compile_pattern",
    "compile_dictionary",
    "DynamicTermStore",
    "LinguisticsEngine",
    "build_translation_result",
    "get_engine",
    "format_terms_for_prompt",
    "UrbanDictionaryClient",
    "SlangDiscoveryService"
]
