"""
Slang Translator - Utility Functions
"""
from slang_translator.utils.validators import (
    validate_text,
    validate_term,
    validate_meaning,
    validate_category
)
from slang_translator.utils.logging import (
    LogBuffer,
    AppLogger,
    get_logger,
    debug_print
)

__all__ = [
    "validate_text",
    "validate_term",
    "validate_meaning",
    "validate_category",
    "LogBuffer",
    "AppLogger",
    "get_logger",
    "debug_print"
]
