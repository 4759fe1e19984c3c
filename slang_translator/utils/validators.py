"""
Validation Utilities
====================
Functions for validating input data.
"""
import re
from typing import Tuple, Optional

from slang_translator.config import config, Category

MAX_TERM_LENGTH = 100
MAX_MEANING_LENGTH = 500
MAX_CATEGORY_LENGTH = 50

CATEGORY_PATTERN = re.compile(r'^[A-Za-z0-9_\- ]+$')


def validate_text(text) -> Tuple[bool, Optional[str]]:
    """
    Validate text submitted for translation.

    Empty text is valid; it produces an empty result.

    Args:
        text: The text to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if text is None:
        return False, "text is required"

    if not isinstance(text, str):
        return False, "text must be a string"

    max_length = config.engine.max_input_length
    if len(text) > max_length:
        return False, f"text too long. Maximum length: {max_length} characters"

    return True, None


def validate_term(term) -> Tuple[bool, Optional[str]]:
    """
    Validate a slang term.

    Args:
        term: The surface term to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(term, str) or not term.strip():
        return False, "term is required"

    if len(term) > MAX_TERM_LENGTH:
        return False, f"term too long. Maximum length: {MAX_TERM_LENGTH} characters"

    return True, None


def validate_meaning(meaning) -> Tuple[bool, Optional[str]]:
    """Validate the meaning of a term."""
    if not isinstance(meaning, str) or not meaning.strip():
        return False, "meaning is required"

    if len(meaning) > MAX_MEANING_LENGTH:
        return False, f"meaning too long. Maximum length: {MAX_MEANING_LENGTH} characters"

    return True, None


def validate_category(category) -> Tuple[bool, Optional[str]]:
    """
    Validate a category label.

    Bundled categories are always accepted; learned terms may carry any short
    label made of letters, digits, spaces, underscores or hyphens.
    """
    if not isinstance(category, str) or not category.strip():
        return False, "category is required"

    if category in Category.__members__:
        return True, None

    if len(category) > MAX_CATEGORY_LENGTH:
        return False, f"category too long. Maximum length: {MAX_CATEGORY_LENGTH} characters"

    if not CATEGORY_PATTERN.match(category):
        return False, "Invalid category format"

    return True, None
