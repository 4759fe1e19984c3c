"""
Prompt Context
==============
Renders detected terms as hints for a downstream AI prompt.
"""
from typing import List, Optional

from slang_translator.config import config
from slang_translator.models.terms import TermEntry


def format_terms_for_prompt(terms: List[TermEntry], max_terms: Optional[int] = None) -> str:
    """
    Generate a slang-context line for inclusion in prompts.

    Args:
        terms: Terms from a TranslationResult, most specific first
        max_terms: Maximum number of terms to include

    Returns:
        Formatted hint line, or an empty string when nothing was detected
    """
    if not terms:
        return ""

    limit = max_terms or config.engine.prompt_max_terms
    listed = ', '.join(f'"{t.term}" ({t.meaning})' for t in terms[:limit])
    return f"Detected slang/dialect terms: {listed}"


def format_terms_inline(terms: List[TermEntry], max_terms: int = 5) -> str:
    """Compact term=meaning form for tight prompt budgets."""
    if not terms:
        return ""
    return "Slang: " + ', '.join(f"{t.term}={t.meaning}" for t in terms[:max_terms])
