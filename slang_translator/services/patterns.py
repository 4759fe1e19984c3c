"""
Pattern Compiler
================
Turns dictionary entries into precompiled whole-word matchers.
"""
import re
from typing import Dict, Iterator, List, Mapping

from slang_translator.models.terms import CompiledPattern, TermEntry


def _category_name(category) -> str:
    """Plain string form of a category (enum member or free-form label)."""
    return getattr(category, 'value', category)


def compile_pattern(term: str, meaning: str, category) -> CompiledPattern:
    """
    Compile a term into a matcher that finds it as an independent unit.

    The term is matched literally and case-insensitively, and only where it
    is not flanked by word characters, so "cap" matches in "that's cap" but
    not in "caption".

    Args:
        term: Surface string to detect (may contain spaces)
        meaning: Canonical gloss
        category: Category enum member or label

    Returns:
        CompiledPattern for the term

    Raises:
        ValueError: If the term is empty
    """
    if not term or not term.strip():
        raise ValueError("term must be a non-empty string")

    matcher = re.compile(rf"(?<!\w){re.escape(term)}(?!\w)", re.IGNORECASE)
    return CompiledPattern(
        matcher=matcher,
        term=term,
        meaning=meaning,
        category=_category_name(category)
    )


def iter_entries(dictionary: Mapping[object, Mapping[str, str]]) -> Iterator[TermEntry]:
    """Yield every dictionary entry in category order, then entry order."""
    for category, terms in dictionary.items():
        for term, meaning in terms.items():
            yield TermEntry(term=term, meaning=meaning, category=_category_name(category))


def compile_dictionary(dictionary: Mapping[object, Mapping[str, str]]) -> List[CompiledPattern]:
    """
    Compile a whole dictionary into one flat list, longest terms first.

    The sort is stable: terms of equal length keep dictionary order.
    """
    patterns = [
        compile_pattern(entry.term, entry.meaning, entry.category)
        for entry in iter_entries(dictionary)
    ]
    return sorted(patterns, key=lambda p: len(p.term), reverse=True)


def count_by_category(dictionary: Mapping[object, Mapping[str, str]]) -> Dict[str, int]:
    return {_category_name(category): len(terms) for category, terms in dictionary.items()}
