"""
Linguistics Engine
==================
Detects slang and dialect terms in free text.

Static dictionary patterns are compiled once at construction; learned terms
are compiled once when registered. A translate call only evaluates those
precompiled matchers and never rewrites the input text.
"""
import random
from typing import Iterable, List, Mapping, Optional, Union

from slang_translator.config.constants import (
    CONFIDENCE_BASE,
    CONFIDENCE_PER_TERM,
    CONFIDENCE_MAX,
    EMPTY_INPUT_CONFIDENCE
)
from slang_translator.config.dictionary import TERM_DICTIONARY
from slang_translator.models.terms import TermEntry, TranslationResult
from slang_translator.services.dynamic_store import DynamicTermStore
from slang_translator.services.patterns import compile_dictionary, compile_pattern
from slang_translator.utils.logging import get_logger, debug_print


def calculate_confidence(match_count: int) -> float:
    """Heuristic UI score: 0.7 plus 0.05 per match, capped at 1.0."""
    return min(CONFIDENCE_MAX, CONFIDENCE_BASE + CONFIDENCE_PER_TERM * match_count)


def build_translation_result(original: str, terms: List[TermEntry]) -> TranslationResult:
    """Package matched terms into a TranslationResult; the text passes through unchanged."""
    return TranslationResult(
        original=original,
        terms=terms,
        confidence=calculate_confidence(len(terms)),
        translated_text=original
    )


class LinguisticsEngine:
    """Term detection over the bundled dictionary plus learned terms."""

    def __init__(
        self,
        dictionary: Mapping[object, Mapping[str, str]] = None,
        rng: random.Random = None
    ):
        self.dictionary = TERM_DICTIONARY if dictionary is None else dictionary
        self.logger = get_logger().engine_logger
        self._rng = rng or random.Random()
        self._patterns = tuple(compile_dictionary(self.dictionary))
        self._dynamic = DynamicTermStore()

        self.logger.info(
            f"Compiled {len(self._patterns)} patterns across {len(self.dictionary)} categories"
        )

    @property
    def static_count(self) -> int:
        return len(self._patterns)

    @property
    def dynamic_count(self) -> int:
        return len(self._dynamic)

    def translate(self, text: str) -> TranslationResult:
        """
        Detect every known term in the text.

        Static patterns are tested longest-first, then learned terms in
        registration order. Each (term, category) pair is reported once.

        Args:
            text: Raw user input

        Returns:
            TranslationResult whose translated_text is the input verbatim
        """
        if not text:
            return TranslationResult(
                original=text,
                terms=[],
                confidence=EMPTY_INPUT_CONFIDENCE,
                translated_text=text
            )

        found: List[TermEntry] = []
        seen = set()

        for pattern in (*self._patterns, *self._dynamic.snapshot()):
            if pattern.key in seen or not pattern.matches(text):
                continue
            seen.add(pattern.key)
            found.append(pattern.to_entry())

        if found:
            self.logger.debug(f"Detected {len(found)} terms: {', '.join(t.term for t in found)}")

        return build_translation_result(text, found)

    def register_term(self, term: str, meaning: str, category: str) -> bool:
        """
        Add or overwrite a learned term.

        Invalid input (empty term or category) is ignored with a warning.

        Returns:
            True if the term was registered
        """
        pattern = self._compile_learned(term, meaning, category)
        if pattern is None:
            return False

        self._dynamic.put(pattern)
        debug_print(f"[LEARNED] {pattern.term} ({pattern.category}) = {pattern.meaning}", 'DEBUG', 'ENGINE')
        return True

    def load_terms(self, entries: Iterable[Union[TermEntry, Mapping[str, str]]]) -> int:
        """
        Bulk-register learned terms, typically once at startup.

        Accepts TermEntry objects or mappings with term, meaning and
        category keys. All valid entries are published together.

        Returns:
            Number of terms registered
        """
        patterns = []
        for entry in entries:
            if isinstance(entry, Mapping):
                term, meaning, category = entry.get('term'), entry.get('meaning'), entry.get('category')
            else:
                term, meaning, category = entry.term, entry.meaning, entry.category
            pattern = self._compile_learned(term, meaning, category)
            if pattern is not None:
                patterns.append(pattern)

        loaded = self._dynamic.put_many(patterns)
        self.logger.info(f"Loaded {loaded} learned terms ({self.dynamic_count} in store)")
        return loaded

    def get_dynamic_terms(self) -> List[TermEntry]:
        return [pattern.to_entry() for pattern in self._dynamic.snapshot()]

    def get_random_term(self) -> TermEntry:
        """Pick a category uniformly, then a term uniformly within it (static terms only)."""
        categories = [c for c, terms in self.dictionary.items() if terms]
        category = self._rng.choice(categories)
        term, meaning = self._rng.choice(list(self.dictionary[category].items()))
        return TermEntry(term=term, meaning=meaning, category=getattr(category, 'value', category))

    def _compile_learned(self, term, meaning, category):
        if not isinstance(term, str) or not term.strip():
            self.logger.warning(f"Rejected learned term with empty surface form: {term!r}")
            return None
        category = getattr(category, 'value', category)
        if not isinstance(category, str) or not category.strip():
            self.logger.warning(f"Rejected learned term {term!r} without a category")
            return None
        return compile_pattern(term, meaning or "", category)


_engine_instance: Optional[LinguisticsEngine] = None


def get_engine() -> LinguisticsEngine:
    """Get or create the default engine used by the web app."""
    global _engine_instance
    if _engine_instance is None:
        _engine_instance = LinguisticsEngine()
    return _engine_instance
