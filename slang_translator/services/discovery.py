"""
Slang Discovery Service
=======================
Resolves unknown terms and feeds what it learns back into the engine.

Lookup order:
1. Terms the engine already knows (bundled or learned this run)
2. Terms learned in earlier runs (learned_terms table)
3. Urban Dictionary, whose answer is persisted and registered
"""
import sqlite3
from typing import Optional

from slang_translator.config import config
from slang_translator.config.constants import DiscoverySource, STATIC_TERM_CONFIDENCE
from slang_translator.database.repositories import LearnedTermRepository
from slang_translator.models.schemas import DiscoveryResult
from slang_translator.services.engine import LinguisticsEngine
from slang_translator.services.urban_dictionary import UrbanDictionaryClient
from slang_translator.utils.logging import get_logger, debug_print
from slang_translator.utils.validators import validate_category, validate_term


class SlangDiscoveryService:
    """Looks up, learns and persists slang terms."""

    def __init__(
        self,
        engine: LinguisticsEngine,
        repository: LearnedTermRepository,
        client: Optional[UrbanDictionaryClient] = None
    ):
        self.engine = engine
        self.repository = repository
        self.client = client or UrbanDictionaryClient()
        self.logger = get_logger().app_logger

    def initialize(self) -> int:
        """Load every persisted term into the engine. Returns how many were loaded."""
        try:
            learned = self.repository.get_all()
        except sqlite3.Error as e:
            self.logger.error(f"Failed to load learned terms: {e}")
            return 0

        loaded = self.engine.load_terms(t.to_entry() for t in learned)
        self.logger.info(f"Slang discovery initialized with {loaded} learned terms")
        return loaded

    def find_term(self, term: str) -> DiscoveryResult:
        """Check the engine, then the learned-terms store."""
        normalized = term.lower().strip()
        if not normalized:
            return DiscoveryResult(found=False, term=normalized)

        known = self.engine.translate(normalized).terms
        if known:
            match = known[0]
            return DiscoveryResult(
                found=True,
                term=match.term,
                meaning=match.meaning,
                category=match.category,
                source=DiscoverySource.STATIC.value,
                confidence=STATIC_TERM_CONFIDENCE
            )

        try:
            learned = self.repository.find_by_term(normalized)
            if learned is None:
                return DiscoveryResult(found=False, term=normalized)
            self.repository.increment_usage(normalized)
        except sqlite3.Error as e:
            self.logger.error(f"Learned term lookup failed for {normalized!r}: {e}")
            return DiscoveryResult(found=False, term=normalized)

        self.engine.register_term(learned.term, learned.meaning, learned.category)
        return DiscoveryResult(
            found=True,
            term=learned.term,
            meaning=learned.meaning,
            category=learned.category,
            source=DiscoverySource.DATABASE.value,
            source_url=learned.source_url,
            confidence=learned.confidence
        )

    def discover_and_cache(self, term: str) -> DiscoveryResult:
        """Resolve a term, asking Urban Dictionary when nothing local knows it."""
        existing = self.find_term(term)
        if existing.found or not existing.term:
            return existing

        if not config.discovery.enabled:
            return existing

        normalized = existing.term
        debug_print(f"[DISCOVERY] Looking up new term: {normalized}", 'INFO', 'DISCOVERY')

        definition = self.client.define(normalized)
        if definition is None:
            self.logger.info(f"Could not find definition for {normalized!r}")
            return DiscoveryResult(found=False, term=normalized)

        category = config.discovery.default_category
        self.engine.register_term(definition.word, definition.meaning, category)
        try:
            self.repository.upsert(
                term=definition.word,
                meaning=definition.meaning,
                category=category,
                source=DiscoverySource.URBAN_DICTIONARY.value,
                source_url=definition.permalink,
                confidence=definition.confidence
            )
        except sqlite3.Error as e:
            self.logger.error(f"Failed to persist learned term {definition.word!r}: {e}")

        self.logger.info(f"Learned {definition.word!r} from Urban Dictionary: {definition.meaning}")
        return DiscoveryResult(
            found=True,
            term=definition.word,
            meaning=definition.meaning,
            category=category,
            source=DiscoverySource.URBAN_DICTIONARY.value,
            source_url=definition.permalink,
            confidence=definition.confidence
        )

    def learn_term(
        self,
        term: str,
        meaning: str,
        category: str,
        source: str = DiscoverySource.USER.value,
        confidence: int = None
    ) -> bool:
        """
        Persist a caller-supplied definition, then make it live in the engine.

        The engine only sees the term once it is stored, so a failed write
        never leaves a term that would vanish on restart.

        Returns:
            False if the term or category is invalid; persistence errors propagate
        """
        term = term.strip() if isinstance(term, str) else term
        for valid, error in (validate_term(term), validate_category(category)):
            if not valid:
                self.logger.warning(f"Not learning {term!r}: {error}")
                return False

        self.repository.upsert(
            term=term,
            meaning=meaning,
            category=category,
            source=source,
            confidence=confidence if confidence is not None else config.discovery.default_confidence
        )
        return self.engine.register_term(term, meaning, category)
