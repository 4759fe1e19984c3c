"""
Term Data Models
================
Core data structures for term detection.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List


@dataclass(frozen=True)
class TermEntry:
    """A dictionary term with its canonical meaning and category."""
    term: str
    meaning: str
    category: str

    def to_dict(self) -> dict:
        return {
            'term': self.term,
            'meaning': self.meaning,
            'category': self.category,
        }


@dataclass(frozen=True)
class CompiledPattern:
    """A precompiled whole-word matcher for one term."""
    matcher: re.Pattern
    term: str
    meaning: str
    category: str

    @property
    def key(self) -> str:
        """Identity of a match within one translate call."""
        return f"{self.term}:{self.category}"

    def matches(self, text: str) -> bool:
        return self.matcher.search(text) is not None

    def to_entry(self) -> TermEntry:
        return TermEntry(term=self.term, meaning=self.meaning, category=self.category)


@dataclass
class TranslationResult:
    """Result of a translate call."""
    original: str
    terms: List[TermEntry] = field(default_factory=list)
    confidence: float = 1.0
    translated_text: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'original': self.original,
            'terms': [t.to_dict() for t in self.terms],
            'confidence': self.confidence,
            'translatedText': self.translated_text,
        }


@dataclass
class LearnedTerm:
    """A persisted dynamic term."""
    term: str
    meaning: str
    category: str
    source: str
    id: Optional[int] = None
    source_url: Optional[str] = None
    confidence: int = 80
    usage_count: int = 1
    last_used: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row) -> 'LearnedTerm':
        """Build from a sqlite3.Row or mapping."""
        data = dict(row)
        return cls(
            id=data.get('id'),
            term=data['term'],
            meaning=data['meaning'],
            category=data['category'],
            source=data['source'],
            source_url=data.get('source_url'),
            confidence=data.get('confidence', 80),
            usage_count=data.get('usage_count', 1),
            last_used=_parse_timestamp(data.get('last_used')),
            created_at=_parse_timestamp(data.get('created_at')),
        )

    def to_entry(self) -> TermEntry:
        return TermEntry(term=self.term, meaning=self.meaning, category=self.category)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'term': self.term,
            'meaning': self.meaning,
            'category': self.category,
            'source': self.source,
            'source_url': self.source_url,
            'confidence': self.confidence,
            'usage_count': self.usage_count,
            'last_used': self.last_used.isoformat() if self.last_used else None,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }


def _parse_timestamp(value) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        return None
