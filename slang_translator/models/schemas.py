"""
Request/Response Schemas
========================
Validation schemas for API requests and responses.
"""
from dataclasses import dataclass
from typing import Optional, List

from slang_translator.utils.validators import (
    validate_text,
    validate_term,
    validate_meaning,
    validate_category
)


@dataclass
class TranslateRequest:
    """Request schema for the translate endpoint."""
    text: str

    @classmethod
    def from_json(cls, data: Optional[dict]) -> 'TranslateRequest':
        data = data or {}
        return cls(text=data.get('text', data.get('input')))

    def validate(self) -> List[str]:
        valid, error = validate_text(self.text)
        return [] if valid else [error]


@dataclass
class RegisterTermRequest:
    """Request schema for registering a learned term."""
    term: str
    meaning: str
    category: str

    @classmethod
    def from_json(cls, data: Optional[dict]) -> 'RegisterTermRequest':
        data = data or {}
        return cls(
            term=data.get('term', ''),
            meaning=data.get('meaning', ''),
            category=data.get('category', '')
        )

    def validate(self) -> List[str]:
        """Validate the request and return list of errors."""
        errors = []
        for validator, value in (
            (validate_term, self.term),
            (validate_meaning, self.meaning),
            (validate_category, self.category),
        ):
            valid, error = validator(value)
            if not valid:
                errors.append(error)
        return errors


@dataclass
class DiscoveryResult:
    """Outcome of resolving a term through discovery."""
    found: bool
    term: str
    meaning: Optional[str] = None
    category: Optional[str] = None
    source: Optional[str] = None
    source_url: Optional[str] = None
    confidence: Optional[int] = None

    def to_dict(self) -> dict:
        result = {'found': self.found, 'term': self.term}
        if self.found:
            result.update({
                'meaning': self.meaning,
                'category': self.category,
                'source': self.source,
                'confidence': self.confidence,
            })
            if self.source_url:
                result['source_url'] = self.source_url
        return result


@dataclass
class HealthStatus:
    """Health check response."""
    status: str
    static_terms: int
    dynamic_terms: int
    database_connected: bool
    version: str

    def to_dict(self) -> dict:
        return {
            'status': self.status,
            'static_terms': self.static_terms,
            'dynamic_terms': self.dynamic_terms,
            'database_connected': self.database_connected,
            'version': self.version,
        }
