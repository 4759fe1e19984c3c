"""
Slang Translator - Data Models
"""
from slang_translator.models.terms import (
    TermEntry,
    CompiledPattern,
    TranslationResult,
    LearnedTerm
)
from slang_translator.models.schemas import (
    TranslateRequest,
    RegisterTermRequest,
    DiscoveryResult,
    HealthStatus
)

__all__ = [
    "TermEntry",
    "CompiledPattern",
    "TranslationResult",
    "LearnedTerm",
    "TranslateRequest",
    "RegisterTermRequest",
    "DiscoveryResult",
    "HealthStatus"
]
