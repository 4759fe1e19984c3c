"""
Constants and Enums for Slang Translator
"""
from enum import Enum

APP_VERSION = "1.0.0"


class Category(str, Enum):
    """Categories of the bundled term dictionary."""
    GEN_Z = "GEN_Z"
    AAVE = "AAVE"
    TECH = "TECH"
    STARTUP = "STARTUP"
    DESIGN = "DESIGN"
    SOUTHERN = "SOUTHERN"
    UK = "UK"
    HIPHOP = "HIPHOP"
    GAMING = "GAMING"
    HISPANIC = "HISPANIC"
    EMOTIONAL = "EMOTIONAL"


class DiscoverySource(str, Enum):
    """Where a term definition came from."""
    STATIC = "static"
    DATABASE = "database"
    URBAN_DICTIONARY = "urbandictionary"
    USER = "user"


# Translation confidence heuristic: min(CONFIDENCE_MAX, BASE + PER_TERM * matches)
CONFIDENCE_BASE = 0.7
CONFIDENCE_PER_TERM = 0.05
CONFIDENCE_MAX = 1.0
EMPTY_INPUT_CONFIDENCE = 1.0

# Discovery confidence is on a 0-100 scale
STATIC_TERM_CONFIDENCE = 100
MIN_LOOKUP_CONFIDENCE = 50
MAX_LOOKUP_CONFIDENCE = 100
