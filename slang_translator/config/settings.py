"""
Centralized Configuration for Slang Translator
===============================================
All configuration values in one place, configurable via environment variables.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    val = os.environ.get(key, "").lower()
    if val in ("true", "1", "yes", "on"):
        return True
    elif val in ("false", "0", "no", "off"):
        return False
    return default


def _get_int_env(key: str, default: int) -> int:
    """Get integer from environment variable."""
    try:
        return int(os.environ.get(key, default))
    except (ValueError, TypeError):
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float from environment variable."""
    try:
        return float(os.environ.get(key, default))
    except (ValueError, TypeError):
        return default


def get_app_dir() -> str:
    """Get the directory used for persistent data (logs, learned terms)."""
    override = os.environ.get('SLANG_TRANSLATOR_APP_DIR')
    if override:
        return override
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@dataclass
class ServerConfig:
    """Flask server configuration."""
    host: str = field(default_factory=lambda: os.environ.get("SLANG_TRANSLATOR_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _get_int_env("SLANG_TRANSLATOR_PORT", 5002))
    debug: bool = field(default_factory=lambda: _get_bool_env("SLANG_TRANSLATOR_DEBUG", False))
    secret_key: str = field(default_factory=lambda: os.environ.get("SECRET_KEY", "dev-key-change-in-production"))

    cors_origins: List[str] = field(default_factory=lambda: [
        "http://localhost:5002",
        "http://127.0.0.1:5002"
    ])


@dataclass
class EngineConfig:
    """Linguistics engine and prompt-context settings."""
    # Terms listed in a prompt hint block
    prompt_max_terms: int = field(default_factory=lambda: _get_int_env("PROMPT_MAX_TERMS", 20))
    # Longest text accepted by the HTTP translate endpoint
    max_input_length: int = field(default_factory=lambda: _get_int_env("MAX_INPUT_LENGTH", 20000))


@dataclass
class DiscoveryConfig:
    """Slang discovery (Urban Dictionary lookup) configuration."""
    enabled: bool = field(default_factory=lambda: _get_bool_env("DISCOVERY_ENABLED", True))
    urban_dictionary_url: str = field(default_factory=lambda: os.environ.get(
        "URBAN_DICTIONARY_URL", "https://api.urbandictionary.com/v0/define"
    ))
    timeout: float = field(default_factory=lambda: _get_float_env("DISCOVERY_TIMEOUT", 10.0))
    max_retries: int = field(default_factory=lambda: _get_int_env("DISCOVERY_MAX_RETRIES", 2))
    max_meaning_length: int = field(default_factory=lambda: _get_int_env("DISCOVERY_MAX_MEANING_LENGTH", 150))
    default_category: str = field(default_factory=lambda: os.environ.get("DISCOVERY_DEFAULT_CATEGORY", "GEN_Z"))
    default_confidence: int = field(default_factory=lambda: _get_int_env("DISCOVERY_DEFAULT_CONFIDENCE", 80))


@dataclass
class LoggingConfig:
    """Logging configuration."""
    verbose_debug: bool = field(default_factory=lambda: _get_bool_env("VERBOSE_DEBUG", False))
    log_buffer_size: int = field(default_factory=lambda: _get_int_env("LOG_BUFFER_SIZE", 500))
    log_file_max_bytes: int = field(default_factory=lambda: _get_int_env("LOG_FILE_MAX_BYTES", 10 * 1024 * 1024))
    log_file_backup_count: int = field(default_factory=lambda: _get_int_env("LOG_FILE_BACKUP_COUNT", 5))


@dataclass
class SecurityConfig:
    """Security configuration."""
    api_key: str = field(default_factory=lambda: os.environ.get("API_KEY", ""))
    rate_limit_per_minute: int = field(default_factory=lambda: _get_int_env("RATE_LIMIT_PER_MINUTE", 120))
    db_timeout: int = field(default_factory=lambda: _get_int_env("DB_TIMEOUT", 30))


@dataclass
class PathConfig:
    """Path configuration."""
    app_dir: str = field(default_factory=get_app_dir)

    @property
    def log_folder(self) -> Path:
        return Path(self.app_dir) / 'logs'

    @property
    def db_path(self) -> str:
        return os.environ.get("LEARNED_TERMS_DB", os.path.join(self.app_dir, 'learned_terms.db'))


@dataclass
class Config:
    """Main application configuration container."""
    server: ServerConfig = field(default_factory=ServerConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    discovery: DiscoveryConfig = field(default_factory=DiscoveryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    paths: PathConfig = field(default_factory=PathConfig)

    def __post_init__(self):
        """Create necessary directories after initialization."""
        os.makedirs(self.paths.log_folder, exist_ok=True)
        self._validate()

    def _validate(self):
        """Validate configuration values."""
        if not 0 < self.server.port < 65536:
            raise ValueError("port must be between 1 and 65535")
        if self.engine.prompt_max_terms < 1:
            raise ValueError("prompt_max_terms must be at least 1")
        if self.discovery.max_meaning_length < 10:
            raise ValueError("max_meaning_length must be at least 10")
        if not 0 <= self.discovery.default_confidence <= 100:
            raise ValueError("default_confidence must be between 0 and 100")


# Global configuration instance
config = Config()
