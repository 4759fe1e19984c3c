"""
Database Connection Manager
===========================
Handles SQLite database connections with proper context management.
"""
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Generator

from slang_translator.config import config
from slang_translator.utils.logging import get_logger


class Database:
    """
    Thread-safe SQLite database manager.

    Each thread gets its own connection; schema setup runs once.
    """

    _instance: Optional['Database'] = None
    _lock = threading.Lock()

    def __init__(self, db_path: Path = None):
        self.db_path = Path(db_path or config.paths.db_path)
        self.logger = get_logger().db_logger
        self._local = threading.local()
        self._initialized = False

        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_instance(cls, db_path: Path = None) -> 'Database':
        """Get singleton instance."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls(db_path)
            return cls._instance

    @property
    def connection(self) -> sqlite3.Connection:
        """Get thread-local connection."""
        if getattr(self._local, 'connection', None) is None:
            self._local.connection = self._create_connection()
        return self._local.connection

    def _create_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(
            str(self.db_path),
            timeout=config.security.db_timeout
        )
        conn.row_factory = sqlite3.Row

        # WAL lets request threads read while discovery writes
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA synchronous=NORMAL")

        return conn

    def initialize(self) -> None:
        """Initialize database schema."""
        if self._initialized:
            return

        with self._lock:
            if self._initialized:
                return

            self._create_tables()
            self._initialized = True

            self.logger.info(f"Database initialized: {self.db_path}")

    def _create_tables(self) -> None:
        with self.connection:
            self.connection.execute("""
                CREATE TABLE IF NOT EXISTS learned_terms (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    term TEXT NOT NULL UNIQUE COLLATE NOCASE,
                    meaning TEXT NOT NULL,
                    category TEXT NOT NULL,
                    source TEXT NOT NULL,
                    source_url TEXT,
                    confidence INTEGER NOT NULL DEFAULT 80,
                    usage_count INTEGER NOT NULL DEFAULT 1,
                    last_used TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    CONSTRAINT valid_confidence CHECK (confidence >= 0 AND confidence <= 100)
                )
            """)
            self.connection.execute("""
                CREATE INDEX IF NOT EXISTS idx_learned_terms_category
                ON learned_terms(category)
            """)

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """Context manager for database transactions."""
        conn = self.connection
        try:
            yield conn
            conn.commit()
        except Exception as e:
            conn.rollback()
            self.logger.error(f"Transaction rolled back: {e}")
            raise

    def execute(self, query: str, params: tuple = None) -> sqlite3.Cursor:
        try:
            if params:
                return self.connection.execute(query, params)
            return self.connection.execute(query)
        except sqlite3.Error as e:
            self.logger.error(f"Database error: {e}")
            raise

    def fetchone(self, query: str, params: tuple = None) -> Optional[sqlite3.Row]:
        return self.execute(query, params).fetchone()

    def fetchall(self, query: str, params: tuple = None) -> list:
        return self.execute(query, params).fetchall()

    def is_healthy(self) -> bool:
        try:
            self.fetchone("SELECT 1")
            return True
        except sqlite3.Error:
            return False

    def close(self) -> None:
        """Close thread-local connection."""
        if getattr(self._local, 'connection', None) is not None:
            self._local.connection.close()
            self._local.connection = None


_database: Optional[Database] = None


def get_database() -> Database:
    """Get database singleton."""
    global _database
    if _database is None:
        _database = Database.get_instance()
        _database.initialize()
    return _database
