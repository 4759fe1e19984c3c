"""
Database Repositories
=====================
Data access for learned slang terms.
"""
from typing import Optional, List, Dict, Any

from slang_translator.database.connection import Database, get_database
from slang_translator.models.terms import LearnedTerm
from slang_translator.utils.logging import get_logger


class LearnedTermRepository:
    """
    Repository for learned terms.

    Terms are unique case-insensitively; the stored spelling is the one
    supplied by the most recent upsert.
    """

    def __init__(self, database: Database = None):
        self.db = database or get_database()
        self.logger = get_logger().db_logger

    def upsert(
        self,
        term: str,
        meaning: str,
        category: str,
        source: str,
        source_url: str = None,
        confidence: int = 80,
        usage_count: int = 1
    ) -> int:
        """Insert a learned term, or replace the definition of an existing one."""
        with self.db.transaction() as conn:
            conn.execute("""
                INSERT INTO learned_terms (
                    term, meaning, category, source, source_url, confidence, usage_count
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(term) DO UPDATE SET
                    term = excluded.term,
                    meaning = excluded.meaning,
                    category = excluded.category,
                    source = excluded.source,
                    source_url = excluded.source_url,
                    confidence = excluded.confidence,
                    last_used = CURRENT_TIMESTAMP
            """, (term, meaning, category, source, source_url, confidence, usage_count))
            # lastrowid is unreliable after the update branch
            row = conn.execute("SELECT id FROM learned_terms WHERE term = ?", (term,)).fetchone()

        self.logger.info(f"Stored learned term {term!r} from {source}")
        return row['id']

    def find_by_term(self, term: str) -> Optional[LearnedTerm]:
        row = self.db.fetchone(
            "SELECT * FROM learned_terms WHERE lower(term) = lower(?)",
            (term.strip(),)
        )
        return LearnedTerm.from_row(row) if row else None

    def increment_usage(self, term: str) -> None:
        with self.db.transaction() as conn:
            conn.execute("""
                UPDATE learned_terms SET
                    usage_count = usage_count + 1,
                    last_used = CURRENT_TIMESTAMP
                WHERE lower(term) = lower(?)
            """, (term.strip(),))

    def get_all(self, category: str = None) -> List[LearnedTerm]:
        """Get learned terms in the order they were first stored."""
        if category:
            rows = self.db.fetchall(
                "SELECT * FROM learned_terms WHERE category = ? ORDER BY id",
                (category,)
            )
        else:
            rows = self.db.fetchall("SELECT * FROM learned_terms ORDER BY id")
        return [LearnedTerm.from_row(row) for row in rows]

    def delete(self, term: str) -> bool:
        with self.db.transaction() as conn:
            cursor = conn.execute(
                "DELETE FROM learned_terms WHERE lower(term) = lower(?)",
                (term.strip(),)
            )
            return cursor.rowcount > 0

    def get_stats(self) -> Dict[str, Any]:
        total = self.db.fetchone("SELECT COUNT(*) AS total FROM learned_terms")['total']
        by_category = {
            row['category']: row['count']
            for row in self.db.fetchall(
                "SELECT category, COUNT(*) AS count FROM learned_terms GROUP BY category ORDER BY category"
            )
        }
        by_source = {
            row['source']: row['count']
            for row in self.db.fetchall(
                "SELECT source, COUNT(*) AS count FROM learned_terms GROUP BY source ORDER BY source"
            )
        }
        return {
            'total': total,
            'by_category': by_category,
            'by_source': by_source
        }
