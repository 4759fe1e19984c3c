"""
Unit Tests for Learned Term Persistence
=======================================
"""
import sqlite3
import threading

import pytest

from slang_translator.database.connection import Database
from slang_translator.database.repositories import LearnedTermRepository


@pytest.fixture
def database(tmp_path):
    db = Database(tmp_path / 'learned.db')
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def repo(database):
    return LearnedTermRepository(database)


class TestDatabase:

    def test_initialize_creates_table(self, database):
        row = database.fetchone(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='learned_terms'"
        )
        assert row is not None

    def test_initialize_is_idempotent(self, database):
        database.initialize()
        assert database.is_healthy()

    def test_transaction_rolls_back(self, database, repo):
        with pytest.raises(RuntimeError):
            with database.transaction() as conn:
                conn.execute(
                    "INSERT INTO learned_terms (term, meaning, category, source) VALUES (?, ?, ?, ?)",
                    ('rizz', 'charisma', 'GEN_Z', 'user')
                )
                raise RuntimeError("boom")
        assert repo.find_by_term('rizz') is None


class TestLearnedTermRepository:

    def test_insert_and_find(self, repo):
        term_id = repo.upsert('rizz', 'charisma', 'GEN_Z', 'user', confidence=90)
        found = repo.find_by_term('RIZZ')
        assert found.id == term_id
        assert found.meaning == 'charisma'
        assert found.confidence == 90
        assert found.usage_count == 1
        assert found.created_at is not None

    def test_upsert_overwrites_case_insensitively(self, repo):
        first = repo.upsert('rizz', 'charisma', 'GEN_Z', 'user')
        second = repo.upsert('Rizz', 'charm', 'GEN_Z', 'urbandictionary',
                             source_url='https://example.test/rizz')
        assert first == second
        found = repo.find_by_term('rizz')
        assert found.term == 'Rizz'
        assert found.meaning == 'charm'
        assert found.source_url == 'https://example.test/rizz'
        assert len(repo.get_all()) == 1

    def test_find_missing(self, repo):
        assert repo.find_by_term('nothing') is None

    def test_increment_usage(self, repo):
        repo.upsert('rizz', 'charisma', 'GEN_Z', 'user')
        repo.increment_usage('Rizz')
        repo.increment_usage('rizz ')
        assert repo.find_by_term('rizz').usage_count == 3

    def test_get_all_in_insert_order(self, repo):
        repo.upsert('rizz', 'charisma', 'GEN_Z', 'user')
        repo.upsert('delulu', 'delusional', 'INTERNET', 'user')
        repo.upsert('gyat', 'wow', 'GEN_Z', 'urbandictionary')
        assert [t.term for t in repo.get_all()] == ['rizz', 'delulu', 'gyat']
        assert [t.term for t in repo.get_all(category='GEN_Z')] == ['rizz', 'gyat']

    def test_delete(self, repo):
        repo.upsert('rizz', 'charisma', 'GEN_Z', 'user')
        assert repo.delete('RIZZ') is True
        assert repo.delete('rizz') is False
        assert repo.get_all() == []

    def test_stats(self, repo):
        repo.upsert('rizz', 'charisma', 'GEN_Z', 'user')
        repo.upsert('delulu', 'delusional', 'INTERNET', 'urbandictionary')
        repo.upsert('gyat', 'wow', 'GEN_Z', 'urbandictionary')
        stats = repo.get_stats()
        assert stats['total'] == 3
        assert stats['by_category'] == {'GEN_Z': 2, 'INTERNET': 1}
        assert stats['by_source'] == {'urbandictionary': 2, 'user': 1}

    def test_to_dict(self, repo):
        repo.upsert('rizz', 'charisma', 'GEN_Z', 'user')
        data = repo.find_by_term('rizz').to_dict()
        assert data['term'] == 'rizz'
        assert data['source'] == 'user'
        assert isinstance(data['created_at'], str)

    def test_term_column_ignores_case(self, database, repo):
        repo.upsert('rizz', 'charisma', 'GEN_Z', 'user')
        with pytest.raises(sqlite3.IntegrityError):
            with database.transaction() as conn:
                conn.execute(
                    "INSERT INTO learned_terms (term, meaning, category, source) VALUES (?, ?, ?, ?)",
                    ('RIZZ', 'charm', 'GEN_Z', 'user')
                )

    def test_concurrent_upserts_share_one_row(self, database, repo):
        errors = []
        barrier = threading.Barrier(4)

        def learn(spelling):
            try:
                barrier.wait()
                repo.upsert(spelling, 'charisma', 'GEN_Z', 'urbandictionary')
            except Exception as e:
                errors.append(e)
            finally:
                database.close()

        threads = [threading.Thread(target=learn, args=(s,)) for s in ('rizz', 'Rizz', 'RIZZ', 'rizz')]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(repo.get_all()) == 1
