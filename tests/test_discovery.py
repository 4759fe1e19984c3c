"""
Unit Tests for Slang Discovery
==============================
Discovery against a temporary learned-terms database and a mocked
Urban Dictionary client.
"""
import sqlite3
from unittest.mock import Mock

import pytest

from slang_translator.config import config
from slang_translator.database.connection import Database
from slang_translator.database.repositories import LearnedTermRepository
from slang_translator.services.discovery import SlangDiscoveryService
from slang_translator.services.engine import LinguisticsEngine
from slang_translator.services.urban_dictionary import UrbanDefinition, UrbanDictionaryClient


@pytest.fixture
def repo(tmp_path):
    db = Database(tmp_path / 'discovery.db')
    db.initialize()
    yield LearnedTermRepository(db)
    db.close()


@pytest.fixture
def client():
    return Mock(spec=UrbanDictionaryClient)


@pytest.fixture
def engine():
    return LinguisticsEngine()


@pytest.fixture
def service(engine, repo, client):
    return SlangDiscoveryService(engine, repo, client)


class TestInitialize:

    def test_loads_persisted_terms(self, engine, repo, client):
        repo.upsert('rizz', 'charisma', 'GEN_Z', 'user')
        repo.upsert('delulu', 'delusional', 'INTERNET', 'urbandictionary')

        service = SlangDiscoveryService(engine, repo, client)
        assert service.initialize() == 2
        assert engine.dynamic_count == 2
        assert [t.term for t in engine.translate("rizz and delulu").terms] == ['rizz', 'delulu']

    def test_database_error_is_logged(self, engine, client):
        broken = Mock(spec=LearnedTermRepository)
        broken.get_all.side_effect = sqlite3.OperationalError("no such table")
        service = SlangDiscoveryService(engine, broken, client)
        assert service.initialize() == 0
        assert engine.dynamic_count == 0


class TestFindTerm:

    def test_bundled_term(self, service):
        result = service.find_term("  Slay ")
        assert result.found
        assert result.term == "slay"
        assert result.source == "static"
        assert result.confidence == 100

    def test_longest_match_reported(self, service):
        result = service.find_term("no cap")
        assert result.term == "no cap"
        assert result.meaning == "honestly"

    def test_persisted_term_is_registered(self, service, engine, repo):
        repo.upsert('rizz', 'charisma', 'GEN_Z', 'urbandictionary',
                    source_url='https://example.test/rizz', confidence=70)

        result = service.find_term("Rizz")
        assert result.found
        assert result.source == "database"
        assert result.source_url == 'https://example.test/rizz'
        assert result.confidence == 70
        assert repo.find_by_term('rizz').usage_count == 2
        assert 'rizz' in [t.term for t in engine.translate("he has rizz").terms]

    def test_unknown_term(self, service):
        result = service.find_term("glorpflux")
        assert not result.found
        assert result.term == "glorpflux"

    def test_blank_term(self, service, client):
        assert not service.find_term("   ").found
        assert not service.discover_and_cache("   ").found
        client.define.assert_not_called()


class TestDiscoverAndCache:

    def test_known_term_skips_lookup(self, service, client):
        result = service.discover_and_cache("bussin")
        assert result.source == "static"
        client.define.assert_not_called()

    def test_learns_from_urban_dictionary(self, service, engine, repo, client):
        client.define.return_value = UrbanDefinition(
            word='rizz', meaning='charisma', permalink='https://example.test/rizz',
            thumbs_up=300, thumbs_down=20
        )

        result = service.discover_and_cache("Rizz")

        client.define.assert_called_once_with("rizz")
        assert result.found
        assert result.source == "urbandictionary"
        assert result.category == config.discovery.default_category
        assert result.confidence == 100

        stored = repo.find_by_term('rizz')
        assert stored.meaning == 'charisma'
        assert stored.source == 'urbandictionary'
        assert stored.source_url == 'https://example.test/rizz'
        assert 'rizz' in [t.term for t in engine.translate("he has rizz").terms]

    def test_second_discovery_uses_engine(self, service, client):
        client.define.return_value = UrbanDefinition(word='rizz', meaning='charisma')
        service.discover_and_cache("rizz")
        result = service.discover_and_cache("rizz")
        assert result.source == "static"
        assert client.define.call_count == 1

    def test_lookup_miss(self, service, repo, client):
        client.define.return_value = None
        result = service.discover_and_cache("glorpflux")
        assert not result.found
        assert repo.get_all() == []

    def test_disabled_discovery(self, service, client, monkeypatch):
        monkeypatch.setattr(config.discovery, 'enabled', False)
        result = service.discover_and_cache("glorpflux")
        assert not result.found
        client.define.assert_not_called()

    def test_persistence_failure_still_registers(self, engine, client):
        repo = Mock(spec=LearnedTermRepository)
        repo.find_by_term.return_value = None
        repo.upsert.side_effect = sqlite3.OperationalError("database is locked")
        client.define.return_value = UrbanDefinition(word='rizz', meaning='charisma')

        result = SlangDiscoveryService(engine, repo, client).discover_and_cache("rizz")

        assert result.found
        assert engine.dynamic_count == 1


class TestLearnTerm:

    def test_registers_and_persists(self, service, engine, repo):
        assert service.learn_term(" rizz ", "charisma", "GEN_Z")
        stored = repo.find_by_term("rizz")
        assert stored.term == "rizz"
        assert stored.source == "user"
        assert stored.confidence == config.discovery.default_confidence
        assert engine.translate("rizz").terms[0].meaning == "charisma"

    def test_rejected_term_not_persisted(self, service, repo):
        assert service.learn_term("rizz", "charisma", "") is False
        assert repo.get_all() == []

    def test_blank_term_not_persisted(self, service, repo):
        assert service.learn_term("   ", "charisma", "GEN_Z") is False
        assert repo.get_all() == []

    def test_failed_save_leaves_engine_unchanged(self, engine, client):
        repo = Mock(spec=LearnedTermRepository)
        repo.upsert.side_effect = sqlite3.OperationalError("disk I/O error")
        service = SlangDiscoveryService(engine, repo, client)

        with pytest.raises(sqlite3.OperationalError):
            service.learn_term("rizz", "charisma", "GEN_Z")

        assert engine.dynamic_count == 0
        assert engine.translate("he has rizz").terms == []
