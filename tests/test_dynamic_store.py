"""
Unit Tests for the Dynamic Term Store
=====================================
"""
from slang_translator.services.dynamic_store import DynamicTermStore
from slang_translator.services.patterns import compile_pattern


def make(term, meaning="m", category="GEN_Z"):
    return compile_pattern(term, meaning, category)


class TestDynamicTermStore:

    def test_put_and_get_case_insensitive(self):
        store = DynamicTermStore()
        store.put(make("Rizz"))
        assert "rizz" in store
        assert "RIZZ" in store
        assert store.get("rIzZ").term == "Rizz"

    def test_overwrite_keeps_position(self):
        store = DynamicTermStore()
        store.put_many([make("one"), make("two"), make("three")])
        store.put(make("ONE", "updated"))
        snapshot = store.snapshot()
        assert [p.term for p in snapshot] == ["ONE", "two", "three"]
        assert snapshot[0].meaning == "updated"
        assert len(store) == 3

    def test_snapshot_is_stable(self):
        store = DynamicTermStore()
        store.put(make("one"))
        snapshot = store.snapshot()
        store.put(make("two"))
        assert [p.term for p in snapshot] == ["one"]
        assert len(store) == 2

    def test_put_many_returns_count(self):
        store = DynamicTermStore()
        assert store.put_many(make(t) for t in ["a1", "a2", "a1"]) == 3
        assert len(store) == 2

    def test_clear(self):
        store = DynamicTermStore()
        store.put(make("one"))
        store.clear()
        assert len(store) == 0
        assert store.get("one") is None
