"""
Dynamic Term Store
==================
Runtime addendum to the bundled dictionary, filled with learned terms.
"""
import threading
from typing import Dict, Iterable, List, Optional

from slang_translator.models.terms import CompiledPattern


class DynamicTermStore:
    """
    Insertion-ordered map of lowercased term -> CompiledPattern.

    Writers serialise on a lock and publish a fresh dict with a single
    reference assignment; readers never lock and always iterate a complete
    snapshot. Re-registering a term overwrites it in place (last write wins).
    There is no eviction.
    """

    def __init__(self):
        self._patterns: Dict[str, CompiledPattern] = {}
        self._write_lock = threading.Lock()

    def put(self, pattern: CompiledPattern) -> None:
        self.put_many([pattern])

    def put_many(self, patterns: Iterable[CompiledPattern]) -> int:
        """Publish several patterns in one swap. Returns how many were stored."""
        count = 0
        with self._write_lock:
            updated = dict(self._patterns)
            for pattern in patterns:
                updated[pattern.term.lower()] = pattern
                count += 1
            self._patterns = updated
        return count

    def get(self, term: str) -> Optional[CompiledPattern]:
        return self._patterns.get(term.lower())

    def snapshot(self) -> List[CompiledPattern]:
        """Patterns in registration order, as of this call."""
        return list(self._patterns.values())

    def clear(self) -> None:
        with self._write_lock:
            self._patterns = {}

    def __contains__(self, term: str) -> bool:
        return term.lower() in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)
