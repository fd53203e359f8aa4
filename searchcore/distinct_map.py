"""Counters that cap how many results may share the same distinct key."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable


class DistinctMap:
    """Committed per-key counts, limited to ``limit`` entries per key."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self._counts: Counter[Hashable] = Counter()
        self._len = 0

    def __len__(self) -> int:
        return self._len


class BufferedDistinctMap:
    """Pending registrations on top of a DistinctMap, committed on transfer."""

    def __init__(self, internal: DistinctMap) -> None:
        self._internal = internal
        self._counts: Counter[Hashable] = Counter()
        self._len = 0

    def register(self, key: Hashable) -> bool:
        """Count key once more if it is still under the limit; say whether it was."""
        seen = self._internal._counts[key] + self._counts[key]
        if seen < self._internal.limit:
            self._counts[key] += 1
            self._len += 1
            return True
        return False

    def register_without_key(self) -> bool:
        """Count an entry that has no distinct key; always accepted."""
        self._len += 1
        return True

    def transfer_to_internal(self) -> None:
        """Commit the pending counts to the underlying map."""
        self._internal._counts.update(self._counts)
        self._counts.clear()
        self._internal._len += self._len
        self._len = 0

    def __len__(self) -> int:
        return len(self._internal) + self._len