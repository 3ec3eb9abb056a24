"""Memoization of generated names.

A :class:`NameCache` remembers every name computed for one alphabet and mode.
Entries are only ever added; a name stored for an index is returned unchanged
for as long as the cache lives.  Because the name for ``n`` is the name for
``n // B - 1`` plus one symbol, a miss walks down that chain until it meets a
cached prefix, then builds the missing names back up and stores each of them.

Caches are meant to be shared by every factory of a naming session, possibly
from several threads, so all access goes through a lock.
"""

from __future__ import annotations

import threading

from obfuscator.utils.errors import IndexRangeError
from obfuscator.utils.logging import get_logger

from .alphabet import Alphabet, NameMode, coerce_mode

logger = get_logger(__name__)


class NameCache:
    """Append-only ``index -> name`` table for one alphabet and mode."""

    def __init__(self, alphabet: Alphabet, mode: NameMode | str) -> None:
        self.alphabet: Alphabet = alphabet
        self.mode: NameMode = coerce_mode(mode)
        self._size = alphabet.size(self.mode)
        self._names: dict[int, str] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)

    def __contains__(self, index: object) -> bool:
        with self._lock:
            return index in self._names

    def __repr__(self) -> str:
        return f"NameCache(mode={self.mode.value!r}, entries={len(self)})"

    def get_or_compute(self, index: int) -> str:
        """Return the name for ``index``, computing and storing it on a miss."""

        if index < 0:
            raise IndexRangeError(f"index must be non-negative, got {index}")
        with self._lock:
            cached = self._names.get(index)
            if cached is not None:
                self.hits += 1
                return cached
            self.misses += 1
            return self._compute(index)

    def _compute(self, index: int) -> str:
        # Pending (index, last symbol) pairs, outermost first.
        chain: list[tuple[int, str]] = []
        prefix = ""
        current = index
        while True:
            cached = self._names.get(current)
            if cached is not None:
                prefix = cached
                break
            base_index, offset = divmod(current, self._size)
            chain.append((current, self.alphabet.symbol_at(self.mode, offset)))
            if base_index == 0:
                break
            current = base_index - 1

        for position, symbol in reversed(chain):
            prefix += symbol
            self._names[position] = prefix
        logger.debug(
            "computed %d name(s) for index %d in %s mode", len(chain), index, self.mode.value
        )
        return prefix


__all__ = ["NameCache"]
