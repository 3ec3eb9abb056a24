"""Sequence driver that hands out names one at a time.

A :class:`NameFactory` keeps a cursor into the name sequence of one mode.
``next_name`` returns the name at the cursor and advances it; ``reset``
rewinds to the first name without touching the cache, so a reset factory
produces exactly the sequence a new factory would.
"""

from __future__ import annotations

from collections.abc import Iterator

from .alphabet import DEFAULT_ALPHABET, Alphabet, NameMode, coerce_mode
from .cache import NameCache


class NameFactory:
    """Generate unique short names, mixed-case by default."""

    def __init__(
        self,
        mode: NameMode | str = NameMode.MIXED_CASE,
        *,
        alphabet: Alphabet | None = None,
        cache: NameCache | None = None,
    ) -> None:
        """Initialize the factory.

        Parameters
        ----------
        mode:
            Whether names may use the full symbol set or the lower-case part
            only, as a :class:`NameMode` or its value.  Fixed for the lifetime
            of the factory; anything else raises :class:`NamingError`.
        alphabet:
            Symbols to draw from.  Defaults to the cache's alphabet, or the
            ``kana`` preset when no cache is given either.
        cache:
            Shared memoization table, normally obtained from
            :meth:`obfuscator.naming.NamingSession.cache`.  When omitted the
            factory memoizes into a private table.
        """

        mode = coerce_mode(mode)
        if cache is None:
            cache = NameCache(alphabet or DEFAULT_ALPHABET, mode)
        elif cache.mode is not mode:
            raise ValueError(
                f"cache holds {cache.mode.value} names but factory mode is {mode.value}"
            )
        elif alphabet is not None and alphabet != cache.alphabet:
            raise ValueError("cache was built for a different alphabet")
        self._mode = mode
        self._cache = cache
        self._index = 0

    @property
    def mode(self) -> NameMode:
        return self._mode

    @property
    def alphabet(self) -> Alphabet:
        return self._cache.alphabet

    @property
    def position(self) -> int:
        """Index of the name the next call to :meth:`next_name` returns."""

        return self._index

    def reset(self) -> None:
        self._index = 0

    def next_name(self) -> str:
        name = self._cache.get_or_compute(self._index)
        self._index += 1
        return name

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.next_name()

    def __repr__(self) -> str:
        return f"NameFactory(mode={self._mode.value!r}, position={self._index})"


__all__ = ["NameFactory"]
