"""Symbol alphabets for generated names.

An :class:`Alphabet` holds two ordered symbol strings.  ``lower`` is the
reduced set used when only lower-case names are allowed; ``upper`` holds the
extra symbols that mixed-case names may also use.  The mixed-case symbol order
is always ``lower`` followed by ``upper`` so that the offset of a symbol never
changes for the lifetime of the alphabet.

Symbols are opaque single characters.  Which characters they are is a
configuration detail; the encoder only relies on them being distinct.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from obfuscator.utils.constants import PRESETS
from obfuscator.utils.errors import AlphabetError, IndexRangeError, NamingError


class NameMode(Enum):
    """Which part of the alphabet a name factory may draw from."""

    MIXED_CASE = "mixed"
    LOWER_CASE = "lower"


def coerce_mode(mode: object) -> NameMode:
    """Return ``mode`` as a :class:`NameMode`, accepting its string value."""

    if isinstance(mode, NameMode):
        return mode
    if isinstance(mode, str):
        try:
            return NameMode(mode)
        except ValueError:
            pass
    raise NamingError(f"unknown name mode {mode!r}; expected 'mixed' or 'lower'")


@dataclass(slots=True, frozen=True)
class Alphabet:
    """Ordered, duplicate-free symbol sets for both name modes."""

    lower: str
    upper: str

    def __post_init__(self) -> None:
        if not self.lower:
            raise AlphabetError("lower-case symbol set must not be empty")
        if not self.upper:
            raise AlphabetError("upper-case symbol set must not be empty")
        seen: set[str] = set()
        for symbol in self.lower + self.upper:
            if symbol in seen:
                raise AlphabetError(f"duplicate symbol {symbol!r}")
            seen.add(symbol)

    @classmethod
    def from_preset(cls, name: str) -> "Alphabet":
        """Return the built-in alphabet called ``name`` (``kana`` or ``latin``)."""

        try:
            lower, upper = PRESETS[name]
        except KeyError:
            raise AlphabetError(f"unknown alphabet preset {name!r}") from None
        return cls(lower, upper)

    def symbols(self, mode: NameMode) -> str:
        """Return all symbols available in ``mode``, in encoding order."""

        if mode is NameMode.MIXED_CASE:
            return self.lower + self.upper
        return self.lower

    def size(self, mode: NameMode) -> int:
        """Return the number of symbols available in ``mode``."""

        if mode is NameMode.MIXED_CASE:
            return len(self.lower) + len(self.upper)
        return len(self.lower)

    def symbol_at(self, mode: NameMode, offset: int) -> str:
        """Return the symbol at ``offset`` for ``mode``."""

        if not 0 <= offset < self.size(mode):
            raise IndexRangeError(f"symbol offset {offset} out of range for {mode.value} mode")
        if offset < len(self.lower):
            return self.lower[offset]
        return self.upper[offset - len(self.lower)]


DEFAULT_ALPHABET = Alphabet.from_preset("kana")

__all__ = ["Alphabet", "DEFAULT_ALPHABET", "NameMode", "coerce_mode"]
