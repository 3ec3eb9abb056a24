"""Bijective numeral encoding of sequence indices.

Index ``n`` maps to the ``n``-th string of the shortest-first enumeration of
all non-empty strings over the mode's symbols.  With ``B`` symbols the
indices ``0..B-1`` are the single symbols, ``B..B+B**2-1`` the two-symbol
names, and so on.  Unlike ordinary base-``B`` numerals there is no zero digit:
each step continues with ``index // B - 1`` instead of ``index // B``, which
makes every string reachable exactly once.

The helpers are pure.  Memoization lives in :mod:`obfuscator.naming.cache`.
"""

from __future__ import annotations

from obfuscator.utils.errors import AlphabetError, IndexRangeError, NameDecodeError

from .alphabet import Alphabet, NameMode


def encode(index: int, alphabet: Alphabet, mode: NameMode) -> str:
    """Return the name for ``index`` over ``alphabet`` in ``mode``.

    Symbols are collected least significant first and reversed at the end, so
    the call depth does not grow with the index.
    """

    if index < 0:
        raise IndexRangeError(f"index must be non-negative, got {index}")
    size = alphabet.size(mode)
    symbols: list[str] = []
    while True:
        base_index, offset = divmod(index, size)
        symbols.append(alphabet.symbol_at(mode, offset))
        if base_index == 0:
            break
        index = base_index - 1
    symbols.reverse()
    return "".join(symbols)


def decode(name: str, alphabet: Alphabet, mode: NameMode) -> int:
    """Return the index that :func:`encode` maps to ``name``."""

    if not name:
        raise NameDecodeError("cannot decode an empty name")
    symbols = alphabet.symbols(mode)
    size = len(symbols)
    index = 0
    for symbol in name:
        offset = symbols.find(symbol)
        if offset < 0:
            raise NameDecodeError(f"symbol {symbol!r} is not part of the {mode.value} alphabet")
        index = index * size + offset + 1
    return index - 1


def name_length(index: int, size: int) -> int:
    """Return ``len(encode(index, ...))`` for an alphabet of ``size`` symbols."""

    if index < 0:
        raise IndexRangeError(f"index must be non-negative, got {index}")
    if size < 1:
        raise AlphabetError("alphabet size must be positive")
    length = 1
    block = size
    while index >= block:
        index -= block
        block *= size
        length += 1
    return length


__all__ = ["decode", "encode", "name_length"]
