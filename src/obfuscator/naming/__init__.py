"""Deterministic short-name generation.

Names are produced by bijective numeral expansion over an :class:`Alphabet`
(see :mod:`.encoder`), memoized per mode in a :class:`NameCache`, and handed
out in sequence by a :class:`NameFactory`.  A :class:`NamingSession` ties the
caches to the lifetime of one renaming run.
"""

from .alphabet import DEFAULT_ALPHABET, Alphabet, NameMode, coerce_mode
from .base import NameGenerator
from .cache import NameCache
from .encoder import decode, encode, name_length
from .factory import NameFactory
from .session import NamingSession, alphabet_from_config

__all__ = [
    "Alphabet",
    "DEFAULT_ALPHABET",
    "NameCache",
    "NameFactory",
    "NameGenerator",
    "NameMode",
    "NamingSession",
    "alphabet_from_config",
    "coerce_mode",
    "decode",
    "encode",
    "name_length",
]
