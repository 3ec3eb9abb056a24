"""Naming sessions own the caches shared between factories.

A renaming run creates one :class:`NamingSession` and asks it for a factory
per naming scope.  Factories of the same mode then reuse each other's
computed names through a single cache, while the two modes never share one.
The caches live exactly as long as the session; dropping the session drops
them.
"""

from __future__ import annotations

import threading

from obfuscator.config import ConfigModel
from obfuscator.utils.logging import get_logger

from .alphabet import DEFAULT_ALPHABET, Alphabet, NameMode, coerce_mode
from .cache import NameCache
from .factory import NameFactory

logger = get_logger(__name__)


class NamingSession:
    """Per-run owner of one name cache per mode."""

    def __init__(self, alphabet: Alphabet | None = None) -> None:
        self.alphabet: Alphabet = alphabet or DEFAULT_ALPHABET
        self._caches: dict[NameMode, NameCache] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, cfg: ConfigModel) -> "NamingSession":
        """Create a session using the alphabet selected in ``cfg``."""

        return cls(alphabet_from_config(cfg))

    def cache(self, mode: NameMode | str) -> NameCache:
        """Return the cache for ``mode``, creating it on first use."""

        mode = coerce_mode(mode)
        with self._lock:
            cache = self._caches.get(mode)
            if cache is None:
                cache = NameCache(self.alphabet, mode)
                self._caches[mode] = cache
                logger.debug(
                    "created %s name cache over %d symbols", mode.value, self.alphabet.size(mode)
                )
            return cache

    def factory(self, mode: NameMode | str = NameMode.MIXED_CASE) -> NameFactory:
        """Return a fresh factory for ``mode`` backed by the session cache."""

        cache = self.cache(mode)
        return NameFactory(cache.mode, cache=cache)


def alphabet_from_config(cfg: ConfigModel) -> Alphabet:
    """Build the alphabet described by ``cfg.naming``."""

    naming = cfg.naming
    if naming.alphabet == "custom":
        # Presence of both symbol strings is checked by the config schema.
        return Alphabet(naming.custom_lower or "", naming.custom_upper or "")
    return Alphabet.from_preset(naming.alphabet)


__all__ = ["NamingSession", "alphabet_from_config"]
