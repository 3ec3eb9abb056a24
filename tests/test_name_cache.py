from __future__ import annotations

import pytest

from obfuscator.naming import Alphabet, NameCache, NameMode, encode
from obfuscator.utils.errors import IndexRangeError

FIVE = Alphabet("ABCDE", "VWXYZ")


def test_cold_lookup_fills_prefix_chain() -> None:
    cache = NameCache(FIVE, NameMode.LOWER_CASE)
    assert cache.get_or_compute(30) == "AAA"
    # 30 -> "AA" at 5 -> "A" at 0
    assert len(cache) == 3
    assert 0 in cache and 5 in cache and 30 in cache
    assert cache.misses == 1 and cache.hits == 0


def test_hits_return_same_value() -> None:
    cache = NameCache(FIVE, NameMode.LOWER_CASE)
    first = cache.get_or_compute(29)
    assert cache.get_or_compute(29) == first == "EE"
    assert cache.get_or_compute(4) == "E"
    assert cache.hits == 2
    assert cache.misses == 1


def test_out_of_order_lookups_match_encoder() -> None:
    cache = NameCache(FIVE, NameMode.MIXED_CASE)
    for index in (999, 3, 250, 0, 10, 11, 998, 1000):
        assert cache.get_or_compute(index) == encode(index, FIVE, NameMode.MIXED_CASE)


def test_cache_only_grows() -> None:
    cache = NameCache(FIVE, NameMode.LOWER_CASE)
    sizes = []
    for index in (100, 3, 100, 7, 2000):
        cache.get_or_compute(index)
        sizes.append(len(cache))
    assert sizes == sorted(sizes)


def test_negative_index_rejected() -> None:
    cache = NameCache(FIVE, NameMode.LOWER_CASE)
    with pytest.raises(IndexRangeError):
        cache.get_or_compute(-1)
    assert len(cache) == 0


def test_repr_mentions_mode() -> None:
    cache = NameCache(FIVE, NameMode.MIXED_CASE)
    cache.get_or_compute(0)
    assert repr(cache) == "NameCache(mode='mixed', entries=1)"
