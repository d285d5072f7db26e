# src/e2e/test_suffix_array_lookup.py

import pytest

from shakesearch.index import SuffixArrayIndex, build_suffix_array


def _brute_force(data: bytes, pattern: bytes) -> list[int]:
    return [i for i in range(len(data) - len(pattern) + 1) if data[i:i + len(pattern)] == pattern]


def test_banana_suffix_order():
    assert list(build_suffix_array(b"banana")) == [5, 3, 1, 0, 4, 2]


def test_empty_and_single_byte():
    assert list(build_suffix_array(b"")) == []
    assert list(build_suffix_array(b"x")) == [0]


def test_lookup_returns_overlapping_matches_in_corpus_order():
    idx = SuffixArrayIndex(b"aaaa")
    assert idx.lookup(b"aa") == [0, 1, 2]
    assert SuffixArrayIndex(b"banana").lookup(b"ana") == [1, 3]


def test_lookup_cap():
    idx = SuffixArrayIndex(b"aaaa")
    assert idx.lookup(b"a", 2) == [0, 1]
    assert idx.lookup(b"a", 0) == []
    assert idx.lookup(b"a", -1) == [0, 1, 2, 3]
    assert idx.lookup(b"a", 99) == [0, 1, 2, 3]


def test_lookup_absent_or_empty_pattern():
    idx = SuffixArrayIndex(b"to be or not to be")
    assert idx.lookup(b"question") == []
    assert idx.lookup(b"") == []
    assert idx.lookup(b"to be or not to be, that") == []


@pytest.mark.parametrize("pattern", [b"the", b"th", b"e", b" ", b"the quick", b"dog.", b"zebra"])
def test_lookup_matches_brute_force(pattern):
    data = (b"the quick brown fox jumps over the lazy dog. " * 7) + b"then the end."
    idx = SuffixArrayIndex(data)
    assert len(idx) == len(data)
    assert idx.lookup(pattern) == _brute_force(data, pattern)


def test_megabyte_corpus_builds_quickly_and_stays_sorted():
    import time
    block = b"Whether 'tis nobler in the mind to suffer\r\nThe slings and arrows of outrageous fortune,\r\n"
    license_text = b"THIS ELECTRONIC VERSION IS COPYRIGHT WORLD LIBRARY, INC.\r\n" * 3
    data = (block * 40 + license_text) * 90
    assert len(data) > 1_000_000

    t0 = time.perf_counter()
    idx = SuffixArrayIndex(data)
    assert time.perf_counter() - t0 < 10

    assert len(idx) == len(data)
    assert idx.lookup(b"outrageous") == _brute_force(data, b"outrageous")
    sa = idx._sa
    for i in range(0, len(sa) - 1, 4999):
        assert data[sa[i]:sa[i] + 64] <= data[sa[i + 1]:sa[i + 1] + 64]
