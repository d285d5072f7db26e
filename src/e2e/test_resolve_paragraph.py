# src/e2e/test_resolve_paragraph.py

from shakesearch.search import resolve, window

BOUNDS = (0, 22)
N = 43  # len("To be, or not to be.\r\nThat is the question.")


def test_offsets_in_first_paragraph():
    for idx in (0, 3, 17, 21):
        assert resolve(BOUNDS, idx, N) == (0, 22)


def test_last_paragraph_closes_at_corpus_end():
    assert resolve(BOUNDS, 22, N) == (22, N)
    assert resolve(BOUNDS, N - 1, N) == (22, N)


def test_out_of_range_degrades_to_zero():
    assert resolve(BOUNDS, N, N) == (0, 0)
    assert resolve(BOUNDS, -1, N) == (0, 0)
    assert resolve((), 3, N) == (0, 0)
    assert resolve((5, 9), 2, N) == (0, 0)


def test_encloses_and_is_monotonic_for_every_offset():
    bounds = (0, 4, 9, 10, 30)
    n = 41
    last_open = 0
    for idx in range(n):
        open_, close = resolve(bounds, idx, n)
        assert open_ <= idx < close
        assert open_ >= last_open
        last_open = open_


def test_window_is_clamped_to_corpus():
    assert window(3, 2, 43, size=250) == (0, 43)
    assert window(400, 5, 1000, size=250) == (150, 655)
    assert window(990, 5, 1000, size=250) == (740, 1000)
