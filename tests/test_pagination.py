"""Tests for page math."""

import pytest

from termpick.pagination import clamp_page, is_paged, page_indices, page_of, total_pages


class TestTotalPages:
    @pytest.mark.parametrize("size", [None, 0, -3])
    def test_disabled_is_one_page(self, size):
        assert total_pages(list(range(250)), size) == 1

    def test_empty_is_one_page(self):
        assert total_pages([], 10) == 1

    def test_rounds_up(self):
        assert total_pages(list(range(5)), 2) == 3
        assert total_pages(list(range(4)), 2) == 2


class TestPageIndices:
    def test_slices(self):
        filtered = [0, 2, 4, 6, 8]
        assert page_indices(filtered, 2, 0) == (0, 2)
        assert page_indices(filtered, 2, 2) == (8,)

    def test_beyond_last_page_is_empty(self):
        assert page_indices([1, 2, 3], 2, 5) == ()

    def test_disabled_returns_everything_on_first_page(self):
        assert page_indices([1, 2, 3], None, 0) == (1, 2, 3)
        assert page_indices([1, 2, 3], 0, 1) == ()
        assert page_indices([1, 2, 3], -4, 0) == (1, 2, 3)


def test_pages_cover_filtered_exactly_once():
    filtered = [1, 3, 4, 7, 9, 10, 11]
    for size in [None, 1, 2, 3, 7, 10]:
        pages = total_pages(filtered, size)
        joined = [i for page in range(pages) for i in page_indices(filtered, size, page)]
        assert joined == filtered


def test_clamp_page():
    filtered = list(range(5))
    assert clamp_page(-1, filtered, 2) == 0
    assert clamp_page(9, filtered, 2) == 2
    assert clamp_page(1, filtered, 2) == 1
    assert clamp_page(3, filtered, None) == 0


def test_page_of():
    assert page_of(0, 2) == 0
    assert page_of(3, 2) == 1
    assert page_of(99, None) == 0
    assert page_of(5, -2) == 0


def test_is_paged():
    assert is_paged(1)
    assert not is_paged(0)
    assert not is_paged(None)
