import pytest

from dsakit.searching import binary_search, linear_search

SORTED = [1, 2, 4, 8, 9, 10]
UNSORTED = [4, 8, 6, 1, 7, 9]


@pytest.mark.parametrize("key", SORTED)
def test_binary_search_finds_each(key):
    assert SORTED[binary_search(SORTED, key)] == key


@pytest.mark.parametrize("key", [0, 3, 11])
def test_binary_search_missing(key):
    assert binary_search(SORTED, key) == -1


def test_binary_search_empty():
    assert binary_search([], 1) == -1


@pytest.mark.parametrize("key", UNSORTED)
def test_linear_search_finds_each(key):
    assert linear_search(UNSORTED, key) == UNSORTED.index(key)


def test_linear_search_first_occurrence():
    assert linear_search([3, 5, 3], 3) == 0


def test_linear_search_missing():
    assert linear_search(UNSORTED, 5) == -1