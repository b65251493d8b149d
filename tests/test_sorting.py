from functools import cmp_to_key

from fmark.model import Bookmark
from fmark.sorting import alphanumeric_key, bookmark_sort_key, compare


def test_compare_ignores_case_and_punctuation():
    assert compare("A-1", "a1") == 0
    assert compare("a", "A") == 0
    assert compare("a", "b") == -1
    assert compare("b", "a") == 1
    assert compare("1", "2") == -1
    assert compare("1", "a") == -1


def test_strict_prefix_sorts_first():
    assert compare("a-1", "a-10") == -1
    assert compare("a10", "a-1") == 1


def test_category_example_order():
    assert sorted(["b-2", "A1", "a-10"], key=cmp_to_key(compare)) == ["A1", "a-10", "b-2"]


def test_non_ascii_is_dropped_from_key():
    assert alphanumeric_key("Çafé #1") == "af1"


def test_bookmarks_sort_by_category_then_title():
    bms = [
        Bookmark("zeta", "b", "u1"),
        Bookmark("Alpha", "b", "u2"),
        Bookmark("omega", "A", "u3"),
    ]
    got = [b.url for b in sorted(bms, key=bookmark_sort_key)]
    assert got == ["u3", "u2", "u1"]
