from __future__ import annotations

from typing import Tuple

from .model import Bookmark


def alphanumeric_key(s: str) -> str:
    """Lower-cased ASCII letters and digits of ``s``; everything else is ignored."""
    return "".join(ch for ch in s if ch.isascii() and ch.isalnum()).lower()


def compare(a: str, b: str) -> int:
    ka = alphanumeric_key(a)
    kb = alphanumeric_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


def bookmark_sort_key(b: Bookmark) -> Tuple[str, str, str, str, str]:
    # Raw fields only break ties between keys that fold to the same string.
    return (
        alphanumeric_key(b.category),
        alphanumeric_key(b.title),
        b.category,
        b.title,
        b.url,
    )
