"""Line format of the bookmark file.

A bookmark occupies one line made of three marked segments followed by
alignment padding::

    {T}{Rust}       {C}{Lang}        {U}{https://rust-lang.org}

Categories are separated by a line of ``-``. Anything else is not a bookmark.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .model import Bookmark

TITLE_MARKER = "T"
TITLE_MAX_LENGTH = 35

CATEGORY_MARKER = "C"
CATEGORY_MAX_LENGTH = 35

URL_MARKER = "U"
URL_MAX_LENGTH = 2048

SEGMENT_START = "{"
SEGMENT_END = "}"

SEPARATOR_LINE_SYMBOL = "-"
SEPARATOR_OVERHEAD = 8

ADD_BOOKMARK = "Add bookmark"
ADD_BOOKMARK_OVERHEAD = 11

_SEGMENT_COUNT = 6


def _padding(width: int, char_count: int, max_length: int) -> int:
    if width >= max_length - 1:
        width = max_length
    return max(width - char_count, 0) + 1


def encode_line(bookmark: Bookmark, title_width: int, category_width: int) -> str:
    title = bookmark.title
    category = bookmark.category
    url = bookmark.url

    title_pad = _padding(title_width, len(title), TITLE_MAX_LENGTH)
    category_pad = _padding(category_width, len(category), CATEGORY_MAX_LENGTH)

    title = title[:TITLE_MAX_LENGTH]
    category = category[:CATEGORY_MAX_LENGTH]
    url = url[:URL_MAX_LENGTH]

    return (
        f"{{{TITLE_MARKER}}}{{{title}}}{' ' * title_pad}"
        f"{{{CATEGORY_MARKER}}}{{{category}}}{' ' * category_pad}"
        f"{{{URL_MARKER}}}{{{url}}}\n"
    )


def _segments(line: str) -> List[str]:
    segments: List[str] = []
    segment: List[str] = []
    capture = False
    for ch in line:
        if ch == SEGMENT_START and not capture:
            capture = True
            segment = []
        elif ch == "\n" and capture:
            capture = False
            segment = []
        if capture:
            segment.append(ch)
        if ch == SEGMENT_END and capture:
            capture = False
            segments.append("".join(segment))
    return segments


def decode_line(line: str) -> Optional[Bookmark]:
    segments = _segments(line)
    if len(segments) != _SEGMENT_COUNT:
        return None

    fields: Dict[str, str] = {}
    for i in range(0, _SEGMENT_COUNT, 2):
        marker = segments[i].strip(SEGMENT_START + SEGMENT_END).strip()
        value = segments[i + 1].strip(SEGMENT_START + SEGMENT_END).strip()
        if marker in (TITLE_MARKER, CATEGORY_MARKER, URL_MARKER):
            fields[marker] = value

    if len(fields) != 3:
        return None
    return Bookmark(
        title=fields[TITLE_MARKER],
        category=fields[CATEGORY_MARKER],
        url=fields[URL_MARKER],
    )


def has_segment_delimiters(value: str) -> bool:
    """Braces inside a field would end its segment early on decode."""
    return SEGMENT_START in value or SEGMENT_END in value


def is_separator(line: str) -> bool:
    """True for a line made only of separator symbols (surrounding whitespace aside)."""
    s = line.strip()
    return bool(s) and set(s) == {SEPARATOR_LINE_SYMBOL}


def separator_line(longest_title: int, longest_category: int) -> str:
    width = min(longest_title, TITLE_MAX_LENGTH) + min(longest_category, CATEGORY_MAX_LENGTH) + SEPARATOR_OVERHEAD
    return SEPARATOR_LINE_SYMBOL * width + "\n"


def add_bookmark_line(longest_title: int, longest_category: int) -> str:
    """Menu entry that starts the "add bookmark" dialog, centred in dashes."""
    total = (
        min(longest_title, TITLE_MAX_LENGTH)
        + min(longest_category, CATEGORY_MAX_LENGTH)
        + ADD_BOOKMARK_OVERHEAD
    )
    padding = max(total - len(ADD_BOOKMARK), 0)
    left = padding // 2
    right = padding - left
    return SEPARATOR_LINE_SYMBOL * left + ADD_BOOKMARK + SEPARATOR_LINE_SYMBOL * right
