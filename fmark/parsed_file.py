from __future__ import annotations

from typing import Dict, List, Optional

from .categories import CategorySet
from .line_codec import decode_line, is_separator
from .log import get_logger
from .model import Bookmark, InvalidLine
from .sorting import bookmark_sort_key
from .widths import WidthTracker

log = get_logger(__name__)


class ParsedFile:
    """In-memory index of a bookmark file.

    Bookmarks are keyed by URL. Every mutation that changes content bumps
    ``bookmarks_version``; ``categories_version`` only moves when the sorted
    category list changes. ``PlainText`` compares these counters against what
    it last rendered.
    """

    def __init__(self) -> None:
        self.bookmarks: Dict[str, Bookmark] = {}
        self.invalid_lines: Dict[int, InvalidLine] = {}
        self.categories = CategorySet()
        self.title_widths = WidthTracker()
        self.category_widths = WidthTracker()
        self.bookmarks_version = 0
        self.categories_version = 0
        self.edited = False

    @classmethod
    def parse(cls, raw_text: str) -> "ParsedFile":
        parsed = cls()
        for i, line in enumerate(_lines(raw_text)):
            trimmed = line.strip()
            if not trimmed or is_separator(trimmed):
                continue
            bookmark = decode_line(trimmed)
            if bookmark is None:
                parsed.invalid_lines[i] = InvalidLine(line_number=i, raw_text=line)
                continue
            parsed._discard(bookmark.url)
            parsed._insert(bookmark)
        log.debug(
            "Parsed %d bookmarks in %d categories (%d unparsed lines).",
            len(parsed.bookmarks),
            len(parsed.categories),
            len(parsed.invalid_lines),
        )
        return parsed

    @property
    def longest_title(self) -> int:
        return self.title_widths.longest

    @property
    def longest_category(self) -> int:
        return self.category_widths.longest

    @property
    def category_names(self) -> List[str]:
        return self.categories.names

    def get(self, url: str) -> Optional[Bookmark]:
        return self.bookmarks.get(url)

    def sorted_bookmarks(self) -> List[Bookmark]:
        return sorted(self.bookmarks.values(), key=bookmark_sort_key)

    def upsert(self, new: Bookmark, old: Optional[Bookmark] = None) -> None:
        """Add ``new``, replacing ``old`` when given. Unchanged edits are no-ops."""
        if old is not None and old == new:
            return
        if self.bookmarks.get(new.url) == new and (old is None or old.url == new.url):
            return

        categories_changed = False
        if old is not None:
            categories_changed |= self._discard(old.url)
        categories_changed |= self._discard(new.url)
        categories_changed |= self._insert(new)

        self._touch(categories_changed)

    def remove(self, url: str) -> None:
        if url not in self.bookmarks:
            return
        categories_changed = self._discard(url)
        self._touch(categories_changed)

    def _insert(self, bookmark: Bookmark) -> bool:
        self.bookmarks[bookmark.url] = bookmark
        self.title_widths.add(bookmark.title)
        added = self.categories.add(bookmark.category)
        if added:
            self.category_widths.add(bookmark.category)
        return added

    def _discard(self, url: str) -> bool:
        bookmark = self.bookmarks.pop(url, None)
        if bookmark is None:
            return False
        self.title_widths.remove(bookmark.title)
        removed = self.categories.remove(bookmark.category)
        if removed:
            self.category_widths.remove(bookmark.category)
        return removed

    def _touch(self, categories_changed: bool) -> None:
        self.bookmarks_version += 1
        if categories_changed:
            self.categories_version += 1
        self.edited = True

    def __contains__(self, url: object) -> bool:
        return url in self.bookmarks

    def __len__(self) -> int:
        return len(self.bookmarks)


def _lines(text: str) -> List[str]:
    # Only "\n" ends a line; a single "\r" before it belongs to the terminator.
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]
