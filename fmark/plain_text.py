from __future__ import annotations

from pathlib import Path
from typing import List

from .line_codec import encode_line, separator_line
from .log import get_logger
from .model import Bookmark
from .parsed_file import ParsedFile

log = get_logger(__name__)


class PlainText:
    """Lazily rendered text of a ``ParsedFile``.

    Each blob remembers the index version it was rendered from and is only
    rebuilt once that version moves.
    """

    def __init__(self) -> None:
        self._bookmarks = ""
        self._bookmarks_version = -1
        self._categories = ""
        self._categories_version = -1

    def render_bookmarks(self, index: ParsedFile) -> str:
        if self._bookmarks_version == index.bookmarks_version:
            return self._bookmarks

        bookmarks = index.sorted_bookmarks()
        separator = separator_line(index.longest_title, index.longest_category)
        invalid = index.invalid_lines

        out: List[str] = []
        next_bookmark = 0
        current_category = None
        for slot in range(len(bookmarks) + len(invalid)):
            line = invalid.get(slot)
            if line is not None:
                out.append(line.raw_text + "\n")
                continue
            if next_bookmark == len(bookmarks):
                continue
            b = bookmarks[next_bookmark]
            next_bookmark += 1
            if current_category is not None and current_category != b.category:
                out.append(separator)
            current_category = b.category
            out.append(encode_line(b, index.longest_title, index.longest_category))

        # Dropped blank and separator lines can push line numbers past the last slot.
        last_slot = len(bookmarks) + len(invalid)
        for line_number in sorted(n for n in invalid if n >= last_slot):
            out.append(invalid[line_number].raw_text + "\n")

        self._bookmarks = "".join(out)
        self._bookmarks_version = index.bookmarks_version
        log.debug("Rendered %d bookmarks (version %d).", len(bookmarks), index.bookmarks_version)
        return self._bookmarks

    def render_categories(self, index: ParsedFile) -> str:
        if self._categories_version == index.categories_version:
            return self._categories
        self._categories = "".join(f"{name}\n" for name in index.category_names)
        self._categories_version = index.categories_version
        return self._categories

    def flush(self, path: Path, index: ParsedFile) -> bool:
        """Write the rendered bookmarks to ``path`` if the index was edited.

        Returns True when the file was written. ``OSError`` is left to the caller.
        """
        if not index.edited:
            return False
        text = self.render_bookmarks(index)
        Path(path).write_text(text, encoding="utf-8")
        log.info("Wrote %d bookmarks to %s", len(index), path)
        return True


def read_text(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def template_text() -> str:
    """Contents of a freshly created bookmark file."""
    index = ParsedFile()
    index.upsert(Bookmark.default())
    return PlainText().render_bookmarks(index)
