from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bookmark:
    title: str
    category: str
    url: str

    @staticmethod
    def default() -> "Bookmark":
        return Bookmark(
            title="Project's Github",
            category="Development",
            url="https://github.com/vannrr/fmark",
        )


@dataclass(frozen=True)
class InvalidLine:
    """A non-blank line that is not a bookmark, kept verbatim for write-back."""

    line_number: int
    raw_text: str
