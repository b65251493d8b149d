from __future__ import annotations

from collections import Counter


class WidthTracker:
    """Running maximum character width of one field over live bookmarks.

    A histogram of widths lets removal recover the true new maximum, even when
    several values were tied at the old one.
    """

    def __init__(self) -> None:
        self._counts: Counter[int] = Counter()
        self.longest = 0

    def on_add(self, width: int) -> None:
        self._counts[width] += 1
        if width > self.longest:
            self.longest = width

    def on_remove(self, width: int) -> None:
        if not self._counts[width]:
            return
        self._counts[width] -= 1
        if self._counts[width]:
            return
        del self._counts[width]
        if width != self.longest:
            return
        for w in range(width - 1, 0, -1):
            if self._counts[w]:
                self.longest = w
                return
        self.longest = 0

    def add(self, text: str) -> None:
        self.on_add(len(text))

    def remove(self, text: str) -> None:
        self.on_remove(len(text))

    def __len__(self) -> int:
        return sum(self._counts.values())
