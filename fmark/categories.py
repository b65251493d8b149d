from __future__ import annotations

import bisect
from typing import Dict, Iterator, List, Tuple

from .sorting import alphanumeric_key


def _key(name: str) -> Tuple[str, str]:
    return (alphanumeric_key(name), name)


class CategorySet:
    """Reference-counted category names, kept in alphanumeric order.

    ``add`` and ``remove`` return True only when the sorted name list itself
    changed, i.e. when a count crossed between 0 and 1.
    """

    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}
        self._names: List[str] = []
        self._keys: List[Tuple[str, str]] = []

    def add(self, name: str) -> bool:
        count = self._counts.get(name, 0)
        self._counts[name] = count + 1
        if count:
            return False
        key = _key(name)
        i = bisect.bisect_left(self._keys, key)
        self._keys.insert(i, key)
        self._names.insert(i, name)
        return True

    def remove(self, name: str) -> bool:
        count = self._counts.get(name, 0)
        if count == 0:
            return False
        if count > 1:
            self._counts[name] = count - 1
            return False
        del self._counts[name]
        key = _key(name)
        i = bisect.bisect_left(self._keys, key)
        if i < len(self._keys) and self._keys[i] == key:
            del self._keys[i]
            del self._names[i]
        return True

    def count(self, name: str) -> int:
        return self._counts.get(name, 0)

    @property
    def names(self) -> List[str]:
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)
