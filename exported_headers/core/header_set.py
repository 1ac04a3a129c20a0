# exported_headers/core/header_set.py
from typing import AbstractSet, Iterable, Iterator, Optional


class ExportedHeaderSet:
    # ordered set of unique normalized header paths; iterates lexicographically.
    def __init__(self, paths: Optional[Iterable[str]] = None):
        self._paths: AbstractSet[str] = set()
        if paths:
            self.update(paths)

    @property
    def frozen(self) -> bool:
        return isinstance(self._paths, frozenset)

    def add(self, path: str) -> None:
        if self.frozen:
            raise TypeError("exported header set is frozen")
        self._paths.add(path)

    def update(self, paths: Iterable[str]) -> None:
        for path in paths:
            self.add(path)

    def freeze(self) -> "ExportedHeaderSet":
        # no further inserts once the set is handed to collaborators.
        self._paths = frozenset(self._paths)
        return self

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExportedHeaderSet):
            return self._paths == other._paths
        if isinstance(other, (set, frozenset)):
            return self._paths == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ExportedHeaderSet({list(self)!r})"
