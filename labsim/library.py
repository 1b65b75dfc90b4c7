"""Read-only reference libraries keyed by analyte/sample id."""

from __future__ import annotations

from typing import Dict, Generic, Iterable, Iterator, Protocol, TypeVar

from .errors import NotFoundError


class LibraryEntry(Protocol):
    id: str
    name: str


EntryT = TypeVar("EntryT", bound=LibraryEntry)


class ReferenceLibrary(Generic[EntryT]):
    """Ordered, immutable table of library entries.

    Insertion order is display order. Entries are looked up by ``id``.
    """

    def __init__(self, entries: Iterable[EntryT], kind: str = "analyte") -> None:
        self.kind = kind
        self._entries: Dict[str, EntryT] = {}
        for entry in entries:
            if entry.id in self._entries:
                raise ValueError(f"Duplicate {kind} id '{entry.id}' in library.")
            self._entries[entry.id] = entry

    def lookup(self, entry_id: str) -> EntryT:
        if entry_id not in self._entries:
            raise NotFoundError(self.kind, entry_id, list(self._entries))
        return self._entries[entry_id]

    def list(self) -> list[EntryT]:
        return list(self._entries.values())

    @property
    def ids(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def __iter__(self) -> Iterator[EntryT]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ReferenceLibrary({self.kind}: {', '.join(self._entries)})"
