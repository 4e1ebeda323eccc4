"""
Design (repository.py)
- Purpose: Own the ordered collection of catalog entries behind a tiny API, so the controller
           and UI never touch the list directly.
- Inputs: Entry objects and names.
- Outputs: Snapshots (copies) of the ordered entries; CatalogChange events to listeners.
- Side effects: Mutates the internal list; calls subscribed listeners after each change.
- Thread-safety: None needed; every call comes from the Tk main loop, one intent at a time.
"""

import itertools
import logging
from dataclasses import replace
from typing import Callable, Iterable, List, Optional, Tuple, Union

from .models import CatalogChange, ChangeKind, Entry

logger = logging.getLogger(__name__)

Listener = Callable[[CatalogChange], None]


class CatalogStore:
    """
    Design (CatalogStore)
    - State:
        _entries: [Entry] in insertion order; names are unique (trimmed)
        _ids: counter handing out surrogate entry_id values
        _listeners: callables receiving one CatalogChange per affected row
    - Merge policy (upsert-by-name):
        create() with a name already present replaces that row in place instead of appending.
        update() replaces the edited row in place; if the new name belongs to another row,
        that other row is removed. If the edited row is gone, update() falls back to create().
    """

    def __init__(self, seed: Iterable[Union[Entry, Tuple[str, float]]] = ()) -> None:
        self._entries: List[Entry] = []
        self._ids = itertools.count(1)
        self._listeners: List[Listener] = []
        for item in seed:
            self.create(item if isinstance(item, Entry) else Entry(*item))

    # -------- Change feed --------

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, changes: List[CatalogChange]) -> None:
        for change in changes:
            logger.debug("Catalog %s: %r at %d", change.kind.value, change.entry.name, change.index)
            for listener in list(self._listeners):
                try:
                    listener(change)
                except Exception:
                    logger.exception("Catalog listener %r failed on %s", listener, change.kind.value)

    # -------- Reading --------

    def entries(self) -> List[Entry]:
        """
        Purpose: Return copies of the entries, in order, for safe iteration.
        Outputs: [Entry]
        """
        return [e.copy() for e in self._entries]

    def get(self, name: str) -> Optional[Entry]:
        idx = self._index_of(name)
        return None if idx is None else self._entries[idx].copy()

    @property
    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._index_of(name) is not None

    def _index_of(self, name: str, skip: Optional[int] = None) -> Optional[int]:
        key = name.strip()
        for i, entry in enumerate(self._entries):
            if i != skip and entry.name == key:
                return i
        return None

    # -------- CRUD --------

    def create(self, entry: Entry) -> List[Entry]:
        """
        Purpose: Append a new entry, or replace the row that already has this name.
        Inputs: entry (Entry)
        Outputs: New snapshot of the entries.
        Side effects: Mutates _entries; emits ADDED or UPDATED.
        """
        entry = replace(entry, name=entry.name.strip())
        idx = self._index_of(entry.name)
        if idx is None:
            stored = replace(entry, entry_id=next(self._ids))
            self._entries.append(stored)
            change = CatalogChange(ChangeKind.ADDED, stored.copy(), len(self._entries) - 1)
        else:
            stored = replace(entry, entry_id=self._entries[idx].entry_id)
            self._entries[idx] = stored
            change = CatalogChange(ChangeKind.UPDATED, stored.copy(), idx)
        self._emit([change])
        return self.entries()

    def update(self, original_name: str, entry: Entry) -> List[Entry]:
        """
        Purpose: Replace the row named original_name with entry, keeping its position and entry_id.
        Inputs: original_name (str), entry (Entry; its name may differ from original_name)
        Outputs: New snapshot of the entries.
        Side effects: Mutates _entries; emits REMOVED (name clash) and UPDATED.
        """
        idx = self._index_of(original_name)
        if idx is None:
            logger.info("Edit target %r no longer exists; saving %r as a new entry", original_name, entry.name)
            return self.create(entry)

        entry = replace(entry, name=entry.name.strip())
        changes: List[CatalogChange] = []
        clash = self._index_of(entry.name, skip=idx)
        if clash is not None:
            removed = self._entries.pop(clash)
            changes.append(CatalogChange(ChangeKind.REMOVED, removed.copy(), clash))
            if clash < idx:
                idx -= 1

        stored = replace(entry, entry_id=self._entries[idx].entry_id)
        self._entries[idx] = stored
        changes.append(CatalogChange(ChangeKind.UPDATED, stored.copy(), idx))
        self._emit(changes)
        return self.entries()

    def delete(self, name: str) -> List[Entry]:
        """
        Purpose: Remove the entry with this name.
        Outputs: New snapshot of the entries (unchanged when the name is unknown).
        Side effects: Mutates _entries; emits REMOVED.
        """
        idx = self._index_of(name)
        if idx is None:
            logger.debug("Delete of unknown entry %r ignored", name)
            return self.entries()
        removed = self._entries.pop(idx)
        self._emit([CatalogChange(ChangeKind.REMOVED, removed.copy(), idx)])
        return self.entries()

    def save(self, draft: Entry, original_name: Optional[str] = None) -> List[Entry]:
        """
        Purpose: Single commit point used by the controller.
        Inputs: draft (validated Entry), original_name (name the edit session was opened on, or None when creating)
        Outputs: New snapshot of the entries.
        """
        if original_name is None:
            return self.create(draft)
        return self.update(original_name, draft)
