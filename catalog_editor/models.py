"""
Design (models.py)
- Purpose: Define simple, typed data structures for the catalog (Entry, FieldErrors, CatalogChange).
- Inputs: Field values (str, float).
- Outputs: Dataclass instances.
- Side effects: None.
- Thread-safety: Dataclasses are plain containers; CatalogStore hands out copies only.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


@dataclass
class Entry:
    """
    Design (Entry)
    - Purpose: Represents a single named, priced catalog item.
    - Fields:
        name: display name; unique inside a CatalogStore (trimmed on commit).
        price: unit price; must be finite and > 0 to be committed.
        entry_id: surrogate key assigned by CatalogStore; survives renames.
                  Not part of equality, so Entry("A", 1) == stored Entry("A", 1).
    """
    name: str
    price: float
    entry_id: Optional[int] = field(default=None, compare=False)

    def copy(self) -> "Entry":
        return replace(self)


@dataclass(frozen=True)
class FieldErrors:
    """
    Design (FieldErrors)
    - Purpose: Per-field validation flags shown inline by the form.
    """
    name_invalid: bool = False
    price_invalid: bool = False

    @property
    def ok(self) -> bool:
        return not (self.name_invalid or self.price_invalid)

    @classmethod
    def none(cls) -> "FieldErrors":
        return cls()


class ChangeKind(Enum):
    ADDED = "added"
    UPDATED = "updated"
    REMOVED = "removed"


@dataclass(frozen=True)
class CatalogChange:
    """
    Design (CatalogChange)
    - Purpose: One row-level change emitted by CatalogStore to its listeners.
    - Fields:
        kind: ADDED / UPDATED / REMOVED
        entry: copy of the row after the change (before it, for REMOVED)
        index: row position after the change (before it, for REMOVED)
    """
    kind: ChangeKind
    entry: Entry
    index: int
