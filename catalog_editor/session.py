"""
Design (session.py)
- Purpose: Hold the transient state of the add/edit dialog: which mode it is in, the draft being
           typed, and the inline validation flags.
- Inputs: Entries to edit, raw field values from the form.
- Outputs: mode / draft / field_errors for the UI to read.
- Side effects: None outside the session itself; never touches CatalogStore.
- Thread-safety: Main thread only.
"""

import logging
from enum import Enum
from typing import Optional

from .config import DEFAULT_PRICE
from .models import Entry, FieldErrors
from .utils import parse_price

logger = logging.getLogger(__name__)

FIELDS = ("name", "price")


class SessionMode(Enum):
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"


class EditSession:
    """
    Design (EditSession)
    - State:
        mode: CLOSED | CREATING | EDITING
        original_name: name of the entry being edited (EDITING only)
        draft: working copy shown in the form (None while CLOSED)
        field_errors: flags from the last failed save (cleared on open/close)
    """

    def __init__(self) -> None:
        self.mode = SessionMode.CLOSED
        self.original_name: Optional[str] = None
        self.draft: Optional[Entry] = None
        self.field_errors = FieldErrors.none()

    @property
    def is_open(self) -> bool:
        return self.mode is not SessionMode.CLOSED

    @property
    def is_editing(self) -> bool:
        return self.mode is SessionMode.EDITING

    def open_for_create(self) -> None:
        self._discard_if_open()
        self.mode = SessionMode.CREATING
        self.original_name = None
        self.draft = Entry(name="", price=DEFAULT_PRICE)
        self.field_errors = FieldErrors.none()
        logger.debug("Session opened for a new entry")

    def open_for_edit(self, entry: Entry) -> None:
        self._discard_if_open()
        self.mode = SessionMode.EDITING
        self.original_name = entry.name
        self.draft = entry.copy()
        self.field_errors = FieldErrors.none()
        logger.debug("Session opened for %r", entry.name)

    def change_field(self, field: str, raw_value) -> bool:
        """
        Purpose: Update one draft field from the form.
        Inputs: field ('name' or 'price'), raw_value (text from the form; numbers accepted for price)
        Outputs: True when the draft changed, False when the session is closed.
        Raises: ValueError for an unknown field name.
        """
        if field not in FIELDS:
            raise ValueError(f"Unknown field {field!r}; expected one of {FIELDS}")
        if self.draft is None:
            logger.warning("change_field(%r) ignored: no entry is being edited", field)
            return False
        if field == "name":
            self.draft.name = "" if raw_value is None else str(raw_value)
        else:
            self.draft.price = parse_price(raw_value)
        return True

    def fail(self, errors: FieldErrors) -> None:
        """Record the flags of a rejected save; mode and draft stay as they are."""
        self.field_errors = errors

    def close(self) -> None:
        self.mode = SessionMode.CLOSED
        self.original_name = None
        self.draft = None
        self.field_errors = FieldErrors.none()

    def _discard_if_open(self) -> None:
        if self.is_open:
            logger.debug("Discarding open draft (%s) before reopening", self.mode.value)
