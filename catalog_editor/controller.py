"""
Design (controller.py)
- Purpose: Glue user intents (open editor, change field, save, cancel, delete row) to the
           EditSession and the CatalogStore, enforcing the save protocol.
- Inputs: Intents forwarded by the UI.
- Outputs: Read-side state for the UI (entries, count, session).
- Side effects: Mutates the session; mutates the store exactly once per successful save or delete.
- Thread-safety: Main thread only; intents run to completion one at a time.
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional

from .config import ADD_DIALOG_TITLE, EDIT_DIALOG_TITLE
from .models import Entry, FieldErrors
from .repository import CatalogStore
from .session import EditSession
from .validation import validate

logger = logging.getLogger(__name__)


class CatalogController:
    """
    Design (CatalogController)
    - Public methods (intents):
        open_for_create(), open_for_edit(entry), change_field(field, raw),
        save() -> FieldErrors, cancel(), delete_row(name)
    - Read side:
        entries, count, session
    - on_any_change: optional callback run after any intent that changed state (UI refresh hook).
    """

    def __init__(self, store: CatalogStore, session: Optional[EditSession] = None,
                 on_any_change: Optional[Callable[[], None]] = None):
        self.store = store
        self.session = session if session is not None else EditSession()
        self.on_any_change = on_any_change

    # ---------- read side ----------

    @property
    def entries(self) -> List[Entry]:
        return self.store.entries()

    @property
    def count(self) -> int:
        return self.store.count

    @property
    def dialog_title(self) -> str:
        return EDIT_DIALOG_TITLE if self.session.is_editing else ADD_DIALOG_TITLE

    # ---------- intents ----------

    def open_for_create(self) -> None:
        self.session.open_for_create()
        self._changed()

    def open_for_edit(self, entry: Entry) -> None:
        self.session.open_for_edit(entry)
        self._changed()

    def change_field(self, field: str, raw_value) -> bool:
        changed = self.session.change_field(field, raw_value)
        if changed:
            self._changed()
        return changed

    def save(self) -> FieldErrors:
        """
        Purpose: Validate the draft and commit it.
        Outputs: The field flags. FieldErrors.ok is False only when the draft was rejected.
        Side effects:
            no dialog open -> nothing committed, cleared flags returned
            invalid draft -> flags stored on the session, dialog stays open, store untouched
            valid draft   -> one CatalogStore.save() call, session closed
        """
        draft = self.session.draft
        if draft is None:
            logger.warning("save() ignored: no entry is being edited")
            return FieldErrors.none()

        errors = validate(draft)
        if not errors.ok:
            logger.debug("Draft rejected: %s", errors)
            self.session.fail(errors)
            self._changed()
            return errors

        committed = replace(draft, name=draft.name.strip())
        self.store.save(committed, self.session.original_name)
        logger.info("Saved %r (%s)", committed.name, self.session.mode.value)
        self.session.close()
        self._changed()
        return errors

    def cancel(self) -> None:
        if not self.session.is_open:
            return
        self.session.close()
        self._changed()

    def delete_row(self, name: str) -> None:
        """
        Purpose: Remove a row, closing the dialog if it was editing that row.
        Side effects: Mutates the store (no-op for unknown names); may close the session.
        """
        if name not in self.store:
            logger.debug("delete_row(%r) ignored: no such entry", name)
            return
        self.store.delete(name)
        logger.info("Deleted %r", name)
        if self.session.is_editing and self.session.original_name.strip() == name.strip():
            logger.info("Closing editor: %r was deleted", name)
            self.session.close()
        self._changed()

    def _changed(self) -> None:
        if self.on_any_change is not None:
            self.on_any_change()
