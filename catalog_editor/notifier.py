"""
Design (notifier.py)
- Purpose: Turn catalog change events into short messages and, when enabled, OS desktop notifications.
- Inputs: CatalogChange events from CatalogStore.
- Outputs: None.
- Side effects: plyer.notification.notify() pops a system toast.
- Thread-safety: Main thread only (called from store listeners).
"""

import logging
from typing import Callable

from plyer import notification

from .config import NOTIFICATION_TIMEOUT_SEC, WINDOW_TITLE
from .models import CatalogChange, ChangeKind
from .utils import format_price

logger = logging.getLogger(__name__)


def describe_change(change: CatalogChange) -> str:
    """
    Purpose: One-line human summary of a change, used by notifications and the Logs panel.
    Example: 'Added Shirt (20.00)', 'Removed Shirt'.
    """
    entry = change.entry
    if change.kind is ChangeKind.REMOVED:
        return f"Removed {entry.name}"
    verb = "Added" if change.kind is ChangeKind.ADDED else "Updated"
    return f"{verb} {entry.name} ({format_price(entry.price)})"


class ChangeNotifier:
    """
    Design (ChangeNotifier)
    - Purpose: CatalogStore listener that raises a desktop notification per change.
    - enabled: zero-arg callable read on every change (the UI passes a BooleanVar.get).
    """

    def __init__(self, enabled: Callable[[], bool]):
        self.enabled = enabled

    def __call__(self, change: CatalogChange) -> None:
        if not self.enabled():
            return
        message = describe_change(change)
        try:
            notification.notify(
                title=f"{WINDOW_TITLE}: item {change.kind.value}",
                message=message,
                timeout=NOTIFICATION_TIMEOUT_SEC,
            )
        except NotImplementedError:
            logger.warning("Desktop notifications are not supported here; skipped %r", message)
