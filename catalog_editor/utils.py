"""
Design (utils.py)
- Purpose: Reusable helpers: price text parsing for the edit form, price display formatting,
           and the per-row highlight timers used by the list.
- Inputs: Raw form values (str or numbers) and prices (float).
- Outputs: Helper results (floats, strings).
- Side effects: None; RowHighlights only schedules through the callables it is given.
- Thread-safety: The functions are stateless; RowHighlights is main-thread only.
"""

import math
from numbers import Real
from typing import Callable, Dict, Optional

from .config import PRICE_DECIMALS


def parse_price(raw) -> float:
    """
    Purpose: Turn the price field's raw value into a float.
    Inputs: raw (str typed by the user, or any real number passed programmatically).
    Outputs: The parsed float; NaN when the text is empty, not a number, or too large for a float.
    Side Effects: None.
    Thread-safety: Safe.
    """
    if isinstance(raw, bool) or raw is None:
        return math.nan
    if not isinstance(raw, Real):
        raw = str(raw).strip()
        if not raw:
            return math.nan
    try:
        return float(raw)
    except (ValueError, OverflowError):
        return math.nan


def format_price(value: float, decimals: int = PRICE_DECIMALS) -> str:
    """
    Purpose: Render a price with fixed precision for the list and the edit form.
    Inputs: value (float), decimals (int).
    Outputs: e.g. 159 -> '159.00'. Non-finite values render as ''.
    """
    if not math.isfinite(value):
        return ""
    return f"{value:.{decimals}f}"


def price_input_text(value: float) -> str:
    """Prefill text for the price field: '' for an unset (<= 0 or NaN) price, otherwise the plain number."""
    if not math.isfinite(value) or value <= 0:
        return ""
    return f"{value:g}" if value == int(value) else repr(value)


class RowHighlights:
    """
    Design (RowHighlights)
    - Purpose: Remember which rows are flashing after a change and the pending fade timer of each,
               so a second change to the same row restarts its timer instead of being cut short.
    - Inputs: schedule(ms, callback) -> job id and cancel(job id); the UI passes Tk.after / Tk.after_cancel.
    """

    def __init__(self, schedule: Callable[[int, Callable[[], None]], object],
                 cancel: Callable[[object], None], duration_ms: int):
        self._schedule = schedule
        self._cancel = cancel
        self.duration_ms = duration_ms
        self._tags: Dict[int, str] = {}
        self._jobs: Dict[int, object] = {}

    def tag(self, entry_id: Optional[int]) -> Optional[str]:
        return self._tags.get(entry_id)

    def flash(self, entry_id: int, tag: str, on_fade: Callable[[], None]) -> None:
        self._cancel_job(entry_id)
        self._tags[entry_id] = tag
        self._jobs[entry_id] = self._schedule(self.duration_ms, lambda: self._fade(entry_id, on_fade))

    def drop(self, entry_id: Optional[int]) -> None:
        self._cancel_job(entry_id)
        self._tags.pop(entry_id, None)

    def _fade(self, entry_id: int, on_fade: Callable[[], None]) -> None:
        self._jobs.pop(entry_id, None)
        if self._tags.pop(entry_id, None) is not None:
            on_fade()

    def _cancel_job(self, entry_id: Optional[int]) -> None:
        job = self._jobs.pop(entry_id, None)
        if job is not None:
            self._cancel(job)
