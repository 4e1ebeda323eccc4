"""
Design (validation.py)
- Purpose: Decide whether a draft Entry can be committed and which fields are wrong.
- Inputs: Entry (draft).
- Outputs: FieldErrors.
- Side effects: None (pure).
- Thread-safety: Safe.
"""

import math
from numbers import Real

from .models import Entry, FieldErrors


def is_valid_name(name: str) -> bool:
    return isinstance(name, str) and name.strip() != ""


def is_valid_price(price) -> bool:
    """True for a real, finite number strictly greater than zero. Numbers too large for a float are not finite."""
    if isinstance(price, bool) or not isinstance(price, Real):
        return False
    try:
        value = float(price)
    except OverflowError:
        return False
    return math.isfinite(value) and value > 0


def validate(draft: Entry) -> FieldErrors:
    """
    Purpose: Flag invalid fields of a draft.
    Rules:
        name_invalid  <=> name is empty after trimming whitespace
        price_invalid <=> price is not a finite number > 0
    Name uniqueness is not checked here; CatalogStore resolves collisions by upsert.
    """
    return FieldErrors(
        name_invalid=not is_valid_name(draft.name),
        price_invalid=not is_valid_price(draft.price),
    )
