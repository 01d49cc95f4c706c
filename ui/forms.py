"""
forms.py — Input parsing at the UI boundary
============================================
The only place user text becomes core values.

  • City names: surrounding whitespace stripped, upper-cased, must be
    non-empty.  "nyc " and "NYC" are the same city.
  • Distances: whole numbers ≥ 0.  Text, fractions and negatives are
    rejected here, which keeps uniform-cost search sound; the store
    itself accepts whatever it is given.

Every rejection is an InvalidInput carrying a message fit for the user.
"""

from typing import Any

from graph import NodeId


class InvalidInput(ValueError):
    """User input that cannot be turned into a city or a distance."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


def normalize_city(text: Any, field: str = "city") -> NodeId:
    if text is None:
        raise InvalidInput(field, f"Enter a {field} name.")
    name = str(text).strip().upper()
    if not name:
        raise InvalidInput(field, f"Enter a {field} name.")
    return NodeId(name)


def parse_distance(raw: Any, field: str = "distance") -> int:
    # bool is an int subclass; "true" is not a distance
    if isinstance(raw, bool) or raw is None:
        raise InvalidInput(field, "Distance must be a whole number.")

    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            raise InvalidInput(field, "Distance must be a whole number.")
        value = int(raw)
    else:
        text = str(raw).strip()
        try:
            value = int(text)
        except ValueError:
            raise InvalidInput(field, f"'{text}' is not a whole number.") from None

    if value < 0:
        raise InvalidInput(field, "Distance cannot be negative.")
    return value
