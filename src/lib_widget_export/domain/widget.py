"""Widget value object exported as one CSV row.

Purpose
-------
Describe the record the exporter serialises: an identifying code, a display
name, and a price in minor currency units.

Contents
--------
* :class:`Widget` frozen dataclass with row and mapping helpers.

System Role
-----------
Pure data living in the domain layer. Callers construct widgets before export;
the exporter only reads them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .columns import ExportColumn


@dataclass(slots=True, frozen=True)
class Widget:
    """Immutable widget record.

    Attributes
    ----------
    code:
        Short identifier. Uniqueness is a convention, not enforced here.
    name:
        Free-text display name.
    price:
        Price in minor currency units (for example cents).

    Examples
    --------
    >>> Widget("ABC123", "Left-handed screwdriver", 499).to_row()
    ('ABC123', 'Left-handed screwdriver', 499)
    """

    code: str
    name: str
    price: int

    def to_row(self) -> tuple[str, str, int]:
        """Return the field values in header order."""

        return (self.code, self.name, self.price)

    def to_dict(self) -> dict[str, Any]:
        """Return a mapping keyed by header name.

        Examples
        --------
        >>> Widget("DEF456", "Tartan paint", 1249).to_dict()
        {'Code': 'DEF456', 'Name': 'Tartan paint', 'Price': 1249}
        """

        return {column.value: getattr(self, column.attribute) for column in ExportColumn}

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Widget":
        """Build a widget from a mapping keyed by attribute or header name.

        Keys are matched case-insensitively so both ``{"code": ...}`` and
        ``{"Code": ...}`` are accepted.

        Raises
        ------
        ValueError
            If a field is missing or ``price`` is not an integer.

        Examples
        --------
        >>> Widget.from_mapping({"Code": "ABC123", "name": "Screwdriver", "PRICE": "499"})
        Widget(code='ABC123', name='Screwdriver', price=499)
        >>> Widget.from_mapping({"code": "ABC123"})
        Traceback (most recent call last):
        ...
        ValueError: widget is missing field(s): name, price
        """

        if not isinstance(payload, Mapping):
            raise ValueError(f"widget must be a mapping, got {type(payload).__name__}")
        normalised = {str(key).strip().lower(): value for key, value in payload.items()}
        missing = [column.attribute for column in ExportColumn if column.attribute not in normalised]
        if missing:
            raise ValueError(f"widget is missing field(s): {', '.join(missing)}")

        raw_price = normalised["price"]
        if isinstance(raw_price, (bool, float)):
            raise ValueError(f"widget price must be an integer, got {raw_price!r}")
        try:
            price = int(raw_price)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"widget price must be an integer, got {raw_price!r}") from exc

        return cls(code=str(normalised["code"]), name=str(normalised["name"]), price=price)


__all__ = ["Widget"]
