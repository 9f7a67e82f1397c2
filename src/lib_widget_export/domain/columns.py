"""Column enumeration for widget CSV exports.

Purpose
-------
Pin the header names and their order so the exporter, the verification reader,
and the CLI table all agree on one layout.

Contents
--------
* :class:`ExportColumn` enumeration with parsing helpers.
* :data:`HEADER` - the fixed header row written first in every export.

System Role
-----------
Domain constant shared by adapters; the column order is not configurable.
"""

from __future__ import annotations

from enum import Enum


class ExportColumn(Enum):
    """Columns written for every widget, in file order.

    Examples
    --------
    >>> ExportColumn.CODE.value
    'Code'
    >>> [column.value for column in ExportColumn]
    ['Code', 'Name', 'Price']
    """

    CODE = "Code"
    NAME = "Name"
    PRICE = "Price"

    @property
    def attribute(self) -> str:
        """Return the :class:`~lib_widget_export.domain.widget.Widget` attribute name.

        Examples
        --------
        >>> ExportColumn.PRICE.attribute
        'price'
        """
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "ExportColumn":
        """Return the column matching a case-insensitive header name.

        Raises
        ------
        ValueError
            If ``name`` is not one of the known headers.

        Examples
        --------
        >>> ExportColumn.from_name(' price ') is ExportColumn.PRICE
        True
        >>> ExportColumn.from_name('sku')
        Traceback (most recent call last):
        ...
        ValueError: Unknown export column: 'sku'
        """

        normalized = name.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown export column: {name!r}")


HEADER: tuple[str, ...] = tuple(column.value for column in ExportColumn)


__all__ = ["ExportColumn", "HEADER"]
