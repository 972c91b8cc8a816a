# src/rfc822_like/binding/base.py

"""Visitor protocol between the parser and caller-defined shapes.

The parser never learns what it is filling in. It hands out accessors and the
visitor pulls from them:

- `MapAccess` walks the fields of one record: key, value, key, value, ...
  until `next_key()` returns None
- `SeqAccess` walks the records of a document while `has_next()` holds,
  presenting each one to an element visitor as a map
"""

from typing import Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class MapAccess(Protocol):
    """Field-by-field access to a single record."""

    line_number: int  # line of the field last returned by next_key()

    def next_key(self) -> str | None:
        """Return the next key, or None once the record is exhausted."""
        ...

    def next_value(self) -> str:
        """Return the value belonging to the key just returned."""
        ...


class SeqAccess(Protocol):
    """Record-by-record access to a document."""

    def has_next(self) -> bool:
        """Return whether another record remains."""
        ...

    def next_element(self, visitor: "Visitor[T]") -> T:
        """Present the next record to `visitor` and return what it built."""
        ...


class Visitor(Protocol[T_co]):
    """Builds a value of some caller-defined shape from an accessor."""

    def visit_map(self, access: MapAccess) -> T_co: ...

    def visit_seq(self, access: SeqAccess) -> T_co: ...
