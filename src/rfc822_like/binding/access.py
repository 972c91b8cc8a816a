# src/rfc822_like/binding/access.py

import logging
from collections.abc import Iterator
from enum import Enum
from typing import TypeVar

from rfc822_like.errors import BindingProtocolError
from rfc822_like.parsing.models import Field, Record

from .base import Visitor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AccessState(str, Enum):
    START = "start"
    EXPECTING_KEY = "expecting_key"
    EXPECTING_VALUE = "expecting_value"
    END = "end"


class RecordAccess:
    """`MapAccess` over one record's fields, in file order.

    START -> EXPECTING_KEY -> (EXPECTING_VALUE -> EXPECTING_KEY)* -> END

    END is reported once: `next_key()` returns None the first time and raises
    afterwards.
    """

    def __init__(self, record: Record) -> None:
        self._fields = iter(record.fields)
        self._current: Field | None = None
        self.state = AccessState.START
        self.line_number = 0

    def next_key(self) -> str | None:
        if self.state is AccessState.EXPECTING_VALUE:
            raise BindingProtocolError(
                f"next_key() called before the value of '{self._current_key}' was read"
            )
        if self.state is AccessState.END:
            raise BindingProtocolError("next_key() called after the end of the record")

        self._current = next(self._fields, None)
        if self._current is None:
            self.state = AccessState.END
            return None

        self.state = AccessState.EXPECTING_VALUE
        self.line_number = self._current.line_number
        return self._current.key

    def next_value(self) -> str:
        if self.state is not AccessState.EXPECTING_VALUE or self._current is None:
            raise BindingProtocolError("next_value() called without a preceding key")
        self.state = AccessState.EXPECTING_KEY
        return self._current.value

    @property
    def _current_key(self) -> str:
        return self._current.key if self._current else ""


class DocumentAccess:
    """`SeqAccess` over records pulled lazily from a scanner.

    `has_next()` reads ahead at most one record.
    """

    def __init__(self, records: Iterator[Record]) -> None:
        self._records = records
        self._pending: Record | None = None
        self._done = False
        self.index = 0

    def has_next(self) -> bool:
        if self._pending is None and not self._done:
            self._pending = next(self._records, None)
            if self._pending is None:
                self._done = True
                logger.debug("Document exhausted after %d records", self.index)
        return self._pending is not None

    def next_element(self, visitor: Visitor[T]) -> T:
        if not self.has_next():
            raise BindingProtocolError("next_element() called after the end of the document")
        record, self._pending = self._pending, None
        self.index += 1
        return visitor.visit_map(RecordAccess(record))
