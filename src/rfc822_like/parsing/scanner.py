# src/rfc822_like/parsing/scanner.py

"""Line scanner and field assembler.

Turns a stream of lines into `Record`s, one per paragraph:

- `Key: value` starts a field
- a line starting with whitespace continues the previous field
- a blank line (or end of input) closes the record

Records are produced lazily so arbitrarily large `Packages` indexes can be
walked without buffering them.
"""

import io
import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from time import monotonic
from typing import IO

from rfc822_like.errors import (
    MalformedContinuation,
    MalformedFieldLine,
    ParseError,
    ReadError,
)
from rfc822_like.observability import names
from rfc822_like.observability.base import MetricsHook, NoOpMetricsHook

from .config import ScannerConfig
from .models import Field, Record

logger = logging.getLogger(__name__)

Source = str | bytes | IO[str] | IO[bytes] | Iterable[str] | Iterable[bytes]

SEPARATOR = ":"


class LineKind(str, Enum):
    """Classification of a single physical line."""

    FIELD_START = "field_start"
    CONTINUATION = "continuation"
    BLANK = "blank"
    MALFORMED = "malformed"


def classify_line(line: str) -> LineKind:
    if not line.strip():
        return LineKind.BLANK
    if line[0].isspace():
        return LineKind.CONTINUATION
    if SEPARATOR in line:
        return LineKind.FIELD_START
    return LineKind.MALFORMED


def _as_lines(source: Source) -> Iterable[str] | Iterable[bytes]:
    if isinstance(source, str):
        return io.StringIO(source)
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(source)
    return source


def _head_value(text: str) -> str:
    if text.startswith(" "):
        text = text[1:]
    return text.rstrip()


def _fold(parts: list[str]) -> str:
    # "Description:" followed by continuation lines starts on the next line
    if len(parts) > 1 and not parts[0]:
        parts = parts[1:]
    return "\n".join(parts)


class RecordScanner:
    """Single-pass iterator over the records of one input.

    Not restartable: once exhausted, or once it has raised, further calls to
    `next()` raise `StopIteration`. Records yielded before an error stay
    valid.

    Example:
        >>> scanner = RecordScanner("Package: foo\\n\\nPackage: bar\\n")
        >>> [record["Package"] for record in scanner]
        ['foo', 'bar']
    """

    def __init__(
        self,
        source: Source,
        config: ScannerConfig = ScannerConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook
        self.line_number = 0
        self.records_emitted = 0
        self._lines = iter(_as_lines(source))
        self._records = self._scan()

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        return next(self._records)

    def _scan(self) -> Iterator[Record]:
        # excludes time spent suspended at a yield
        busy = 0.0
        resumed = monotonic()
        fields: list[Field] = []
        key: str | None = None
        parts: list[str] = []
        field_line = 0

        for line in self._read():
            kind = classify_line(line)

            if kind is LineKind.CONTINUATION:
                if key is None:
                    raise self._fail(MalformedContinuation(self.line_number))
                parts.append(line.strip())
                continue

            if key is not None:
                fields.append(Field(key=key, value=_fold(parts), line_number=field_line))
                key = None

            if kind is LineKind.BLANK:
                if fields:
                    busy += monotonic() - resumed
                    yield self._emit(fields)
                    resumed = monotonic()
                    fields = []
                continue

            if kind is LineKind.MALFORMED:
                raise self._fail(MalformedFieldLine(self.line_number, line))

            name, _, value = line.partition(SEPARATOR)
            name = name.rstrip()
            if not name:
                raise self._fail(MalformedFieldLine(self.line_number, line))
            key, field_line, parts = name, self.line_number, [_head_value(value)]

        if key is not None:
            fields.append(Field(key=key, value=_fold(parts), line_number=field_line))
        if fields:
            busy += monotonic() - resumed
            yield self._emit(fields)
            resumed = monotonic()

        busy += monotonic() - resumed
        self.metrics_hook.record_latency(names.SCAN_DURATION, 1000 * busy)
        logger.debug(
            "Scanned %d records from %d lines", self.records_emitted, self.line_number
        )

    def _read(self) -> Iterator[str]:
        while True:
            try:
                raw = next(self._lines)
            except StopIteration:
                return
            # closed files raise ValueError rather than OSError
            except (OSError, ValueError) as exc:
                raise self._fail(ReadError(self.line_number + 1, str(exc))) from exc

            self.line_number += 1
            if isinstance(raw, (bytes, bytearray)):
                try:
                    raw = raw.decode(self.config.encoding, self.config.errors)
                except UnicodeDecodeError as exc:
                    raise self._fail(
                        ReadError(self.line_number, f"invalid {self.config.encoding} data")
                    ) from exc

            if raw.endswith("\n"):
                raw = raw[:-1]
            if raw.endswith("\r"):
                raw = raw[:-1]
            if self.line_number == 1:
                raw = raw.lstrip("\ufeff")
            yield raw

    def _emit(self, fields: list[Field]) -> Record:
        self.records_emitted += 1
        self.metrics_hook.increment(names.RECORDS_TOTAL)
        logger.debug(
            "Record %d complete: %d fields, ends at line %d",
            self.records_emitted,
            len(fields),
            self.line_number,
        )
        return Record(fields=tuple(fields))

    def _fail(self, error: ParseError) -> ParseError:
        logger.error("Failed to parse input: %s", error)
        self.metrics_hook.increment(names.PARSE_ERRORS_TOTAL, labels={"kind": error.kind})
        return error


def scan(
    source: Source,
    config: ScannerConfig = ScannerConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Record]:
    """Parse the whole input into a list of records (the document)."""
    return list(RecordScanner(source, config=config, metrics_hook=metrics_hook))
