# src/rfc822_like/errors.py

"""Exception hierarchy for rfc822-like.

Every exception raised by this package derives from `Rfc822Error`.
pydantic's `ValidationError` is the one exception that passes through
unchanged: conversion failures belong to the model, not to the parser.
"""

from pathlib import Path


class Rfc822Error(Exception):
    """Base class for all rfc822-like errors."""


# ============================================================================
# Parse errors
# ============================================================================


class ParseError(Rfc822Error):
    """Input could not be split into fields. Carries the 1-indexed line."""

    kind = "parse"

    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


class MalformedFieldLine(ParseError):
    kind = "malformed_field_line"

    def __init__(self, line_number: int, line: str = "") -> None:
        if line:
            message = f"missing ':' separator in {line!r}"
        else:
            message = "missing ':' separator"
        super().__init__(line_number, message)
        self.line = line


class MalformedContinuation(ParseError):
    kind = "malformed_continuation"

    def __init__(self, line_number: int) -> None:
        super().__init__(line_number, "continuation line without a preceding field")


class ReadError(ParseError):
    """The underlying stream failed; the original error is `__cause__`."""

    kind = "read_error"

    def __init__(self, line_number: int, reason: str = "failed to read input") -> None:
        super().__init__(line_number, reason)


# ============================================================================
# Binding errors
# ============================================================================


class BindingError(Rfc822Error):
    """Records could not be presented to, or accepted by, a visitor."""


class UnknownFieldError(BindingError):
    def __init__(self, key: str, line_number: int) -> None:
        super().__init__(f"line {line_number}: unknown field '{key}'")
        self.key = key
        self.line_number = line_number


class DuplicateFieldError(BindingError):
    def __init__(self, key: str, line_number: int) -> None:
        super().__init__(f"line {line_number}: duplicate field '{key}'")
        self.key = key
        self.line_number = line_number


class BindingProtocolError(BindingError):
    """A visitor drove a record or sequence access out of order."""


class AmbiguousTypeError(BindingError):
    def __init__(self, target: object = None) -> None:
        message = (
            "The deserialized type is ambiguous and must be explicitly specified "
            "(RFC822 is NOT self-describing)"
        )
        if target is not None:
            message = f"{message}: got {target!r}"
        super().__init__(message)
        self.target = target


# ============================================================================
# File errors
# ============================================================================


class ReadFileError(Rfc822Error):
    """Loading from a path failed. The reason is chained as `__cause__`."""

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(f"{message} {path}")
        self.path = Path(path)


class FileOpenError(ReadFileError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "failed to open file for reading:")


class FileLoadError(ReadFileError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "failed to load file")
