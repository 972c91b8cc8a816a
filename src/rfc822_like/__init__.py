"""Parser for the RFC822-like format used by Debian.

This is the format of `debian/control` files and of apt's `Packages` and
`Sources` indexes: paragraphs of `Key: Value` fields separated by blank
lines, with values continued on lines that start with whitespace.

It is "RFC822-like" because Debian does not claim to implement RFC822
exactly; this package follows what Debian tools accept, not the RFC.
Writing the format back out is not implemented.

Example:
    >>> from pydantic import BaseModel, ConfigDict
    >>> from pydantic.alias_generators import to_pascal
    >>> from rfc822_like import from_str
    >>>
    >>> class Package(BaseModel):
    ...     model_config = ConfigDict(alias_generator=to_pascal)
    ...     package: str
    ...     depends: list[str] = []
    >>>
    >>> from_str("Package: foo\\nDepends: libc6, python3\\n", list[Package])
    [Package(package='foo', depends=['libc6', 'python3'])]
"""

# API
from .api import (
    from_bytes,
    from_file,
    from_reader,
    from_str,
    iter_models,
    iter_records,
    parse,
)

# Binding
from .binding import (
    BindingConfig,
    Deserializer,
    DictVisitor,
    ListVisitor,
    MapAccess,
    ModelVisitor,
    SeqAccess,
    Visitor,
    create_visitor,
)

# Errors
from .errors import (
    AmbiguousTypeError,
    BindingError,
    BindingProtocolError,
    DuplicateFieldError,
    FileLoadError,
    FileOpenError,
    MalformedContinuation,
    MalformedFieldLine,
    ParseError,
    ReadError,
    ReadFileError,
    Rfc822Error,
    UnknownFieldError,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsing
from .parsing import Field, Record, RecordScanner, ScannerConfig, scan

__all__ = [
    # API
    "from_bytes",
    "from_file",
    "from_reader",
    "from_str",
    "iter_models",
    "iter_records",
    "parse",
    # Binding
    "BindingConfig",
    "Deserializer",
    "DictVisitor",
    "ListVisitor",
    "MapAccess",
    "ModelVisitor",
    "SeqAccess",
    "Visitor",
    "create_visitor",
    # Errors
    "AmbiguousTypeError",
    "BindingError",
    "BindingProtocolError",
    "DuplicateFieldError",
    "FileLoadError",
    "FileOpenError",
    "MalformedContinuation",
    "MalformedFieldLine",
    "ParseError",
    "ReadError",
    "ReadFileError",
    "Rfc822Error",
    "UnknownFieldError",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsing
    "Field",
    "Record",
    "RecordScanner",
    "ScannerConfig",
    "scan",
]
