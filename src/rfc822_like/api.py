# src/rfc822_like/api.py

"""Convenience entry points.

Example:
    >>> from rfc822_like import from_str
    >>> from_str("Package: foo\\nVersion: 1.0\\n", dict[str, str])
    {'Package': 'foo', 'Version': '1.0'}
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from rfc822_like.binding.config import BindingConfig
from rfc822_like.binding.deserializer import Deserializer
from rfc822_like.binding.visitors import ModelVisitor
from rfc822_like.errors import FileLoadError, FileOpenError, Rfc822Error
from rfc822_like.observability.base import MetricsHook, NoOpMetricsHook
from rfc822_like.parsing.config import ScannerConfig
from rfc822_like.parsing.models import Record
from rfc822_like.parsing.scanner import RecordScanner, Source, scan

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def from_reader(
    source: Source,
    target: Any,
    *,
    binding_config: BindingConfig = BindingConfig(),
    scanner_config: ScannerConfig = ScannerConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Any:
    """Deserialize `target` from a file object or any iterable of lines.

    `target` is a pydantic model or `dict[str, str]` for a single record, or
    `list[...]` of either for every record. See `create_visitor`.
    """
    deserializer = Deserializer(
        source, scanner_config=scanner_config, metrics_hook=metrics_hook
    )
    return deserializer.deserialize(target, binding_config)


def from_str(text: str, target: Any, **options: Any) -> Any:
    return from_reader(text, target, **options)


def from_bytes(data: bytes, target: Any, **options: Any) -> Any:
    """Like `from_str`, decoding with `ScannerConfig.encoding` line by line."""
    return from_reader(data, target, **options)


def from_file(path: str | Path, target: Any, **options: Any) -> Any:
    """Open `path` and deserialize `target` from it.

    Raises:
        FileOpenError: If the file cannot be opened.
        FileLoadError: If reading, parsing or binding fails. The underlying
            error is chained as `__cause__`.
    """
    try:
        handle = open(path, "rb")
    except OSError as exc:
        logger.error("Cannot open %s: %s", path, exc)
        raise FileOpenError(path) from exc

    with handle:
        try:
            result = from_reader(handle, target, **options)
        except (Rfc822Error, ValidationError) as exc:
            logger.error("Cannot load %s: %s", path, exc)
            raise FileLoadError(path) from exc

    logger.info("Loaded %s from %s", target, path)
    return result


def iter_records(
    source: Source,
    *,
    scanner_config: ScannerConfig = ScannerConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> RecordScanner:
    """Stream records one paragraph at a time."""
    return RecordScanner(source, config=scanner_config, metrics_hook=metrics_hook)


def iter_models(
    source: Source,
    model: type[M],
    *,
    binding_config: BindingConfig = BindingConfig(),
    scanner_config: ScannerConfig = ScannerConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Iterator[M]:
    """Stream one `model` instance per record.

    Instances already yielded stay valid if a later record fails.
    """
    deserializer = Deserializer(
        source, scanner_config=scanner_config, metrics_hook=metrics_hook
    )
    return deserializer.deserialize_each(ModelVisitor(model, binding_config))


def parse(
    source: Source,
    *,
    scanner_config: ScannerConfig = ScannerConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Record]:
    """Parse the whole input into records without binding them."""
    return scan(source, config=scanner_config, metrics_hook=metrics_hook)
