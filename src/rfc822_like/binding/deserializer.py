# src/rfc822_like/binding/deserializer.py

import logging
from collections.abc import Callable, Iterator
from time import monotonic
from typing import Any, TypeVar

from pydantic import ValidationError

from rfc822_like.errors import AmbiguousTypeError, BindingError
from rfc822_like.observability import names
from rfc822_like.observability.base import MetricsHook, NoOpMetricsHook
from rfc822_like.parsing.config import ScannerConfig
from rfc822_like.parsing.models import Record
from rfc822_like.parsing.scanner import RecordScanner, Source

from .access import DocumentAccess, RecordAccess
from .base import Visitor
from .config import BindingConfig
from .factory import create_visitor
from .visitors import ListVisitor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Deserializer:
    """Drives visitors over the records of one input.

    One input, one pass: every `deserialize_*` call pulls from the same
    underlying scanner. `deserialize_map` consumes only the first record.

    Example:
        >>> from pydantic import BaseModel, ConfigDict
        >>> from pydantic.alias_generators import to_pascal
        >>> class Package(BaseModel):
        ...     model_config = ConfigDict(alias_generator=to_pascal)
        ...     package: str
        >>> Deserializer("Package: foo\\n\\nPackage: bar\\n").deserialize(list[Package])
        [Package(package='foo'), Package(package='bar')]
    """

    def __init__(
        self,
        source: Source,
        *,
        scanner_config: ScannerConfig = ScannerConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.metrics_hook = metrics_hook
        self._scanner = RecordScanner(source, config=scanner_config, metrics_hook=metrics_hook)

    @property
    def line_number(self) -> int:
        return self._scanner.line_number

    def deserialize(self, target: Any, config: BindingConfig = BindingConfig()) -> Any:
        """Build `target` (see `create_visitor`) from the input."""
        visitor = create_visitor(target, config)
        if isinstance(visitor, ListVisitor):
            return self.deserialize_seq(visitor)
        return self.deserialize_map(visitor)

    def deserialize_any(self, visitor: Visitor[T]) -> T:
        raise AmbiguousTypeError()

    def deserialize_map(self, visitor: Visitor[T]) -> T:
        record = next(self._scanner, None)
        if record is None:
            record = Record(fields=())
        return self._bind(lambda: visitor.visit_map(RecordAccess(record)))

    def deserialize_seq(self, visitor: Visitor[T]) -> T:
        return self._bind(lambda: visitor.visit_seq(DocumentAccess(self._scanner)))

    def deserialize_each(self, visitor: Visitor[T]) -> Iterator[T]:
        """Yield one value per record, bound as it is scanned."""
        for record in self._scanner:
            yield self._bind(lambda: visitor.visit_map(RecordAccess(record)))

    def _bind(self, build: Callable[[], T]) -> T:
        start = monotonic()
        try:
            result = build()
        except (BindingError, ValidationError) as exc:
            logger.error("Binding failed near line %d: %s", self.line_number, exc)
            self.metrics_hook.increment(
                names.BINDING_ERRORS_TOTAL, labels={"error": type(exc).__name__}
            )
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.BINDING_DURATION, elapsed_ms)
        return result
