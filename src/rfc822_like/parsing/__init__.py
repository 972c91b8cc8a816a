"""Line scanning and record assembly for RFC822-like files."""

from .config import ScannerConfig
from .models import Field, Record
from .scanner import LineKind, RecordScanner, Source, classify_line, scan

__all__ = [
    "Field",
    "LineKind",
    "Record",
    "RecordScanner",
    "ScannerConfig",
    "Source",
    "classify_line",
    "scan",
]
