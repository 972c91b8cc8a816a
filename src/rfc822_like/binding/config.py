# src/rfc822_like/binding/config.py

from dataclasses import dataclass
from typing import Literal

UnknownFields = Literal["skip", "reject"]


@dataclass(frozen=True)
class BindingConfig:
    """Configuration for binding records onto caller shapes.

    Immutable. Explicit. Debian files routinely carry fields nobody asked for,
    so unknown fields are skipped unless told otherwise.
    """

    unknown_fields: UnknownFields = "skip"
    list_separator: str = ","
    expand_paragraph_markers: bool = True

    def __post_init__(self) -> None:
        if self.unknown_fields not in ("skip", "reject"):
            raise ValueError(f"Unknown unknown_fields policy: {self.unknown_fields}")
        if not self.list_separator:
            raise ValueError("list_separator must not be empty")
