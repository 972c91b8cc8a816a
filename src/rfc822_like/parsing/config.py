# src/rfc822_like/parsing/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ScannerConfig:
    """Configuration for the line scanner.

    Immutable. Explicit. Only consulted for `bytes` input; text input is
    taken as already decoded.
    """

    encoding: str = "utf-8"
    errors: str = "strict"

    def __post_init__(self) -> None:
        if not self.encoding:
            raise ValueError("encoding must not be empty")
