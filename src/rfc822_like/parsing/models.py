# src/rfc822_like/parsing/models.py

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Field:
    """One `Key: Value` unit, continuation lines already folded into `value`."""

    key: str
    value: str
    line_number: int  # line the field started on


@dataclass(frozen=True)
class Record:
    """One paragraph: fields in file order.

    Keys are matched case-sensitively. Duplicate keys are kept; `record[key]`
    returns the first occurrence and `get_all` returns every one.
    """

    fields: tuple[Field, ...]

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __contains__(self, key: object) -> bool:
        return any(f.key == key for f in self.fields)

    def __getitem__(self, key: str) -> str:
        for f in self.fields:
            if f.key == key:
                return f.value
        raise KeyError(key)

    def get(self, key: str, default: str | None = None) -> str | None:
        try:
            return self[key]
        except KeyError:
            return default

    def get_all(self, key: str) -> list[str]:
        return [f.value for f in self.fields if f.key == key]

    def keys(self) -> list[str]:
        return [f.key for f in self.fields]

    def to_dict(self) -> dict[str, str]:
        # last occurrence wins; use `fields` when duplicates matter
        return {f.key: f.value for f in self.fields}
