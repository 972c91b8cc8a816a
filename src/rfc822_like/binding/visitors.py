# src/rfc822_like/binding/visitors.py

import collections.abc
import logging
import types
from typing import Any, Generic, TypeVar, Union, get_args, get_origin

from pydantic import AliasChoices, BaseModel
from pydantic.fields import FieldInfo

from rfc822_like.errors import BindingError, DuplicateFieldError, UnknownFieldError

from .base import MapAccess, SeqAccess, Visitor
from .config import BindingConfig
from .values import expand_paragraph_markers, split_list

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

_SEQUENCE_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.Set,
)


class BaseVisitor(Generic[T]):
    """Rejects every shape. Subclasses override the one they accept."""

    expecting = "a value"

    def visit_map(self, access: MapAccess) -> T:
        raise BindingError(f"invalid type: record, expected {self.expecting}")

    def visit_seq(self, access: SeqAccess) -> T:
        raise BindingError(f"invalid type: sequence of records, expected {self.expecting}")


class DictVisitor(BaseVisitor[dict[str, Any]]):
    """Reads one record into a dict, keys in file order.

    With `split_values=True` every value is read as a list (`dict[str, list[str]]`).
    """

    expecting = "a map"

    def __init__(
        self, config: BindingConfig = BindingConfig(), split_values: bool = False
    ) -> None:
        self.config = config
        self.split_values = split_values

    def visit_map(self, access: MapAccess) -> dict[str, Any]:
        result: dict[str, Any] = {}
        while True:
            key = access.next_key()
            if key is None:
                return result
            if key in result:
                raise DuplicateFieldError(key, access.line_number)
            value = access.next_value()
            if self.split_values:
                result[key] = split_list(value, self.config.list_separator)
            elif self.config.expand_paragraph_markers:
                result[key] = expand_paragraph_markers(value)
            else:
                result[key] = value


class ModelVisitor(BaseVisitor[M]):
    """Reads one record into a pydantic model.

    Record keys are matched case-sensitively against field aliases (or field
    names when the model has none). Use `alias_generator=to_pascal` on the
    model for the usual `Package`/`Description` spelling.

    Values are handed to pydantic as text, or as a list of text for
    list-typed fields; type conversion and missing-field checks are pydantic's
    and its `ValidationError` is not wrapped.

    Unknown keys follow the model's own `extra` setting when it is "forbid"
    (rejected) or "allow" (passed through as text). Otherwise
    `BindingConfig.unknown_fields` decides.
    """

    def __init__(self, model: type[M], config: BindingConfig = BindingConfig()) -> None:
        self.model = model
        self.config = config
        self.expecting = f"a {model.__name__} record"
        self._sequence_keys: dict[str, bool] = _index_fields(model)
        self._unknown_fields = _unknown_policy(model, config)

    def visit_map(self, access: MapAccess) -> M:
        data: dict[str, Any] = {}
        while True:
            key = access.next_key()
            if key is None:
                break
            if key in data:
                raise DuplicateFieldError(key, access.line_number)

            is_sequence = self._sequence_keys.get(key)
            if is_sequence is None:
                if self._unknown_fields == "reject":
                    raise UnknownFieldError(key, access.line_number)
                value = access.next_value()
                if self._unknown_fields == "allow":
                    data[key] = self._text(value)
                    continue
                logger.debug("Skipping unknown field %s at line %d", key, access.line_number)
                continue

            value = access.next_value()
            if is_sequence:
                data[key] = split_list(value, self.config.list_separator)
            else:
                data[key] = self._text(value)

        return self.model.model_validate(data)

    def _text(self, value: str) -> str:
        if self.config.expand_paragraph_markers:
            return expand_paragraph_markers(value)
        return value


class ListVisitor(BaseVisitor[list[T]]):
    """Reads every record of a document, each through `element`."""

    def __init__(self, element: Visitor[T]) -> None:
        self.element = element
        self.expecting = f"a sequence of {getattr(element, 'expecting', 'records')}"

    def visit_seq(self, access: SeqAccess) -> list[T]:
        items: list[T] = []
        while access.has_next():
            items.append(access.next_element(self.element))
        return items


def _index_fields(model: type[BaseModel]) -> dict[str, bool]:
    """Map each accepted input key to whether the field is list-typed."""
    by_name = bool(
        model.model_config.get("populate_by_name")
        or model.model_config.get("validate_by_name")
    )
    index: dict[str, bool] = {}
    for name, info in model.model_fields.items():
        is_sequence = _is_sequence(info.annotation)
        for key in _input_keys(name, info, by_name):
            index[key] = is_sequence
    return index


def _unknown_policy(model: type[BaseModel], config: BindingConfig) -> str:
    extra = model.model_config.get("extra")
    if extra == "forbid":
        return "reject"
    if extra == "allow":
        return "allow"
    return config.unknown_fields


def _input_keys(name: str, info: FieldInfo, by_name: bool) -> list[str]:
    keys: list[str] = []
    alias = info.validation_alias
    if isinstance(alias, str):
        keys.append(alias)
    elif isinstance(alias, AliasChoices):
        keys.extend(choice for choice in alias.choices if isinstance(choice, str))
    elif info.alias:
        keys.append(info.alias)
    if not keys or by_name:
        keys.append(name)
    return keys


def _is_sequence(annotation: Any) -> bool:
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return any(_is_sequence(arg) for arg in get_args(annotation) if arg is not type(None))
    return annotation in _SEQUENCE_ORIGINS or origin in _SEQUENCE_ORIGINS
