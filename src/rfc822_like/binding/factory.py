# src/rfc822_like/binding/factory.py

from typing import Any, get_args, get_origin

from pydantic import BaseModel

from rfc822_like.errors import AmbiguousTypeError

from .base import Visitor
from .config import BindingConfig
from .visitors import DictVisitor, ListVisitor, ModelVisitor


def create_visitor(target: Any, config: BindingConfig = BindingConfig()) -> Visitor[Any]:
    """Create the visitor that builds `target` from records.

    Args:
        target: What to build. One of:
            - a pydantic model class (one record)
            - `dict`, `dict[str, str]` or `dict[str, list[str]]` (one record)
            - `list[...]` of any of the above (every record)
        config: Binding configuration shared by the created visitors.

    Returns:
        A visitor; a `ListVisitor` for sequence targets.

    Raises:
        AmbiguousTypeError: If `target` is not one of the supported shapes.
            The format is not self-describing, so there is no fallback.

    Example:
        >>> visitor = create_visitor(list[dict[str, str]])
        >>> isinstance(visitor, ListVisitor)
        True
    """
    origin = get_origin(target)

    if origin is list:
        args = get_args(target)
        if len(args) != 1 or get_origin(args[0]) is list:
            raise AmbiguousTypeError(target)
        return ListVisitor(create_visitor(args[0], config))

    if target is dict:
        return DictVisitor(config)

    if origin is dict:
        args = get_args(target)
        if len(args) != 2:
            raise AmbiguousTypeError(target)
        key_type, value_type = args
        if key_type is not str:
            raise AmbiguousTypeError(target)
        if value_type is str:
            return DictVisitor(config)
        if get_origin(value_type) is list and get_args(value_type) == (str,):
            return DictVisitor(config, split_values=True)
        raise AmbiguousTypeError(target)

    if isinstance(target, type) and issubclass(target, BaseModel):
        return ModelVisitor(target, config)

    raise AmbiguousTypeError(target)
