"""Binding of parsed records onto caller-defined shapes."""

from .access import AccessState, DocumentAccess, RecordAccess
from .base import MapAccess, SeqAccess, Visitor
from .config import BindingConfig
from .deserializer import Deserializer
from .factory import create_visitor
from .values import expand_paragraph_markers, split_list
from .visitors import BaseVisitor, DictVisitor, ListVisitor, ModelVisitor

__all__ = [
    # Entry point
    "Deserializer",
    "create_visitor",
    # Config
    "BindingConfig",
    # Protocol
    "MapAccess",
    "SeqAccess",
    "Visitor",
    # Accessors
    "AccessState",
    "DocumentAccess",
    "RecordAccess",
    # Visitors
    "BaseVisitor",
    "DictVisitor",
    "ListVisitor",
    "ModelVisitor",
    # Values
    "expand_paragraph_markers",
    "split_list",
]
