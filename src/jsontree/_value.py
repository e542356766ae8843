"""
The JSON value tree.

A value is one of six frozen dataclasses, each tagged with a ``ValueKind``.
``Null`` and ``Bool(False)`` are distinct variants. Containers own their
children; a tree is built depth-first from finite input and so is always
acyclic.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import ClassVar

from jsontree._errors import UnsupportedValueError


class ValueKind(Enum):
    """Tag identifying which variant a value is."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class Null:
    kind: ClassVar[ValueKind] = ValueKind.NULL


@dataclass(frozen=True)
class Bool:
    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOL


@dataclass(frozen=True)
class Number:
    value: float
    kind: ClassVar[ValueKind] = ValueKind.NUMBER


@dataclass(frozen=True)
class String:
    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING


@dataclass(frozen=True)
class Array:
    """Ordered sequence of values."""

    items: list[Value] = field(default_factory=list)
    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


@dataclass(frozen=True)
class Object:
    """
    Ordered mapping from string keys to values.

    Keys are unique and iterate in insertion order. ``set_member`` moves a
    re-inserted key to the end, so the last occurrence of a duplicate key
    decides both its value and its position.
    """

    members: dict[str, Value] = field(default_factory=dict)
    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    def set_member(self, key: str, value: Value) -> None:
        self.members.pop(key, None)
        self.members[key] = value

    def __len__(self) -> int:
        return len(self.members)

    def __getitem__(self, key: str) -> Value:
        return self.members[key]

    def __contains__(self, key: object) -> bool:
        return key in self.members


type Value = Null | Bool | Number | String | Array | Object

VALUE_TYPES = (Null, Bool, Number, String, Array, Object)


def _value_node(obj: Any) -> tuple[Value, bool]:
    """Converts one level of ``obj``; containers come back empty and flagged."""
    if isinstance(obj, VALUE_TYPES):
        return obj, False
    if obj is None:
        return Null(), False
    if isinstance(obj, bool):
        return Bool(obj), False
    if isinstance(obj, int | float):
        return Number(float(obj)), False
    if isinstance(obj, str):
        return String(obj), False
    if isinstance(obj, list | tuple):
        return Array(), True
    if isinstance(obj, dict):
        return Object(), True
    raise UnsupportedValueError(obj)


def from_python(obj: Any) -> Value:
    """
    Builds a value tree from plain Python data.

    Accepts ``None``, ``bool``, ``int``, ``float``, ``str``, ``list``,
    ``tuple`` and ``dict`` with string keys; anything already a value is
    returned as-is. Nesting depth is limited only by memory.
    """
    root, needs_fill = _value_node(obj)
    pending: list[tuple[Any, Value]] = [(obj, root)] if needs_fill else []

    while pending:
        source, target = pending.pop()
        if isinstance(target, Array):
            for item in source:
                child, needs_fill = _value_node(item)
                target.items.append(child)
                if needs_fill:
                    pending.append((item, child))
        elif isinstance(target, Object):
            for key, item in source.items():
                if not isinstance(key, str):
                    raise UnsupportedValueError(key)
                child, needs_fill = _value_node(item)
                target.set_member(key, child)
                if needs_fill:
                    pending.append((item, child))

    return root


def _python_node(value: Value) -> tuple[Any, bool]:
    if isinstance(value, Null):
        return None, False
    elif isinstance(value, Bool | Number | String):
        return value.value, False
    elif isinstance(value, Array):
        return [], True
    elif isinstance(value, Object):
        return {}, True
    raise UnsupportedValueError(value)


def to_python(value: Value) -> Any:
    """Converts a value tree back into plain Python data."""
    root, needs_fill = _python_node(value)
    pending: list[tuple[Value, Any]] = [(value, root)] if needs_fill else []

    while pending:
        node, target = pending.pop()
        if isinstance(node, Array):
            for item in node.items:
                child, needs_fill = _python_node(item)
                target.append(child)
                if needs_fill:
                    pending.append((item, child))
        elif isinstance(node, Object):
            for key, item in node.members.items():
                child, needs_fill = _python_node(item)
                target[key] = child
                if needs_fill:
                    pending.append((item, child))

    return root
