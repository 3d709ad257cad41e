"""
Variant data model used as render input and section payload.

A template is rendered against a tree of Value objects. Each variant is its
own dataclass so the payload that is valid for a value is fixed by its class:
objects map names to values, strings carry opaque text, lists hold ordered
values and booleans are two payload-free tags. Values inserted into an object
or list are deep copied.
"""

import copy
from abc import ABC
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from mustree.exceptions import InvalidAccessError


class ValueType(Enum):
    """Variant tag of a Value."""

    OBJECT = "object"
    STRING = "string"
    LIST = "list"
    TRUE = "true"
    FALSE = "false"


@dataclass
class Value(ABC):
    """
    Base class for all data values.

    Accessors that only make sense for one variant raise InvalidAccessError on
    every other variant. `get` is the exception: name lookup on a non-object
    simply finds nothing, which is what scope resolution relies on.
    """

    type = None

    @staticmethod
    def boolean(flag: bool) -> "Value":
        """Return the True or False tag for a Python boolean."""
        return TrueValue() if flag else FalseValue()

    def is_object(self) -> bool:
        return self.type is ValueType.OBJECT

    def is_string(self) -> bool:
        return self.type is ValueType.STRING

    def is_list(self) -> bool:
        return self.type is ValueType.LIST

    def is_bool(self) -> bool:
        return self.type in (ValueType.TRUE, ValueType.FALSE)

    def is_true(self) -> bool:
        return self.type is ValueType.TRUE

    def is_false(self) -> bool:
        return self.type is ValueType.FALSE

    def is_empty_list(self) -> bool:
        return False

    def is_non_empty_list(self) -> bool:
        return False

    def is_falsy(self) -> bool:
        """
        Check whether this value suppresses a section.

        Only the False tag and an empty list are falsy. Empty objects and
        empty strings are truthy.
        """
        return self.is_false() or self.is_empty_list()

    def get(self, name: str) -> "Value | None":
        """Look up a member by name; non-objects have no members."""
        return None

    def exists(self, name: str) -> bool:
        """Check whether an object has a member with the given name."""
        return False

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def set(self, name: str, value: "Value") -> None:
        raise InvalidAccessError(self._type_name(), "set")

    def push(self, value: "Value") -> None:
        raise InvalidAccessError(self._type_name(), "push")

    def __getitem__(self, index: int) -> "Value":
        raise InvalidAccessError(self._type_name(), "index")

    @property
    def text(self) -> str:
        raise InvalidAccessError(self._type_name(), "text")

    @property
    def members(self) -> dict[str, "Value"]:
        raise InvalidAccessError(self._type_name(), "members")

    @property
    def items(self) -> list["Value"]:
        raise InvalidAccessError(self._type_name(), "items")

    def _type_name(self) -> str:
        return self.type.value


@dataclass
class ObjectValue(Value):
    """
    Mapping from names to values.

    Params:
        values: Initial members; each is deep copied on construction
    """

    values: dict[str, Value] = field(default_factory=dict)

    type = ValueType.OBJECT

    def __post_init__(self):
        """Take private copies of the initial members."""
        self.values = {name: copy.deepcopy(v) for name, v in self.values.items()}

    def get(self, name: str) -> Value | None:
        return self.values.get(name)

    def exists(self, name: str) -> bool:
        return name in self.values

    def set(self, name: str, value: Value) -> None:
        """Insert or overwrite a member with a copy of `value`."""
        self.values[name] = copy.deepcopy(value)

    @property
    def members(self) -> dict[str, Value]:
        return self.values


@dataclass
class StringValue(Value):
    """Opaque text payload."""

    value: str = ""

    type = ValueType.STRING

    @property
    def text(self) -> str:
        return self.value


@dataclass
class ListValue(Value):
    """
    Ordered sequence of values.

    Params:
        values: Initial elements; each is deep copied on construction
    """

    values: list[Value] = field(default_factory=list)

    type = ValueType.LIST

    def __post_init__(self):
        """Take private copies of the initial elements."""
        self.values = [copy.deepcopy(v) for v in self.values]

    def push(self, value: Value) -> None:
        """Append a copy of `value`."""
        self.values.append(copy.deepcopy(value))

    def __getitem__(self, index: int) -> Value:
        return self.values[index]

    def __iter__(self) -> Iterator[Value]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    @property
    def items(self) -> list[Value]:
        return self.values

    def is_empty_list(self) -> bool:
        return not self.values

    def is_non_empty_list(self) -> bool:
        return bool(self.values)


@dataclass
class TrueValue(Value):
    """Boolean true tag."""

    type = ValueType.TRUE


@dataclass
class FalseValue(Value):
    """Boolean false tag."""

    type = ValueType.FALSE


def to_value(data: Any) -> Value:
    """
    Convert plain Python data into a Value tree.

    Conversion rules:
      - Value instances are returned unchanged.
      - Mappings become objects (keys converted with `str`).
      - `str` becomes a string, `bool` a True/False tag, `None` the False tag.
      - `int` and `float` become strings of their `str()` form.
      - Any other iterable becomes a list.

    Params:
        data: Python value to convert

    Returns:
        Freshly built Value tree

    Raises:
        TypeError: If some part of `data` has no Value representation
    """
    if isinstance(data, Value):
        return data
    if isinstance(data, bool):
        return Value.boolean(data)
    if data is None:
        return FalseValue()
    if isinstance(data, str):
        return StringValue(data)
    if isinstance(data, (int, float)):
        return StringValue(str(data))
    if isinstance(data, Mapping):
        # Children are freshly built here, so skip the copying constructor
        obj = ObjectValue()
        for key, item in data.items():
            obj.values[str(key)] = to_value(item)
        return obj
    if isinstance(data, Iterable):
        lst = ListValue()
        for item in data:
            lst.values.append(to_value(item))
        return lst
    raise TypeError(f"Cannot convert {type(data).__name__} to a template value")
