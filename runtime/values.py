"""Value model of the embedded configuration language.

Scripts only ever see instances of :class:`Value`. The classes mirror the
language's own semantics rather than Python's: ``True`` is not equal to ``1``,
``1`` is equal to ``1.0``, and dictionaries compare equal regardless of their
insertion order. Mutable containers are unhashable and cannot be used as
dictionary keys.
"""

from __future__ import annotations

import json
import math
from typing import Any, Iterable, Iterator, List as PyList, Tuple as PyTuple

from .errors import UnhashableError


class Value:
    """Base class for every runtime value."""

    type_name = "value"

    def truth(self) -> bool:
        return True

    def hash(self) -> int:
        raise UnhashableError(f"unhashable type: {self.type_name}")

    def __hash__(self) -> int:
        return self.hash()

    def __str__(self) -> str:
        return repr(self)


class NoneType(Value):
    type_name = "NoneType"

    def truth(self) -> bool:
        return False

    def hash(self) -> int:
        return 0

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoneType)

    __hash__ = Value.__hash__

    def __repr__(self) -> str:
        return "None"


NONE = NoneType()


class Bool(Value):
    type_name = "bool"

    def __init__(self, value: bool) -> None:
        self.value = bool(value)

    def truth(self) -> bool:
        return self.value

    def hash(self) -> int:
        return hash(self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Bool) and other.value == self.value

    __hash__ = Value.__hash__

    def __repr__(self) -> str:
        return "True" if self.value else "False"


TRUE = Bool(True)
FALSE = Bool(False)


class _Number(Value):
    value: Any

    def truth(self) -> bool:
        return bool(self.value)

    def hash(self) -> int:
        # int and float hashes agree for equal numbers
        return hash(self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Number) and other.value == self.value

    __hash__ = Value.__hash__


class Int(_Number):
    type_name = "int"

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Int requires an int, got {type(value).__name__}")
        self.value = value

    def __repr__(self) -> str:
        return str(self.value)


class Float(_Number):
    type_name = "float"

    def __init__(self, value: float) -> None:
        self.value = float(value)

    def __repr__(self) -> str:
        if math.isnan(self.value):
            return "nan"
        if math.isinf(self.value):
            return "+inf" if self.value > 0 else "-inf"
        return repr(self.value)


class String(Value):
    type_name = "string"

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"String requires a str, got {type(value).__name__}")
        self.value = value

    def truth(self) -> bool:
        return bool(self.value)

    def hash(self) -> int:
        return hash(self.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, String) and other.value == self.value

    __hash__ = Value.__hash__

    def __repr__(self) -> str:
        return json.dumps(self.value, ensure_ascii=False)


class _Sequence(Value):
    _elems: Any

    def truth(self) -> bool:
        return len(self._elems) > 0

    def __len__(self) -> int:
        return len(self._elems)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._elems)

    def __getitem__(self, index: int) -> Value:
        return self._elems[index]


class Tuple(_Sequence):
    type_name = "tuple"

    def __init__(self, elems: Iterable[Value] = ()) -> None:
        self._elems: PyTuple[Value, ...] = tuple(elems)

    def hash(self) -> int:
        return hash(tuple(elem.hash() for elem in self._elems))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Tuple) and other._elems == self._elems

    __hash__ = Value.__hash__

    def __repr__(self) -> str:
        if len(self._elems) == 1:
            return f"({self._elems[0]!r},)"
        return "(" + ", ".join(repr(elem) for elem in self._elems) + ")"


class List(_Sequence):
    type_name = "list"

    def __init__(self, elems: Iterable[Value] = ()) -> None:
        self._elems: PyList[Value] = list(elems)

    def append(self, value: Value) -> None:
        self._elems.append(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, List) and other._elems == self._elems

    __hash__ = Value.__hash__

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(elem) for elem in self._elems) + "]"


class Dict(Value):
    """Insertion-ordered mapping keyed by hashable runtime values."""

    type_name = "dict"

    def __init__(self, items: Iterable[PyTuple[Value, Value]] = ()) -> None:
        self._entries: dict[Value, Value] = {}
        for key, value in items:
            self.set_key(key, value)

    def set_key(self, key: Value, value: Value) -> None:
        key.hash()
        self._entries[key] = value

    def get(self, key: Value, default: Value | None = None) -> Value | None:
        return self._entries.get(key, default)

    def items(self) -> PyList[PyTuple[Value, Value]]:
        return list(self._entries.items())

    def truth(self) -> bool:
        return bool(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __getitem__(self, key: Value) -> Value:
        return self._entries[key]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Dict) and other._entries == self._entries

    __hash__ = Value.__hash__

    def __repr__(self) -> str:
        return "{" + ", ".join(f"{key!r}: {value!r}" for key, value in self._entries.items()) + "}"
