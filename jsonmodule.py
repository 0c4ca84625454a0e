"""JSON encoding of runtime values.

``encode_json`` writes the compact form used by the configuration language's
own ``json.encode``: no whitespace, dictionary keys in sorted order, and only
string keys. The output is meant to be re-read by a YAML 1.1 parser, so floats
always carry a decimal point (``1.0e+20`` rather than ``1e+20``) and strings
escape every character outside printable ASCII, since YAML rejects or folds
raw DEL, C1 controls and lone surrogates.
"""

from __future__ import annotations

import contextlib
import json
import math
from typing import Iterator, List

from runtime import Bool, Dict, EvalError, Float, Int, List as ListValue, NoneType, String, Tuple, Value


class JSONEncodeError(EvalError):
    """Raised when a runtime value has no JSON representation."""


def encode_json(value: Value) -> str:
    """Return the JSON text for ``value``."""

    out: List[str] = []
    _write(out, value, set())
    return "".join(out)


def quote(text: str) -> str:
    # json leaves DEL unescaped
    return json.dumps(text).replace("\x7f", "\\u007f")


def format_float(number: float) -> str:
    if not math.isfinite(number):
        raise JSONEncodeError(f"cannot encode non-finite float {Float(number)!r}")

    text = repr(number)
    if "e" in text and "." not in text:
        mantissa, exponent = text.split("e")
        text = f"{mantissa}.0e{exponent}"
    return text


def _write(out: List[str], value: Value, seen: set[int]) -> None:
    if isinstance(value, NoneType):
        out.append("null")
    elif isinstance(value, Bool):
        out.append("true" if value.value else "false")
    elif isinstance(value, Int):
        out.append(str(value.value))
    elif isinstance(value, Float):
        out.append(format_float(value.value))
    elif isinstance(value, String):
        out.append(quote(value.value))
    elif isinstance(value, (ListValue, Tuple)):
        with _visiting(value, seen):
            out.append("[")
            for index, elem in enumerate(value):
                if index:
                    out.append(",")
                _write(out, elem, seen)
            out.append("]")
    elif isinstance(value, Dict):
        items = value.items()
        for key, _ in items:
            if not isinstance(key, String):
                raise JSONEncodeError(f"{value.type_name} has {key.type_name} key, want string")
        with _visiting(value, seen):
            out.append("{")
            for index, (key, elem) in enumerate(sorted(items, key=lambda item: item[0].value)):
                if index:
                    out.append(",")
                out.append(quote(key.value))
                out.append(":")
                _write(out, elem, seen)
            out.append("}")
    else:
        type_name = getattr(value, "type_name", type(value).__name__)
        raise JSONEncodeError(f"cannot encode {type_name} as JSON")


@contextlib.contextmanager
def _visiting(value: Value, seen: set[int]) -> Iterator[None]:
    key = id(value)
    if key in seen:
        raise JSONEncodeError("cycle in JSON structure")
    seen.add(key)
    try:
        yield
    finally:
        seen.discard(key)
