from __future__ import annotations

from typing import Any

from runtime import FALSE, NONE, TRUE, Dict, Float, Int, List, String, Value

from .dynamic import DynamicMap
from .errors import DuplicateKeyError, UnsupportedKeyError, UnsupportedTypeError

LAST_WINS = "last"
REJECT = "error"
DUPLICATE_KEY_POLICIES = (LAST_WINS, REJECT)


def kind_of(obj: Any) -> str:
    if isinstance(obj, (DynamicMap, dict)):
        return "map"
    if isinstance(obj, list):
        return "list"
    return type(obj).__name__


def to_scalar_value(obj: Any) -> Value | None:
    """Convert a scalar dynamic value, or return ``None`` for any other kind."""

    if obj is None:
        return NONE
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return TRUE if obj else FALSE
    if isinstance(obj, int):
        return Int(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return String(obj)
    return None


class Decoder:
    """Translate a generic dynamic value tree into runtime values.

    Mappings may arrive as :class:`DynamicMap` (from
    :func:`yamlmodule.dynamic.parse`) or as plain dictionaries. Their keys must
    be scalars; values may be anything the decoder supports. The walk is
    depth-first and stops at the first failure.
    """

    def __init__(self, duplicate_keys: str = LAST_WINS) -> None:
        if duplicate_keys not in DUPLICATE_KEY_POLICIES:
            raise ValueError(
                f"duplicate_keys must be one of {', '.join(DUPLICATE_KEY_POLICIES)}, "
                f"got {duplicate_keys!r}"
            )
        self.duplicate_keys = duplicate_keys

    def convert(self, obj: Any) -> Value:
        scalar = to_scalar_value(obj)
        if scalar is not None:
            return scalar

        if isinstance(obj, (DynamicMap, dict)):
            return self._convert_map(obj)

        if isinstance(obj, list):
            return List(self.convert(elem) for elem in obj)

        raise UnsupportedTypeError(f"{kind_of(obj)} ({obj!r}) is not a supported type")

    def _convert_map(self, obj: DynamicMap | dict) -> Dict:
        result = Dict()
        for key, value in obj.items():
            key_value = to_scalar_value(key)
            if key_value is None:
                raise UnsupportedKeyError(f"{kind_of(key)} ({key!r}) is not a supported key type")
            if self.duplicate_keys == REJECT and key_value in result:
                raise DuplicateKeyError(f"duplicate key {key_value!r}")
            result.set_key(key_value, self.convert(value))
        return result
