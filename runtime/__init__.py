from .builtins import Builtin, Module, unpack_positional_args
from .errors import EvalError, UnhashableError
from .values import (
    FALSE,
    NONE,
    TRUE,
    Bool,
    Dict,
    Float,
    Int,
    List,
    NoneType,
    String,
    Tuple,
    Value,
)

__all__ = [
    "Bool",
    "Builtin",
    "Dict",
    "EvalError",
    "FALSE",
    "Float",
    "Int",
    "List",
    "Module",
    "NONE",
    "NoneType",
    "String",
    "TRUE",
    "Tuple",
    "UnhashableError",
    "Value",
    "unpack_positional_args",
]
