"""Native functions and modules exposed to scripts."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence, Tuple, Type

from .errors import EvalError
from .values import Value

Kwargs = Sequence[Tuple[str, Value]]
BuiltinImpl = Callable[["Builtin", Tuple[Value, ...], Kwargs], Value]


class Builtin(Value):
    """A named native function callable from scripts.

    ``impl`` receives the builtin itself, the positional arguments as a tuple
    and the keyword arguments as a sequence of ``(name, value)`` pairs, the
    same shape the interpreter uses at a call site.
    """

    type_name = "builtin_function_or_method"

    def __init__(self, name: str, impl: BuiltinImpl) -> None:
        self.name = name
        self.impl = impl

    def call(self, args: Sequence[Value], kwargs: Kwargs = ()) -> Value:
        return self.impl(self, tuple(args), list(kwargs))

    def __call__(self, *args: Value, **kwargs: Value) -> Value:
        return self.call(args, list(kwargs.items()))

    def hash(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        return f"<built-in function {self.name}>"


def unpack_positional_args(
    fn_name: str,
    args: Sequence[Value],
    kwargs: Kwargs,
    min_args: int,
    *params: Tuple[str, Type[Value]],
) -> Tuple[Value | None, ...]:
    """Check a positional-only call and return one slot per parameter.

    ``params`` lists ``(name, type)`` pairs in order. Parameters past
    ``min_args`` are optional and come back as ``None`` when omitted.
    """

    if kwargs:
        raise EvalError(f"{fn_name}: unexpected keyword arguments")

    if len(args) < min_args:
        missing = params[len(args)][0]
        raise EvalError(f"{fn_name}: missing argument for {missing}")

    if len(args) > len(params):
        raise EvalError(f"{fn_name}: got {len(args)} arguments, want at most {len(params)}")

    unpacked: list[Value | None] = [None] * len(params)
    for index, arg in enumerate(args):
        name, expected = params[index]
        if not isinstance(arg, expected):
            got = getattr(arg, "type_name", type(arg).__name__)
            raise EvalError(
                f"{fn_name}: for parameter {name}: got {got}, want {expected.type_name}"
            )
        unpacked[index] = arg

    return tuple(unpacked)


class Module(Value):
    """A named, immutable collection of members such as ``yaml`` or ``json``."""

    type_name = "module"

    def __init__(self, name: str, members: Mapping[str, Value]) -> None:
        self.name = name
        self.members = dict(members)

    def attr(self, name: str) -> Value:
        try:
            return self.members[name]
        except KeyError as exc:
            raise EvalError(f"module has no .{name} field or method") from exc

    def attr_names(self) -> list[str]:
        return sorted(self.members)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name in ("members", "name"):
            raise AttributeError(name)
        try:
            return self.attr(name)
        except EvalError as exc:
            raise AttributeError(str(exc)) from exc

    def hash(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        return f'<module "{self.name}">'
