"""The ``yaml`` module exposed to scripts.

    yaml = module(
        decode,
        encode,
    )

``marshal`` and ``unmarshal`` are kept as deprecated aliases of ``encode`` and
``decode`` for scripts written against earlier releases. They will be removed
in 1.0.
"""

from __future__ import annotations

from runtime import Builtin, Module, String, Value, unpack_positional_args

from logging_utils import get_logger

from .decoder import LAST_WINS, Decoder
from .dynamic import parse
from .encoder import Encoder

logger = get_logger(__name__)


def make_decode(decoder: Decoder) -> Builtin:
    """Return a ``yaml.decode`` builtin backed by ``decoder``.

    >>> yaml.decode("hello:\\n- world\\n")
    {"hello": ["world"]}
    """

    def yaml_decode(fn: Builtin, args, kwargs) -> Value:
        (blob,) = unpack_positional_args(fn.name, args, kwargs, 1, ("blob", String))
        inflated = parse(blob.value)
        value = decoder.convert(inflated)
        logger.debug("%s: decoded document into %s", fn.name, value.type_name)
        return value

    return Builtin("yaml.decode", yaml_decode)


def make_encode(encoder: Encoder) -> Builtin:
    """Return a ``yaml.encode`` builtin backed by ``encoder``.

    >>> yaml.encode({"hello": ["world"]})
    "hello:\\n- world\\n"
    """

    def yaml_encode(fn: Builtin, args, kwargs) -> Value:
        (value,) = unpack_positional_args(fn.name, args, kwargs, 1, ("value", Value))
        text = encoder.convert(value)
        logger.debug("%s: encoded %s into %d characters", fn.name, value.type_name, len(text))
        return String(text)

    return Builtin("yaml.encode", yaml_encode)


_decode = make_decode(Decoder())
_encode = make_encode(Encoder())


def decode() -> Builtin:
    """Return the shared ``yaml.decode`` builtin."""

    return _decode


def encode() -> Builtin:
    """Return the shared ``yaml.encode`` builtin."""

    return _encode


def new_module(duplicate_keys: str = LAST_WINS) -> Module:
    """Build the ``yaml`` module.

    The default policy reuses the shared builtins; any other ``duplicate_keys``
    policy gets a decoder of its own.
    """

    decode_fn = _decode if duplicate_keys == LAST_WINS else make_decode(Decoder(duplicate_keys))
    return Module(
        "yaml",
        {
            "decode": decode_fn,
            "encode": _encode,
            "marshal": _encode,
            "unmarshal": decode_fn,
        },
    )
