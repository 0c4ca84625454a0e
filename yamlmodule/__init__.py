from .decoder import DUPLICATE_KEY_POLICIES, Decoder
from .dynamic import DynamicLoader, DynamicMap, parse, serialize
from .encoder import Encoder
from .errors import ConversionError, DuplicateKeyError, UnsupportedKeyError, UnsupportedTypeError
from .module import decode, encode, new_module

__all__ = [
    "ConversionError",
    "DUPLICATE_KEY_POLICIES",
    "Decoder",
    "DuplicateKeyError",
    "DynamicLoader",
    "DynamicMap",
    "Encoder",
    "UnsupportedKeyError",
    "UnsupportedTypeError",
    "decode",
    "encode",
    "new_module",
    "parse",
    "serialize",
]
