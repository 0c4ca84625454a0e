from __future__ import annotations


class ConversionError(Exception):
    """Base class for values that cannot cross between YAML and the runtime."""


class UnsupportedTypeError(ConversionError):
    """A parsed value has a kind the runtime has no counterpart for."""


class UnsupportedKeyError(ConversionError):
    """A mapping key is a list or a mapping rather than a scalar."""


class DuplicateKeyError(ConversionError):
    """Two mapping keys convert to equal runtime values."""
