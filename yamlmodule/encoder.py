from __future__ import annotations

from jsonmodule import encode_json
from runtime import Value

from .dynamic import parse, serialize


class Encoder:
    """Write runtime values as YAML by way of their JSON form.

    The value is first encoded as JSON, which limits the output to data JSON
    can represent, then that text is parsed as YAML and written back out in
    block style. Every step propagates its own error.
    """

    def convert(self, value: Value) -> str:
        blob = encode_json(value)
        inflated = parse(blob)
        return serialize(inflated)
