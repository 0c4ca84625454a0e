"""Generic dynamic values produced and consumed by the YAML codec.

PyYAML's stock loaders build Python dictionaries, which reject list or mapping
keys before any caller gets to see them. :class:`DynamicLoader` keeps every
mapping as a :class:`DynamicMap` of ``(key, value)`` pairs instead, so the
decoder decides which key kinds are acceptable.

Dates and times are left as plain strings and ``!!binary`` data is decoded
into a UTF-8 string, the way untyped YAML targets treat them. ``!!set``,
``!!omap`` and ``!!pairs`` collapse into the map and sequence shapes they are
written in. Only the first document of a stream is read.
"""

from __future__ import annotations

import copy
from typing import Any, Iterable, Iterator, List, Tuple

import yaml

MAP_TAG = "tag:yaml.org,2002:map"
STR_TAG = "tag:yaml.org,2002:str"
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
UNICODE_BREAKS = "\x85\u2028\u2029"


class DynamicMap:
    """A parsed YAML mapping whose keys may be of any kind."""

    def __init__(self, pairs: Iterable[Tuple[Any, Any]] = ()) -> None:
        self.pairs: List[Tuple[Any, Any]] = list(pairs)

    def items(self) -> List[Tuple[Any, Any]]:
        return list(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.pairs)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DynamicMap) and other.pairs == self.pairs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DynamicMap({self.pairs!r})"


class DynamicLoader(yaml.SafeLoader):
    """SafeLoader variant producing generic dynamic values."""


DynamicLoader.yaml_implicit_resolvers = copy.deepcopy(yaml.SafeLoader.yaml_implicit_resolvers)
for first_char, resolvers in list(DynamicLoader.yaml_implicit_resolvers.items()):
    DynamicLoader.yaml_implicit_resolvers[first_char] = [
        resolver for resolver in resolvers if resolver[0] != TIMESTAMP_TAG
    ]


def construct_dynamic_map(loader: DynamicLoader, node: yaml.MappingNode) -> DynamicMap:
    if not isinstance(node, yaml.MappingNode):
        raise yaml.constructor.ConstructorError(
            None, None, f"expected a mapping node, but found {node.id}", node.start_mark
        )
    loader.flatten_mapping(node)
    pairs = []
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=True)
        value = loader.construct_object(value_node, deep=True)
        pairs.append((key, value))
    return DynamicMap(pairs)


def construct_binary_str(loader: DynamicLoader, node: yaml.ScalarNode) -> str:
    data = loader.construct_yaml_binary(node)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise yaml.constructor.ConstructorError(
            None, None, f"binary data is not valid UTF-8: {exc}", node.start_mark
        ) from exc


def construct_dynamic_sequence(loader: DynamicLoader, node: yaml.SequenceNode) -> List[Any]:
    return loader.construct_sequence(node, deep=True)


DynamicLoader.add_constructor(MAP_TAG, construct_dynamic_map)
DynamicLoader.add_constructor("tag:yaml.org,2002:set", construct_dynamic_map)
DynamicLoader.add_constructor("tag:yaml.org,2002:seq", construct_dynamic_sequence)
DynamicLoader.add_constructor("tag:yaml.org,2002:omap", construct_dynamic_sequence)
DynamicLoader.add_constructor("tag:yaml.org,2002:pairs", construct_dynamic_sequence)
DynamicLoader.add_constructor(TIMESTAMP_TAG, yaml.SafeLoader.construct_yaml_str)
DynamicLoader.add_constructor("tag:yaml.org,2002:binary", construct_binary_str)


class DynamicDumper(yaml.SafeDumper):
    """SafeDumper that also writes :class:`DynamicMap` values."""


def represent_dynamic_map(dumper: DynamicDumper, data: DynamicMap) -> yaml.MappingNode:
    return dumper.represent_mapping(MAP_TAG, data.pairs)


def represent_dynamic_str(dumper: DynamicDumper, data: str) -> yaml.ScalarNode:
    # single-quoted output folds NEL, LS and PS on reload
    if any(ch in data for ch in UNICODE_BREAKS):
        return dumper.represent_scalar(STR_TAG, data, style='"')
    return dumper.represent_str(data)


DynamicDumper.add_representer(DynamicMap, represent_dynamic_map)
DynamicDumper.add_representer(str, represent_dynamic_str)


def parse(text: str) -> Any:
    """Parse the first YAML document of ``text`` into a generic dynamic value.

    Later documents in the stream are ignored and an empty stream yields
    ``None``.
    """

    loader = DynamicLoader(text)
    try:
        if loader.check_data():
            return loader.get_data()
        return None
    finally:
        loader.dispose()


def serialize(data: Any) -> str:
    """Write a generic dynamic value as block-style YAML."""

    return yaml.dump(data, Dumper=DynamicDumper, default_flow_style=False, allow_unicode=True)
