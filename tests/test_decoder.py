import pytest
import yaml

from runtime import FALSE, NONE, TRUE, Dict, Float, Int, List, String
from yamlmodule import (
    Decoder,
    DuplicateKeyError,
    DynamicMap,
    UnsupportedKeyError,
    UnsupportedTypeError,
    parse,
)


def decode(text, **kwargs):
    return Decoder(**kwargs).convert(parse(text))


def test_scalars_keep_their_kind():
    value = decode("a: 1\nb: 2.5\nc: true\nd: null\ne: text\n")

    assert value == Dict(
        [
            (String("a"), Int(1)),
            (String("b"), Float(2.5)),
            (String("c"), TRUE),
            (String("d"), NONE),
            (String("e"), String("text")),
        ]
    )
    assert type(value[String("a")]) is Int
    assert type(value[String("b")]) is Float


def test_integers_keep_full_precision():
    value = decode("big: 18446744073709551615\nsmall: -9223372036854775808\n")

    assert value[String("big")] == Int(18446744073709551615)
    assert value[String("small")] == Int(-9223372036854775808)


def test_lists_keep_their_order():
    value = decode("- 3\n- [b, a]\n- {k: v}\n- false\n")

    assert value == List(
        [
            Int(3),
            List([String("b"), String("a")]),
            Dict([(String("k"), String("v"))]),
            FALSE,
        ]
    )


def test_scalar_keys_of_every_kind():
    value = decode("1: int\n2.5: float\ntrue: bool\n~: none\nname: str\n")

    assert value[Int(1)] == String("int")
    assert value[Float(2.5)] == String("float")
    assert value[TRUE] == String("bool")
    assert value[NONE] == String("none")
    assert value[String("name")] == String("str")


def test_list_key_is_rejected():
    with pytest.raises(UnsupportedKeyError, match=r"^list \(\['a', 'b'\]\) is not a supported key type$"):
        decode("? [a, b]\n: 1\n")


def test_map_key_is_rejected():
    with pytest.raises(UnsupportedKeyError, match="^map .* is not a supported key type$"):
        decode("? {a: 1}\n: 2\n")


def test_nested_key_error_propagates():
    with pytest.raises(UnsupportedKeyError):
        decode("outer:\n  - ok: 1\n  - ? [x]\n    : 2\n")


def test_unsupported_values_are_rejected():
    with pytest.raises(UnsupportedTypeError, match=r"^bytes \(b'hello'\) is not a supported type$"):
        Decoder().convert({"data": b"hello"})

    with pytest.raises(UnsupportedTypeError):
        Decoder().convert(object())


def test_binary_data_decodes_to_a_string():
    assert decode("data: !!binary aGVsbG8=\n") == Dict([(String("data"), String("hello"))])


def test_binary_data_must_be_utf8():
    with pytest.raises(yaml.YAMLError, match="not valid UTF-8"):
        decode("data: !!binary /w==\n")


def test_only_the_first_document_is_decoded():
    assert decode("a: 1\n---\nb: 2\n") == Dict([(String("a"), Int(1))])
    assert decode("---\n...\n---\nb: 2\n") is NONE


def test_dates_stay_strings():
    assert decode("when: 2001-12-14\n") == Dict([(String("when"), String("2001-12-14"))])


def test_sets_become_dicts_with_none_values():
    assert decode("!!set {a, b}\n") == Dict([(String("a"), NONE), (String("b"), NONE)])


def test_ordered_maps_become_lists_of_dicts():
    assert decode("!!omap\n- a: 1\n- b: 2\n") == List(
        [
            Dict([(String("a"), Int(1))]),
            Dict([(String("b"), Int(2))]),
        ]
    )


def test_merge_keys_are_applied():
    value = decode("base: &base {x: 1}\nderived:\n  <<: *base\n  y: 2\n")

    assert value[String("derived")] == Dict([(String("x"), Int(1)), (String("y"), Int(2))])


def test_empty_document_is_none():
    assert decode("") is NONE


def test_recursive_aliases_fail_to_parse():
    with pytest.raises(yaml.YAMLError):
        parse("&a [*a]\n")


def test_duplicate_keys_last_write_wins_by_default():
    value = decode("a: 1\na: 2\n")

    assert value == Dict([(String("a"), Int(2))])


def test_duplicate_keys_compare_as_runtime_values():
    value = decode("1: a\n1.0: b\ntrue: c\n")

    assert len(value) == 2
    assert value[Int(1)] == String("b")
    assert value[TRUE] == String("c")


def test_duplicate_keys_can_be_rejected():
    with pytest.raises(DuplicateKeyError, match='^duplicate key "a"$'):
        decode("a: 1\na: 2\n", duplicate_keys="error")

    with pytest.raises(DuplicateKeyError):
        decode("1: a\n1.0: b\n", duplicate_keys="error")


def test_unknown_duplicate_key_policy():
    with pytest.raises(ValueError):
        Decoder(duplicate_keys="first")


def test_plain_python_data_is_accepted():
    value = Decoder().convert({"a": [1, 2.0, None], 3: "x"})

    assert value == Dict(
        [
            (String("a"), List([Int(1), Float(2.0), NONE])),
            (Int(3), String("x")),
        ]
    )


def test_parse_keeps_compound_keys():
    parsed = parse("? [a]\n: 1\nb: 2\n")

    assert parsed == DynamicMap([(["a"], 1), ("b", 2)])
