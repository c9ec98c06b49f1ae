import numpy as np
import pytest

from wgraph.types.numeric import (
    NODE_ID_TYPES,
    WEIGHT_TYPES,
    get_node_id_type,
    get_weight_type,
    parse_integer,
)


@pytest.mark.parametrize(
    "name, scalar",
    [
        ("u8", np.uint8),
        ("u16", np.uint16),
        ("u32", np.uint32),
        ("u64", np.uint64),
        ("usize", np.uintp),
    ],
)
def test_node_id_constants(name, scalar):
    id_type = get_node_id_type(name)
    assert isinstance(id_type.zero, scalar) and id_type.zero == 0
    assert isinstance(id_type.one, scalar) and id_type.one == 1
    assert id_type.max_value == np.iinfo(scalar).max
    assert id_type.is_integer


def test_weight_constants():
    f64 = get_weight_type("f64")
    assert f64.max_value == np.finfo(np.float64).max
    assert not f64.is_integer
    assert get_weight_type("i8").min_value == -128
    assert get_weight_type("u16").max_value == 65535


def test_lookup_is_case_insensitive():
    assert get_node_id_type("U16") is NODE_ID_TYPES["u16"]
    assert get_weight_type("F32") is WEIGHT_TYPES["f32"]


def test_unknown_names():
    with pytest.raises(ValueError, match="Invalid node id type 'f64'"):
        get_node_id_type("f64")
    with pytest.raises(ValueError, match="Valid values are: u8, u16"):
        get_weight_type("u128")


def test_node_id_parse_and_index():
    u16 = get_node_id_type("u16")
    node = u16.parse("65535")
    assert isinstance(node, np.uint16)
    assert u16.to_index(node) == 65535
    assert type(u16.to_index(node)) is int
    assert u16.from_index(7) == 7


@pytest.mark.parametrize(
    "token", ["65536", "-1", "1.0", "abc", "", "1_0", "\u0661", "\uff11", " 1", "0x1"]
)
def test_node_id_parse_rejects(token):
    with pytest.raises(ValueError):
        get_node_id_type("u16").parse(token)


def test_weight_parse():
    assert get_weight_type("i32").parse("-12") == -12
    value = get_weight_type("f64").parse("2.5e-1")
    assert isinstance(value, np.float64) and value == 0.25
    assert get_weight_type("f32").parse("3") == 3.0


@pytest.mark.parametrize(
    "name, token",
    [
        ("u8", "256"),
        ("i8", "-129"),
        ("u32", "2.5"),
        ("u32", "2_5"),
        ("f64", "nan"),
        ("f64", "inf"),
        ("f64", "1_0.5"),
        ("f64", "\u0662.5"),
        ("f32", "1e39"),
    ],
)
def test_weight_parse_rejects(name, token):
    with pytest.raises(ValueError):
        get_weight_type(name).parse(token)


def test_weight_arithmetic_keeps_width():
    u32 = get_weight_type("u32")
    total = u32.zero
    for token in ["1", "2", "3"]:
        total += u32.parse(token)
    assert isinstance(total, np.uint32) and total == 6
    assert u32.parse("7") % u32.parse("4") == 3
    assert u32.parse("6") * u32.one == 6


def test_weight_parse_accepts_plain_number_forms():
    f64 = get_weight_type("f64")
    assert f64.parse("+1.5") == 1.5
    assert f64.parse(".5") == 0.5
    assert f64.parse("2.") == 2.0
    assert f64.parse("-3E2") == -300.0
    assert get_weight_type("i16").parse("+7") == 7


def test_parse_integer():
    assert parse_integer("42") == 42
    assert parse_integer("-3") == -3
    for token in ["1_0", "\u0661", "4.0", ""]:
        with pytest.raises(ValueError, match="Cannot parse"):
            parse_integer(token)


def test_add_refuses_to_wrap():
    u8 = get_weight_type("u8")
    total = u8.add(u8.parse("200"), u8.parse("55"))
    assert isinstance(total, np.uint8) and total == 255
    with pytest.raises(OverflowError, match="u8"):
        u8.add(u8.parse("200"), u8.parse("200"))

    i8 = get_weight_type("i8")
    assert i8.add(i8.parse("-100"), i8.parse("28")) == -72
    with pytest.raises(OverflowError):
        i8.add(i8.parse("-100"), i8.parse("-29"))


def test_add_floats():
    f32 = get_weight_type("f32")
    total = f32.add(f32.parse("0.5"), f32.parse("0.25"))
    assert isinstance(total, np.float32) and total == 0.75
    with pytest.raises(OverflowError, match="f32"):
        f32.add(f32.max_value, f32.max_value)


def test_no_128_bit_weight_types():
    assert "u128" not in WEIGHT_TYPES
    assert "i128" not in WEIGHT_TYPES
