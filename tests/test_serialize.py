import math
import struct

import pytest

from nekostd.serialize import NekoObject, SerializeError, serialize, unserialize


def pack(n):
    return struct.pack("<i", n)


def test_constants_wire_format():
    assert serialize(None) == b"N"
    assert serialize(True) == b"T"
    assert serialize(False) == b"F"


def test_small_int_wire_format():
    assert serialize(5) == b"i" + pack(5)
    assert unserialize(b"i" + pack(-7)) == -7


def test_string_wire_format():
    assert serialize("ab") == b"s\x02\x00\x00\x00ab"


def test_bytes_and_str_serialize_alike():
    assert serialize(b"ab") == serialize("ab")


def test_large_int_uses_int32_tag():
    data = serialize(1 << 30)
    assert data[:1] == b"I"
    assert unserialize(data) == 1 << 30
    assert unserialize(serialize(-(1 << 31))) == -(1 << 31)


def test_int_beyond_32_bits_rejected():
    with pytest.raises(SerializeError):
        serialize(1 << 31)


@pytest.mark.parametrize("x", [0.0, -0.0, 1.5, -2.25e300, math.inf])
def test_float_round_trip(x):
    result = unserialize(serialize(x))
    assert result == x
    assert math.copysign(1.0, result) == math.copysign(1.0, x)


def test_nan_round_trip():
    assert math.isnan(unserialize(serialize(math.nan)))


def test_nested_list_round_trip():
    value = [1, "two", [3.0, None, True], (False, "x")]
    assert unserialize(serialize(value)) == [1, "two", [3.0, None, True], [False, "x"]]


def test_object_with_proto_round_trip():
    proto = NekoObject({10: "base"})
    obj = NekoObject({1: 2, 3: [4, 5]}, proto=proto)
    result = unserialize(serialize(obj))
    assert isinstance(result, NekoObject)
    assert result == {1: 2, 3: [4, 5]}
    assert result.proto == {10: "base"}
    assert result.proto.proto is None


def test_plain_dict_becomes_object():
    result = unserialize(serialize({7: "seven"}))
    assert isinstance(result, NekoObject)
    assert result == {7: "seven"}


def test_shared_reference_preserved():
    inner = [1]
    result = unserialize(serialize([inner, inner]))
    assert result[0] is result[1]
    assert result[0] == [1]


def test_shared_string_written_once():
    text = "shared"
    data = serialize([text, text])
    assert data.count(b"shared") == 1
    assert unserialize(data) == ["shared", "shared"]


def test_cyclic_list():
    a = []
    a.append(a)
    result = unserialize(serialize(a))
    assert result[0] is result


def test_cyclic_object():
    obj = NekoObject()
    obj[1] = obj
    result = unserialize(serialize(obj))
    assert result[1] is result


@pytest.mark.parametrize("bad", [{"a": 1}, {0: 1}, {1 << 40: 1}])
def test_invalid_field_ids(bad):
    with pytest.raises(SerializeError):
        serialize(bad)


def test_functions_and_abstracts_rejected():
    with pytest.raises(SerializeError, match="function"):
        serialize(len)
    with pytest.raises(SerializeError, match="Abstract"):
        serialize(object())


def test_depth_limit():
    shallow = None
    for _ in range(300):
        shallow = [shallow]
    assert unserialize(serialize(shallow)) == shallow
    deep = None
    for _ in range(400):
        deep = [deep]
    with pytest.raises(SerializeError, match="stack overflow"):
        serialize(deep)


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"Q",
        b"i\x01",
        b"r" + pack(0),
        b"s" + pack(-1),
        b"s" + pack(5) + b"ab",
        b"a" + pack(100) + b"N",
        b"o" + pack(0) + b"q",
        b"o" + pack(0) + b"pN",
        b"L",
        b"x",
    ],
)
def test_invalid_data(data):
    with pytest.raises(SerializeError):
        unserialize(data)


def test_unserialize_requires_bytes():
    with pytest.raises(TypeError):
        unserialize("N")


def test_hash_tag_reads_as_dict():
    data = b"h" + pack(4) + pack(1) + pack(7) + serialize(1) + serialize("x")
    assert unserialize(data) == {1: "x"}