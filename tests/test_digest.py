import hashlib

import pytest

from nekostd import digest


def test_md5_of_string_is_standard_md5():
    assert digest.make_md5("abc") == hashlib.md5(b"abc").digest()


def test_md5_str_and_bytes_agree():
    assert digest.make_md5("hello") == digest.make_md5(b"hello")


def test_md5_null_collides_with_four_zero_bytes():
    assert digest.make_md5(None) == digest.make_md5(b"\x00\x00\x00\x00")


def test_md5_digest_length():
    assert len(digest.make_md5([1, "two", 3.0, None, True])) == 16


def test_md5_bools_differ():
    assert digest.make_md5(True) != digest.make_md5(False)


def test_md5_array_order_matters():
    assert digest.make_md5([1, 2]) != digest.make_md5([2, 1])
    assert digest.make_md5([1, 2]) == digest.make_md5((1, 2))


def test_md5_int_and_float_differ():
    assert digest.make_md5(1) != digest.make_md5(1.0)


def test_md5_int_wraps_to_32_bits():
    assert digest.make_md5(1 << 32) == digest.make_md5(0)


def test_md5_cyclic_arrays():
    a = []
    a.append(a)
    b = []
    b.append(b)
    assert digest.make_md5(a) == digest.make_md5(b)
    assert digest.make_md5(a) != digest.make_md5([[]])


def test_md5_objects():
    assert digest.make_md5({1: "x", 2: 3}) == digest.make_md5({1: "x", 2: 3})
    assert digest.make_md5({1: "x"}) != digest.make_md5({2: "x"})


def test_md5_object_rejects_string_keys():
    with pytest.raises(TypeError):
        digest.make_md5({"name": 1})


def test_md5_functions_by_arity():
    def two(a, b):
        return a

    assert digest.make_md5(two) == digest.make_md5(lambda x, y: x)
    assert digest.make_md5(two) != digest.make_md5(lambda x: x)


def test_md5_abstract_value_tag():
    assert digest.make_md5(object()) == digest.make_md5(b"\x18\x00\x00\x00")


def test_sha1_whole_string():
    assert digest.make_sha1(b"abc", 0, 3) == hashlib.sha1(b"abc").digest()


def test_sha1_substring():
    assert digest.make_sha1("xabcx", 1, 3) == digest.make_sha1(b"abc", 0, 3)
    assert len(digest.make_sha1(b"", 0, 0)) == 20


@pytest.mark.parametrize("pos,length", [(-1, 1), (0, -1), (2, 5), (4, 0)])
def test_sha1_bounds(pos, length):
    with pytest.raises(ValueError):
        digest.make_sha1(b"abc", pos, length)