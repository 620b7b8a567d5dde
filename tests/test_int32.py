import pytest

from nekostd import int32

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def test_wrap_overflow():
    assert int32.wrap(INT_MAX + 1) == INT_MIN
    assert int32.wrap(INT_MIN - 1) == INT_MAX
    assert int32.wrap(5) == 5


def test_add_sub_wrap():
    assert int32.add(INT_MAX, 1) == INT_MIN
    assert int32.sub(INT_MIN, 1) == INT_MAX
    assert int32.add(2, 3) == 5


def test_mul_wraps_to_zero():
    assert int32.mul(65536, 65536) == 0


def test_div_truncates_toward_zero():
    assert int32.div(7, -2) == -3
    assert int32.div(-7, 2) == -3


def test_mod_sign_of_dividend():
    assert int32.mod(-7, 2) == -1
    assert int32.mod(7, -2) == 1


@pytest.mark.parametrize("a,b", [(17, 5), (-17, 5), (17, -5), (-17, -5), (INT_MAX, 3)])
def test_div_mod_identity(a, b):
    assert int32.add(int32.mul(int32.div(a, b), b), int32.mod(a, b)) == a


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        int32.div(1, 0)
    with pytest.raises(ZeroDivisionError):
        int32.mod(1, 0)


def test_shifts():
    assert int32.shl(1, 31) == INT_MIN
    assert int32.shr(INT_MIN, 31) == -1
    assert int32.ushr(INT_MIN, 31) == 1


@pytest.mark.parametrize("x", [0, 1, 12345, INT_MAX])
def test_ushr_matches_shr_for_non_negative(x):
    for n in range(32):
        assert int32.ushr(x, n) == int32.shr(x, n)


def test_neg_and_complement():
    assert int32.neg(INT_MIN) == INT_MIN
    for x in (0, 1, -1, 42, INT_MAX):
        assert int32.complement(x) == int32.sub(int32.neg(x), 1)


@pytest.mark.parametrize("x", [0, 1, -1, 0x1234, INT_MIN, INT_MAX])
def test_bitwise_invariants(x):
    assert int32.bit_and(x, int32.complement(x)) == 0
    assert int32.bit_or(x, int32.complement(x)) == -1
    assert int32.bit_xor(x, x) == 0


def test_compare():
    assert int32.compare(1, 2) == -1
    assert int32.compare(2, 2) == 0
    assert int32.compare(3, 2) == 1


def test_new_truncates():
    assert int32.new(3.9) == 3
    assert int32.new(-3.9) == -3
    assert int32.new(INT_MAX + 1) == INT_MIN


def test_new_rejects_non_numbers():
    with pytest.raises(TypeError):
        int32.new("1")
    with pytest.raises(TypeError):
        int32.new(True)


def test_to_int_limits():
    assert int32.to_int(2**30 - 1) == 2**30 - 1
    assert int32.to_int(-(2**30)) == -(2**30)
    with pytest.raises(OverflowError):
        int32.to_int(2**30)


def test_to_float():
    assert int32.to_float(7) == 7.0
    assert isinstance(int32.to_float(7), float)


def test_operations_reject_floats():
    with pytest.raises(TypeError):
        int32.add(1.5, 1)