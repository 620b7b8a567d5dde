import pytest

from nekostd.rng import Random


def test_same_seed_same_sequence():
    a, b = Random(1234), Random(1234)
    assert [a.next_int(1000) for _ in range(100)] == [b.next_int(1000) for _ in range(100)]


def test_different_seeds_differ():
    a, b = Random(1), Random(2)
    assert [a.next_int(1 << 30) for _ in range(10)] != [b.next_int(1 << 30) for _ in range(10)]


def test_set_seed_restarts_sequence():
    r = Random(7)
    first = [r.next_int(100000) for _ in range(60)]
    r.set_seed(7)
    assert [r.next_int(100000) for _ in range(60)] == first


def test_next_int_in_range():
    r = Random(99)
    values = [r.next_int(10) for _ in range(500)]
    assert all(0 <= v < 10 for v in values)
    assert set(values) == set(range(10))


def test_nonpositive_limit_gives_zero():
    r = Random(5)
    assert r.next_int(0) == 0
    assert r.next_int(-3) == 0


def test_next_float_in_unit_interval():
    r = Random(42)
    values = [r.next_float() for _ in range(300)]
    assert all(0.0 <= v < 1.0 for v in values)
    assert len(set(values)) == len(values)


def test_negative_seed_equals_its_unsigned_form():
    a, b = Random(-1), Random(0xFFFFFFFF)
    assert [a.next_int(1 << 30) for _ in range(40)] == [b.next_int(1 << 30) for _ in range(40)]


def test_unseeded_generator_works():
    r = Random()
    assert 0 <= r.next_int(50) < 50


def test_seed_must_be_int():
    with pytest.raises(TypeError):
        Random("seed")


def test_limit_must_be_int():
    with pytest.raises(TypeError):
        Random(1).next_int(2.5)