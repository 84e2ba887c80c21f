from itertools import islice

from wordgrid.mt19937 import MersenneTwister


def test_default_seed_first_output():
    assert MersenneTwister(5489)() == 3499211612


def test_default_seed_ten_thousandth_output():
    gen = MersenneTwister(5489)
    value = None
    for _ in range(10000):
        value = gen()
    assert value == 4123659995


def test_default_constructor_uses_5489():
    a = MersenneTwister()
    b = MersenneTwister(5489)
    assert [a() for _ in range(20)] == [b() for _ in range(20)]


def test_same_seed_same_sequence():
    a = MersenneTwister(42)
    b = MersenneTwister(42)
    assert [a() for _ in range(1000)] == [b() for _ in range(1000)]


def test_different_seeds_differ():
    a = [MersenneTwister(1)() for _ in range(1)]
    b = [MersenneTwister(2)() for _ in range(1)]
    assert a != b or a == []
    assert list(islice(MersenneTwister(1), 10)) != list(islice(MersenneTwister(2), 10))


def test_negative_seed_wraps_modulo_2_32():
    a = list(islice(MersenneTwister(-1), 50))
    b = list(islice(MersenneTwister(2**32 - 1), 50))
    assert a == b


def test_iteration_matches_calls():
    gen = MersenneTwister(7)
    by_call = [gen() for _ in range(700)]
    assert list(islice(MersenneTwister(7), 700)) == by_call


def test_outputs_are_32_bit():
    values = list(islice(MersenneTwister(123), 2000))
    assert all(0 <= v <= 0xFFFFFFFF for v in values)
    assert len(set(values)) > 1900


def test_iter_returns_self():
    gen = MersenneTwister(3)
    assert iter(gen) is gen