from itertools import islice

import pytest

from wordgrid.hashing import StringHash, letter_digit_to_number, main
from wordgrid.mt19937 import MersenneTwister


@pytest.mark.parametrize(
    "key, expected",
    [
        ("abc", 9953503400),
        ("abc123", 473827885525100),
        ("antidisestablishmentarianism", 1137429692708383810),
        ("9999999999999999999999999999", 7116200424364995040),
        ("", 0),
        ("B", 261934300),
        ("gfedcba", 80987980279261566),
        ("abcdefghijkl", 99959782498362165),
        ("abcdefghijklm", 177508434398820306),
        ("usccs103landcs104l", 2322055531449905840),
    ],
)
def test_debug_hash_values(key, expected):
    assert StringHash(True)(key) == expected


def test_case_insensitive():
    h = StringHash(True)
    assert h("usccs103landcs104l") == h("USCCS103LandCS104L")
    assert h("AntidisEstablishmentAriaNism") == 1137429692708383810


def test_default_is_debug():
    assert StringHash()("abc") == 9953503400


@pytest.mark.parametrize(
    "letter, expected",
    [("a", 0), ("A", 0), ("z", 25), ("Z", 25), ("0", 26), ("9", 35), ("!", 0), ("é", 0)],
)
def test_letter_digit_to_number(letter, expected):
    assert letter_digit_to_number(letter) == expected


def test_only_last_thirty_characters_count():
    h = StringHash(True)
    tail = "abcdefghijklmnopqrstuvwxyz0123"
    assert len(tail) == 30
    assert h("zzzz" + tail) == h(tail)


def test_result_fits_in_64_bits():
    h = StringHash(True)
    assert 0 <= h("9" * 30) < 2**64


def test_seeded_r_values_come_from_generator():
    h = StringHash(True)
    h.generate_r_values(1234)
    assert h.r_values == list(islice(MersenneTwister(1234), 5))


def test_different_seeds_give_different_hashes():
    key = "AntidisEstablishmentAriaNism"
    values = set()
    for seed in range(1, 6):
        h = StringHash(True)
        h.generate_r_values(seed)
        values.add(h(key))
    assert len(values) == 5


def test_random_mode_replaces_debug_values():
    h = StringHash(False)
    assert len(h.r_values) == 5
    assert h.r_values != [983132572, 1468777056, 552714139, 984953261, 261934300]


def test_main_prints_hash(capsys):
    assert main(["abc"]) == 0
    assert capsys.readouterr().out == "h(abc)=9953503400\n"


def test_main_without_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Please provide a string to hash\n"