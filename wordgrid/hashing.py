"""Polynomial string hash over the 36-symbol alphabet a-z, 0-9."""

from __future__ import annotations

import sys
import time
from itertools import islice
from typing import Sequence

from .mt19937 import MersenneTwister

_MASK64 = (1 << 64) - 1
_CHUNK = 6
_WORDS = 5
_BASE = 36

DEBUG_R_VALUES = (983132572, 1468777056, 552714139, 984953261, 261934300)


def letter_digit_to_number(letter: str) -> int:
    """Map a-z/A-Z to 0-25 and 0-9 to 26-35; anything else maps to 0."""
    if "A" <= letter <= "Z":
        return ord(letter) - ord("A")
    if "a" <= letter <= "z":
        return ord(letter) - ord("a")
    if "0" <= letter <= "9":
        return ord(letter) - ord("0") + 26
    return 0


def _chunk_value(chunk: str) -> int:
    return sum(
        letter_digit_to_number(ch) * _BASE**power
        for power, ch in enumerate(reversed(chunk))
    )


class StringHash:
    """Hash a string into a 64-bit value using five random weights.

    The string is split from its end into groups of six characters; each
    group is read as a base-36 number, and the (at most five) resulting words
    are combined with the weights. In debug mode fixed weights are used.
    """

    def __init__(self, debug: bool = True) -> None:
        self.r_values: list[int] = list(DEBUG_R_VALUES)
        if not debug:
            self.generate_r_values()

    def generate_r_values(self, seed: int | None = None) -> None:
        """Draw new weights from a Mersenne Twister seeded by ``seed`` or the clock."""
        if seed is None:
            seed = time.time_ns() & 0xFFFFFFFF
        self.r_values = list(islice(MersenneTwister(seed), _WORDS))

    def __call__(self, key: str) -> int:
        words = [0] * _WORDS
        end = len(key)
        for slot in reversed(range(_WORDS)):
            if end <= 0:
                break
            words[slot] = _chunk_value(key[max(0, end - _CHUNK):end])
            end -= _CHUNK
        return sum(r * w for r, w in zip(self.r_values, words)) & _MASK64


def main(argv: Sequence[str] | None = None) -> int:
    """Print the debug-mode hash of the string given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide a string to hash")
        return 1
    key = args[0]
    print(f"h({key})={StringHash(True)(key)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())