"""Boggle-style word search along rows, columns and down-right diagonals."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import chain

from .mt19937 import MersenneTwister

# Scrabble letter frequencies for A through Z.
_LETTER_FREQUENCIES = (
    9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1,
)
_LETTERS = "".join(
    chr(ord("A") + offset) * count for offset, count in enumerate(_LETTER_FREQUENCIES)
)

# Directions searched from every cell: right, down, and down-right.
_DIRECTIONS = ((0, 1), (1, 0), (1, 1))

Board = list[list[str]]


def gen_board(n: int, seed: int) -> Board:
    """Return an ``n`` by ``n`` board of letters drawn with Scrabble frequencies."""
    rng = MersenneTwister(seed)
    return [[_LETTERS[rng() % len(_LETTERS)] for _ in range(n)] for _ in range(n)]


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Render the board with every letter right-aligned in a two-wide column."""
    return "".join("".join(f"{cell:>2}" for cell in row) + "\n" for row in board)


def print_board(board: Sequence[Sequence[str]]) -> None:
    """Write the formatted board to standard output."""
    sys.stdout.write(format_board(board))


def _prefixes(word: str) -> Iterable[str]:
    return (word[:length] for length in range(1, len(word)))


def parse_dict(fname: str) -> tuple[set[str], set[str]]:
    """Read whitespace-separated words; return the words and all their proper prefixes.

    The prefix set always holds the empty string. Raises ValueError if the
    file cannot be opened.
    """
    try:
        with open(fname, encoding="utf-8") as handle:
            words = set(handle.read().split())
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    prefix = set(chain.from_iterable(_prefixes(word) for word in words))
    prefix.add("")
    return words, prefix


def _longest_on_ray(
    dictionary: set[str],
    prefix: set[str],
    board: Sequence[Sequence[str]],
    row: int,
    col: int,
    d_row: int,
    d_col: int,
) -> str | None:
    """Walk from (row, col) while the letters read form a prefix; keep the longest word."""
    size = len(board)
    word = ""
    best = None
    while row < size and col < size:
        word += board[row][col]
        if word in dictionary:
            best = word
        if word not in prefix:
            break
        row += d_row
        col += d_col
    return best


def boggle(
    dictionary: set[str], prefix: set[str], board: Sequence[Sequence[str]]
) -> set[str]:
    """Return the longest dictionary word starting at each cell in each direction."""
    size = len(board)
    found = (
        _longest_on_ray(dictionary, prefix, board, row, col, d_row, d_col)
        for row in range(size)
        for col in range(size)
        for d_row, d_col in _DIRECTIONS
    )
    return {word for word in found if word is not None}


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a board, search it with a dictionary file, and print what was found."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("Usage: boggle-driver <size> <seed> <dictionary file>")
        return 1
    size = int(args[0])
    seed = int(args[1])
    board = gen_board(size, seed)
    print_board(board)
    dictionary, prefix = parse_dict(args[2])
    found = boggle(dictionary, prefix, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    sys.exit(main())