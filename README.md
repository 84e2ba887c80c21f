# wordgrid

A small toolkit around word grids and hashing:

- **Boggle solver** (`wordgrid.boggle`): generates a square letter board
  from Scrabble tile frequencies. Boards are seeded, so the same seed gives
  the same board. It then searches the board along straight lines that run to
  the right, downward, or diagonally down-right. From every cell, in each of
  those three directions, the search reads letters while they still form a
  prefix of some dictionary word, and it keeps the longest dictionary word
  met on the way.
- **String hash** (`wordgrid.hashing`): a base-36 hash over letters and
  digits that ignores case. It uses fixed debug multipliers, or multipliers
  drawn from a seeded generator.
- **Hash table** (`wordgrid.hashtable`): an open-addressing map with linear
  (`LinearProber`) or double-hash (`DoubleHashProber`) probing. Removed
  entries are kept as tombstones. The table grows through a fixed list of
  prime capacities once its load factor is reached.
- **Mersenne Twister** (`wordgrid.mt19937`): a 32-bit MT19937 generator,
  `MersenneTwister`, seeded from one integer in the standard way.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

To solve a random board of size 5 with seed 42 against a word list whose
words are separated by whitespace:

```
wordgrid-boggle 5 42 words.txt
```

The board is printed first, then `Found N words:`, then the words in sorted
order separated by commas. If fewer than three arguments are given, a usage
line is printed and the command exits with status 1.

To hash a string with the fixed debug multipliers:

```
wordgrid-hash antidisestablishmentarianism
```

This prints `h(antidisestablishmentarianism)=1137429692708383810`.

To run a short demonstration of the hash table, which inserts, looks up,
updates and removes entries and prints the results:

```
wordgrid-table-demo
```

## Library use

```python
from wordgrid.boggle import gen_board, format_board, parse_dict, boggle
from wordgrid.hashing import StringHash
from wordgrid.hashtable import HashTable, DoubleHashProber

board = gen_board(4, 7)
print(format_board(board))

dictionary, prefixes = parse_dict("words.txt")
print(sorted(boggle(dictionary, prefixes, board)))

h = StringHash(True)
assert h("abc") == 9953503400
assert h("ABC") == h("abc")

table = HashTable(0.7, DoubleHashProber(StringHash(True)))
table.insert("hi1", 1)
table["hi1"] += 1
assert table.at("hi1") == 2
table.remove("hi1")
assert "hi1" not in table and table.empty()
```

Error handling:

- `parse_dict` raises `ValueError` when the dictionary file cannot be opened.
- `HashTable.at` and indexing raise `KeyError` for a missing key, while
  `find` returns `None`.
- An insertion that finds no free slot raises `ProbeExhausted`.
- Growing past the last capacity raises `RuntimeError`.

For statistics, `HashTable.total_probes()` and `clear_total_probes()` track
the number of probe attempts. `report_all(out)` writes every occupied bucket
to a stream, and that includes tombstones.

## Limits

The solver does not follow paths that turn. It reads only the three straight
directions listed above, and from each cell and direction it reports at most
one word: the longest one found.