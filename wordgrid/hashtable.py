"""Open-addressing hash table with pluggable linear or double-hash probing."""

from __future__ import annotations

import operator
import sys
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Sequence, TextIO, TypeVar

from .hashing import StringHash

K = TypeVar("K")
V = TypeVar("V")

CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437, 102877,
    205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977, 26339969, 52679969,
    105359969, 210719881, 421439783, 842879579, 1685759167,
)

DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431, 102871,
    205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963, 26339921, 52679927,
    105359939, 210719881, 421439749, 842879563, 1685759113,
)


class ProbeExhausted(RuntimeError):
    """Raised when a probe sequence finds neither the key nor a free slot."""


class Prober:
    """Base probe sequence; subclasses supply :meth:`next`."""

    def __init__(self) -> None:
        self.start = 0
        self.m = 0
        self.num_probes = 0

    def init(self, start: int, m: int, key: Any) -> None:
        """Begin a new probe sequence at ``start`` in a table of size ``m``."""
        self.start = start
        self.m = m
        self.num_probes = 0

    def next(self) -> int:
        """Return the next slot index, or raise :class:`ProbeExhausted`."""
        raise NotImplementedError("use a concrete prober")


class LinearProber(Prober):
    """Probe consecutive slots starting from the home position."""

    def next(self) -> int:
        if self.num_probes >= self.m:
            raise ProbeExhausted("linear probe sequence exhausted")
        loc = (self.start + self.num_probes) % self.m
        self.num_probes += 1
        return loc


class DoubleHashProber(Prober):
    """Probe with a step size derived from a second hash of the key."""

    def __init__(self, h2: Callable[[Any], int] | None = None) -> None:
        super().__init__()
        self.h2 = h2 if h2 is not None else StringHash()
        self.step = 0

    @staticmethod
    def _modulus_for(table_size: int) -> int:
        smaller = [mod for mod in DOUBLE_HASH_MOD_VALUES if mod < table_size]
        return smaller[-1] if smaller else DOUBLE_HASH_MOD_VALUES[0]

    def init(self, start: int, m: int, key: Any) -> None:
        super().init(start, m, key)
        modulus = self._modulus_for(m)
        self.step = modulus - self.h2(key) % modulus

    def next(self) -> int:
        if self.num_probes >= self.m:
            raise ProbeExhausted("double-hash probe sequence exhausted")
        loc = (self.start + self.num_probes * self.step) % self.m
        self.num_probes += 1
        return loc


@dataclass
class _Slot(Generic[K, V]):
    key: K
    value: V
    deleted: bool = False


class HashTable(Generic[K, V]):
    """Map stored in a prime-sized array, resized when the load factor is reached.

    Removed entries are kept as tombstones until the next resize.
    """

    def __init__(
        self,
        resize_alpha: float = 0.4,
        prober: Prober | None = None,
        hash_func: Callable[[K], int] | None = None,
        key_equal: Callable[[K, K], bool] | None = None,
    ) -> None:
        self._resize_alpha = resize_alpha
        self._prober = prober if prober is not None else LinearProber()
        self._hash = hash_func if hash_func is not None else hash
        self._equal = key_equal if key_equal is not None else operator.eq
        self._capacity_index = 0
        self._table: list[_Slot[K, V] | None] = [None] * CAPACITIES[0]
        self._num_items = 0
        self._num_active = 0
        self._total_probes = 0

    @property
    def capacity(self) -> int:
        return CAPACITIES[self._capacity_index]

    def __len__(self) -> int:
        return self._num_active

    def empty(self) -> bool:
        """Return True if no live entries remain."""
        return self._num_active == 0

    def _probe(self, key: K) -> int | None:
        """Return the slot holding ``key`` or the first free slot, else None."""
        capacity = self.capacity
        self._prober.init(self._hash(key) % capacity, capacity, key)
        while True:
            self._total_probes += 1
            try:
                loc = self._prober.next()
            except ProbeExhausted:
                return None
            slot = self._table[loc]
            if slot is None:
                return loc
            if not slot.deleted and self._equal(slot.key, key):
                return loc

    def _live_slot(self, key: K) -> _Slot[K, V] | None:
        loc = self._probe(key)
        return None if loc is None else self._table[loc]

    def insert(self, key: K, value: V) -> None:
        """Add ``key`` or update its value; raise ProbeExhausted if no slot is free."""
        if self._num_items / self.capacity >= self._resize_alpha:
            self._resize()
        loc = self._probe(key)
        if loc is None:
            raise ProbeExhausted("cannot insert: no free location")
        slot = self._table[loc]
        if slot is None:
            self._table[loc] = _Slot(key, value)
            self._num_items += 1
            self._num_active += 1
        else:
            slot.value = value

    def remove(self, key: K) -> None:
        """Mark the entry for ``key`` as deleted; do nothing if it is absent."""
        slot = self._live_slot(key)
        if slot is not None:
            slot.deleted = True
            self._num_active -= 1

    def find(self, key: K) -> tuple[K, V] | None:
        """Return the ``(key, value)`` pair for ``key``, or None."""
        slot = self._live_slot(key)
        return None if slot is None else (slot.key, slot.value)

    def at(self, key: K) -> V:
        """Return the value for ``key``; raise KeyError if it is absent."""
        slot = self._live_slot(key)
        if slot is None:
            raise KeyError(key)
        return slot.value

    def __getitem__(self, key: K) -> V:
        return self.at(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def __contains__(self, key: object) -> bool:
        return self.find(key) is not None  # type: ignore[arg-type]

    def report_all(self, out: TextIO | None = None) -> None:
        """Write every occupied bucket, tombstones included, to ``out``."""
        stream = sys.stdout if out is None else out
        for index, slot in enumerate(self._table):
            if slot is not None:
                stream.write(f"Bucket {index}: {slot.key} {slot.value}\n")

    def clear_total_probes(self) -> None:
        self._total_probes = 0

    def total_probes(self) -> int:
        """Number of probe attempts since creation or the last clear."""
        return self._total_probes

    def _resize(self) -> None:
        if self._capacity_index + 1 >= len(CAPACITIES):
            raise RuntimeError("hash table cannot grow any further")
        self._capacity_index += 1
        old = self._table
        self._table = [None] * self.capacity
        self._num_items = 0
        self._num_active = 0
        for slot in old:
            if slot is not None and not slot.deleted:
                self.insert(slot.key, slot.value)


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise a double-hashed table of string keys and report on it."""
    table: HashTable[str, int] = HashTable(0.7, DoubleHashProber(StringHash()))
    for i in range(10):
        table.insert(f"hi{i}", i)
    if table.find("hi1") is not None:
        print("Found hi1")
        table["hi1"] += 1
        print(f"Incremented hi1's value to: {table['hi1']}")
    if table.find("doesnotexist") is None:
        print("Did not find: doesnotexist")
    print(f"HT size: {len(table)}")
    table.remove("hi7")
    table.remove("hi9")
    print(f"HT size: {len(table)}")
    if table.find("hi9") is not None:
        print("Found hi9")
    else:
        print("Did not find hi9")
    table.insert("hi7", 17)
    print(f"size: {len(table)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())