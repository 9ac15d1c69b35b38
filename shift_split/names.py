"""
Name pool and assignment: shuffle present names, optionally pair them, and derive the
shift count from who is present. Purely decorative; the partition never sees the pool.
"""
import math
import random
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

PAIR_SEPARATOR = " + "


@dataclass
class NameEntry:
    name: str
    present: bool = True


class NamePool:
    """Ordered names, unique by name, each flagged present or absent."""

    def __init__(self, entries: Optional[Iterable[NameEntry]] = None):
        self._entries: Dict[str, NameEntry] = {}
        for e in entries or ():
            self.add(e.name, e.present)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[NameEntry]:
        return iter(self._entries.values())

    def __contains__(self, name: str) -> bool:
        return name.strip() in self._entries

    def add(self, name: str, present: bool = True) -> bool:
        """Add a name. Returns False if it was already there (pool unchanged)."""
        key = (name or "").strip()
        if not key:
            raise ValueError("Name must not be blank")
        if key in self._entries:
            return False
        self._entries[key] = NameEntry(key, present)
        return True

    def remove(self, name: str) -> None:
        key = name.strip()
        if key not in self._entries:
            raise KeyError(name)
        del self._entries[key]

    def set_present(self, name: str, present: bool) -> None:
        key = name.strip()
        if key not in self._entries:
            raise KeyError(name)
        self._entries[key].present = present

    def toggle(self, name: str) -> bool:
        """Flip presence; returns the new value."""
        key = name.strip()
        if key not in self._entries:
            raise KeyError(name)
        entry = self._entries[key]
        entry.present = not entry.present
        return entry.present

    def present_names(self) -> List[str]:
        return [e.name for e in self._entries.values() if e.present]

    def to_records(self) -> List[dict]:
        return [{"name": e.name, "present": e.present} for e in self._entries.values()]

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "NamePool":
        pool = cls()
        for r in records:
            name = str(r.get("name", "")).strip()
            if name:
                pool.add(name, bool(r.get("present", True)))
        return pool

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "NamePool":
        pool = cls()
        for n in names:
            if n and n.strip():
                pool.add(n)
        return pool


def shuffle_names(names: Sequence[str], rng: random.Random) -> List[str]:
    """Uniform permutation of a copy of names (Fisher-Yates via rng.shuffle)."""
    shuffled = list(names)
    rng.shuffle(shuffled)
    return shuffled


def pair_names(names: Sequence[str], separator: str = PAIR_SEPARATOR) -> List[str]:
    """["A", "B", "C"] -> ["A + B", "C"]."""
    return [separator.join(names[i:i + 2]) for i in range(0, len(names), 2)]


def assign_names(
    pool: NamePool,
    pairing: bool = False,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Shuffled labels for segments, matched by position. Pass a seeded rng for repeatable output."""
    rng = rng if rng is not None else random.Random()
    shuffled = shuffle_names(pool.present_names(), rng)
    return pair_names(shuffled) if pairing else shuffled


def resolve_shift_count(present_count: int, pairing: bool = False) -> int:
    """Auto shift count: one per present name (or per pair). Never below 1."""
    count = math.ceil(present_count / 2) if pairing else present_count
    return max(1, count)
