"""
advising/hash_table.py

Fixed-size hash table of courses using separate chaining.
"""

from enum import Enum
from typing import Iterable, List, Tuple
from .models import Course
from .errors import StateError, NotFoundError
from . import utils


class TableState(Enum):
    UNLOADED = "unloaded"
    LOADED = "loaded"


class CourseHashTable:
    """
    Stores courses in a fixed number of buckets. Each bucket is a chain of
    (canonical key, Course) entries kept in insertion order.

    Duplicate codes are not merged: every insert adds a chain entry and a
    key_order entry, and lookup returns the first one inserted.
    """

    def __init__(self, bucket_count: int = utils.HASH_TABLE_SIZE):
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be at least 1, got {bucket_count}")
        self.bucket_count = bucket_count
        self.buckets: List[List[Tuple[str, Course]]] = [[] for _ in range(bucket_count)]
        self.key_order: List[str] = []
        self.state = TableState.UNLOADED

    def __len__(self) -> int:
        return sum(len(chain) for chain in self.buckets)

    @property
    def is_loaded(self) -> bool:
        return self.state is TableState.LOADED

    def hash(self, key: str) -> int:
        """
        Polynomial rolling hash (x31) over the upper-cased key with unsigned
        32-bit wraparound, reduced to a bucket index.
        """
        hash_val = 0
        for ch in utils.normalize_code(key):
            hash_val = (hash_val * utils.HASH_MULTIPLIER + ord(ch)) & utils.HASH_MASK
        return hash_val % self.bucket_count

    def insert(self, course: Course) -> None:
        """Appends the course to the tail of its bucket chain."""
        key = utils.normalize_code(course.code)
        index = self.hash(key)
        self.buckets[index].append((key, course))
        self.key_order.append(key)

    def _require_loaded(self) -> None:
        if self.state is not TableState.LOADED:
            raise StateError("No data loaded.")

    def lookup(self, code: str) -> Course:
        """Returns the first course in the chain whose code matches."""
        self._require_loaded()
        key = utils.normalize_code(code)
        for stored_key, course in self.buckets[self.hash(key)]:
            if stored_key == key:
                return course
        raise NotFoundError(code)

    def list_keys_sorted(self) -> List[str]:
        """Returns every inserted key in ascending order, duplicates included."""
        self._require_loaded()
        return sorted(self.key_order)

    def clear(self) -> None:
        for chain in self.buckets:
            chain.clear()
        self.key_order.clear()
        self.state = TableState.UNLOADED

    def load(self, records: Iterable[Course]) -> None:
        """
        Clears the table, then inserts every record in order.
        The table is only marked loaded once the whole sequence has been
        consumed; if iterating `records` raises, the exception propagates
        and entries inserted so far are left in place.
        """
        self.clear()
        for course in records:
            self.insert(course)
        self.state = TableState.LOADED

    def bucket_sizes(self) -> List[int]:
        """Number of chain entries per bucket."""
        return [len(chain) for chain in self.buckets]
