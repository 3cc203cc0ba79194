"""A separately chained hash table of creatures keyed by creature ID."""

from __future__ import annotations

from typing import Iterator

from bestiary.creature import Creature

DEFAULT_CAPACITY = 101
_HASH_SEED = 5381
_MASK = (1 << 64) - 1


def is_prime(n: int) -> bool:
    """Return True if n is a prime number."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def next_prime(n: int) -> int:
    """Return the smallest prime that is not less than n."""
    while not is_prime(n):
        n += 1
    return n


def hash_key(key: str, capacity: int) -> int:
    """Return the bucket index of key using the djb2 string hash."""
    value = _HASH_SEED
    for byte in key.encode("utf-8"):
        char = byte - 256 if byte > 127 else byte
        value = (value * 33 + char) & _MASK
    return value % capacity


class HashTable:
    """Creatures in a prime number of buckets, chained by insertion order."""

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = next_prime(initial_capacity)
        self._buckets: list[dict[str, Creature]] = [{} for _ in range(self._capacity)]
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return self._capacity

    def insert(self, creature: Creature) -> int:
        """Store creature, replacing any with the same ID; return its bucket index."""
        key = creature.creature_id
        index = hash_key(key, self._capacity)
        bucket = self._buckets[index]
        if key not in bucket:
            self._size += 1
        bucket[key] = creature
        return index

    def search(self, creature_id: str) -> Creature:
        """Return the creature with this ID; raise KeyError if absent."""
        bucket = self._buckets[hash_key(creature_id, self._capacity)]
        try:
            return bucket[creature_id]
        except KeyError:
            raise KeyError(creature_id) from None

    def get_creature(self, creature_id: str, index: int) -> Creature:
        """Look for the creature in the given bucket; a placeholder if it is not there."""
        return self._buckets[index].get(creature_id, Creature())

    def remove(self, creature_id: str) -> None:
        """Remove the creature with this ID; raise KeyError if absent."""
        bucket = self._buckets[hash_key(creature_id, self._capacity)]
        try:
            del bucket[creature_id]
        except KeyError:
            raise KeyError(creature_id) from None
        self._size -= 1

    def creatures(self) -> Iterator[Creature]:
        """Yield every creature in table order."""
        for bucket in self._buckets:
            yield from bucket.values()

    def rehash(self) -> None:
        """Grow to the next prime at least twice the capacity and redistribute."""
        new_capacity = next_prime(self._capacity * 2)
        new_buckets: list[dict[str, Creature]] = [{} for _ in range(new_capacity)]
        for bucket in self._buckets:
            for key, creature in bucket.items():
                new_buckets[hash_key(key, new_capacity)][key] = creature
        self._buckets = new_buckets
        self._capacity = new_capacity

    def load_factor(self) -> float:
        """Return the number of creatures divided by the number of buckets."""
        return self._size / self._capacity

    def longest_chain(self) -> int:
        """Return the length of the fullest bucket."""
        return max((len(bucket) for bucket in self._buckets), default=0)

    def empty_buckets(self) -> int:
        """Return how many buckets hold nothing."""
        return sum(1 for bucket in self._buckets if not bucket)

    def format_table(self) -> str:
        """Return one line per bucket listing its keys."""
        lines = (
            f"Bucket {i}: " + "".join(f"[{key}] -> " for key in bucket) + "NULL\n"
            for i, bucket in enumerate(self._buckets)
        )
        return "".join(lines)