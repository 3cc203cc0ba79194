import pytest

from bestiary.creature import Creature
from bestiary.hashtable import HashTable, hash_key, is_prime, next_prime


def make(creature_id, name="Name", year=1):
    return Creature(creature_id, name, "Cat", "Hist", "Hab", "Desc", year)


def test_is_prime_small_values():
    assert is_prime(2)
    assert is_prime(3)
    assert not is_prime(1)
    assert not is_prime(0)


@pytest.mark.parametrize("a", [2, 3, 5, 7, 11])
@pytest.mark.parametrize("b", [2, 3, 13, 25])
def test_products_are_not_prime(a, b):
    assert not is_prime(a * b)


@pytest.mark.parametrize("n", [-5, 0, 1, 4, 20, 100, 101, 1000])
def test_next_prime_is_smallest_prime_at_least_n(n):
    p = next_prime(n)
    assert p >= n
    assert is_prime(p)
    assert not any(is_prime(k) for k in range(n, p))


def test_next_prime_keeps_prime():
    assert next_prime(101) == 101


def test_hash_of_empty_key_is_seed():
    assert hash_key("", 101) == 5381 % 101


@pytest.mark.parametrize("key", ["DRGN-RD", "UNCRN-W", "FNKS-BD", "é"])
def test_hash_in_range_and_stable(key):
    h = hash_key(key, 101)
    assert 0 <= h < 101
    assert hash_key(key, 101) == h


def test_default_capacity():
    assert HashTable().capacity == 101


def test_capacity_rounded_to_prime():
    table = HashTable(20)
    assert is_prime(table.capacity)
    assert table.capacity == next_prime(20)


def test_insert_returns_bucket_and_search_finds():
    table = HashTable(11)
    dragon = make("DRGN-RD", "Dragon")
    index = table.insert(dragon)
    assert index == hash_key("DRGN-RD", table.capacity)
    assert table.search("DRGN-RD") == dragon
    assert table.get_creature("DRGN-RD", index) == dragon
    assert len(table) == 1


def test_insert_duplicate_updates():
    table = HashTable(11)
    table.insert(make("X", "Old"))
    table.insert(make("X", "New"))
    assert len(table) == 1
    assert table.search("X").name == "New"


def test_search_missing_raises():
    with pytest.raises(KeyError):
        HashTable().search("nothing")


def test_get_creature_wrong_bucket_gives_placeholder():
    table = HashTable(11)
    index = table.insert(make("A"))
    other = (index + 1) % table.capacity
    assert table.get_creature("A", other) == Creature()


def test_remove():
    table = HashTable(11)
    table.insert(make("A"))
    table.insert(make("B"))
    table.remove("A")
    assert len(table) == 1
    with pytest.raises(KeyError):
        table.search("A")
    with pytest.raises(KeyError):
        table.remove("A")


def test_creatures_and_statistics():
    table = HashTable(7)
    ids = [f"ID-{i}" for i in range(5)]
    for creature_id in ids:
        table.insert(make(creature_id))
    assert sorted(c.creature_id for c in table.creatures()) == ids
    assert table.load_factor() == len(table) / table.capacity
    used = {hash_key(i, table.capacity) for i in ids}
    assert table.empty_buckets() == table.capacity - len(used)
    assert 1 <= table.longest_chain() <= len(ids)


def test_empty_table_statistics():
    table = HashTable(5)
    assert table.longest_chain() == 0
    assert table.empty_buckets() == table.capacity
    assert table.load_factor() == 0


def test_rehash_keeps_creatures():
    table = HashTable(5)
    creatures = [make(f"K{i}") for i in range(4)]
    for c in creatures:
        table.insert(c)
    old = table.capacity
    table.rehash()
    assert table.capacity == next_prime(old * 2)
    assert len(table) == 4
    for c in creatures:
        assert table.search(c.creature_id) == c
        assert table.get_creature(c.creature_id, hash_key(c.creature_id, table.capacity)) == c


def test_format_table():
    table = HashTable(5)
    table.insert(make("A"))
    text = table.format_table()
    lines = text.splitlines()
    assert len(lines) == table.capacity
    assert all(line.endswith("NULL") for line in lines)
    assert f"Bucket {hash_key('A', 5)}: [A] -> NULL" in lines