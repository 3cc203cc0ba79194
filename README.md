# bestiary

Data structures for a catalogue of mythical creatures. Creature records are
kept in a separately chained hash table keyed by creature ID. A binary search
tree of IDs sits alongside it. Each ID in the tree points to the bucket that
holds the record, so the IDs can be listed in sorted order.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library.

## Modules

### `bestiary.creature`

`Creature` is a dataclass with these fields:

- `creature_id`
- `name`
- `category`
- `history`
- `habitat`
- `description`
- `relevant_year`

Every text field defaults to `"dummy"` and the year defaults to `0`.
`Creature.vertical()` returns the record as labelled lines:

```
Creature ID: ...
Name: ...
Category: ...
History: ...
Habitat: ...
Description: ...
Year: ...
```

### `bestiary.bst`

`BinarySearchTree` is an unbalanced tree that maps unique keys to integer
indexes.

Storing and looking up keys:

- `insert(index, key)` returns `False` if the key is already present.
- `search(key)` returns the stored index.
- `set_index(key, index)` replaces the stored index.
- `remove(key)` removes the key. A node with two children is replaced by its
  in-order successor.
- `search`, `set_index` and `remove` raise `KeyError` for a missing key.
- `find_smallest()` and `find_largest()` return the index stored with the
  smallest or largest key. They raise `ValueError` on an empty tree.
- `len(tree)`, `key in tree`, `is_empty()` and `clear()` work as usual.

Traversals are generators:

- `preorder()`, `inorder()` and `postorder()` yield keys in that order.
- `indented()` yields `(key, level)` pairs in pre-order, with the root at
  level 1.
- `leaves()` yields the keys of leaf nodes from left to right.

### `bestiary.hashtable`

`HashTable(initial_capacity=101)` rounds the capacity up to the next prime.
Keys are hashed with djb2 over the UTF-8 bytes of the creature ID.

Storing and looking up creatures:

- `insert(creature)` stores the creature and returns its bucket index. A
  creature with the same ID is replaced.
- `search(creature_id)` returns the creature.
- `remove(creature_id)` removes it.
- `search` and `remove` raise `KeyError` for a missing ID.
- `get_creature(creature_id, index)` looks only in the given bucket. It
  returns a default `Creature()` if the creature is not there.
- `creatures()` yields every creature in table order.
- `rehash()` grows the table to the next prime at least twice the current
  capacity and redistributes the entries.

Statistics:

- `len(table)` is the number of creatures and `capacity` is the number of
  buckets.
- `load_factor()` is the number of creatures divided by the number of
  buckets.
- `longest_chain()` is the length of the fullest bucket.
- `empty_buckets()` is the number of buckets that hold nothing.
- `format_table()` returns one `Bucket i: [key] -> ... NULL` line per bucket.

The module also provides the helpers `is_prime(n)`, `next_prime(n)` and
`hash_key(key, capacity)`.

## Example

```python
from bestiary.bst import BinarySearchTree
from bestiary.creature import Creature
from bestiary.hashtable import HashTable

table = HashTable(11)
ids = BinarySearchTree()

phoenix = Creature("FNKS-BD", "Phoenix", "Bird", "Reborn from its ashes",
                   "Deserts and mountains", "Fiery bird", 500)
index = table.insert(phoenix)
ids.insert(index, phoenix.creature_id)

bucket = ids.search("FNKS-BD")
print(table.get_creature("FNKS-BD", bucket).vertical())
print(list(ids.inorder()))
print(table.load_factor(), table.longest_chain(), table.empty_buckets())
```

After `table.rehash()` the bucket indexes change. Update the tree with
`ids.set_index(creature_id, new_index)` for each creature, using the index
that `hash_key(creature_id, table.capacity)` gives.

## What it does not do

The package is a library only. It installs no command and has no interactive
menu. It does not read or write data files.

The hash table and the search tree are separate objects. Keeping them in step
is up to the caller: insert into both, remove from both, and refresh indexes
after a rehash. The table never rehashes by itself.

## Tests

```
pip install .[test]
pytest
```