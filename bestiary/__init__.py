"""Creature records in a chained hash table, with a binary search tree of IDs."""

__version__ = "0.1.0"
__all__ = ["bst", "creature", "hashtable"]