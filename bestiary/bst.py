"""A binary search tree mapping unique keys to hash-table indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class _Node:
    index: int
    key: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class BinarySearchTree:
    """Unbalanced binary search tree; duplicate keys are rejected."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key) -> bool:
        return self._find(key) is not None

    def is_empty(self) -> bool:
        """Return True if the tree holds no keys."""
        return self._count == 0

    def clear(self) -> None:
        """Remove every key."""
        self._root = None
        self._count = 0

    def _find(self, key) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if node.key == key:
                return node
            node = node.left if node.key > key else node.right
        return None

    def insert(self, index: int, key) -> bool:
        """Insert key with its index; return False if the key is already present."""
        if key in self:
            return False
        new = _Node(index, key)
        if self._root is None:
            self._root = new
        else:
            node = self._root
            while True:
                if key < node.key:
                    if node.left is None:
                        node.left = new
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = new
                        break
                    node = node.right
        self._count += 1
        return True

    def search(self, key) -> int:
        """Return the index stored with key; raise KeyError if absent."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.index

    def set_index(self, key, index: int) -> None:
        """Replace the index stored with key; raise KeyError if absent."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        node.index = index

    def find_smallest(self) -> int:
        """Return the index stored with the smallest key."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.index

    def find_largest(self) -> int:
        """Return the index stored with the largest key."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.index

    def remove(self, key) -> None:
        """Remove key; raise KeyError if absent."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            raise KeyError(key)

        if node.left is not None and node.right is not None:
            # Replace with the in-order successor from the right subtree.
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.key, node.index = succ.key, succ.index
            if succ_parent is node:
                node.right = succ.right
            else:
                succ_parent.left = succ.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._count -= 1

    def preorder(self) -> Iterator:
        """Yield keys in pre-order."""
        for node, _ in self._walk_preorder():
            yield node.key

    def inorder(self) -> Iterator:
        """Yield keys in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def postorder(self) -> Iterator:
        """Yield keys in post-order."""
        if self._root is None:
            return
        stack: list[tuple[_Node, bool]] = [(self._root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.key
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def indented(self) -> Iterator[tuple]:
        """Yield (key, level) pairs in pre-order, the root at level 1."""
        for node, level in self._walk_preorder():
            yield node.key, level

    def leaves(self) -> Iterator:
        """Yield the keys of leaf nodes from left to right."""
        for node, _ in self._walk_preorder():
            if node.is_leaf:
                yield node.key

    def _walk_preorder(self) -> Iterator[tuple[_Node, int]]:
        if self._root is None:
            return
        stack: list[tuple[_Node, int]] = [(self._root, 1)]
        while stack:
            node, level = stack.pop()
            yield node, level
            if node.right is not None:
                stack.append((node.right, level + 1))
            if node.left is not None:
                stack.append((node.left, level + 1))