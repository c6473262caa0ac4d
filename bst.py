# Binary search tree of integer keys with lazy level-order and in-order walks.

import logging
from collections import deque
from typing import Optional


logger = logging.getLogger(__name__)


class Node:

    def __init__(self, value, left=None, right=None):
        self.value = value
        self.left = left
        self.right = right

    def __str__(self):
        def _value(node):
            return node.value if node else None
        return f'({self.value}) -> ({_value(self.left)}, {_value(self.right)})'

    def __repr__(self):
        return f'Node({self.value!r})'


def _as_key(value):
    if not isinstance(value, int):
        raise TypeError(f'keys must be integers, got {type(value).__name__}')
    # True/False are stored as 1/0
    return int(value)


class LevelOrderTraversal:
    # tree must not be mutated while a traversal is alive

    def __init__(self, node: Optional[Node] = None):
        self._node = node
        self._pending = deque()

    def __iter__(self):
        return self

    def __next__(self):
        if self._node is None:
            if not self._pending:
                raise StopIteration
            self._node = self._pending.popleft()

        node = self._node
        if node.left:
            self._pending.append(node.left)
        if node.right:
            self._pending.append(node.right)
        self._node = None
        return node.value


class InOrderTraversal:

    def __init__(self, node: Optional[Node] = None):
        self._node = node
        self._stack = []

    def __iter__(self):
        return self

    def __next__(self):
        while self._node is not None:
            self._stack.append(self._node)
            self._node = self._node.left

        if not self._stack:
            raise StopIteration

        node = self._stack.pop()
        self._node = node.right
        return node.value


class Tree:

    def __init__(self):
        self.root = None

    def insert(self, value: int):
        value = _as_key(value)

        if self.root is None:
            logger.debug('creating root %d', value)
            self.root = Node(value)
            return

        node = self.root
        while True:
            if value == node.value:
                logger.debug('ignoring duplicate %d', value)
                return
            if value > node.value:
                if node.right is None:
                    logger.debug('attaching %d right of %d', value, node.value)
                    node.right = Node(value)
                    return
                node = node.right
            else:
                if node.left is None:
                    logger.debug('attaching %d left of %d', value, node.value)
                    node.left = Node(value)
                    return
                node = node.left

    def level_iter(self):
        return LevelOrderTraversal(self.root)

    def in_ord_iter(self):
        return InOrderTraversal(self.root)

    def values(self):
        if self.root is None:
            return []

        results = [self.root.value]
        generation = deque([self.root])
        while generation:
            # drain only the nodes queued so far so levels never interleave
            for _ in range(len(generation)):
                node = generation.popleft()
                for child in (node.left, node.right):
                    if child:
                        results.append(child.value)
                        generation.append(child)
        return results

    def __iter__(self):
        return self.in_ord_iter()

    def __len__(self):
        return sum(1 for _ in self.level_iter())

    def __bool__(self):
        return self.root is not None

    def __contains__(self, value):
        value = _as_key(value)
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.right if value > node.value else node.left
        return False


def verify_is_bst(root: Optional[Node]):
    last_value = None
    for value in InOrderTraversal(root):
        if last_value is not None and last_value >= value:
            return False
        last_value = value

    return True


def traverse_in_order(root: Optional[Node]):
    yield from InOrderTraversal(root)
