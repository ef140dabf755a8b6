"""
Ordered Tree - unbalanced binary search tree over a single `<` relation.

Stores unique values in sorted order. Two values are treated as the same
element when neither compares less than the other, so element types only
need to implement `__lt__`. Every descent is a loop, which keeps degenerate
(sorted-insertion) trees within Python's recursion limit.
"""

import logging
from typing import TypeVar, Generic, List, Iterator, Optional

T = TypeVar('T')

logger = logging.getLogger(__name__)


class OrderedTree(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['OrderedTree.Node'] = None
            self.right: Optional['OrderedTree.Node'] = None

        def min(self) -> 'OrderedTree.Node':
            node = self
            while node.left is not None:
                node = node.left
            return node

        def max(self) -> 'OrderedTree.Node':
            node = self
            while node.right is not None:
                node = node.right
            return node

    class NodeView:
        """Read-only handle to a stored node, as returned by `find_node`."""

        __slots__ = ('_node',)

        def __init__(self, node: 'OrderedTree.Node') -> None:
            self._node = node

        @property
        def value(self) -> T:
            return self._node.value

        def __repr__(self) -> str:
            return f"NodeView({self._node.value!r})"

    def __init__(self) -> None:
        self._root: Optional[OrderedTree.Node] = None

    def insert(self, value: T) -> bool:
        if self._root is None:
            self._root = OrderedTree.Node(value)
            return True

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = OrderedTree.Node(value)
                    return True
                node = node.left
            elif node.value < value:
                if node.right is None:
                    node.right = OrderedTree.Node(value)
                    return True
                node = node.right
            else:
                logger.debug("insert rejected, %r already present", value)
                return False

    def remove(self, value: T) -> bool:
        """
        Remove the element comparison-equal to `value`.

        A node with at most one child is spliced out of its parent slot. A node
        with two children keeps its place and takes the value of its in-order
        successor, which is then spliced out of the right subtree.

        Returns:
            True if an element was removed, False if none matched
        """
        parent: Optional[OrderedTree.Node] = None
        node = self._root
        is_left_child = False

        while node is not None:
            if value < node.value:
                parent = node
                node = node.left
                is_left_child = True
            elif node.value < value:
                parent = node
                node = node.right
                is_left_child = False
            else:
                break

        if node is None:
            logger.debug("remove missed, %r not present", value)
            return False

        if node.left is None:
            replacement = node.right
            node.right = None
        elif node.right is None:
            replacement = node.left
            node.left = None
        else:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            # successor has no left child, so its right subtree takes its slot
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            successor.right = None
            return True

        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement
        return True

    def contain(self, value: T) -> bool:
        return self._find_node(self._root, value) is not None

    def find_node(self, value: T) -> Optional['OrderedTree.NodeView']:
        """
        Look up the node holding `value`.

        The returned view reads through to the live node and offers no way to
        change it. After the node is removed the view keeps the last value
        the node held.
        """
        node = self._find_node(self._root, value)
        if node is None:
            return None
        return OrderedTree.NodeView(node)

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._root.min().value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._root.max().value

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        height = 0
        level: List[OrderedTree.Node] = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return height

    def clear(self) -> None:
        if self._root is None:
            return
        # unlink every node so no chain of references outlives the tree
        stack: List[OrderedTree.Node] = [self._root]
        self._root = None
        while stack:
            node = stack.pop()
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
            node.left = None
            node.right = None
        logger.debug("tree cleared")

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[OrderedTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        # node, right, left reversed gives left, right, node
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def copy(self) -> 'OrderedTree[T]':
        clone: OrderedTree[T] = OrderedTree()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def _find_node(self, node: Optional[Node], value: T) -> Optional[Node]:
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return node
        return None

    def __contains__(self, value: T) -> bool:
        return self.contain(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"OrderedTree({self.in_order()})"
