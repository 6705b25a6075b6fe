"""AVL tree: a binary search tree kept height-balanced by rotations.

Heights are measured in edges. A leaf has height 0 and an absent child has
height -1, so every node satisfies ``|height(left) - height(right)| <= 1``
once a mutation returns.
"""
import logging
from typing import Any, TypeVar, Generic, List, Iterator, NamedTuple, Optional, Tuple

from .circular_queue import Queue

logger = logging.getLogger(__name__)

T = TypeVar('T')


class NodeEntry(NamedTuple):
    """One node as seen by breadth-first traversal.

    ``index`` uses binary-heap addressing: the root is 1, a left child is
    ``2 * parent`` and a right child is ``2 * parent + 1``. ``element`` is the
    stored value, of the tree's element type ``T``.
    """
    index: int
    element: Any
    height: int


class AVLTree(Generic[T]):
    class Node:
        __slots__ = ('value', 'left', 'right', 'height')

        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['AVLTree.Node'] = None
            self.right: Optional['AVLTree.Node'] = None
            self.height: int = 0

    def __init__(self) -> None:
        self._root: Optional[AVLTree.Node] = None
        self._size: int = 0

    @staticmethod
    def _height(node: Optional[Node]) -> int:
        if node is None:
            return -1
        return node.height

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._height(node.left), self._height(node.right))

    # Rotations. Each returns the new root of the rotated subtree.

    def _rotate_with_left_child(self, k2: Node) -> Node:
        k1 = k2.left
        assert k1 is not None
        k2.left = k1.right
        k1.right = k2
        self._update_height(k2)
        k1.height = 1 + max(self._height(k1.left), k2.height)
        logger.debug("rotated %r up over %r", k1.value, k2.value)
        return k1

    def _rotate_with_right_child(self, k1: Node) -> Node:
        k2 = k1.right
        assert k2 is not None
        k1.right = k2.left
        k2.left = k1
        self._update_height(k1)
        k2.height = 1 + max(self._height(k2.right), k1.height)
        logger.debug("rotated %r up over %r", k2.value, k1.value)
        return k2

    def _double_with_left_child(self, k3: Node) -> Node:
        assert k3.left is not None
        k3.left = self._rotate_with_right_child(k3.left)
        return self._rotate_with_left_child(k3)

    def _double_with_right_child(self, k1: Node) -> Node:
        assert k1.right is not None
        k1.right = self._rotate_with_left_child(k1.right)
        return self._rotate_with_right_child(k1)

    def _balance(self, node: Optional[Node]) -> Optional[Node]:
        if node is None:
            return None

        if self._height(node.left) - self._height(node.right) > 1:
            assert node.left is not None
            if self._height(node.left.left) >= self._height(node.left.right):
                node = self._rotate_with_left_child(node)
            else:
                node = self._double_with_left_child(node)
        elif self._height(node.right) - self._height(node.left) > 1:
            assert node.right is not None
            if self._height(node.right.right) >= self._height(node.right.left):
                node = self._rotate_with_right_child(node)
            else:
                node = self._double_with_right_child(node)

        self._update_height(node)
        return node

    def _insert(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            self._size += 1
            return AVLTree.Node(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
            if self._height(node.left) - self._height(node.right) == 2:
                if value < node.left.value:
                    node = self._rotate_with_left_child(node)
                else:
                    node = self._double_with_left_child(node)
        elif value > node.value:
            node.right = self._insert(node.right, value)
            if self._height(node.right) - self._height(node.left) == 2:
                if value > node.right.value:
                    node = self._rotate_with_right_child(node)
                else:
                    node = self._double_with_right_child(node)
        else:
            return node

        self._update_height(node)
        return node

    def insert(self, value: T) -> None:
        """Insert ``value``; inserting an element already present does nothing."""
        self._root = self._insert(self._root, value)

    def _remove(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        elif node.left is not None and node.right is not None:
            # take over the in-order successor's element, then delete it below
            node.value = self._find_min_node(node.right).value
            node.right = self._remove(node.right, node.value)
        else:
            self._size -= 1
            node = node.left if node.left is not None else node.right

        return self._balance(node)

    def remove(self, value: T) -> None:
        """Remove ``value``. Nothing is done if it is not in the tree."""
        self._root = self._remove(self._root, value)

    def contains(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    @staticmethod
    def _find_min_node(node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _find_max_node(node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def find_min(self) -> Optional[T]:
        """Smallest element, or None for an empty tree."""
        if self._root is None:
            return None
        return self._find_min_node(self._root).value

    def find_max(self) -> Optional[T]:
        """Largest element, or None for an empty tree."""
        if self._root is None:
            return None
        return self._find_max_node(self._root).value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def make_empty(self) -> None:
        logger.debug("discarding %d elements", self._size)
        self._root = None
        self._size = 0

    def height(self) -> int:
        return self._height(self._root)

    def traverse_breadth_first(self) -> Iterator[NodeEntry]:
        """Yield a NodeEntry per node, level by level, left to right.

        The generator reads the tree lazily; call again to start over.
        Mutating the tree while a traversal is in progress is not supported.
        """
        if self._root is None:
            return
        pending: Queue[Tuple[int, AVLTree.Node]] = Queue()
        pending.enqueue((1, self._root))
        while pending:
            index, node = pending.dequeue()
            yield NodeEntry(index, node.value, node.height)
            if node.left is not None:
                pending.enqueue((2 * index, node.left))
            if node.right is not None:
                pending.enqueue((2 * index + 1, node.right))

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[AVLTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def _is_balanced(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        left, right = self._height(node.left), self._height(node.right)
        if abs(left - right) > 1 or node.height != 1 + max(left, right):
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        """Check the balance condition and the cached height of every node."""
        return self._is_balanced(self._root)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
