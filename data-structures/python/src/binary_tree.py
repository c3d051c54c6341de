import logging
from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

T = TypeVar('T')

logger = logging.getLogger(__name__)


class TraversalOrder(Enum):
    PRE_ORDER = "pre_order"
    POST_ORDER = "post_order"
    IN_ORDER = "in_order"


class BinaryTree(Generic[T]):
    """Unbalanced binary search tree that keeps duplicates.

    Smaller values go left, equal or greater values go right. Nothing is
    rebalanced, so sorted input degrades the tree to a linked list; every
    walk is iterative to keep that case clear of the recursion limit.

    The tree must not be mutated while a traversal or an iterator over it is
    in progress. Doing so raises RuntimeError on the next step of the walk.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinaryTree.Node'] = None
            self.right: Optional['BinaryTree.Node'] = None

        def compare_to(self, other: T) -> int:
            """Positive if this node's value is greater than other, negative if less, 0 if equal."""
            return (self.value > other) - (self.value < other)

        def __repr__(self) -> str:
            return f"Node({self.value!r})"

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[BinaryTree.Node] = None
        self._count: int = 0
        self._version: int = 0
        if values is not None:
            self.extend(values)

    @property
    def count(self) -> int:
        return self._count

    def add(self, value: T) -> None:
        if value is None:
            raise TypeError("BinaryTree does not accept None")

        if self._root is None:
            self._root = BinaryTree.Node(value)
        else:
            node = self._root
            while True:
                if node.compare_to(value) > 0:
                    if node.left is None:
                        node.left = BinaryTree.Node(value)
                        break
                    node = node.left
                else:
                    # equal values route right
                    if node.right is None:
                        node.right = BinaryTree.Node(value)
                        break
                    node = node.right

        self._count += 1
        self._version += 1

    def extend(self, values: Iterable[T]) -> None:
        for value in values:
            self.add(value)

    def contains(self, value: T) -> bool:
        if value is None:
            return False
        node, _, _ = self._find_with_parent(value)
        return node is not None

    def remove(self, value: T) -> bool:
        if value is None:
            return False

        node, parent, is_left_child = self._find_with_parent(value)
        if node is None:
            return False

        if node.right is None:
            logger.debug("remove %r: no right child, promoting left subtree", value)
            replacement = node.left
        elif node.right.left is None:
            logger.debug("remove %r: right child has no left child, promoting right child", value)
            replacement = node.right
            replacement.left = node.left
        else:
            successor_parent = node.right
            successor = successor_parent.left
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            logger.debug("remove %r: replacing with in-order successor %r", value, successor.value)
            successor_parent.left = successor.right
            successor.left = node.left
            successor.right = node.right
            replacement = successor

        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement

        node.left = None
        node.right = None
        self._count -= 1
        self._version += 1
        return True

    def clear(self) -> None:
        if self._root is not None:
            logger.debug("clearing tree of %d values", self._count)
            self._version += 1
        self._root = None
        self._count = 0

    def is_empty(self) -> bool:
        return self._count == 0

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def height(self) -> int:
        if self._root is None:
            return 0
        best = 0
        stack: List[Tuple[BinaryTree.Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            if depth > best:
                best = depth
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def traverse(self, visit: Callable[[T], Any],
                 order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> None:
        order = TraversalOrder(order)
        if order is TraversalOrder.PRE_ORDER:
            walk = self._walk_pre_order()
        elif order is TraversalOrder.POST_ORDER:
            walk = self._walk_post_order()
        else:
            walk = self.in_order_traversal()
        for value in walk:
            visit(value)

    def in_order(self) -> List[T]:
        result: List[T] = []
        self.traverse(result.append, TraversalOrder.IN_ORDER)
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        self.traverse(result.append, TraversalOrder.PRE_ORDER)
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        self.traverse(result.append, TraversalOrder.POST_ORDER)
        return result

    def in_order_traversal(self) -> Iterator[T]:
        """Lazily yield values in ascending order.

        Each call starts an independent walk from the root.
        """
        version = self._version
        stack: List[BinaryTree.Node] = []
        node = self._root
        go_left_next = True
        while node is not None:
            if go_left_next:
                while node.left is not None:
                    stack.append(node)
                    node = node.left

            yield node.value
            self._check_version(version)

            if node.right is not None:
                node = node.right
                go_left_next = True
            elif stack:
                node = stack.pop()
                go_left_next = False
            else:
                node = None

    def copy(self) -> 'BinaryTree[T]':
        # re-adding in pre-order rebuilds the same shape
        return BinaryTree(self.pre_order())

    def _walk_pre_order(self) -> Iterator[T]:
        if self._root is None:
            return
        version = self._version
        stack: List[BinaryTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            yield node.value
            self._check_version(version)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _walk_post_order(self) -> Iterator[T]:
        version = self._version
        stack: List[BinaryTree.Node] = []
        last_visited: Optional[BinaryTree.Node] = None
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
                continue
            top = stack[-1]
            if top.right is not None and top.right is not last_visited:
                node = top.right
            else:
                yield top.value
                self._check_version(version)
                last_visited = stack.pop()

    def _find_with_parent(self, value: T) -> Tuple[Optional[Node], Optional[Node], bool]:
        """Return the first node equal to value, its parent, and whether it is the parent's left child."""
        parent: Optional[BinaryTree.Node] = None
        node = self._root
        is_left_child = False
        while node is not None:
            result = node.compare_to(value)
            if result > 0:
                parent, node, is_left_child = node, node.left, True
            elif result < 0:
                parent, node, is_left_child = node, node.right, False
            else:
                break
        return node, parent, is_left_child

    def _check_version(self, version: int) -> None:
        if self._version != version:
            raise RuntimeError("BinaryTree changed during iteration")

    def __len__(self) -> int:
        return self._count

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return self.in_order_traversal()

    def __repr__(self) -> str:
        return f"BinaryTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinaryTree(size={self._count})"
