from typing import TypeVar, Generic, Iterable, Iterator, List, Optional, Tuple

from avltree.circular_queue import CircularQueue

T = TypeVar('T')


class Node(Generic[T]):
    """One stored value plus the cached height of the subtree it roots."""

    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: Optional['Node[T]'] = None
        self.right: Optional['Node[T]'] = None
        self.height: int = 1

    def __repr__(self) -> str:
        return f"Node({self.value!r}, height={self.height})"


def node_height(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return node.height


def balance_factor(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return node_height(node.left) - node_height(node.right)


def update_height(node: Node) -> None:
    node.height = 1 + max(node_height(node.left), node_height(node.right))


def rotate_right(y: Node) -> Node:
    """Promote ``y.left`` to subtree root. Returns the new root."""
    x = y.left
    assert x is not None
    y.left = x.right
    update_height(y)
    x.right = y
    update_height(x)
    return x


def rotate_left(x: Node) -> Node:
    """Promote ``x.right`` to subtree root. Returns the new root."""
    y = x.right
    assert y is not None
    x.right = y.left
    update_height(x)
    y.left = x
    update_height(y)
    return y


def rebalance(node: Node) -> Node:
    """Refresh ``node.height`` and apply at most one single or double rotation.

    The caller must store the returned node in the slot ``node`` came from,
    since a rotation hands the subtree a new root.
    """
    update_height(node)
    balance = balance_factor(node)

    if balance > 1:
        if balance_factor(node.left) < 0:
            assert node.left is not None
            node.left = rotate_left(node.left)
        return rotate_right(node)

    if balance < -1:
        if balance_factor(node.right) > 0:
            assert node.right is not None
            node.right = rotate_right(node.right)
        return rotate_left(node)

    return node


def _is_orderable(value: object) -> bool:
    # unordered types answer NotImplemented even against themselves
    cls = type(value)
    return (cls.__lt__(value, value) is not NotImplemented
            or cls.__gt__(value, value) is not NotImplemented)


class AVLTree(Generic[T]):
    def __init__(self) -> None:
        self._root: Optional[Node[T]] = None
        self._size: int = 0

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> 'AVLTree[T]':
        tree: AVLTree[T] = cls()
        for value in values:
            tree.insert(value)
        return tree

    @property
    def root(self) -> Optional[Node[T]]:
        return self._root

    def _insert(self, node: Optional[Node[T]], value: T) -> Node[T]:
        if node is None:
            self._size += 1
            return Node(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        elif value != node.value:
            # incomparable under a partial order (sets, NaN)
            raise TypeError("value must be orderable")
        else:
            return node

        return rebalance(node)

    def insert(self, value: T) -> None:
        """Insert ``value`` and rebalance. Inserting a stored value is a no-op.

        Raises TypeError if ``value`` has no ordering; the tree is left
        untouched when a comparison fails part way down.
        """
        if not _is_orderable(value):
            raise TypeError("value must be orderable")
        self._root = self._insert(self._root, value)

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

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        return node_height(self._root)

    def inorder(self) -> Iterator[T]:
        stack: List[Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def pre_order(self) -> Iterator[T]:
        if self._root is None:
            return
        stack: List[Node[T]] = [self._root]
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def level_order(self) -> Iterator[Tuple[T, int]]:
        """Yield ``(value, height)`` pairs breadth-first, root first."""
        if self._root is None:
            return
        queue: CircularQueue[Node[T]] = CircularQueue()
        queue.enqueue(self._root)
        while queue:
            node = queue.dequeue()
            yield node.value, node.height
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)

    def format_inorder(self) -> str:
        return "Inorder: " + " ".join(str(value) for value in self.inorder())

    def format_level_order(self) -> str:
        return "Level Order: " + " ".join(
            f"{value}(h:{height})" for value, height in self.level_order()
        )

    def copy(self) -> 'AVLTree[T]':
        clone: AVLTree[T] = AVLTree()
        clone._root = _clone(self._root)
        clone._size = self._size
        return clone

    def _is_balanced(self, node: Optional[Node[T]]) -> bool:
        if node is None:
            return True
        if abs(balance_factor(node)) > 1:
            return False
        return self._is_balanced(node.left) and self._is_balanced(node.right)

    def is_balanced(self) -> bool:
        return self._is_balanced(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return self.inorder()

    def __repr__(self) -> str:
        return f"AVLTree({list(self.inorder())})"

    def __str__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"


def _clone(node: Optional[Node[T]]) -> Optional[Node[T]]:
    if node is None:
        return None
    twin = Node(node.value)
    twin.height = node.height
    twin.left = _clone(node.left)
    twin.right = _clone(node.right)
    return twin
