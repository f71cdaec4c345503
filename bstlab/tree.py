
import logging
import sys
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Iterable, List, Optional, TextIO, Tuple

logger = logging.getLogger(__name__)

EMPTY_TREE_TEXT = "Empty tree"


class EmptyTreeError(LookupError):
    """Raised when a query needs at least one element but the tree is empty."""


class InvalidRotationError(ValueError):
    """Raised when a rotation is requested around a node lacking the pivot child."""


class Position(ABC):
    @abstractmethod
    def get_element(self):
        """Return the element stored at this position."""
        pass


class Tree(ABC):
    """Abstract base class representing a tree structure."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the total number of elements in the tree."""
        pass

    def is_empty(self) -> bool:
        """Return True if the tree is empty."""
        return self.root() is None

    @abstractmethod
    def __iter__(self):
        """Generate an iteration of the tree's elements."""
        pass

    @abstractmethod
    def positions(self) -> Iterable[Position]:
        """Generate an iteration of the tree's positions."""
        pass

    @abstractmethod
    def root(self) -> Optional[Position]:
        """Return the root Position of the tree (or None if tree is empty)."""
        pass

    @abstractmethod
    def children(self, p: Position) -> Iterable[Position]:
        """Return an iterable collection containing the children of Position p."""
        pass

    @abstractmethod
    def num_children(self, p: Position) -> int:
        """Return the number of children that Position p has."""
        pass

    def is_leaf(self, p: Position) -> bool:
        """Return True if Position p has no children."""
        return self.num_children(p) == 0


class BinaryTree(Tree):
    """Abstract base class representing a binary tree structure."""

    @abstractmethod
    def left(self, p: Position) -> Optional[Position]:
        """Return the Position of p's left child (or None if no child exists)."""
        pass

    @abstractmethod
    def right(self, p: Position) -> Optional[Position]:
        """Return the Position of p's right child (or None if no child exists)."""
        pass


class AbstractBinaryTree(BinaryTree):
    """Abstract base class providing functionality for BinaryTree."""

    def num_children(self, p: Position) -> int:
        """Return the number of children of Position p."""
        count = 0
        if self.left(p) is not None:
            count += 1
        if self.right(p) is not None:
            count += 1
        return count

    def children(self, p: Position) -> Iterable[Position]:
        """Generate an iteration of Positions representing p's children."""
        if self.left(p) is not None:
            yield self.left(p)
        if self.right(p) is not None:
            yield self.right(p)

    def inorder(self) -> Iterable[Position]:
        """Generate an inorder iteration of positions (nodes) in the tree."""
        if not self.is_empty():
            for p in self._subtree_inorder(self.root()):
                yield p

    def _subtree_inorder(self, p: Position) -> Iterable[Position]:
        """Generate an inorder iteration of positions of the subtree rooted at p."""
        if self.left(p) is not None:
            yield from self._subtree_inorder(self.left(p))

        yield p

        if self.right(p) is not None:
            yield from self._subtree_inorder(self.right(p))

    def breadthfirst(self) -> Iterable[Tuple[int, Position]]:
        """Generate (level, position) pairs level by level; the root is level 1."""
        if self.is_empty():
            return
        queue = deque([(1, self.root())])
        while queue:
            level, p = queue.popleft()
            yield level, p
            for c in self.children(p):
                queue.append((level + 1, c))


class BinarySearchTree(AbstractBinaryTree):
    """
    Unbalanced binary search tree.

    Matching is based on ``<`` and ``>`` between elements; duplicates are
    ignored. Every node owns its children exclusively, so each subtree
    helper below takes a node and returns the (possibly new) subtree root.
    """

    class _Node(Position):
        """Nested Node class that acts as a Position."""
        __slots__ = '_element', '_left', '_right'

        def __init__(self, e, left=None, right=None):
            self._element = e
            self._left = left
            self._right = right

        def get_element(self):
            return self._element

        def get_left(self): return self._left
        def get_right(self): return self._right
        def set_element(self, e): self._element = e
        def set_left(self, left): self._left = left
        def set_right(self, right): self._right = right

        def __repr__(self):
            return f"_Node({self._element!r})"

    def __init__(self, elements: Iterable[Any] = ()):
        self._root = None
        for e in elements:
            self.insert(e)

    def _validate(self, p):
        """Validates the position and returns it as a node."""
        if not isinstance(p, self._Node):
            raise TypeError("Not valid position type")
        return p

    # ------------------ Accessors ------------------
    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, x) -> bool:
        return self.contains(x)

    def __iter__(self) -> Iterable[Any]:
        """Generate an iteration of the tree's elements in sorted order."""
        for p in self.inorder():
            yield p.get_element()

    def __eq__(self, other):
        if not isinstance(other, BinarySearchTree):
            return NotImplemented
        return self.equals(other)

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"

    def root(self) -> Optional[Position]: return self._root
    def left(self, p: Position) -> Optional[Position]: return self._validate(p).get_left()
    def right(self, p: Position) -> Optional[Position]: return self._validate(p).get_right()

    def positions(self) -> Iterable[Position]:
        """Generate an iteration of the tree's positions (using inorder traversal)."""
        yield from self.inorder()

    # ------------------ Search & mutation ------------------
    def insert(self, x) -> None:
        """Insert x into the tree; duplicates are ignored."""
        self._root = self._insert(x, self._root)

    def remove(self, x) -> None:
        """Remove x from the tree. Nothing is done if x is not found."""
        self._root = self._remove(x, self._root)

    def contains(self, x) -> bool:
        """Return True if x is present."""
        return self._find(x, self._root) is not None

    def find(self, x) -> Optional[Position]:
        """Return the Position holding x, or None."""
        return self._find(x, self._root)

    def find_min(self):
        """Return the smallest element; raise EmptyTreeError if the tree is empty."""
        if self.is_empty():
            raise EmptyTreeError("find_min on an empty tree")
        return self._find_min(self._root).get_element()

    def find_max(self):
        """Return the largest element; raise EmptyTreeError if the tree is empty."""
        if self.is_empty():
            raise EmptyTreeError("find_max on an empty tree")
        return self._find_max(self._root).get_element()

    def make_empty(self) -> None:
        """Make the tree logically empty."""
        self._root = None

    def _insert(self, x, t):
        if t is None:
            return self._Node(x)
        if x < t.get_element():
            t.set_left(self._insert(x, t.get_left()))
        elif x > t.get_element():
            t.set_right(self._insert(x, t.get_right()))
        return t

    def _remove(self, x, t):
        if t is None:
            return t  # Not found; do nothing
        if x < t.get_element():
            t.set_left(self._remove(x, t.get_left()))
        elif x > t.get_element():
            t.set_right(self._remove(x, t.get_right()))
        elif t.get_left() is not None and t.get_right() is not None:
            t.set_element(self._find_min(t.get_right()).get_element())
            t.set_right(self._remove(t.get_element(), t.get_right()))
        else:
            t = t.get_left() if t.get_left() is not None else t.get_right()
        return t

    def _find(self, x, t):
        if t is None:
            return None
        if x < t.get_element():
            return self._find(x, t.get_left())
        elif x > t.get_element():
            return self._find(x, t.get_right())
        return t  # Match

    def _find_min(self, t):
        if t.get_left() is None:
            return t
        return self._find_min(t.get_left())

    def _find_max(self, t):
        while t.get_right() is not None:
            t = t.get_right()
        return t

    # ------------------ Structural queries ------------------
    def node_count(self) -> int:
        """Return the number of nodes, counted afresh on every call."""
        return self._node_count(self._root)

    def height(self) -> int:
        """Return the height of the tree; -1 when empty, 0 for a single node."""
        return self._height(self._root)

    def is_full(self) -> bool:
        """Return True if every node has either zero or two children."""
        return self._is_full(self._root)

    def compare_structure(self, other: "BinarySearchTree") -> bool:
        """Return True if both trees have the same shape, ignoring elements."""
        return self._compare_structure(self._root, other._root)

    def equals(self, other: "BinarySearchTree") -> bool:
        """Return True if both trees have the same shape and the same elements."""
        return self._equals(self._root, other._root)

    def is_mirror(self, other: "BinarySearchTree") -> bool:
        """Return True if other is the left-right mirror image of this tree."""
        return self._is_mirror(self._root, other._root)

    def _node_count(self, t) -> int:
        if t is None:
            return 0
        return 1 + self._node_count(t.get_left()) + self._node_count(t.get_right())

    def _height(self, t) -> int:
        if t is None:
            return -1
        return 1 + max(self._height(t.get_left()), self._height(t.get_right()))

    def _is_full(self, t) -> bool:
        if t is None:
            return True
        if self.is_leaf(t):
            return True
        if self.num_children(t) == 2:
            return self._is_full(t.get_left()) and self._is_full(t.get_right())
        return False

    def _compare_structure(self, t, s) -> bool:
        if t is None and s is None:
            return True
        if t is None or s is None:
            return False
        return (self._compare_structure(t.get_left(), s.get_left())
                and self._compare_structure(t.get_right(), s.get_right()))

    def _equals(self, t, s) -> bool:
        if t is None and s is None:
            return True
        if t is None or s is None:
            return False
        return (t.get_element() == s.get_element()
                and self._equals(t.get_left(), s.get_left())
                and self._equals(t.get_right(), s.get_right()))

    def _is_mirror(self, t, s) -> bool:
        if t is None and s is None:
            return True
        if t is None or s is None:
            return False
        return (t.get_element() == s.get_element()
                and self._is_mirror(t.get_left(), s.get_right())
                and self._is_mirror(t.get_right(), s.get_left()))

    # ------------------ Structural transforms ------------------
    def copy(self) -> "BinarySearchTree":
        """Return a deep copy sharing no nodes with this tree."""
        s = type(self)()
        s._root = self._copy(self._root)
        return s

    def mirror(self) -> "BinarySearchTree":
        """
        Return a new tree with left and right children swapped at every level.

        The result holds the same elements in reversed order, so it no longer
        satisfies the search ordering; use it for shape comparisons.
        """
        s = type(self)()
        s._root = self._mirror(self._root)
        return s

    def rotate_right(self, p: Position) -> Position:
        """
        Rotate the subtree rooted at p to the right.

        p's left child takes p's place, p becomes its right child and the
        child's former right subtree becomes p's left subtree. Returns the
        Position now occupying p's old slot.

        Raises InvalidRotationError if p has no left child.
        """
        node = self._validate(p)
        pivot = node.get_left()
        if pivot is None:
            raise InvalidRotationError(f"cannot rotate right: {node.get_element()!r} has no left child")
        logger.debug("rotate_right around %r, pivot %r", node.get_element(), pivot.get_element())
        self._root = self._rotate_at(node, self._rotate_with_left_child)
        return pivot

    def rotate_left(self, p: Position) -> Position:
        """
        Rotate the subtree rooted at p to the left; mirror of rotate_right.

        Raises InvalidRotationError if p has no right child.
        """
        node = self._validate(p)
        pivot = node.get_right()
        if pivot is None:
            raise InvalidRotationError(f"cannot rotate left: {node.get_element()!r} has no right child")
        logger.debug("rotate_left around %r, pivot %r", node.get_element(), pivot.get_element())
        self._root = self._rotate_at(node, self._rotate_with_right_child)
        return pivot

    def _copy(self, t):
        if t is None:
            return None
        return self._Node(t.get_element(), self._copy(t.get_left()), self._copy(t.get_right()))

    def _mirror(self, t):
        if t is None:
            return None
        return self._Node(t.get_element(), self._mirror(t.get_right()), self._mirror(t.get_left()))

    def _rotate_at(self, target, rotate: Callable):
        """Return the new tree root after rotating around target; the tree is untouched on error."""
        new_root = self._relink_at(self._root, target, rotate)
        if new_root is None:
            raise ValueError("p is not a node of this tree")
        return new_root

    def _relink_at(self, t, target, rotate: Callable):
        """
        Apply rotate to target inside the subtree t and return the new subtree root.

        The slot is found by node identity, not by element, so mirrored trees
        rotate as well. Returns None when target is not in the subtree.
        """
        if t is None:
            return None
        if t is target:
            return rotate(t)
        left = self._relink_at(t.get_left(), target, rotate)
        if left is not None:
            t.set_left(left)
            return t
        right = self._relink_at(t.get_right(), target, rotate)
        if right is not None:
            t.set_right(right)
            return t
        return None

    def _rotate_with_left_child(self, k2):
        k1 = k2.get_left()
        k2.set_left(k1.get_right())
        k1.set_right(k2)
        return k1

    def _rotate_with_right_child(self, k1):
        k2 = k1.get_right()
        k1.set_right(k2.get_left())
        k2.set_left(k1)
        return k2

    # ------------------ Printing ------------------
    def levels(self) -> Iterable[Tuple[int, List[Any]]]:
        """Generate (level, elements) pairs breadth-first; the root is level 1."""
        current_level, row = None, []
        for level, p in self.breadthfirst():
            if level != current_level and row:
                yield current_level, row
                row = []
            current_level = level
            row.append(p.get_element())
        if row:
            yield current_level, row

    def print_tree(self, file: Optional[TextIO] = None) -> None:
        """Print the elements in sorted order, one per line."""
        out = file or sys.stdout
        if self.is_empty():
            print(EMPTY_TREE_TEXT, file=out)
            return
        for e in self:
            print(e, file=out)

    def print_levels(self, file: Optional[TextIO] = None) -> None:
        """Print one line per level, elements separated by spaces."""
        out = file or sys.stdout
        if self.is_empty():
            print(EMPTY_TREE_TEXT, file=out)
            return
        for _, row in self.levels():
            print(" ".join(str(e) for e in row), file=out)
