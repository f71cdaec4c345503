"""
Unbalanced binary search tree with structural comparison, mirroring and rotation.
"""

from bstlab.tree import (
    EMPTY_TREE_TEXT,
    AbstractBinaryTree,
    BinarySearchTree,
    BinaryTree,
    EmptyTreeError,
    InvalidRotationError,
    Position,
    Tree,
)

__all__ = [
    "EMPTY_TREE_TEXT",
    "AbstractBinaryTree",
    "BinarySearchTree",
    "BinaryTree",
    "EmptyTreeError",
    "InvalidRotationError",
    "Position",
    "Tree",
]
