"""Binary and n-ary tree nodes and classic tree algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


@dataclass(eq=False)
class NaryNode:
    """A node of a tree whose nodes may have any number of children."""

    val: Any
    children: list[NaryNode] = field(default_factory=list)


def build_tree(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a binary tree from level-order values, where None marks a missing node."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(items, _END)
            if value is _END:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _mirrored(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    if p is None or q is None:
        return p is q
    return p.val == q.val and _mirrored(p.left, q.right) and _mirrored(p.right, q.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True if the tree is a mirror image of itself."""
    return root is None or _mirrored(root.left, root.right)


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest path from the root to a leaf."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest path from the root to a leaf."""
    if root is None:
        return 0
    children = [child for child in (root.left, root.right) if child is not None]
    if not children:
        return 1
    return 1 + min(min_depth(child) for child in children)


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    """Height of a balanced subtree, or None if it is unbalanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True if every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def has_path_sum(root: Optional[TreeNode], total: Any) -> bool:
    """Return True if some root-to-leaf path has values adding up to total."""
    if root is None:
        return False
    remaining = total - root.val
    if root.is_leaf:
        return remaining == 0
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def _paths(node: TreeNode, prefix: tuple[str, ...]) -> Iterator[str]:
    trail = (*prefix, str(node.val))
    if node.is_leaf:
        yield "->".join(trail)
        return
    for child in (node.left, node.right):
        if child is not None:
            yield from _paths(child, trail)


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """All root-to-leaf paths, left to right, written as 'a->b->c'."""
    if root is None:
        return []
    return list(_paths(root, ()))


def nary_max_depth(root: Optional[NaryNode]) -> int:
    """Number of nodes on the longest root-to-leaf path of an n-ary tree."""
    if root is None:
        return 0
    return 1 + max((nary_max_depth(child) for child in root.children), default=0)


def _leaves(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    if node.is_leaf:
        yield node.val
    yield from _leaves(node.left)
    yield from _leaves(node.right)


def leaf_similar(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same leaf values from left to right."""
    if root1 is None or root2 is None:
        return root1 is root2
    return list(_leaves(root1)) == list(_leaves(root2))


def _inorder(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node
    yield from _inorder(node.right)


def increasing_bst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink the tree's nodes in place into a right-leaning chain in in-order order."""
    nodes = list(_inorder(root))
    if not nodes:
        return None
    for node, successor in zip(nodes, [*nodes[1:], None]):
        node.left = None
        node.right = successor
    return nodes[0]