"""
An immutable, generically typed binary tree.

A tree is either a Leaf (an empty subtree) or a Node holding one value and
two child subtrees. Trees are never mutated; every transformation builds a
new tree. There is no ordering invariant, so this is not a search tree.

Time Complexity:
Traversal/map/size/height: O(n)

The traversals and map use an explicit work stack rather than recursion,
so very unbalanced trees do not hit the interpreter recursion limit.
Equality and hashing are iterative too. repr(), render(), from_nested()
and to_nested() recurse and are bounded by the recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..core.errors import TreeShapeError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping


class BinaryTree[T]:
    """Base class of the two tree variants, Leaf and Node."""

    __slots__ = ()

    def is_leaf(self) -> bool:
        return isinstance(self, Leaf)

    # -------------------------------
    # Traversals
    # -------------------------------
    def iter_values(self) -> Iterator[T]:
        """Lazily yield the values in order: left subtree, value, right subtree."""
        pending: list[Node[T]] = []
        tree: BinaryTree[T] = self
        while pending or isinstance(tree, Node):
            while isinstance(tree, Node):
                pending.append(tree)
                tree = tree.left
            node = pending.pop()
            yield node.value
            tree = node.right

    def values(self) -> list[T]:
        """Return all values of the tree in order as a list."""
        return list(self.iter_values())

    def preorder_values(self) -> list[T]:
        """Return the values as value, left subtree, right subtree."""
        out: list[T] = []
        pending: list[BinaryTree[T]] = [self]
        while pending:
            tree = pending.pop()
            if isinstance(tree, Node):
                out.append(tree.value)
                pending.append(tree.right)
                pending.append(tree.left)
        return out

    def postorder_values(self) -> list[T]:
        """Return the values as left subtree, right subtree, value."""
        # value-right-left preorder, reversed
        out: list[T] = []
        pending: list[BinaryTree[T]] = [self]
        while pending:
            tree = pending.pop()
            if isinstance(tree, Node):
                out.append(tree.value)
                pending.append(tree.left)
                pending.append(tree.right)
        out.reverse()
        return out

    def __iter__(self) -> Iterator[T]:
        return self.iter_values()

    # -------------------------------
    # Transformation
    # -------------------------------
    def map[U](self, transform: Callable[[T], U]) -> BinaryTree[U]:
        """
        Returns a new tree with the same shape where every value
        is replaced by transform(value).

        transform is called in preorder (value, left subtree, right subtree).
        If it raises, the exception propagates and no tree is returned.
        """
        built: list[BinaryTree[U]] = []
        # (tree, transformed value, children already scheduled)
        pending: list[tuple[BinaryTree[T], Any, bool]] = [(self, None, False)]
        while pending:
            tree, value, expanded = pending.pop()
            if not isinstance(tree, Node):
                built.append(Leaf())
            elif expanded:
                right = built.pop()
                left = built.pop()
                built.append(Node(value, left, right))
            else:
                pending.append((tree, transform(tree.value), True))
                pending.append((tree.right, None, False))
                pending.append((tree.left, None, False))
        return built.pop()

    # -------------------------------
    # Utility
    # -------------------------------
    def size(self) -> int:
        """Returns the number of nodes (leaves are not counted)."""
        count = 0
        pending: list[BinaryTree[T]] = [self]
        while pending:
            tree = pending.pop()
            if isinstance(tree, Node):
                count += 1
                pending.append(tree.left)
                pending.append(tree.right)
        return count

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return isinstance(self, Node)

    def height(self) -> int:
        """
        Returns the number of nodes on the longest path from the root down.
        A leaf has height 0, a single node height 1.
        """
        max_height = 0
        pending: list[tuple[BinaryTree[T], int]] = [(self, 0)]
        while pending:
            tree, depth = pending.pop()
            if isinstance(tree, Node):
                depth += 1
                max_height = max(max_height, depth)
                pending.append((tree.left, depth))
                pending.append((tree.right, depth))
        return max_height

    # -------------------------------
    # Comparison
    # -------------------------------
    def __eq__(self, other: object) -> bool:
        """Two trees are equal if they have the same shape and equal values."""
        if not isinstance(other, BinaryTree):
            return NotImplemented
        pending: list[tuple[BinaryTree[Any], BinaryTree[Any]]] = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a is b:
                continue
            if isinstance(a, Node) and isinstance(b, Node):
                if a.value != b.value:
                    return False
                pending.append((a.right, b.right))
                pending.append((a.left, b.left))
            elif isinstance(a, Node) or isinstance(b, Node):
                return False
        return True

    def __hash__(self) -> int:
        # preorder with a marker per leaf pins down the shape
        shape: list[tuple[Any] | None] = []
        pending: list[BinaryTree[T]] = [self]
        while pending:
            tree = pending.pop()
            if isinstance(tree, Node):
                shape.append((tree.value,))
                pending.append(tree.right)
                pending.append(tree.left)
            else:
                shape.append(None)
        return hash(tuple(shape))

    def render(self) -> str:
        """Returns a multi-line drawing of the tree, root at the top."""
        if not isinstance(self, Node):
            return "<empty>"

        def _display(tree: BinaryTree[T]) -> tuple[list[str], int, int, int]:
            # lines, width, height, column of the label's middle
            if not isinstance(tree, Node):
                return [], 0, 0, 0

            label = str(tree.value)
            u = len(label)
            has_left = isinstance(tree.left, Node)
            has_right = isinstance(tree.right, Node)

            if not has_left and not has_right:
                return [label], u, 1, u // 2

            if not has_right:
                lines, n, p, x = _display(tree.left)
                first = (x + 1) * " " + (n - x - 1) * "_" + label
                second = x * " " + "/" + (n - x - 1 + u) * " "
                shifted = [line + u * " " for line in lines]
                return [first, second] + shifted, n + u, p + 2, n + u // 2

            if not has_left:
                lines, n, p, x = _display(tree.right)
                first = label + x * "_" + (n - x) * " "
                second = (u + x) * " " + "\\" + (n - x - 1) * " "
                shifted = [u * " " + line for line in lines]
                return [first, second] + shifted, n + u, p + 2, u // 2

            left, n, p, x = _display(tree.left)
            right, m, q, y = _display(tree.right)
            first = (x + 1) * " " + (n - x - 1) * "_" + label + y * "_" + (m - y) * " "
            second = x * " " + "/" + (n - x - 1 + u + y) * " " + "\\" + (m - y - 1) * " "
            left += [n * " "] * (q - p)
            right += [m * " "] * (p - q)
            lines = [first, second] + [a + u * " " + b for a, b in zip(left, right)]
            return lines, n + m + u, max(p, q) + 2, n + u // 2

        lines, _, _, _ = _display(self)
        return "\n".join(line.rstrip() for line in lines)

    # -------------------------------
    # Nested mapping conversion
    # -------------------------------
    @staticmethod
    def from_nested(data: Mapping[str, Any] | None) -> BinaryTree[Any]:
        """
        Builds a tree from nested mappings of the form
        {"value": v, "left": {...}, "right": {...}}.
        A missing or None child is a Leaf.
        """
        if data is None:
            return Leaf()
        if not hasattr(data, "get"):
            raise TreeShapeError(f"Expected a mapping for a tree node, got {type(data).__name__}")
        if "value" not in data:
            raise TreeShapeError(f"Tree node is missing 'value': {dict(data)!r}")
        return Node(
            data["value"],
            BinaryTree.from_nested(data.get("left")),
            BinaryTree.from_nested(data.get("right")),
        )

    def to_nested(self) -> dict[str, Any] | None:
        """Inverse of from_nested. Leaf children are left out."""
        if not isinstance(self, Node):
            return None
        out: dict[str, Any] = {"value": self.value}
        if isinstance(self.left, Node):
            out["left"] = self.left.to_nested()
        if isinstance(self.right, Node):
            out["right"] = self.right.to_nested()
        return out


@dataclass(frozen=True, eq=False)
class Leaf[T](BinaryTree[T]):
    """The empty subtree. Carries no value."""


@dataclass(frozen=True, eq=False)
class Node[T](BinaryTree[T]):
    """A value with two child subtrees, each a Leaf or a Node."""

    value: T
    left: BinaryTree[T] = field(default_factory=Leaf)
    right: BinaryTree[T] = field(default_factory=Leaf)

    def __post_init__(self) -> None:
        for name in ("left", "right"):
            child = getattr(self, name)
            if not isinstance(child, BinaryTree):
                raise TreeShapeError(
                    f"Node.{name} must be a Leaf or Node, got {type(child).__name__}"
                )

    @classmethod
    def of(cls, value: T) -> Node[T]:
        """A single node with two leaves as children."""
        return cls(value, Leaf(), Leaf())


def singleton[T](value: T) -> Node[T]:
    """Returns a one-node tree holding value."""
    return Node.of(value)
