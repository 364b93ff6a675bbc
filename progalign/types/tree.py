"""Guide tree nodes for tree-ordered progressive alignment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .profile import Profile


@dataclass(eq=False)
class GuideTreeNode:
    """Leaf owning a Profile, or internal node owning two children.

    Internal nodes carry no profile until the alignment pass resolves them.
    Nodes compare by identity.
    """

    profile: Optional[Profile] = None
    children: Optional[Tuple["GuideTreeNode", "GuideTreeNode"]] = None
    name: str = field(init=False)

    def __post_init__(self) -> None:
        if self.children is None:
            if self.profile is None:
                raise ValueError("A leaf node needs a profile.")
            self.name = self.profile.identifiers[0]
        else:
            if len(self.children) != 2:
                raise ValueError("An internal node has exactly two children.")
            if self.children[0] is self.children[1]:
                raise ValueError("A node cannot be joined with itself.")
            if self.profile is not None:
                raise ValueError("An internal node starts without a profile.")
            left, right = self.children
            self.name = f"({left.name},{right.name})"

    @classmethod
    def leaf(cls, profile: Profile) -> "GuideTreeNode":
        """Create a leaf for a single-sequence profile."""
        if profile.num_sequences != 1:
            raise ValueError(
                f"Leaf profiles hold exactly one sequence, got {profile.num_sequences}."
            )
        return cls(profile=profile)

    @classmethod
    def join(cls, left: "GuideTreeNode", right: "GuideTreeNode") -> "GuideTreeNode":
        """Create an internal node over two subtrees."""
        return cls(children=(left, right))

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    @property
    def is_resolved(self) -> bool:
        """Whether a profile has been assigned to this node."""
        return self.profile is not None

    @property
    def left(self) -> "GuideTreeNode":
        if self.children is None:
            raise ValueError("A leaf node has no children.")
        return self.children[0]

    @property
    def right(self) -> "GuideTreeNode":
        if self.children is None:
            raise ValueError("A leaf node has no children.")
        return self.children[1]

    def leaves(self) -> List["GuideTreeNode"]:
        """Leaves of this subtree, left to right."""
        found: List[GuideTreeNode] = []
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                found.append(node)
            else:
                stack.append(node.right)
                stack.append(node.left)
        return found

    def count_nodes(self) -> int:
        """Total number of nodes in this subtree."""
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            if not node.is_leaf:
                stack.extend(node.children)
        return count

    def to_newick(self) -> str:
        """Newick string of the topology (no branch lengths)."""
        return f"{self.name};"


__all__ = ["GuideTreeNode"]
