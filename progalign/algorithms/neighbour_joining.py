"""Neighbour-Joining guide tree and tree-ordered profile alignment.

Adapted Neighbour-Joining after N. Saitou and M. Nei, "The neighbor-joining
method: a new method for reconstructing phylogenetic trees", Molecular Biology
and Evolution 4(4), 1987.

The initial "distances" are raw global alignment scores of the input
sequences. A higher score means more similar sequences, while the NJ
formulas treat larger values as farther apart. The formulas are applied to
the scores unchanged, so the joining order follows an inverted notion of
distance.

All divisions are integer divisions truncating toward zero.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from loguru import logger

from progalign.algorithms.base import GuideStrategy
from progalign.algorithms.needleman_wunsch import GapAwareAligner
from progalign.algorithms.profile_alignment import align_profiles
from progalign.types import (
    GuideTreeNode,
    InsufficientInputError,
    Profile,
    ScoringConfig,
)


def truncated_division(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


class NeighbourJoining:
    """Build a binary guide tree by repeated Neighbour-Joining reductions.

    Attributes:
        nodes: Live nodes, in the row order of ``distance_matrix``.
        leaves: Leaf nodes in input order.
        distance_matrix: Current symmetric distance matrix.
        history: Every distance matrix produced, from k nodes down to 2.
    """

    def __init__(self, profiles: Sequence[Profile], scoring: ScoringConfig) -> None:
        if len(profiles) < 2:
            raise InsufficientInputError(
                f"Expected at least 2 profiles, got {len(profiles)}"
            )
        self.aligner = GapAwareAligner(scoring)
        self.leaves: List[GuideTreeNode] = [
            GuideTreeNode.leaf(profile) for profile in profiles
        ]
        self.nodes: List[GuideTreeNode] = list(self.leaves)
        self.distance_matrix = self._initial_distance_matrix()
        self.history: List[np.ndarray] = [self.distance_matrix.copy()]
        self.root: Optional[GuideTreeNode] = None

    @property
    def size(self) -> int:
        """Number of live nodes."""
        return len(self.nodes)

    def _initial_distance_matrix(self) -> np.ndarray:
        """Score every pair of initial sequences; upper triangle mirrored."""
        size = len(self.nodes)
        D = np.zeros((size, size), dtype=np.int64)
        for i in range(size):
            for j in range(i + 1, size):
                D[i, j] = self.aligner.score(
                    self.nodes[i].profile.initial_sequence,
                    self.nodes[j].profile.initial_sequence,
                )
                D[j, i] = D[i, j]
        return D

    def mean_distances(self) -> List[int]:
        """``r_i``: row sum of node i divided by ``size - 2``."""
        divisor = self.size - 2
        return [
            truncated_division(int(row_sum), divisor)
            for row_sum in self.distance_matrix.sum(axis=1)
        ]

    def neighbour_matrix(self) -> np.ndarray:
        """``N[i][j] = D[i][j] - (r_i + r_j)`` with a zero diagonal."""
        r = np.array(self.mean_distances(), dtype=np.int64)
        N = self.distance_matrix - (r[:, None] + r[None, :])
        np.fill_diagonal(N, 0)
        return N

    def nearest_pair(self, N: np.ndarray) -> Tuple[int, int]:
        """Index pair ``i < j`` with the smallest neighbour value.

        Row-major scan, the first minimum wins. Diagonal cells are not
        candidates since a node cannot be joined with itself.
        """
        rows, cols = np.triu_indices(self.size, k=1)
        best = int(np.argmin(N[rows, cols]))
        return int(rows[best]), int(cols[best])

    def _join(self, i: int, j: int) -> GuideTreeNode:
        """Replace nodes i and j by their parent and shrink the matrix."""
        D = self.distance_matrix
        new_node = GuideTreeNode.join(self.nodes[i], self.nodes[j])
        survivors = [k for k in range(self.size) if k not in (i, j)]

        reduced = np.zeros((len(survivors) + 1, len(survivors) + 1), dtype=np.int64)
        reduced[:-1, :-1] = D[np.ix_(survivors, survivors)]
        for position, k in enumerate(survivors):
            distance = truncated_division(int(D[i, k] + D[j, k] - D[i, j]), 2)
            reduced[position, -1] = distance
            reduced[-1, position] = distance

        self.nodes = [self.nodes[k] for k in survivors] + [new_node]
        self.distance_matrix = reduced
        self.history.append(reduced.copy())
        return new_node

    def build_tree(self) -> GuideTreeNode:
        """Run the reductions until two nodes remain and join them at the root."""
        if self.root is not None:
            return self.root

        while self.size > 2:
            N = self.neighbour_matrix()
            i, j = self.nearest_pair(N)
            logger.debug(
                "NJ: {} nodes, joining {} and {} (N = {})",
                self.size,
                self.nodes[i].name,
                self.nodes[j].name,
                int(N[i, j]),
            )
            self._join(i, j)

        self.root = GuideTreeNode.join(self.nodes[0], self.nodes[1])
        return self.root

    def distance_frame(self) -> pd.DataFrame:
        """Initial distance matrix labelled with the leaf names."""
        labels = [leaf.name for leaf in self.leaves]
        return pd.DataFrame(self.history[0], index=labels, columns=labels)


def resolve_profiles(root: GuideTreeNode, scoring: ScoringConfig) -> Profile:
    """Assign a profile to every internal node in post-order.

    Unresolved children are resolved right child first, then left child; a
    node is merged from its children's profiles once both are resolved. An
    explicit stack replaces recursion so deep trees are safe.
    """
    stack: List[Tuple[GuideTreeNode, bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if node.is_resolved:
            continue
        if children_done:
            node.profile = align_profiles(
                node.left.profile, node.right.profile, scoring
            )
            continue
        stack.append((node, True))
        stack.append((node.left, False))
        stack.append((node.right, False))
    return root.profile


class NeighbourJoiningStrategy(GuideStrategy):
    """Align profiles along a Neighbour-Joining guide tree."""

    name = "neighbour-joining"

    def __init__(self) -> None:
        self.builder: Optional[NeighbourJoining] = None

    @property
    def guide_tree(self) -> Optional[GuideTreeNode]:
        """Root of the tree built by the last ``align`` call."""
        return self.builder.root if self.builder is not None else None

    def align(self, profiles: Sequence[Profile], scoring: ScoringConfig) -> Profile:
        self.builder = NeighbourJoining(profiles, scoring)
        root = self.builder.build_tree()
        return resolve_profiles(root, scoring)


__all__ = [
    "NeighbourJoining",
    "NeighbourJoiningStrategy",
    "resolve_profiles",
    "truncated_division",
]
