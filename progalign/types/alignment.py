"""Pairwise alignment result."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class AlignmentResult:
    """Result of aligning two (possibly gapped) sequences.

    Attributes:
        aligned_a: First sequence with the new gaps inserted.
        aligned_b: Second sequence with the new gaps inserted.
        score: Optimal global score, ``S[m][n]``.
        gaps_a: Ascending column indices of the gaps added to the first sequence.
        gaps_b: Ascending column indices of the gaps added to the second sequence.
    """

    aligned_a: str
    aligned_b: str
    score: int
    gaps_a: List[int] = field(default_factory=list)
    gaps_b: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.aligned_a) != len(self.aligned_b):
            raise ValueError("aligned_a and aligned_b must have the same length.")

    @property
    def columns(self) -> int:
        """Length of the aligned strings."""
        return len(self.aligned_a)


__all__ = ["AlignmentResult"]
