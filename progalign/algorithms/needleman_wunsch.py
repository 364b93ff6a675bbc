"""Needleman-Wunsch global alignment for sequences that may already contain gaps.

Existing gap characters take part in scoring like residues: two identical
symbols (gaps included) score a match, a residue placed against an existing gap
costs the gap penalty, and any other pair adds the mismatch score.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from progalign.types import AlignmentResult, ScoringConfig
from progalign.types.scoring import GAP


def substitution_score(x: str, y: str, scoring: ScoringConfig) -> int:
    """Score contribution of aligning ``x`` against ``y``."""
    if x == y:
        return scoring.match_score
    if x == GAP or y == GAP:
        return -scoring.gap_penalty
    return scoring.mismatch_score


class GapAwareAligner:
    """Global aligner over gapped sequences with a linear gap penalty."""

    def __init__(self, scoring: ScoringConfig) -> None:
        self.scoring = scoring

    def _initialize_dp_matrix(self, m: int, n: int) -> np.ndarray:
        """Allocate S and fill the gap-only first row and column."""
        gap = self.scoring.gap_penalty
        S = np.zeros((m + 1, n + 1), dtype=np.int64)
        S[:, 0] = -gap * np.arange(m + 1)
        S[0, :] = -gap * np.arange(n + 1)
        return S

    def _substitution_row(self, x: str, y: np.ndarray) -> np.ndarray:
        """Vector of ``substitution_score(x, y_j)`` for every j."""
        if x == GAP:
            not_equal = -self.scoring.gap_penalty
        else:
            not_equal = np.where(
                y == GAP, -self.scoring.gap_penalty, self.scoring.mismatch_score
            )
        return np.where(y == x, self.scoring.match_score, not_equal)

    def _fill_interior(self, S: np.ndarray, seq_a: str, seq_b: str) -> None:
        """Apply the recurrence row by row.

        Diagonal and vertical candidates of a row only depend on the previous
        row and are computed at once; the horizontal candidate depends on the
        cell to the left and is resolved in a left-to-right sweep.
        """
        gap = self.scoring.gap_penalty
        b = np.array(list(seq_b), dtype="U1")
        for i in range(1, len(seq_a) + 1):
            diag = S[i - 1, :-1] + self._substitution_row(seq_a[i - 1], b)
            up = S[i - 1, 1:] - gap
            best = np.maximum(diag, up)
            row = S[i]
            for j in range(1, len(seq_b) + 1):
                left = row[j - 1] - gap
                row[j] = best[j - 1] if best[j - 1] >= left else left

    def dp_matrix(self, seq_a: str, seq_b: str) -> np.ndarray:
        """Return the filled ``(m + 1) x (n + 1)`` score matrix."""
        S = self._initialize_dp_matrix(len(seq_a), len(seq_b))
        self._fill_interior(S, seq_a, seq_b)
        return S

    def score(self, seq_a: str, seq_b: str) -> int:
        """Optimal global alignment score ``S[m][n]``."""
        return int(self.dp_matrix(seq_a, seq_b)[len(seq_a), len(seq_b)])

    def _traceback(
        self, S: np.ndarray, seq_a: str, seq_b: str
    ) -> Tuple[str, str, List[int], List[int]]:
        """Walk back from ``(m, n)``: diagonal first, then horizontal, then vertical.

        Gap positions are collected as offsets from the end of the alignment
        while walking backwards and converted to column indices once the
        alignment length is known.
        """
        gap = self.scoring.gap_penalty
        aligned_a: List[str] = []
        aligned_b: List[str] = []
        gaps_a_from_end: List[int] = []
        gaps_b_from_end: List[int] = []

        i, j = len(seq_a), len(seq_b)
        while i > 0 or j > 0:
            current = S[i, j]
            if i > 0 and j > 0 and current == S[i - 1, j - 1] + substitution_score(
                seq_a[i - 1], seq_b[j - 1], self.scoring
            ):
                aligned_a.append(seq_a[i - 1])
                aligned_b.append(seq_b[j - 1])
                i -= 1
                j -= 1
            elif j > 0 and current == S[i, j - 1] - gap:
                gaps_a_from_end.append(len(aligned_a))
                aligned_a.append(GAP)
                aligned_b.append(seq_b[j - 1])
                j -= 1
            elif i > 0 and current == S[i - 1, j] - gap:
                gaps_b_from_end.append(len(aligned_b))
                aligned_a.append(seq_a[i - 1])
                aligned_b.append(GAP)
                i -= 1
            else:
                raise RuntimeError(f"no predecessor reproduces S[{i}][{j}]")

        aligned_a.reverse()
        aligned_b.reverse()
        columns = len(aligned_a)
        gaps_a = [columns - 1 - offset for offset in reversed(gaps_a_from_end)]
        gaps_b = [columns - 1 - offset for offset in reversed(gaps_b_from_end)]
        return "".join(aligned_a), "".join(aligned_b), gaps_a, gaps_b

    def align(self, seq_a: str, seq_b: str) -> AlignmentResult:
        """Align two sequences globally."""
        S = self.dp_matrix(seq_a, seq_b)
        aligned_a, aligned_b, gaps_a, gaps_b = self._traceback(S, seq_a, seq_b)
        return AlignmentResult(
            aligned_a=aligned_a,
            aligned_b=aligned_b,
            score=int(S[len(seq_a), len(seq_b)]),
            gaps_a=gaps_a,
            gaps_b=gaps_b,
        )


def alignment_score(seq_a: str, seq_b: str, scoring: ScoringConfig) -> int:
    """Convenience wrapper for ``GapAwareAligner(scoring).score``."""
    return GapAwareAligner(scoring).score(seq_a, seq_b)


__all__ = ["GapAwareAligner", "substitution_score", "alignment_score"]
