"""Alignment quality metrics and helpers."""

from __future__ import annotations

from itertools import combinations
from typing import List, Tuple

from progalign.algorithms.needleman_wunsch import substitution_score
from progalign.types import Profile, ScoringConfig
from progalign.types.profile import CONSERVED
from progalign.types.scoring import GAP


def _safe_divide(numerator: float, denominator: float) -> float:
    """Divide with zero-denominator protection."""
    return numerator / denominator if denominator else 0.0


def _ensure_same_length(seq_a: str, seq_b: str) -> None:
    if len(seq_a) != len(seq_b):
        raise ValueError(
            "Aligned sequences must have the same length: "
            f"{len(seq_a)} vs {len(seq_b)}"
        )


def percent_identity(seq_a: str, seq_b: str) -> float:
    """Fraction of columns holding the same residue (gaps never count)."""
    _ensure_same_length(seq_a, seq_b)
    matches = sum(1 for a, b in zip(seq_a, seq_b) if a == b and a != GAP)
    return _safe_divide(matches, len(seq_a))


def pairwise_identities(profile: Profile) -> List[Tuple[str, str, float]]:
    """Percent identity of every sequence pair, in profile order."""
    rows = list(zip(profile.identifiers, profile.sequences))
    return [
        (id_a, id_b, percent_identity(seq_a, seq_b))
        for (id_a, seq_a), (id_b, seq_b) in combinations(rows, 2)
    ]


def sum_of_pairs_score(profile: Profile, scoring: ScoringConfig) -> int:
    """Sum of substitution scores over all sequence pairs and columns.

    Columns where both sequences have a gap contribute nothing.
    """
    total = 0
    for seq_a, seq_b in combinations(profile.sequences, 2):
        for a, b in zip(seq_a, seq_b):
            if a == GAP and b == GAP:
                continue
            total += substitution_score(a, b, scoring)
    return total


def conserved_columns(profile: Profile) -> int:
    """Number of fully conserved columns."""
    return profile.match_annotation().count(CONSERVED)


def conserved_fraction(profile: Profile) -> float:
    """Share of fully conserved columns."""
    return _safe_divide(conserved_columns(profile), profile.columns)


__all__ = [
    "percent_identity",
    "pairwise_identities",
    "sum_of_pairs_score",
    "conserved_columns",
    "conserved_fraction",
]
