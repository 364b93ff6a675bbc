"""Alignment summary data structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AlignmentSummary:
    """Quality figures for one multiple alignment."""

    num_sequences: int
    columns: int
    conserved_columns: int
    mean_identity: float
    min_identity: float
    max_identity: float
    sum_of_pairs: int


__all__ = ["AlignmentSummary"]
