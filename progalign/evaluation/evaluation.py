"""Summaries of finished multiple alignments."""

from __future__ import annotations

from statistics import fmean

from progalign.evaluation.metrics import (
    conserved_columns,
    pairwise_identities,
    sum_of_pairs_score,
)
from progalign.types import AlignmentSummary, Profile, ScoringConfig


def summarize_profile(profile: Profile, scoring: ScoringConfig) -> AlignmentSummary:
    """Collect identity, conservation and sum-of-pairs figures for a profile."""
    identities = [value for _, _, value in pairwise_identities(profile)]
    if identities:
        mean_identity = fmean(identities)
        min_identity = min(identities)
        max_identity = max(identities)
    else:
        mean_identity = min_identity = max_identity = 1.0

    return AlignmentSummary(
        num_sequences=profile.num_sequences,
        columns=profile.columns,
        conserved_columns=conserved_columns(profile),
        mean_identity=mean_identity,
        min_identity=min_identity,
        max_identity=max_identity,
        sum_of_pairs=sum_of_pairs_score(profile, scoring),
    )


__all__ = ["summarize_profile"]
