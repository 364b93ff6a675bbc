"""Pair-guided alignment of two profiles through their consensus sequences."""

from __future__ import annotations

from loguru import logger

from progalign.algorithms.needleman_wunsch import GapAwareAligner
from progalign.types import Profile, ScoringConfig


def align_profiles(
    profile_a: Profile, profile_b: Profile, scoring: ScoringConfig
) -> Profile:
    """Align the consensus sequences of two profiles and merge the profiles.

    The gaps the aligner inserts into each consensus are propagated into every
    sequence of the corresponding profile, so the merged profile keeps equal
    sequence lengths. Neither input profile is modified.
    """
    aligner = GapAwareAligner(scoring)
    result = aligner.align(profile_a.consensus(), profile_b.consensus())
    logger.debug(
        "Merged profiles of {} and {} sequences (score {}, {} columns)",
        profile_a.num_sequences,
        profile_b.num_sequences,
        result.score,
        result.columns,
    )
    return Profile.merge(profile_a, profile_b, result.gaps_a, result.gaps_b)


__all__ = ["align_profiles"]
