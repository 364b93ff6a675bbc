"""Greedy consensus-score strategy.

Each round scores every pair of live profiles by aligning their consensus
sequences and merges the best pair, until one profile remains.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from loguru import logger

from progalign.algorithms.base import GuideStrategy
from progalign.algorithms.needleman_wunsch import GapAwareAligner
from progalign.algorithms.profile_alignment import align_profiles
from progalign.types import InsufficientInputError, Profile, ScoringConfig


def select_best_pair(
    consensuses: Sequence[str], aligner: GapAwareAligner
) -> Tuple[int, int, int]:
    """Return ``(i, j, score)`` of the highest scoring consensus pair.

    Pairs are scanned row-major with ``i < j``; a pair replaces the current
    best only with a strictly higher score, starting from a baseline of 0.
    When no pair scores above 0 the first two profiles are chosen.
    """
    high_score = 0
    best_i, best_j = 0, 1
    found = False
    for i in range(len(consensuses)):
        for j in range(i + 1, len(consensuses)):
            score = aligner.score(consensuses[i], consensuses[j])
            if score > high_score:
                high_score = score
                best_i, best_j = i, j
                found = True
    if not found:
        logger.debug("No pair scored above 0; merging the first two profiles")
    return best_i, best_j, high_score


class GreedyConsensusStrategy(GuideStrategy):
    """Merge the best scoring pair of consensus sequences each round."""

    name = "greedy-consensus"

    def align(self, profiles: Sequence[Profile], scoring: ScoringConfig) -> Profile:
        if len(profiles) < 2:
            raise InsufficientInputError(
                f"Expected at least 2 profiles, got {len(profiles)}"
            )

        aligner = GapAwareAligner(scoring)
        live: List[Profile] = list(profiles)
        while len(live) > 1:
            consensuses = [profile.consensus() for profile in live]
            i, j, score = select_best_pair(consensuses, aligner)
            logger.debug(
                "{} profiles left; merging {} and {} (score {})",
                len(live),
                i,
                j,
                score,
            )
            # Remove the higher index first so the lower one does not shift.
            profile_j = live.pop(j)
            profile_i = live.pop(i)
            live.append(align_profiles(profile_i, profile_j, scoring))

        return live[0]


__all__ = ["GreedyConsensusStrategy", "select_best_pair"]
