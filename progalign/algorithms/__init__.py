"""Algorithms for the project."""

from .base import GuideStrategy
from .needleman_wunsch import GapAwareAligner, alignment_score, substitution_score
from .profile_alignment import align_profiles
from .greedy import GreedyConsensusStrategy
from .neighbour_joining import NeighbourJoining, NeighbourJoiningStrategy
from .progressive import STRATEGIES, get_strategy, progressive_alignment


__all__ = [
    "GuideStrategy",
    "GapAwareAligner",
    "alignment_score",
    "substitution_score",
    "align_profiles",
    "GreedyConsensusStrategy",
    "NeighbourJoining",
    "NeighbourJoiningStrategy",
    "STRATEGIES",
    "get_strategy",
    "progressive_alignment",
]
