"""Unit tests for the greedy consensus strategy."""

from __future__ import annotations

from itertools import permutations

import pytest

from progalign.algorithms import GapAwareAligner, GreedyConsensusStrategy
from progalign.algorithms.greedy import select_best_pair
from progalign.types import InsufficientInputError, Profile, ScoringConfig


def _scoring() -> ScoringConfig:
    return ScoringConfig(match_score=2, mismatch_score=1, gap_penalty=1)


NEAR_IDENTICAL = {
    "s1": "MKTPLVGAIQV",
    "s2": "MKTPLVGIQV",
    "s3": "MKTLVGAIQV",
}


def test_select_best_pair_highest_score():
    """The pair with the highest consensus score is chosen."""
    aligner = GapAwareAligner(_scoring())
    assert select_best_pair(["AAAA", "CCCC", "AAAA"], aligner) == (0, 2, 8)


def test_select_best_pair_first_of_equal_scores():
    """Among equal scores the first pair in row-major order wins."""
    aligner = GapAwareAligner(_scoring())
    assert select_best_pair(["AC", "AC", "AC"], aligner) == (0, 1, 4)


def test_select_best_pair_falls_back_to_first_two():
    """When no pair scores above zero the first two profiles are merged."""
    aligner = GapAwareAligner(_scoring())
    assert select_best_pair(["-", "A"], aligner) == (0, 1, 0)
    assert select_best_pair(["", "", ""], aligner) == (0, 1, 0)


def test_requires_two_profiles():
    """A single profile cannot be aligned progressively."""
    with pytest.raises(InsufficientInputError):
        GreedyConsensusStrategy().align([Profile.leaf("ACG")], _scoring())


def test_two_profiles_merge_once():
    """Two leaves give their pairwise alignment."""
    result = GreedyConsensusStrategy().align(
        [Profile.leaf("ACGT", "a"), Profile.leaf("AGT", "b")], _scoring()
    )
    assert result.sequences == ["ACGT", "A-GT"]
    assert result.identifiers == ["a", "b"]


@pytest.mark.parametrize("order", list(permutations(NEAR_IDENTICAL)))
def test_converges_for_any_input_order(order):
    """Every input order ends in one profile holding all sequences."""
    profiles = [Profile.leaf(NEAR_IDENTICAL[name], name) for name in order]
    result = GreedyConsensusStrategy().align(profiles, _scoring())

    assert result.num_sequences == 3
    assert sorted(result.identifiers) == sorted(NEAR_IDENTICAL)
    assert len({len(seq) for seq in result.sequences}) == 1
    for name, aligned in zip(result.identifiers, result.sequences):
        assert aligned.replace("-", "") == NEAR_IDENTICAL[name]


def test_input_profiles_untouched():
    """The caller's list and profiles are left as they were."""
    profiles = [Profile.leaf(seq, name) for name, seq in NEAR_IDENTICAL.items()]
    GreedyConsensusStrategy().align(profiles, _scoring())
    assert [p.sequences[0] for p in profiles] == list(NEAR_IDENTICAL.values())
    assert len(profiles) == 3
