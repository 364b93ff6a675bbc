"""Unit tests for alignment evaluation metrics."""

from __future__ import annotations

import pytest

from progalign.evaluation import summarize_profile
from progalign.evaluation.metrics import (
    conserved_columns,
    conserved_fraction,
    pairwise_identities,
    percent_identity,
    sum_of_pairs_score,
)
from progalign.types import AlignmentSummary, Profile, ScoringConfig


def _scoring() -> ScoringConfig:
    return ScoringConfig(match_score=2, mismatch_score=1, gap_penalty=1)


def test_percent_identity_example():
    """One differing column out of ten gives 90 %."""
    assert percent_identity("ATCGGACGTA", "ATCGGGCGTA") == pytest.approx(0.9)


def test_percent_identity_ignores_shared_gaps():
    """Gap columns never count as identical."""
    assert percent_identity("A-", "A-") == pytest.approx(0.5)
    assert percent_identity("", "") == 0.0


def test_percent_identity_requires_equal_lengths():
    """Unaligned inputs are rejected."""
    with pytest.raises(ValueError):
        percent_identity("ACG", "AC")


def test_pairwise_identities_order():
    """Pairs follow profile order."""
    profile = Profile(["AC", "AG", "AC"], ["x", "y", "z"])
    assert pairwise_identities(profile) == [
        ("x", "y", pytest.approx(0.5)),
        ("x", "z", pytest.approx(1.0)),
        ("y", "z", pytest.approx(0.5)),
    ]


def test_sum_of_pairs_skips_gap_gap_columns():
    """Residue-gap columns are penalised, gap-gap columns are skipped."""
    scoring = _scoring()
    assert sum_of_pairs_score(Profile(["AC", "A-"]), scoring) == 1
    assert sum_of_pairs_score(Profile(["A-", "A-"]), scoring) == 2


def test_conserved_fraction():
    """Share of fully conserved columns."""
    profile = Profile(["AC", "AG"])
    assert conserved_columns(profile) == 1
    assert conserved_fraction(profile) == pytest.approx(0.5)


def test_summarize_profile():
    """Summary of a small three-sequence profile."""
    profile = Profile(["ACGT", "ACGA", "ACGT"])
    summary = summarize_profile(profile, _scoring())

    assert isinstance(summary, AlignmentSummary)
    assert summary.num_sequences == 3
    assert summary.columns == 4
    assert summary.conserved_columns == 3
    assert summary.mean_identity == pytest.approx(2.5 / 3)
    assert summary.min_identity == pytest.approx(0.75)
    assert summary.max_identity == pytest.approx(1.0)
    assert summary.sum_of_pairs == 22


def test_summarize_single_sequence():
    """A one-sequence profile is perfectly identical to itself."""
    summary = summarize_profile(Profile.leaf("ACG"), _scoring())
    assert summary.mean_identity == 1.0
    assert summary.sum_of_pairs == 0
