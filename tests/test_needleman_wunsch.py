"""Unit tests for the gap-aware Needleman-Wunsch aligner."""

from __future__ import annotations

import numpy as np
import pytest

from progalign.algorithms import GapAwareAligner, alignment_score, substitution_score
from progalign.types import ScoringConfig
from progalign.types.profile import insert_gaps


def _scoring() -> ScoringConfig:
    return ScoringConfig(match_score=2, mismatch_score=1, gap_penalty=1)


PAIRS = [
    ("ACGT", "AGT"),
    ("AGT", "ACGT"),
    ("MKTPLVGAIQV", "MTPVGIQV"),
    ("A-CG", "ACG"),
    ("--AC", "AC--"),
    ("W", "MKTPL"),
    ("", "ACG"),
]


def test_substitution_scores():
    """Match, mismatch and residue-against-gap contributions."""
    scoring = _scoring()
    assert substitution_score("A", "A", scoring) == 2
    assert substitution_score("A", "C", scoring) == 1
    assert substitution_score("A", "-", scoring) == -1
    assert substitution_score("-", "A", scoring) == -1
    assert substitution_score("-", "-", scoring) == 2


def test_boundary_row_and_column():
    """First row and column hold multiples of the gap penalty."""
    S = GapAwareAligner(ScoringConfig(4, 2, 3)).dp_matrix("ACG", "AC")
    assert S.shape == (4, 3)
    np.testing.assert_array_equal(S[:, 0], [0, -3, -6, -9])
    np.testing.assert_array_equal(S[0, :], [0, -3, -6])


def test_regression_acgt_agt():
    """ACGT vs AGT scores 5 and gaps the second sequence after A."""
    aligner = GapAwareAligner(_scoring())
    result = aligner.align("ACGT", "AGT")

    assert aligner.dp_matrix("ACGT", "AGT")[4, 3] == 5
    assert result.score == 5
    assert result.aligned_a == "ACGT"
    assert result.aligned_b == "A-GT"
    assert result.gaps_a == []
    assert result.gaps_b == [1]


def test_dp_matrix_matches_recurrence():
    """Every interior cell is the best of its three predecessors."""
    scoring = _scoring()
    seq_a, seq_b = "MKT-PL", "MTPLV"
    S = GapAwareAligner(scoring).dp_matrix(seq_a, seq_b)
    for i in range(1, len(seq_a) + 1):
        for j in range(1, len(seq_b) + 1):
            diagonal = substitution_score(seq_a[i - 1], seq_b[j - 1], scoring)
            expected = max(
                S[i - 1, j - 1] + diagonal,
                S[i - 1, j] - scoring.gap_penalty,
                S[i, j - 1] - scoring.gap_penalty,
            )
            assert S[i, j] == expected


@pytest.mark.parametrize("seq_a, seq_b", PAIRS)
def test_score_is_symmetric(seq_a, seq_b):
    """Swapping the inputs does not change the optimal score."""
    scoring = _scoring()
    assert alignment_score(seq_a, seq_b, scoring) == alignment_score(
        seq_b, seq_a, scoring
    )


@pytest.mark.parametrize("seq_a, seq_b", PAIRS)
def test_gap_positions_rebuild_aligned_strings(seq_a, seq_b):
    """Inserting the reported gaps reproduces the aligned strings."""
    result = GapAwareAligner(_scoring()).align(seq_a, seq_b)

    assert insert_gaps(seq_a, result.gaps_a) == result.aligned_a
    assert insert_gaps(seq_b, result.gaps_b) == result.aligned_b
    assert result.columns == len(seq_a) + len(result.gaps_a)
    assert result.columns == len(seq_b) + len(result.gaps_b)
    assert result.gaps_a == sorted(result.gaps_a)
    assert result.gaps_b == sorted(result.gaps_b)


def test_traceback_score_equals_column_sum():
    """The aligned columns add up to the optimal score."""
    scoring = _scoring()
    result = GapAwareAligner(scoring).align("MKTPLVGAIQV", "MTPVGIQV")
    total = sum(
        substitution_score(a, b, scoring)
        for a, b in zip(result.aligned_a, result.aligned_b)
    )
    assert total == result.score


def test_identical_sequences_need_no_gaps():
    """Aligning a sequence with itself scores match_score per column."""
    result = GapAwareAligner(_scoring()).align("MKT-PL", "MKT-PL")
    assert result.score == 12
    assert result.gaps_a == [] and result.gaps_b == []


def test_empty_against_sequence():
    """An empty sequence is gapped over the full length of the other."""
    result = GapAwareAligner(_scoring()).align("", "ACG")
    assert result.score == -3
    assert result.aligned_a == "---"
    assert result.gaps_a == [0, 1, 2]
