"""Unit tests for Profile, gap insertion and profile merging."""

from __future__ import annotations

import pytest

from progalign.algorithms import align_profiles
from progalign.types import Profile, ScoringConfig, UnsupportedSymbolError
from progalign.types.profile import gap_count, insert_gaps


def _scoring() -> ScoringConfig:
    return ScoringConfig(match_score=2, mismatch_score=1, gap_penalty=1)


def test_default_identifiers():
    """Identifiers default to seq1..seqN."""
    profile = Profile(["AC", "AG"])
    assert profile.identifiers == ["seq1", "seq2"]
    assert profile.num_sequences == 2
    assert profile.columns == 2


def test_invalid_profiles_rejected():
    """Empty profiles, ragged sequences and mismatched labels raise."""
    with pytest.raises(ValueError):
        Profile([])
    with pytest.raises(ValueError):
        Profile(["ACG", "AC"])
    with pytest.raises(ValueError):
        Profile(["AC", "AG"], identifiers=["only_one"])


@pytest.mark.parametrize("sequence", ["MKTPLVGAIQV", "A-C-", "-"])
def test_consensus_of_single_sequence_is_the_sequence(sequence):
    """A one-sequence profile is its own consensus."""
    assert Profile.leaf(sequence).consensus() == sequence


def test_consensus_majority_per_column():
    """Each column contributes its most frequent symbol."""
    profile = Profile(["ACG", "ACT", "AGT"])
    assert profile.consensus() == "ACT"


def test_consensus_may_be_a_gap():
    """Gap-dominated columns give a gap in the consensus."""
    profile = Profile(["A-", "A-", "AC"])
    assert profile.consensus() == "A-"


def test_match_annotation_levels():
    """Full, >= 80 % and lower conservation map to '*', '.' and ' '."""
    profile = Profile(["AAA", "AAA", "AAA", "AAC", "ACC"])
    assert profile.match_annotation() == "*. "


def test_unsupported_symbol_in_consensus():
    """Characters outside the alphabet surface while counting."""
    with pytest.raises(UnsupportedSymbolError):
        Profile(["A1"]).consensus()


def test_insert_gaps_into_growing_buffer():
    """Positions refer to the string after earlier insertions."""
    assert insert_gaps("ACGT", [0, 2]) == "-A-CGT"
    assert insert_gaps("ACGT", [4]) == "ACGT-"
    assert insert_gaps("ACGT", []) == "ACGT"
    with pytest.raises(ValueError):
        insert_gaps("A", [3])


def test_sorted_by_gap_count_is_stable():
    """Rows order by gap count, ties keep insertion order."""
    profile = Profile(["A--", "AC-", "ACG", "A-G"], ["w", "x", "y", "z"])
    assert [name for name, _ in profile.sorted_by_gap_count()] == [
        "y",
        "x",
        "z",
        "w",
    ]
    assert gap_count("A--") == 2


def test_merge_propagates_gaps_to_every_member():
    """New gaps reach every sequence of a profile; A stays first."""
    profile_a = Profile(["ACGT", "ACGA"], ["a1", "a2"])
    profile_b = Profile(["AGT"], ["b1"])
    merged = Profile.merge(profile_a, profile_b, gaps_a=[], gaps_b=[1])
    assert merged.sequences == ["ACGT", "ACGA", "A-GT"]
    assert merged.identifiers == ["a1", "a2", "b1"]
    assert profile_b.sequences == ["AGT"]


def test_align_profiles_uses_consensus_alignment():
    """Two leaves merge into the pairwise alignment of their sequences."""
    merged = align_profiles(
        Profile.leaf("ACGT", "x"), Profile.leaf("AGT", "y"), _scoring()
    )
    assert merged.sequences == ["ACGT", "A-GT"]
    assert merged.identifiers == ["x", "y"]


def test_align_profiles_keeps_existing_columns():
    """Removing the added gap columns gives back the input profiles."""
    profile_a = Profile(["MKT-PL", "MKTAPL"], ["a1", "a2"])
    profile_b = Profile(["MTPL", "MKPL"], ["b1", "b2"])
    merged = align_profiles(profile_a, profile_b, _scoring())

    assert merged.num_sequences == 4
    assert len({len(seq) for seq in merged.sequences}) == 1
    for original, aligned in zip(
        profile_a.sequences + profile_b.sequences, merged.sequences
    ):
        assert aligned.replace("-", "") == original.replace("-", "")
