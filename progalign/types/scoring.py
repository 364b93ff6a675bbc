"""
Scoring parameters for the gap-aware global aligner and the residue alphabet
shared by every profile operation.

The configuration is a frozen dataclass: it is built once at startup and
handed to every alignment, consensus and guide-tree call. Assigning to a field
afterwards raises ``dataclasses.FrozenInstanceError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from .errors import ConfigurationNotSetError

GAP = "-"

# Fixed iteration order; consensus ties resolve to the earliest symbol here.
AMINO_ACID_CODES: Tuple[str, ...] = (
    "A", "C", "D", "E", "F", "G", "H", "I", "K", "L", "M", "N",
    "P", "Q", "R", "S", "T", "V", "W", "Y", "B", "Z", "X", "J",
    "U", "O", GAP,
)  # fmt: skip

SCORING_FIELDS: Tuple[str, str, str] = ("match_score", "mismatch_score", "gap_penalty")


def _validate_integer(value: object, name: str, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")


@dataclass(frozen=True)
class ScoringConfig:
    """Match reward, mismatch contribution and linear gap penalty.

    Attributes:
        match_score: Added for identical residues (> 0).
        mismatch_score: Added for differing residues (> 0). It is a positive
            contribution, so only indels lower the score.
        gap_penalty: Subtracted for every gap column, and for a residue placed
            against an existing gap (>= 0).
    """

    match_score: int
    mismatch_score: int
    gap_penalty: int

    def __post_init__(self) -> None:
        _validate_integer(self.match_score, "match_score", 1)
        _validate_integer(self.mismatch_score, "mismatch_score", 1)
        _validate_integer(self.gap_penalty, "gap_penalty", 0)

    @classmethod
    def from_raw(
        cls, match_score: int, mismatch_score: int, gap_penalty: int
    ) -> "ScoringConfig":
        """Build a config from user input, normalising the gap penalty's sign."""
        return cls(
            match_score=match_score,
            mismatch_score=mismatch_score,
            gap_penalty=(
                abs(gap_penalty) if isinstance(gap_penalty, int) else gap_penalty
            ),
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> "ScoringConfig":
        """Build a config from a mapping holding all three scoring fields."""
        missing = [name for name in SCORING_FIELDS if values.get(name) is None]
        if missing:
            raise ConfigurationNotSetError(f"scoring parameters not set: {missing}")
        unexpected = [name for name in values if name not in SCORING_FIELDS]
        if unexpected:
            raise ValueError(f"scoring has unexpected keys: {unexpected}")
        return cls.from_raw(
            values["match_score"], values["mismatch_score"], values["gap_penalty"]
        )


__all__ = ["ScoringConfig", "AMINO_ACID_CODES", "GAP", "SCORING_FIELDS"]
