"""Profiles: groups of equal-length aligned sequences."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from .occurrence import OccurrenceCounter
from .scoring import GAP

CONSERVED = "*"
HIGHLY_CONSERVED = "."
NOT_CONSERVED = " "
HIGHLY_CONSERVED_THRESHOLD = 0.8


def insert_gaps(sequence: str, gap_positions: Sequence[int]) -> str:
    """Insert a gap at each position, in ascending order, into a growing buffer.

    Every position is interpreted against the buffer as it stands after the
    previous insertions, so the positions are the column indices of the new
    gaps in the returned string.
    """
    buffer = list(sequence)
    for position in gap_positions:
        if position < 0 or position > len(buffer):
            raise ValueError(
                f"gap position {position} outside sequence of length {len(buffer)}"
            )
        buffer.insert(position, GAP)
    return "".join(buffer)


def gap_count(sequence: str) -> int:
    """Number of gap characters in ``sequence``."""
    return sequence.count(GAP)


@dataclass(frozen=True)
class Profile:
    """One cluster of the growing multiple alignment.

    Attributes:
        sequences: Aligned sequences in insertion order.
        identifiers: Labels parallel to ``sequences``; defaults to
            ``seq1``..``seqN``.
    """

    sequences: List[str]
    identifiers: Optional[List[str]] = field(default=None)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sequences", list(self.sequences))
        if not self.sequences:
            raise ValueError("A profile holds at least one sequence.")

        if self.identifiers is None:
            identifiers = [f"seq{index + 1}" for index in range(len(self.sequences))]
        else:
            identifiers = list(self.identifiers)
        if len(identifiers) != len(self.sequences):
            raise ValueError(
                "identifiers and sequences must have the same length: "
                f"{len(identifiers)} vs {len(self.sequences)}"
            )
        object.__setattr__(self, "identifiers", identifiers)

        if any(len(seq) != self.columns for seq in self.sequences):
            raise ValueError("All sequences of a profile must have the same length.")

    @classmethod
    def leaf(cls, sequence: str, identifier: Optional[str] = None) -> "Profile":
        """Wrap a single input sequence."""
        return cls(
            sequences=[sequence],
            identifiers=[identifier] if identifier is not None else None,
        )

    def __len__(self) -> int:
        return len(self.sequences)

    def __iter__(self) -> Iterator[str]:
        return iter(self.sequences)

    @property
    def num_sequences(self) -> int:
        """Number of sequences in the profile."""
        return len(self.sequences)

    @property
    def columns(self) -> int:
        """Number of alignment columns."""
        return len(self.sequences[0])

    @property
    def initial_sequence(self) -> str:
        """First sequence; for a leaf this is the unaligned input."""
        return self.sequences[0]

    @property
    def is_leaf(self) -> bool:
        """Whether the profile wraps exactly one sequence."""
        return len(self.sequences) == 1

    def _column_counters(self) -> Iterator[OccurrenceCounter]:
        counter = OccurrenceCounter()
        for col in range(self.columns):
            counter.reset()
            for sequence in self.sequences:
                counter.increase_by_one(sequence[col])
            yield counter

    def consensus(self) -> str:
        """Most frequent symbol of every column."""
        return "".join(counter.most_frequent() for counter in self._column_counters())

    def match_annotation(self) -> str:
        """Per-column conservation line.

        ``*`` marks a fully conserved column, ``.`` a column whose most
        frequent symbol reaches 80 %, a space anything else.
        """
        marks = []
        for counter in self._column_counters():
            frequency = counter.frequency_of_most_frequent()
            if frequency == 1.0:
                marks.append(CONSERVED)
            elif frequency >= HIGHLY_CONSERVED_THRESHOLD:
                marks.append(HIGHLY_CONSERVED)
            else:
                marks.append(NOT_CONSERVED)
        return "".join(marks)

    def sorted_by_gap_count(self) -> List[Tuple[str, str]]:
        """(identifier, sequence) pairs ordered by ascending gap count."""
        pairs = list(zip(self.identifiers, self.sequences))
        return sorted(pairs, key=lambda pair: gap_count(pair[1]))

    @staticmethod
    def merge(
        profile_a: "Profile",
        profile_b: "Profile",
        gaps_a: Sequence[int],
        gaps_b: Sequence[int],
    ) -> "Profile":
        """Propagate new gaps into both profiles and stack them, A first."""
        sequences = [insert_gaps(seq, gaps_a) for seq in profile_a.sequences]
        sequences.extend(insert_gaps(seq, gaps_b) for seq in profile_b.sequences)
        return Profile(
            sequences=sequences,
            identifiers=profile_a.identifiers + profile_b.identifiers,
        )

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        width = max(len(identifier) for identifier in self.identifiers)
        rows = "\n".join(
            f"   {identifier:>{width}}: {sequence}"
            for identifier, sequence in zip(self.identifiers, self.sequences)
        )
        return (
            f"{class_name} (\n"
            f"   sequences: {self.num_sequences}, columns: {self.columns}\n"
            f"{rows}\n"
            f")"
        )


__all__ = ["Profile", "insert_gaps", "gap_count"]
