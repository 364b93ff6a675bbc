"""Sequence records."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FastaRecord:
    """One input sequence with its FASTA identifier and optional description."""

    identifier: str
    sequence: str
    description: Optional[str] = None

    def __post_init__(self) -> None:
        # Residues are compared by equality, so case is normalized up front.
        object.__setattr__(self, "sequence", "".join(self.sequence.split()).upper())

    def __len__(self) -> int:
        return len(self.sequence)

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        return (
            f"{class_name} (\n"
            f"   id: {self.identifier}\n"
            f"   description: {self.description}\n"
            f"   residues: {self.sequence}\n"
            f")"
        )


__all__ = ["FastaRecord"]
