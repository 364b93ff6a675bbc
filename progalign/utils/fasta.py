"""Functions for working with FASTA files."""

from pathlib import Path
from typing import List, Optional, Sequence, Union

import skbio.io
from skbio import Sequence as SkbioSequence

from progalign.types import FastaRecord, Profile

PathLike = Union[str, Path]


def fasta_record_from_skbio(record: SkbioSequence) -> FastaRecord:
    """Convert a scikit-bio record to a FastaRecord."""
    metadata = getattr(record, "metadata", {}) or {}
    return FastaRecord(
        identifier=metadata.get("id") or "",
        sequence=str(record),
        description=metadata.get("description") or None,
    )


def read_fasta(
    file_path: PathLike, ids: Optional[Sequence[str]] = None
) -> List[FastaRecord]:
    """Read a FASTA file and return its records in file order.

    Args:
        file_path: Path of the FASTA file.
        ids: Optional identifiers to keep; other records are skipped.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"FASTA file not found: {path}")

    records: List[FastaRecord] = []
    for record in skbio.io.read(str(path), format="fasta"):
        converted = fasta_record_from_skbio(record)
        if ids and converted.identifier not in ids:
            continue
        records.append(converted)
    return records


def write_profile_fasta(profile: Profile, file_path: PathLike) -> None:
    """Write the aligned sequences of a profile to a FASTA file."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    records = (
        SkbioSequence(sequence, metadata={"id": identifier, "description": ""})
        for identifier, sequence in zip(profile.identifiers, profile.sequences)
    )
    skbio.io.write(records, format="fasta", into=str(path))


__all__ = ["read_fasta", "write_profile_fasta", "fasta_record_from_skbio"]
