"""Console rendering of a finished alignment."""

from __future__ import annotations

from typing import List

from progalign.types import AlignmentSummary, Profile


def format_profile(profile: Profile, show_identifiers: bool = True) -> str:
    """Sequences sorted by ascending gap count, then the match annotation."""
    rows = profile.sorted_by_gap_count()
    lines: List[str] = []
    if show_identifiers:
        width = max(len(identifier) for identifier, _ in rows)
        for identifier, sequence in rows:
            lines.append(f"{identifier:>{width}}  {sequence}")
        lines.append(f"{'':>{width}}  {profile.match_annotation()}")
    else:
        lines.extend(sequence for _, sequence in rows)
        lines.append(profile.match_annotation())
    return "\n".join(lines)


def format_summary(summary: AlignmentSummary) -> str:
    """Human-readable block of alignment statistics."""
    return "\n".join(
        [
            f"Sequences:          {summary.num_sequences}",
            f"Columns:            {summary.columns}",
            f"Conserved columns:  {summary.conserved_columns}",
            f"Mean identity:      {summary.mean_identity:.2%}",
            f"Min identity:       {summary.min_identity:.2%}",
            f"Max identity:       {summary.max_identity:.2%}",
            f"Sum-of-pairs score: {summary.sum_of_pairs}",
        ]
    )


__all__ = ["format_profile", "format_summary"]
