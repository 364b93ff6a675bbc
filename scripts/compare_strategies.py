#!/usr/bin/env python3
"""Align FASTA files with both guide strategies and tabulate the summaries."""

from __future__ import annotations

import argparse
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from .constants import COMPARISON_FOLDER, FASTA_FOLDER, SCORING_YAML

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from progalign.algorithms import STRATEGIES, progressive_alignment
from progalign.evaluation import summarize_profile
from progalign.types import ScoringConfig
from progalign.utils import load_scoring_config, read_fasta


def compare_file(
    fasta_path: Path, scoring: ScoringConfig, strategies: Sequence[str]
) -> List[Dict[str, object]]:
    """One summary row per strategy for a single FASTA file."""
    records = read_fasta(fasta_path)
    rows: List[Dict[str, object]] = []
    for name in strategies:
        profile = progressive_alignment(records, scoring, strategy=name)
        summary = summarize_profile(profile, scoring)
        rows.append({"file": fasta_path.stem, "strategy": name, **asdict(summary)})
    return rows


def compare_strategies(
    fasta_paths: Sequence[Path],
    scoring: ScoringConfig,
    strategies: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """Summary table with one row per (file, strategy)."""
    names = list(strategies) if strategies else sorted(STRATEGIES)
    rows: List[Dict[str, object]] = []
    for path in fasta_paths:
        rows.extend(compare_file(path, scoring, names))
    return pd.DataFrame(rows)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Compare the greedy and Neighbour-Joining guide strategies."
    )
    parser.add_argument(
        "--fasta-dir",
        type=str,
        default=str(FASTA_FOLDER),
        help="Folder of FASTA files (*.fa, *.fasta) to align.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=str(SCORING_YAML),
        help="YAML file with scoring parameters.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help=(
            "CSV path for the comparison table "
            f"(default: {COMPARISON_FOLDER / 'strategies.csv'})."
        ),
    )
    args = parser.parse_args(argv)

    fasta_dir = Path(args.fasta_dir)
    if not fasta_dir.exists():
        raise FileNotFoundError(f"FASTA folder not found: {fasta_dir}")
    fasta_paths = sorted(
        path for path in fasta_dir.iterdir() if path.suffix in (".fa", ".fasta")
    )
    if not fasta_paths:
        raise ValueError(f"No FASTA files found in {fasta_dir}")

    scoring = load_scoring_config(args.config)
    table = compare_strategies(fasta_paths, scoring)

    print(table.to_string(index=False))

    output_path = (
        Path(args.output) if args.output else COMPARISON_FOLDER / "strategies.csv"
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    table.to_csv(output_path, index=False)
    print(f"\nSaved comparison table to {output_path}")


if __name__ == "__main__":
    main()
