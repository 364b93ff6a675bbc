#!/usr/bin/env python3
"""Progressively align the sequences of a FASTA file and print the result."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .constants import (
    DEFAULT_GAP_PENALTY,
    DEFAULT_MATCH_SCORE,
    DEFAULT_MISMATCH_SCORE,
    EXAMPLE_FASTA,
    LOG_FORMAT,
    LOG_LEVELS,
)

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from progalign.algorithms import (
    GreedyConsensusStrategy,
    NeighbourJoiningStrategy,
    progressive_alignment,
)
from progalign.evaluation import summarize_profile
from progalign.types import ScoringConfig
from progalign.utils import (
    format_profile,
    format_summary,
    load_scoring_config,
    read_fasta,
    write_profile_fasta,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Progressive multiple sequence alignment of a FASTA file."
    )
    parser.add_argument(
        "-f",
        "--fasta",
        type=str,
        default=str(EXAMPLE_FASTA),
        help="FASTA file holding at least two sequences (default: %(default)s).",
    )
    parser.add_argument(
        "--match-score",
        type=int,
        default=None,
        help=f"Score for identical residues (default: {DEFAULT_MATCH_SCORE}).",
    )
    parser.add_argument(
        "--mismatch-score",
        type=int,
        default=None,
        help=f"Score for differing residues (default: {DEFAULT_MISMATCH_SCORE}).",
    )
    parser.add_argument(
        "--gap-penalty",
        type=int,
        default=None,
        help=(
            "Penalty per gap; the sign is ignored "
            f"(default: {DEFAULT_GAP_PENALTY})."
        ),
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file with scoring parameters; explicit flags take precedence.",
    )

    strategy = parser.add_mutually_exclusive_group()
    strategy.add_argument(
        "-c",
        "--consensus",
        dest="strategy",
        action="store_const",
        const=GreedyConsensusStrategy.name,
        help="Merge the best scoring pair of consensus sequences each round.",
    )
    strategy.add_argument(
        "-nj",
        "--neighbour-joining",
        dest="strategy",
        action="store_const",
        const=NeighbourJoiningStrategy.name,
        help="Merge profiles along a Neighbour-Joining guide tree (default).",
    )
    parser.set_defaults(strategy=NeighbourJoiningStrategy.name)

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Write the aligned sequences to this FASTA file.",
    )
    parser.add_argument(
        "--distance-matrix",
        type=str,
        default=None,
        help="Write the initial NJ distance matrix to this CSV file.",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the NJ guide tree in Newick form.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every alignment step to stderr.",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Route library log messages to stderr at the requested level."""
    logger.remove()
    logger.add(sys.stderr, level=LOG_LEVELS[verbose], format=LOG_FORMAT)
    if verbose:
        logger.enable("progalign")
    else:
        logger.disable("progalign")


def resolve_scoring(args: argparse.Namespace) -> ScoringConfig:
    """Scoring from ``--config`` (if any) with explicit flags applied on top."""
    overrides = {
        "match_score": args.match_score,
        "mismatch_score": args.mismatch_score,
        "gap_penalty": args.gap_penalty,
    }
    if args.config:
        return load_scoring_config(args.config, overrides=overrides)

    def _or_default(value: Optional[int], default: int) -> int:
        return default if value is None else value

    return ScoringConfig.from_raw(
        _or_default(args.match_score, DEFAULT_MATCH_SCORE),
        _or_default(args.mismatch_score, DEFAULT_MISMATCH_SCORE),
        _or_default(args.gap_penalty, DEFAULT_GAP_PENALTY),
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    uses_tree = args.strategy == NeighbourJoiningStrategy.name
    if not uses_tree and (args.tree or args.distance_matrix):
        parser.error("--tree and --distance-matrix need the neighbour-joining strategy")

    configure_logging(args.verbose)
    scoring = resolve_scoring(args)
    records = read_fasta(args.fasta)
    logger.info("Read {} sequences from {}", len(records), args.fasta)

    strategy = (
        NeighbourJoiningStrategy() if uses_tree else GreedyConsensusStrategy()
    )
    profile = progressive_alignment(records, scoring, strategy=strategy)

    print(f"Strategy: {strategy.name}")
    print(
        f"Scoring: match={scoring.match_score} "
        f"mismatch={scoring.mismatch_score} gap={scoring.gap_penalty}\n"
    )
    print(format_profile(profile))
    print()
    print(format_summary(summarize_profile(profile, scoring)))

    if uses_tree and args.tree:
        print(f"\nGuide tree: {strategy.guide_tree.to_newick()}")

    if uses_tree and args.distance_matrix:
        matrix_path = Path(args.distance_matrix)
        matrix_path.parent.mkdir(parents=True, exist_ok=True)
        strategy.builder.distance_frame().to_csv(matrix_path)
        print(f"\nDistance matrix written to {matrix_path}")

    if args.output:
        write_profile_fasta(profile, args.output)
        print(f"\nAlignment written to {args.output}")


if __name__ == "__main__":
    main()
