"""Entry point for progressive multiple sequence alignment."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from loguru import logger

from progalign.algorithms.base import GuideStrategy
from progalign.algorithms.greedy import GreedyConsensusStrategy
from progalign.algorithms.neighbour_joining import NeighbourJoiningStrategy
from progalign.types import (
    FastaRecord,
    InsufficientInputError,
    Profile,
    ScoringConfig,
)

STRATEGIES: Dict[str, Callable[[], GuideStrategy]] = {
    GreedyConsensusStrategy.name: GreedyConsensusStrategy,
    NeighbourJoiningStrategy.name: NeighbourJoiningStrategy,
}
DEFAULT_STRATEGY = NeighbourJoiningStrategy.name


def get_strategy(name: str) -> GuideStrategy:
    """Instantiate the guide strategy registered under ``name``."""
    try:
        factory = STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown strategy '{name}'; expected one of {sorted(STRATEGIES)}"
        ) from None
    return factory()


def profiles_from_records(records: Sequence[FastaRecord]) -> List[Profile]:
    """One leaf profile per record, labelled with the record identifier."""
    if len(records) < 2:
        raise InsufficientInputError(
            f"Expected at least 2 sequences, got {len(records)}"
        )
    return [Profile.leaf(record.sequence, record.identifier) for record in records]


def progressive_alignment(
    records: Sequence[FastaRecord],
    scoring: ScoringConfig,
    strategy: str | GuideStrategy = DEFAULT_STRATEGY,
) -> Profile:
    """Align all records into a single profile.

    Args:
        records: Input sequences; at least two are required.
        scoring: Scoring parameters shared by every alignment step.
        strategy: Registered strategy name or a strategy instance.

    Returns:
        Profile holding every input sequence, all of equal length.
    """
    profiles = profiles_from_records(records)
    guide = get_strategy(strategy) if isinstance(strategy, str) else strategy
    logger.debug(
        "Aligning {} sequences with strategy '{}' ({})",
        len(profiles),
        guide.name,
        scoring,
    )
    return guide.align(profiles, scoring)


__all__ = [
    "STRATEGIES",
    "DEFAULT_STRATEGY",
    "get_strategy",
    "profiles_from_records",
    "progressive_alignment",
]
