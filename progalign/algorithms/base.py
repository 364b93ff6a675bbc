"""Shared interface for guide-order strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from progalign.types import Profile, ScoringConfig


class GuideStrategy(ABC):
    """Decides in which order profiles are merged into one alignment."""

    name: str = ""

    @abstractmethod
    def align(self, profiles: Sequence[Profile], scoring: ScoringConfig) -> Profile:
        """Merge the given profiles into a single profile."""
        raise NotImplementedError


__all__ = ["GuideStrategy"]
