"""Types for the project."""

from .scoring import ScoringConfig, AMINO_ACID_CODES, GAP
from .errors import (
    ConfigurationNotSetError,
    InsufficientInputError,
    UnsupportedSymbolError,
)
from .occurrence import OccurrenceCounter
from .profile import Profile
from .alignment import AlignmentResult
from .tree import GuideTreeNode
from .evaluation import AlignmentSummary
from .sequence import FastaRecord


__all__ = [
    "ScoringConfig",
    "AMINO_ACID_CODES",
    "GAP",
    "ConfigurationNotSetError",
    "InsufficientInputError",
    "UnsupportedSymbolError",
    "OccurrenceCounter",
    "Profile",
    "AlignmentResult",
    "GuideTreeNode",
    "AlignmentSummary",
    "FastaRecord",
]
