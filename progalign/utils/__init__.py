"""Utility functions for the project."""

from .fasta import read_fasta, write_profile_fasta
from .config import load_scoring_config, save_scoring_config, scoring_to_dict
from .report import format_profile, format_summary

__all__ = [
    "read_fasta",
    "write_profile_fasta",
    "load_scoring_config",
    "save_scoring_config",
    "scoring_to_dict",
    "format_profile",
    "format_summary",
]
