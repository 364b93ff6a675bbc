"""Evaluation module for the project."""

from .evaluation import summarize_profile

__all__ = [
    "summarize_profile",
    "metrics",
]
