"""Per-column residue tally over the fixed amino-acid alphabet."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .errors import UnsupportedSymbolError
from .scoring import AMINO_ACID_CODES

_SYMBOL_INDEX = {symbol: index for index, symbol in enumerate(AMINO_ACID_CODES)}


class OccurrenceCounter:
    """Count residues of one alignment column.

    Counts are kept in ``AMINO_ACID_CODES`` order so that the most frequent
    symbol is always the first maximum in that order.
    """

    def __init__(self) -> None:
        self.occurrences = np.zeros(len(AMINO_ACID_CODES), dtype=np.int64)

    @classmethod
    def from_column(cls, column: Iterable[str]) -> "OccurrenceCounter":
        """Return a counter that has already tallied every symbol in ``column``."""
        counter = cls()
        for symbol in column:
            counter.increase_by_one(symbol)
        return counter

    def increase_by_one(self, symbol: str) -> None:
        """Increment the tally of ``symbol``."""
        try:
            index = _SYMBOL_INDEX[symbol]
        except KeyError:
            raise UnsupportedSymbolError(
                f"symbol {symbol!r} is not a supported amino-acid code"
            ) from None
        self.occurrences[index] += 1

    @property
    def total(self) -> int:
        """Number of symbols counted since the last reset."""
        return int(self.occurrences.sum())

    def most_frequent(self) -> str:
        """Return the most frequent symbol, ties going to the earlier code."""
        if self.total == 0:
            raise ValueError("no symbols have been counted")
        return AMINO_ACID_CODES[int(np.argmax(self.occurrences))]

    def frequency_of_most_frequent(self) -> float:
        """Return the share of the column held by the most frequent symbol."""
        if self.total == 0:
            raise ValueError("no symbols have been counted")
        return float(self.occurrences.max()) / self.total

    def reset(self) -> None:
        """Zero all tallies."""
        self.occurrences[:] = 0


__all__ = ["OccurrenceCounter"]
