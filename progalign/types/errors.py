"""Exceptions raised by the alignment core."""


class InsufficientInputError(ValueError):
    """Raised when fewer than two sequences are supplied for alignment."""


class ConfigurationNotSetError(ValueError):
    """Raised when a scoring parameter is read before it was provided."""


class UnsupportedSymbolError(ValueError):
    """Raised when a residue outside the amino-acid alphabet is counted."""


__all__ = [
    "InsufficientInputError",
    "ConfigurationNotSetError",
    "UnsupportedSymbolError",
]
