"""Progressive multiple sequence alignment guided by consensus scores or an NJ tree."""

from loguru import logger

# Library code stays silent unless a caller opts in with logger.enable("progalign").
logger.disable("progalign")

__version__ = "0.1.0"
