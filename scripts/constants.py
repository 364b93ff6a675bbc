"""Constants for the project."""

from pathlib import Path
from typing import Dict

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Data directories
# ============================================================================
DATA_FOLDER = PROJECT_ROOT / "data"
FASTA_FOLDER = DATA_FOLDER / "fasta"
EXAMPLE_FASTA = FASTA_FOLDER / "example.fa"

# ============================================================================
# Configuration
# ============================================================================
CONFIG_FOLDER = PROJECT_ROOT / "config"
SCORING_YAML = CONFIG_FOLDER / "scoring.yaml"

# ============================================================================
# Results directories
# ============================================================================
RESULTS_FOLDER = PROJECT_ROOT / "results"

# Strategy comparison tables (from compare_strategies.py)
COMPARISON_FOLDER = RESULTS_FOLDER / "comparison"

# ============================================================================
# Scoring defaults
# ============================================================================
DEFAULT_MATCH_SCORE = 4
DEFAULT_MISMATCH_SCORE = 2
DEFAULT_GAP_PENALTY = 1

# ============================================================================
# Logging
# ============================================================================
LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"
LOG_LEVELS: Dict[bool, str] = {True: "DEBUG", False: "WARNING"}
