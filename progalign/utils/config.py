"""Load and save scoring parameters as YAML."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from progalign.types import ScoringConfig

PathLike = Union[str, Path]


def scoring_to_dict(scoring: ScoringConfig) -> Dict[str, Any]:
    """Convert a ScoringConfig into a plain dictionary suitable for YAML."""
    return asdict(scoring)


def load_scoring_config(
    yaml_path: PathLike, overrides: Dict[str, Any] | None = None
) -> ScoringConfig:
    """Load scoring parameters from a YAML file.

    The parameters may sit at the top level or under a ``scoring`` key.
    Non-``None`` values in ``overrides`` replace the file's values.
    """
    path = Path(yaml_path)
    if not path.exists():
        raise FileNotFoundError(f"Scoring config not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}

    if not isinstance(payload, dict):
        raise ValueError(
            f"Expected a mapping in {path}, got {type(payload).__name__}"
        )
    values = dict(payload.get("scoring", payload))
    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value
    return ScoringConfig.from_mapping(values)


def save_scoring_config(scoring: ScoringConfig, yaml_path: PathLike) -> None:
    """Write scoring parameters under a ``scoring`` key."""
    path = Path(yaml_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump({"scoring": scoring_to_dict(scoring)}, handle, sort_keys=False)


__all__ = ["scoring_to_dict", "load_scoring_config", "save_scoring_config"]
