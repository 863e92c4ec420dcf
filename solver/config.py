from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml
from pydantic import BaseModel, Field

def load_yaml(path: str | Path) -> Dict[str, Any]:
    """Read a YAML mapping of RunConfig fields."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    return data

def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg

class ExperimentSpec(BaseModel):
    num_puzzles: int = Field(ge=1)
    empty_boxes: int = Field(ge=1, le=81)

def _default_experiments() -> List[ExperimentSpec]:
    return [ExperimentSpec(num_puzzles=n, empty_boxes=e)
            for n, e in ((10, 64), (100, 45), (1000, 32), (10000, 16))]

class RunConfig(BaseModel):
    puzzles_dir: Path = Path("data/puzzles/")
    solutions_dir: Path = Path("data/solutions/")
    puzzle_prefix: str = "PUZZLE"
    solution_prefix: str = "SOLUTION"
    num_puzzles: int = Field(default=10, ge=1)
    empty_boxes: int = Field(default=45, ge=1, le=81)
    efficient: bool = False
    seed: Optional[int] = None
    experiments: List[ExperimentSpec] = Field(default_factory=_default_experiments)

def load_config(path: str | Path | None = None, **overrides) -> RunConfig:
    """YAML file (optional) + non-None overrides -> validated RunConfig."""
    cfg: Dict[str, Any] = load_yaml(path) if path else {}
    return RunConfig(**merge_overrides(cfg, **overrides))
