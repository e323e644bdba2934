from __future__ import annotations

from typing import Any, Dict

from board_library import FIXED_BOARDS
from models import LibraryConfig
from utils import deep_get


def parse_library_config(cfg: Dict[str, Any]) -> LibraryConfig:
    """Parse the board library settings from config data.

    Args:
        cfg: Whole config dict; settings are read from its "library" section.

    Returns:
        LibraryConfig with defaults applied. ``total`` never drops below the
        number of fixed tutorial boards.
    """
    raw = deep_get(cfg, "library", {})
    return LibraryConfig.from_dict(raw, min_total=len(FIXED_BOARDS))


def parse_diagnose_defaults(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Optional defaults for the diagnostic command.
    Allows config like:
      "diagnose": { "size": 20, "complexity": 10 }
    """
    size = deep_get(cfg, "diagnose.size", 20)
    complexity = deep_get(cfg, "diagnose.complexity", 10)
    try:
        size = int(size)
    except (TypeError, ValueError):
        size = 20
    try:
        complexity = float(complexity)
    except (TypeError, ValueError):
        complexity = 10.0
    return {"size": size, "complexity": complexity}
