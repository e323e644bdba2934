from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import List, Optional

from board_generator import generate
from board_library import BoardLibrary
from board_text import render_board
from config_io import load_json_config
from config_parsing import parse_diagnose_defaults, parse_library_config
from errors import GenerationError

DEFAULT_CONFIG = Path("config.json")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Print a lightpath board as digits (0 hole, 1 path, 2/3 switch off/on, 4 exit)."
    )
    p.add_argument("size", type=int, nargs="?", default=None, help="Board width and height.")
    p.add_argument(
        "complexity",
        type=float,
        nargs="?",
        default=None,
        help="Maximum number of tiles on the route.",
    )
    p.add_argument(
        "--board",
        type=int,
        default=None,
        help="Print board N of the library instead of generating one.",
    )
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"JSON config (default: {DEFAULT_CONFIG} if present)",
    )
    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional RNG seed for reproducible generation.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log generation details.")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Entrypoint for printing a board from the command line."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None:
        cfg = load_json_config(Path(args.config))
    elif DEFAULT_CONFIG.exists():
        cfg = load_json_config(DEFAULT_CONFIG)
    else:
        cfg = {}

    try:
        if args.board is not None:
            library_cfg = parse_library_config(cfg)
            seed = args.seed if args.seed is not None else library_cfg.seed
            library = BoardLibrary(library_cfg, rng=random.Random(seed))
            board = library[args.board]
        else:
            defaults = parse_diagnose_defaults(cfg)
            size = args.size if args.size is not None else defaults["size"]
            complexity = args.complexity if args.complexity is not None else defaults["complexity"]
            board = generate(size, complexity, random.Random(args.seed))
    except (IndexError, GenerationError) as e:
        raise SystemExit(f"error: {e}")

    print(render_board(board))


if __name__ == "__main__":
    main()
