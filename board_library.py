from __future__ import annotations

import logging
import random
from typing import Dict, Iterator, List, Optional

from board_generator import BoardGenerator
from board_text import parse_boards
from models import Board, LibraryConfig

logger = logging.getLogger(__name__)

# Tutorial boards shown before any generated one.
FIXED_BOARD_TEXTS: List[str] = [
    """
    000000000
    011103110
    013101010
    011112040
    000000000
    start: 3, 3
    """,
    """
    00000000
    00100000
    01310140
    00100100
    00200120
    00110010
    00011310
    00000000
    start: 3, 3
    """,
    """
    000000000000000
    000003120000000
    000001011000000
    000001001100000
    001111100110000
    001100100011110
    001110100000040
    000010100000000
    000010111100110
    000010000110100
    001120000010110
    001000111010010
    013112101011010
    001000001111010
    000000000000000
    start: 3, 13
    """,
]

FIXED_BOARDS: List[Board] = parse_boards(FIXED_BOARD_TEXTS)


class BoardLibrary:
    """Boards indexed 1..total: the fixed tutorial boards, then generated ones.

    Generated boards are built on first access and cached. They all draw from
    the library's random source, so a seeded library gives the same boards
    when walked in order.
    """

    def __init__(
        self,
        config: LibraryConfig,
        rng: Optional[random.Random] = None,
        fixed: Optional[List[Board]] = None,
    ) -> None:
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.fixed = list(FIXED_BOARDS if fixed is None else fixed)
        self.generator = BoardGenerator(self.rng)
        self._generated: Dict[int, Board] = {}

    def __len__(self) -> int:
        return max(self.config.total, len(self.fixed))

    def __iter__(self) -> Iterator[Board]:
        for index in range(1, len(self) + 1):
            yield self[index]

    def __getitem__(self, index: int) -> Board:
        if not 1 <= index <= len(self):
            raise IndexError(f"Board {index} is outside 1..{len(self)}")
        if index <= len(self.fixed):
            return self.fixed[index - 1]
        if index not in self._generated:
            self._generated[index] = self._build(index)
        return self._generated[index]

    def _build(self, index: int) -> Board:
        size = self.config.size_for(index)
        complexity = self.config.complexity_for(index)
        board = self.generator.generate(size, complexity)
        logger.info("built board %s: %sx%s, complexity %s", index, size, size, complexity)
        return board

    def build_all(self) -> List[Board]:
        return list(self)
