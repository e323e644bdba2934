import random

import pytest

from board_generator import generate
from board_library import FIXED_BOARDS, FIXED_BOARD_TEXTS
from board_text import normalize_grid_lines, parse_board, render_board
from models import TileKind


def test_render_uses_digits_and_start_trailer():
    board = parse_board("000\n030\n000\nstart: 2, 2")
    assert render_board(board) == "000\n030\n000\nstart: 2, 2"


@pytest.mark.parametrize("seed", range(3))
def test_generated_board_round_trips(seed):
    board = generate(14, 18, random.Random(seed))
    again = parse_board(render_board(board))
    assert again == board
    assert again.grid.rows == board.grid.rows
    assert again.start == board.start


def test_fixed_boards_round_trip():
    for board in FIXED_BOARDS:
        assert parse_board(render_board(board)) == board


def test_fixed_board_literals_match_their_start_tiles():
    assert len(FIXED_BOARDS) == len(FIXED_BOARD_TEXTS) == 3
    first = FIXED_BOARDS[0]
    assert (first.width, first.height) == (9, 5)
    assert first.start == (3, 3)
    assert first.grid[(8, 4)] is TileKind.EXIT
    assert [b.start for b in FIXED_BOARDS] == [(3, 3), (3, 3), (3, 13)]
    for board in FIXED_BOARDS:
        assert board.grid[board.start] is TileKind.SWITCH_ON
        assert board.exit is not None


def test_short_rows_are_padded_with_holes():
    lines, width, height = normalize_grid_lines(["000", "01", "000"])
    assert (width, height) == (3, 3)
    assert lines[1] == "010"


@pytest.mark.parametrize(
    "text,message",
    [
        ("", "empty"),
        ("start: 1, 1", "empty"),
        ("000\n010\n000", "start"),
        ("000\n090\n000\nstart: 2, 2", "Unknown tile"),
        ("000\n010\n000\nstart: 4, 2", "outside"),
    ],
)
def test_parse_errors(text, message):
    with pytest.raises(ValueError, match=message):
        parse_board(text)
