"""Unit tests for /src/checkers/board.py"""

from typing import Callable

import pytest

from src.checkers.board import EMPTY_DIAGRAM, STARTING_DIAGRAM, Board
from src.checkers.cell import BOARD_SIZE, Cell
from src.checkers.moves import Move
from src.checkers.pieces import Piece, Player, Rank
from src.core.exceptions import InvalidDiagramError

DiagramFactory = Callable[[dict[tuple[int, int], str]], list[str]]


# -- CREATION LOGIC ---
def test_creating_board_in_starting_position() -> None:
    """Black men on the dark squares of rows 0-2, red men on the dark squares of rows 5-7, the rest is empty."""
    board = Board.starting_position()

    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            cell = Cell(row, col)
            piece = board.piece(cell)
            if not cell.is_dark() or row in (3, 4):
                assert piece is None
            elif row < 3:
                assert piece == Piece(Player.BLACK, Rank.MAN)
            else:
                assert piece == Piece(Player.RED, Rank.MAN)


def test_starting_position_has_twelve_pieces_each() -> None:
    board = Board.starting_position()
    assert board.count_pieces() == {Player.RED: 12, Player.BLACK: 12}


def test_starting_position_matches_starting_diagram() -> None:
    assert Board.starting_position().to_diagram() == STARTING_DIAGRAM
    assert Board.from_diagram(STARTING_DIAGRAM) == Board.starting_position()


def test_empty_board() -> None:
    board = Board.from_diagram(EMPTY_DIAGRAM)
    assert all(piece is None for piece in board.position.values())
    assert board.count_pieces() == {Player.RED: 0, Player.BLACK: 0}


def test_diagram_with_kings(diagram_with: DiagramFactory) -> None:
    diagram = diagram_with({(0, 1): "R", (7, 6): "B", (3, 2): "b"})
    board = Board.from_diagram(diagram)
    assert board.piece(Cell(0, 1)) == Piece(Player.RED, Rank.KING)
    assert board.piece(Cell(7, 6)) == Piece(Player.BLACK, Rank.KING)
    assert board.piece(Cell(3, 2)) == Piece(Player.BLACK, Rank.MAN)
    assert board.to_diagram() == diagram


@pytest.mark.parametrize(
    "diagram",
    [
        EMPTY_DIAGRAM[:7],  # too few rows
        EMPTY_DIAGRAM + ["........"],  # too many rows
        ["......."] + EMPTY_DIAGRAM[1:],  # row too short
        [".x......"] + EMPTY_DIAGRAM[1:],  # unknown character
        ["r......."] + EMPTY_DIAGRAM[1:],  # piece on a light square
    ],
)
def test_invalid_diagrams(diagram: list[str]) -> None:
    with pytest.raises(InvalidDiagramError):
        Board.from_diagram(diagram)


# -- BOARD UPDATES ---
def test_move_piece_updates_position() -> None:
    board = Board.starting_position()
    board.move_piece(Move(Cell(5, 0), Cell(4, 1)))
    assert board.piece(Cell(5, 0)) is None
    assert board.piece(Cell(4, 1)) == Piece(Player.RED, Rank.MAN)


def test_remove_and_place_piece() -> None:
    board = Board.empty()
    board.place_piece(Piece(Player.BLACK), Cell(2, 3))
    assert not board.is_empty(Cell(2, 3))
    board.remove_piece(Cell(2, 3))
    assert board.is_empty(Cell(2, 3))


def test_promote_piece() -> None:
    board = Board.empty()
    board.place_piece(Piece(Player.RED), Cell(0, 3))
    board.promote_piece(Cell(0, 3))
    assert board.piece(Cell(0, 3)) == Piece(Player.RED, Rank.KING)


def test_promote_empty_cell_does_nothing() -> None:
    board = Board.empty()
    board.promote_piece(Cell(0, 3))
    assert board.is_empty(Cell(0, 3))


def test_locate_player(diagram_with: DiagramFactory) -> None:
    board = Board.from_diagram(diagram_with({(0, 1): "b", (2, 3): "B", (5, 4): "r"}))
    assert sorted(board.locate_player(Player.BLACK), key=Cell.to_tuple) == [
        Cell(0, 1),
        Cell(2, 3),
    ]
    assert board.locate_player(Player.RED) == [Cell(5, 4)]
    assert board.count_pieces() == {Player.RED: 1, Player.BLACK: 2}
