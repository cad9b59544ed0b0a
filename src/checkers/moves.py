"""
Geometry of checkers moves and the rules a single move must follow.

Two kinds of move exist:
* a step: one cell diagonally. Men may only step forward, kings either way.
* a jump: two cells diagonally, over an opponent's piece (which gets captured). Jumps are not direction checked.

Checking whose turn it is, applying the move, and everything that follows (promotion, turn switch, game over) is done by Game.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Self

from src.checkers.cell import Cell
from src.checkers.pieces import Piece, Player


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, cell: Cell) -> Optional[Piece]: ...
    def is_empty(self, cell: Cell) -> bool: ...


Vector = tuple[int, int]

DIAGONALS: list[Vector] = [(-1, -1), (-1, 1), (1, -1), (1, 1)]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_cell: Cell
    to_cell: Cell

    @classmethod
    def from_coordinates(cls, from_rc: tuple[int, int], to_rc: tuple[int, int]) -> Self:
        return cls(Cell(*from_rc), Cell(*to_rc))

    @property
    def d_row(self) -> int:
        return self.to_cell.row - self.from_cell.row

    @property
    def d_col(self) -> int:
        return self.to_cell.col - self.from_cell.col

    @property
    def is_step(self) -> bool:
        return abs(self.d_row) == 1 and abs(self.d_col) == 1

    @property
    def is_jump(self) -> bool:
        return abs(self.d_row) == 2 and abs(self.d_col) == 2

    @property
    def jumped_cell(self) -> Optional[Cell]:
        """The cell that is jumped over. Only a jump has one."""
        if not self.is_jump:
            return None
        return self.from_cell.midpoint(self.to_cell)


# --- MOVEMENT RULES ---
def is_valid_step(move: Move, piece: Piece) -> bool:
    """A single diagonal step must be forward, unless the piece is a king"""
    if piece.is_king:
        return True
    return move.d_row == piece.owner.forward


def is_valid_jump(move: Move, board: Board, player: Player) -> bool:
    """The cell jumped over must hold a piece of the opponent"""
    jumped_cell = move.jumped_cell
    if jumped_cell is None:
        return False
    jumped_piece = board.piece(jumped_cell)
    return jumped_piece is not None and jumped_piece.owner != player


def is_valid_move(move: Move, board: Board) -> bool:
    """
    Validate a move for the piece standing on the move's starting cell.
    ----

    ---
    **All must hold**
    1. Both cells are on the board and there is a piece on the starting cell.
    2. The target cell is empty.
    3. The move is a diagonal step or a diagonal jump.
    4. step --> forward for men, any direction for kings.
    5. jump --> the cell in between holds an opponent's piece.
    """
    if not (move.from_cell.is_within_bounds() and move.to_cell.is_within_bounds()):
        return False

    piece = board.piece(move.from_cell)
    if piece is None:
        return False

    if not board.is_empty(move.to_cell):
        return False

    if move.is_step:
        return is_valid_step(move, piece)

    if move.is_jump:
        return is_valid_jump(move, board, piece.owner)

    # not a diagonal step or jump
    return False


def candidate_moves(cell: Cell) -> list[Move]:
    """Every diagonal step and jump from the cell that stays on the board. Legality is not checked here."""
    moves: list[Move] = []
    for d_row, d_col in DIAGONALS:
        for distance in (1, 2):
            target = cell.offset(d_row * distance, d_col * distance)
            if target.is_within_bounds():
                moves.append(Move(from_cell=cell, to_cell=target))
    return moves


def legal_moves(cell: Cell, board: Board) -> list[Move]:
    """Moves the piece on the cell is allowed to make."""
    return [move for move in candidate_moves(cell) if is_valid_move(move, board)]
