"""The Game board implements all rules that effect the `position` (in checkers: which piece stands on which dark square)"""

from dataclasses import dataclass
from typing import Optional, Self

from src.checkers.cell import BOARD_SIZE, Cell, all_cells
from src.checkers.moves import Move
from src.checkers.pieces import (
    DIAGRAM_TO_PLAYER,
    EMPTY_CELL_CHAR,
    Piece,
    Player,
    Rank,
)
from src.core.exceptions import InvalidDiagramError

# Each side starts on the dark squares of the three rows closest to them
HOME_ROWS: dict[Player, range] = {
    Player.BLACK: range(0, 3),
    Player.RED: range(BOARD_SIZE - 3, BOARD_SIZE),
}

STARTING_DIAGRAM: list[str] = [
    ".b.b.b.b",
    "b.b.b.b.",
    ".b.b.b.b",
    "........",
    "........",
    "r.r.r.r.",
    ".r.r.r.r",
    "r.r.r.r.",
]

EMPTY_DIAGRAM: list[str] = [EMPTY_CELL_CHAR * BOARD_SIZE] * BOARD_SIZE


@dataclass
class Board:
    position: dict[Cell, Optional[Piece]]

    @classmethod
    def empty(cls) -> Self:
        return cls({cell: None for cell in all_cells()})

    @classmethod
    def starting_position(cls) -> Self:
        """Men of both players on the dark squares of their home rows. Everything else empty."""
        board = cls.empty()
        for player, rows in HOME_ROWS.items():
            for cell in board.position:
                if cell.row in rows and cell.is_dark():
                    board.place_piece(Piece(player, Rank.MAN), cell)
        return board

    @classmethod
    def from_diagram(cls, rows: list[str]) -> Self:
        """Construct a board from a diagram: one string per row, top row (row 0) first.

        ex. a black man on (3,2) that can jump a red man on (4,3):
        ........
        ........
        ........
        ..b.....
        ...r....
        ........
        ........
        ........
        * '.' is an empty cell
        * 'b' / 'r' are black / red men
        * 'B' / 'R' are black / red kings
        """
        if len(rows) != BOARD_SIZE:
            raise InvalidDiagramError(
                f"A board diagram needs {BOARD_SIZE} rows, got {len(rows)}."
            )

        board = cls.empty()
        for row, diagram_row in enumerate(rows):
            if len(diagram_row) != BOARD_SIZE:
                raise InvalidDiagramError(
                    f"Row {row} of the diagram must have {BOARD_SIZE} cells: {diagram_row!r}"
                )
            for col, character in enumerate(diagram_row):
                if character == EMPTY_CELL_CHAR:
                    continue
                if character.lower() not in DIAGRAM_TO_PLAYER:
                    raise InvalidDiagramError(
                        f"Unknown character {character!r} in row {row} of the diagram."
                    )
                cell = Cell(row, col)
                if not cell.is_dark():
                    raise InvalidDiagramError(
                        f"Pieces can only stand on dark squares, not on {cell.to_tuple()}."
                    )
                board.place_piece(Piece.from_diagram(character), cell)
        return board

    def to_diagram(self) -> list[str]:
        return [self._row_to_diagram(row) for row in range(BOARD_SIZE)]

    def _row_to_diagram(self, row: int) -> str:
        """Diagram string of a single row"""
        characters: list[str] = []
        for col in range(BOARD_SIZE):
            piece = self.piece(Cell(row, col))
            characters.append(piece.to_diagram() if piece else EMPTY_CELL_CHAR)
        return "".join(characters)

    def piece(self, cell: Cell) -> Optional[Piece]:
        return self.position[cell]

    def is_empty(self, cell: Cell) -> bool:
        return self.position[cell] is None

    def locate_player(self, player: Player) -> list[Cell]:
        return [
            cell
            for cell, piece in self.position.items()
            if piece is not None and piece.owner == player
        ]

    def place_piece(self, piece: Piece, cell: Cell) -> None:
        self.position[cell] = piece

    def remove_piece(self, cell: Cell) -> None:
        self.position[cell] = None

    def move_piece(self, move: Move) -> None:
        """Update the position on the board. Removing a jumped piece is up to the caller."""
        piece_that_moved = self.piece(move.from_cell)
        self.position[move.from_cell] = None
        self.position[move.to_cell] = piece_that_moved

    def promote_piece(self, cell: Cell) -> None:
        piece = self.piece(cell)
        if piece is not None:
            self.position[cell] = piece.promoted()

    def count_pieces(self) -> dict[Player, int]:
        """Tally how many pieces each player still has on the board"""
        return {player: len(self.locate_player(player)) for player in Player}
