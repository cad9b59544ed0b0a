"""
The Game class is the rules engine, and the entrypoint into the domain layer for the service layer.
It owns the board, whose turn it is, the selected piece, and whether the game has ended.
Every action reports success with a boolean: a rejected selection or move is not an error, it simply does not change the game.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.checkers.board import Board
from src.checkers.cell import Cell
from src.checkers.moves import Move, is_valid_move, legal_moves
from src.checkers.pieces import Player
from src.core.exceptions import GameStateError
from src.core.models import GameModel

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = auto()
    GAME_OVER = auto()


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_player: Player
    selection: Optional[Cell]
    status: Status
    loser: Optional[Player] = None

    @classmethod
    def new_game(
        cls,
        starting_diagram: Optional[list[str]] = None,
        starting_player: Player = Player.RED,
    ) -> Self:
        """Red starts a regular game. A custom diagram / starting player is used to set up a specific position."""
        board = (
            Board.from_diagram(starting_diagram)
            if starting_diagram is not None
            else Board.starting_position()
        )
        game = cls(
            board=board,
            current_player=starting_player,
            selection=None,
            status=Status.IN_PROGRESS,
        )
        # a contrived position might already be decided
        game._update_game_status()
        return game

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in Status])}"
            )
        player_name = model.current_player.upper()
        if player_name not in Player.__members__:
            raise GameStateError(f"Unknown player: {model.current_player!r}")
        if model.loser is not None and model.loser.upper() not in Player.__members__:
            raise GameStateError(f"Unknown player: {model.loser!r}")

        selection = Cell(*model.selection) if model.selection is not None else None
        if selection is not None and not selection.is_within_bounds():
            raise GameStateError(f"Selected cell {model.selection} is off the board.")

        # create the Game
        return cls(
            board=Board.from_diagram(model.board),
            current_player=Player[player_name],
            selection=selection,
            status=Status[status_name],
            loser=Player[model.loser.upper()] if model.loser else None,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            board=self.board.to_diagram(),
            current_player=self.current_player.name.lower(),
            selection=self.selection.to_tuple() if self.selection else None,
            status=self.status.name.lower().replace("_", " "),
            loser=self.loser.name.lower() if self.loser else None,
        )

    @property
    def game_over(self) -> bool:
        return self.status == Status.GAME_OVER

    @property
    def winner(self) -> Optional[Player]:
        """The player who still has pieces once the other one ran out."""
        if self.loser is None:
            return None
        return self.loser.opponent

    def initialize(self) -> None:
        """Back to the starting position. Can be called at any time, also mid-game or after the game ended."""
        self.board = Board.starting_position()
        self.current_player = Player.RED
        self.selection = None
        self.status = Status.IN_PROGRESS
        self.loser = None

    def select_piece(self, row: int, col: int) -> bool:
        """Select one of your own pieces to move next. A failed selection leaves the previous selection in place."""
        cell = Cell(row, col)
        if not cell.is_within_bounds():
            logger.debug("Selection rejected: %s is off the board", cell.to_tuple())
            return False

        piece = self.board.piece(cell)
        if piece is None or piece.owner != self.current_player:
            logger.debug(
                "Selection rejected: %s holds no %s piece",
                cell.to_tuple(),
                self.current_player.name.lower(),
            )
            return False

        self.selection = cell
        return True

    def move_to(self, target_row: int, target_col: int) -> bool:
        """
        Attempt to move the selected piece
        -----

        1. validate the move (there must be a selection, and the move must follow the movement rules)
        2. update the board: move the piece, remove a jumped piece
        3. promote the piece if it reached the far row
        4. clear the selection (happens for a rejected move as well)
        5. hand the turn to the opponent
        6. check if the game has ended
        """
        if self.selection is None:
            logger.debug("Move rejected: no piece selected")
            return False

        move = Move(from_cell=self.selection, to_cell=Cell(target_row, target_col))
        if not self._is_legal(move):
            logger.debug(
                "Move rejected: %s -> %s",
                move.from_cell.to_tuple(),
                move.to_cell.to_tuple(),
            )
            self._clear_selection()
            return False

        self._update_board(move)
        self._promote_if_needed(move.to_cell)
        self._clear_selection()
        self._switch_player()
        self._update_game_status()
        return True

    def is_selected(self, row: int, col: int) -> bool:
        return self.selection == Cell(row, col)

    def legal_targets(self) -> list[Cell]:
        """Cells the selected piece may move to. Can be used to highlight them."""
        if self.selection is None or not self._owns_selection():
            return []
        return [move.to_cell for move in legal_moves(self.selection, self.board)]

    # -- PRIVATE HELPERS ---
    def _owns_selection(self) -> bool:
        # for the type checker: only called once a selection exists
        assert self.selection
        piece = self.board.piece(self.selection)
        return piece is not None and piece.owner == self.current_player

    def _is_legal(self, move: Move) -> bool:
        return self._owns_selection() and is_valid_move(move, self.board)

    def _update_board(self, move: Move) -> None:
        """Move the piece, and take the piece that was jumped over"""
        self.board.move_piece(move)
        jumped_cell = move.jumped_cell
        if jumped_cell is not None:
            self.board.remove_piece(jumped_cell)

    def _promote_if_needed(self, cell: Cell) -> None:
        piece = self.board.piece(cell)
        if piece is not None and cell.row == piece.owner.promotion_row:
            self.board.promote_piece(cell)

    def _clear_selection(self) -> None:
        self.selection = None

    def _switch_player(self) -> None:
        self.current_player = self.current_player.opponent

    def _update_game_status(self) -> None:
        """The game ends as soon as one of the players has no pieces left. Only initialize() starts a new one."""
        piece_counts = self.board.count_pieces()
        for player, count in piece_counts.items():
            if count == 0:
                self._end_game(loser=player)
                return

    def _end_game(self, loser: Player) -> None:
        self.status = Status.GAME_OVER
        self.loser = loser
        logger.info("Game over! %s wins.", loser.opponent.name.lower())
