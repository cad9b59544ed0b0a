"""Orchestration of communication from the presentation layer to business logic and storage (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    ActionResponse,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalTargetsRequest,
    LegalTargetsResponse,
    MoveRequest,
    NewGameRequest,
    ResetGameRequest,
    SelectRequest,
)
from src.checkers.game import Game
from src.checkers.pieces import Player as DomainPlayer
from src.core.exceptions import GameStateError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Player, Status
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class CheckersService:
    """Orchestration of layers for checkers games. Every game is its own, independent Game instance."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- Presentation layer calls ---
    def create_new_game(self, request: NewGameRequest) -> GameResponse:
        """Start a game from the regular starting position (or from a given diagram)."""

        new_game = Game.new_game(
            starting_diagram=request.starting_diagram,
            starting_player=DomainPlayer[request.starting_player.name],
        )
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Everything needed to draw the board: pieces, turn indicator, highlighted cell, and the winner once the game ended.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def select_piece(self, request: SelectRequest) -> ActionResponse:
        """Select a piece of the player whose turn it is."""
        game = self._load_game_in_progress(request.game_id)
        success = game.select_piece(request.row, request.col)
        return self._store_and_respond(request.game_id, game, success)

    def move_piece(self, request: MoveRequest) -> ActionResponse:
        """Move the selected piece to the requested cell."""
        game = self._load_game_in_progress(request.game_id)
        success = game.move_to(request.row, request.col)
        return self._store_and_respond(request.game_id, game, success)

    def legal_targets(self, request: LegalTargetsRequest) -> LegalTargetsResponse:
        """Cells the selected piece can move to."""
        game = self._load_game_in_progress(request.game_id)
        return LegalTargetsResponse(
            game_id=request.game_id,
            selection=game.selection.to_tuple() if game.selection else None,
            targets=[cell.to_tuple() for cell in game.legal_targets()],
        )

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        """Put the game back into the starting position (also allowed once the game has ended)."""
        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)
        game.initialize()
        after_reset = game.to_model()
        self.repo.update_game(request.game_id, after_reset)
        logger.info("Reset game %s", request.game_id)
        return self._create_game_response(request.game_id, after_reset)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        deleted = self.repo.delete_game(request.game_id)
        if deleted is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")

    # -- Internal helpers --
    def _load_game_in_progress(self, game_id: UUID) -> Game:
        """Selecting / moving is not allowed once the game has ended."""
        game = Game.from_model(self._fetch_game(game_id))
        if game.game_over:
            raise GameStateError(f"Game is not in progress. status: {game.status}")
        return game

    def _store_and_respond(self, game_id: UUID, game: Game, success: bool) -> ActionResponse:
        after_action = game.to_model()
        self.repo.update_game(game_id, after_action)
        return ActionResponse(
            success=success, game=self._create_game_response(game_id, after_action)
        )

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = Game.from_model(model)
        piece_counts = game.board.count_pieces()
        return GameResponse(
            game_id=game_id,
            board=model.board,
            current_player=Player(model.current_player),
            selection=model.selection,
            status=Status(model.status),
            winner=Player[game.winner.name] if game.winner else None,
            piece_counts={Player[p.name]: count for p, count in piece_counts.items()},
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
