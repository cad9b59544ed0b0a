"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Player, Status

BOARD_SIZE = 8
DIAGRAM_CHARACTERS = set(".rRbB")

Coordinates = tuple[int, int]


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    starting_diagram: Optional[list[str]] = None
    starting_player: Player = Player.RED

    @field_validator("starting_diagram")
    @classmethod
    def validate_starting_diagram(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        if value is None:
            return value

        if len(value) != BOARD_SIZE:
            raise InvalidRequestError(
                f"Board diagram must contain {BOARD_SIZE} rows, got {len(value)}."
            )
        for row in value:
            if len(row) != BOARD_SIZE or not set(row) <= DIAGRAM_CHARACTERS:
                raise InvalidRequestError(
                    f"Cannot interpret {row!r} as a row of the board diagram."
                )
        return value


class CellRequest(BaseModel):
    """Shared by every request that points at a cell on the board."""

    game_id: UUID
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Coordinate {value} is off the board (must be 0 - {BOARD_SIZE - 1})."
            )
        return value


class SelectRequest(CellRequest):
    pass


class MoveRequest(CellRequest):
    pass


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalTargetsRequest(BaseModel):
    game_id: UUID


class ResetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board: list[str]
    current_player: Player
    selection: Optional[Coordinates]
    status: Status
    winner: Optional[Player]
    piece_counts: dict[Player, int]


class ActionResponse(BaseModel):
    """Outcome of a selection / move attempt, together with the game after the attempt."""

    success: bool
    game: GameResponse


class LegalTargetsResponse(BaseModel):
    game_id: UUID
    selection: Optional[Coordinates]
    targets: list[Coordinates]
