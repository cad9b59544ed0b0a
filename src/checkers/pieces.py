"""Defines the checkers pieces and the two players"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Self

from src.checkers.cell import BOARD_SIZE


class Player(Enum):
    RED = auto()
    BLACK = auto()

    @property
    def opponent(self) -> Player:
        return Player.BLACK if self == Player.RED else Player.RED

    @property
    def forward(self) -> int:
        """Row direction of a forward step: red moves UP the board, black moves DOWN"""
        return -1 if self == Player.RED else 1

    @property
    def promotion_row(self) -> int:
        """The row farthest away from the player's home rows"""
        return 0 if self == Player.RED else BOARD_SIZE - 1


class Rank(Enum):
    MAN = auto()
    KING = auto()


# Board diagram characters: lower case for men, upper case for kings.
DIAGRAM_TO_PLAYER: dict[str, Player] = {
    "r": Player.RED,
    "b": Player.BLACK,
}

PLAYER_TO_DIAGRAM: dict[Player, str] = {
    value: key for key, value in DIAGRAM_TO_PLAYER.items()
}

EMPTY_CELL_CHAR = "."


@dataclass(frozen=True)
class Piece:
    owner: Player
    rank: Rank = Rank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    @classmethod
    def from_diagram(cls, character: str) -> Self:
        # upper case: kings, lower case: men
        rank = Rank.KING if character.isupper() else Rank.MAN
        owner = DIAGRAM_TO_PLAYER[character.lower()]
        return cls(owner, rank)

    def to_diagram(self) -> str:
        character = PLAYER_TO_DIAGRAM[self.owner]
        return character.upper() if self.is_king else character

    def promoted(self) -> Piece:
        """Crowning a piece that already is a king changes nothing."""
        return replace(self, rank=Rank.KING)
