"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the presentation side (higher) and the domain/repository layers (lower) use the model defined here to send to/receive from the Service
(Decouples the data model of each layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
DiagramRow = str
PlayerName = str
Coordinates = tuple[int, int]


@dataclass
class GameModel:
    """Transport-safe representation of a checkers game used between Service, Repository, and Game layers."""

    board: list[DiagramRow]
    current_player: PlayerName
    selection: Optional[Coordinates]
    status: str
    loser: Optional[PlayerName] = None
