"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    GAME_OVER = "game over"


# --- NOTE Same name as the domain enum in src/checkers/pieces.py, but string valued so it can travel across the boundary.
# --- Let the imports show which version is used in what part of the code


class Player(StrEnum):
    RED = "red"
    BLACK = "black"
