"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest

from src.checkers.board import EMPTY_DIAGRAM
from src.db.memory_repository import InMemoryGameRepository


@pytest.fixture
def in_memory_repo() -> Generator[InMemoryGameRepository, None, None]:
    """Fresh repository for every test, so tests of the service layer stay independent of each other."""
    repo = InMemoryGameRepository()
    yield repo


@pytest.fixture
def diagram_with() -> Callable[[dict[tuple[int, int], str]], list[str]]:
    """Call the inner function with {(row, col): diagram character} to build a diagram of an otherwise empty board"""

    def _create_diagram(pieces: dict[tuple[int, int], str]) -> list[str]:
        rows = [list(row) for row in EMPTY_DIAGRAM]
        for (row, col), character in pieces.items():
            rows[row][col] = character
        return ["".join(row) for row in rows]

    return _create_diagram
