from __future__ import annotations

import random
from typing import Optional

from tictactoe.game.board import Board
from tictactoe.game.types import Marker, Position

from .base import Agent


class RandomAgent(Agent):
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def select_move(
        self, board: Board, own_marker: Marker, opponent_marker: Marker
    ) -> Position:
        moves = board.open_positions()
        if not moves:
            raise ValueError("No open squares left")
        return self.rng.choice(moves)
