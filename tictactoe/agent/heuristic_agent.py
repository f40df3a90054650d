"""Rule-based opponent: attack, defend, take the center, else play at random.

Single ply only. It completes its own near-complete line, blocks the
opponent's, and otherwise falls back to the center square or a random open
square. Forks and multi-move traps are not detected.
"""

from __future__ import annotations

import random
from typing import Optional

from tictactoe.game.board import Board
from tictactoe.game.lines import find_threat
from tictactoe.game.types import Marker, Markable, LineSource, Position

from .base import Agent


def attacking_move(board: LineSource, own_marker: Marker) -> Optional[Position]:
    return find_threat(board, own_marker)


def defensive_move(board: LineSource, opponent_marker: Marker) -> Optional[Position]:
    return find_threat(board, opponent_marker)


def center_move(board: Board) -> Optional[Position]:
    center = board.center_square()
    return center if board.is_empty(center) else None


def random_move(board: Markable, rng: random.Random) -> Position:
    moves = board.open_positions()
    if not moves:
        raise ValueError("No open squares left")
    return rng.choice(moves)


class HeuristicAgent(Agent):
    """Attack > defend > center > random."""

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> None:
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng

    def select_move(
        self, board: Board, own_marker: Marker, opponent_marker: Marker
    ) -> Position:
        if board.is_full():
            raise ValueError("No open squares left")

        move = attacking_move(board, own_marker)
        if move is not None:
            return move

        move = defensive_move(board, opponent_marker)
        if move is not None:
            return move

        move = center_move(board)
        if move is not None:
            return move

        return random_move(board, self.rng)

    choose_move = select_move
