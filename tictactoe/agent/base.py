from __future__ import annotations

import abc

from tictactoe.game.board import Board
from tictactoe.game.types import Marker, Position


class Agent(abc.ABC):
    @abc.abstractmethod
    def select_move(
        self, board: Board, own_marker: Marker, opponent_marker: Marker
    ) -> Position:
        """Return the open position where this agent wants to play."""

    @property
    def name(self) -> str:
        return self.__class__.__name__
