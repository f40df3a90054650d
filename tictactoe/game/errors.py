"""Error kinds raised by the game core. All are recoverable by re-prompting."""

from __future__ import annotations


class TicTacToeError(ValueError):
    pass


class InvalidConfiguration(TicTacToeError):
    def __init__(self, side_length: object) -> None:
        super().__init__(
            f"Grid size must be an odd number >= 3, got {side_length!r}"
        )
        self.side_length = side_length


class InvalidPosition(TicTacToeError):
    def __init__(self, position: object) -> None:
        super().__init__(f"Position {position!r} is not on the board")
        self.position = position


class SquareOccupied(TicTacToeError):
    def __init__(self, position: int) -> None:
        super().__init__(f"Square {position} is already marked")
        self.position = position


class OutOfTurn(TicTacToeError):
    pass
