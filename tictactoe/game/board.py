from __future__ import annotations

from typing import Optional, Sequence

from .errors import InvalidConfiguration, InvalidPosition, SquareOccupied
from .lines import is_winning_line
from .types import Line, Marker, Position, Square

STANDARD_SIDE_LENGTH = 3
MIN_SIDE_LENGTH = 3


def is_valid_side_length(side_length: object) -> bool:
    if isinstance(side_length, bool) or not isinstance(side_length, int):
        return False
    return side_length >= MIN_SIDE_LENGTH and side_length % 2 == 1


def parse_side_length(text: str) -> Optional[int]:
    """Parse a grid size like '5'. Returns None unless it is odd and >= 3."""
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if is_valid_side_length(value) else None


def parse_position(text: str, board: Board) -> Optional[Position]:
    """Parse a square number like '5' into a position on `board`.

    Returns None if the text is not a number or falls outside the grid.
    Occupancy is not checked here.
    """
    try:
        position = int(text.strip())
    except ValueError:
        return None
    if not board.is_on_grid(position):
        return None
    return position


class Board:
    """Odd N x N board. Positions are numbered 1..N*N in reading order."""

    def __init__(self, side_length: int = STANDARD_SIDE_LENGTH) -> None:
        self.side_length = STANDARD_SIDE_LENGTH
        self.positions: list[Position] = []
        self.squares: dict[Position, Square] = {}
        self.configure(side_length)

    def configure(self, side_length: int) -> None:
        if not is_valid_side_length(side_length):
            raise InvalidConfiguration(side_length)
        self.side_length = side_length
        self.positions = list(range(1, side_length * side_length + 1))
        self.reset()

    def reset(self) -> None:
        """Replace every square with an empty one, keeping the size."""
        self.squares = {position: Square() for position in self.positions}

    def copy(self) -> Board:
        other = Board(self.side_length)
        for position, square in self.squares.items():
            other.squares[position].marker = square.marker
        return other

    # -- Markable ---------------------------------------------------------

    def is_on_grid(self, position: object) -> bool:
        return (
            isinstance(position, int)
            and not isinstance(position, bool)
            and position in self.squares
        )

    def marker_at(self, position: Position) -> Marker:
        if not self.is_on_grid(position):
            raise InvalidPosition(position)
        return self.squares[position].marker

    def __getitem__(self, position: Position) -> Marker:
        return self.marker_at(position)

    def is_empty(self, position: Position) -> bool:
        return self.marker_at(position) is Marker.EMPTY

    def mark_at(self, position: Position, marker: Marker) -> None:
        if marker is Marker.EMPTY:
            raise ValueError("Cannot mark a square with the empty marker")
        if not self.is_on_grid(position):
            raise InvalidPosition(position)
        square = self.squares[position]
        if square.is_marked:
            raise SquareOccupied(position)
        square.marker = marker

    def open_positions(self) -> list[Position]:
        return [p for p in self.positions if self.squares[p].is_unmarked]

    def is_full(self) -> bool:
        return not self.open_positions()

    @property
    def occupied_count(self) -> int:
        return len(self.positions) - len(self.open_positions())

    # -- LineSource -------------------------------------------------------

    def rows(self) -> list[Line]:
        n = self.side_length
        return [tuple(self.positions[i:i + n]) for i in range(0, len(self.positions), n)]

    def columns(self) -> list[Line]:
        return [tuple(col) for col in zip(*self.rows())]

    def diagonal(self) -> Line:
        # Element i of row i
        return tuple(row[i] for i, row in enumerate(self.rows()))

    def anti_diagonal(self) -> Line:
        # Element i of the i-th row, counting rows bottom-up
        return tuple(row[i] for i, row in enumerate(reversed(self.rows())))

    def winning_lines(self) -> list[Line]:
        return self.rows() + self.columns() + [self.diagonal(), self.anti_diagonal()]

    def markers_in(self, line: Sequence[Position]) -> list[Marker]:
        return [self.squares[p].marker for p in line]

    def winning_marker(self) -> Optional[Marker]:
        """Marker of the first completed line, scanning rows, columns, diagonals."""
        for line in self.winning_lines():
            markers = self.markers_in(line)
            if is_winning_line(markers):
                return markers[0]
        return None

    def someone_won(self) -> bool:
        return self.winning_marker() is not None

    def center_square(self) -> Position:
        return self.positions[len(self.positions) // 2]

    def __str__(self) -> str:
        n = self.side_length
        cells = [str(self.squares[p]) for p in self.positions]
        return "\n".join("|".join(cells[i:i + n]) for i in range(0, len(cells), n))
