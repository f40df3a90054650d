from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

Position = int  # 1-indexed, row-major reading order
Line = tuple[int, ...]


class Marker(enum.Enum):
    EMPTY = " "
    X = "x"
    O = "o"

    @property
    def other(self) -> Marker:
        if self is Marker.EMPTY:
            return Marker.EMPTY
        return Marker.O if self is Marker.X else Marker.X

    def __str__(self) -> str:
        return self.value


PLAYER_MARKERS = (Marker.X, Marker.O)


@dataclass
class Square:
    marker: Marker = Marker.EMPTY

    @property
    def is_marked(self) -> bool:
        return self.marker is not Marker.EMPTY

    @property
    def is_unmarked(self) -> bool:
        return self.marker is Marker.EMPTY

    def __str__(self) -> str:
        return str(self.marker)


class Markable(Protocol):
    """Something whose positions can be marked and queried."""

    def mark_at(self, position: Position, marker: Marker) -> None: ...

    def marker_at(self, position: Position) -> Marker: ...

    def open_positions(self) -> list[Position]: ...


class LineSource(Protocol):
    """Something that can enumerate its winning lines and read them."""

    def winning_lines(self) -> list[Line]: ...

    def markers_in(self, line: Sequence[Position]) -> list[Marker]: ...

    def center_square(self) -> Position: ...


def parse_marker(text: str) -> Optional[Marker]:
    """Parse 'x' or 'o' (any case). Returns None for anything else."""
    text = text.strip().lower()
    for marker in PLAYER_MARKERS:
        if text == marker.value:
            return marker
    return None
