"""Line evaluation: win and threat tests over a single line of markers."""

from __future__ import annotations

from typing import Optional, Sequence

from .types import Line, LineSource, Marker, Position


def is_winning_line(markers: Sequence[Marker]) -> bool:
    """True iff every marker is non-empty and all markers are identical."""
    if not markers:
        return False
    first = markers[0]
    if first is Marker.EMPTY:
        return False
    return all(m is first for m in markers)


def is_threat_line(markers: Sequence[Marker], marker: Marker) -> bool:
    """True iff the line is one `marker` short of a win.

    Exactly len - 1 entries must be `marker` and exactly one must be empty.
    A cell holding any other marker disqualifies the line.
    """
    if marker is Marker.EMPTY:
        return False
    target = len(markers) - 1
    return (
        sum(1 for m in markers if m is marker) == target
        and sum(1 for m in markers if m is Marker.EMPTY) == 1
    )


def threat_target(board: LineSource, line: Line, marker: Marker) -> Optional[Position]:
    """Return the single empty position of `line` if it is a threat for `marker`."""
    markers = board.markers_in(line)
    if not is_threat_line(markers, marker):
        return None
    for position, m in zip(line, markers):
        if m is Marker.EMPTY:
            return position
    return None


def find_threat(board: LineSource, marker: Marker) -> Optional[Position]:
    """Scan winning lines in order; return the open square of the first threat."""
    for line in board.winning_lines():
        target = threat_target(board, line, marker)
        if target is not None:
            return target
    return None
