import pytest

from tictactoe.game.board import (
    STANDARD_SIDE_LENGTH,
    Board,
    is_valid_side_length,
    parse_position,
    parse_side_length,
)
from tictactoe.game.errors import InvalidConfiguration, InvalidPosition, SquareOccupied
from tictactoe.game.types import Marker

X, O = Marker.X, Marker.O

ODD_SIZES = [3, 5, 7, 9, 11]


def _fill(board: Board, layout: str) -> None:
    """Mark squares from a row-major layout like 'xo./.x./..o' (. is empty)."""
    cells = layout.replace("/", "")
    for position, ch in zip(board.positions, cells):
        if ch in "xo":
            board.mark_at(position, Marker(ch))


class TestParsing:
    def test_parse_position(self):
        b = Board()
        assert parse_position("1", b) == 1
        assert parse_position(" 9 ", b) == 9

    def test_parse_position_invalid(self):
        b = Board()
        assert parse_position("", b) is None
        assert parse_position("0", b) is None
        assert parse_position("10", b) is None
        assert parse_position("a", b) is None
        assert parse_position("-1", b) is None

    def test_parse_position_bigger_board(self):
        assert parse_position("25", Board(5)) == 25

    def test_parse_side_length(self):
        assert parse_side_length("3") == 3
        assert parse_side_length(" 7") == 7
        assert parse_side_length("4") is None
        assert parse_side_length("1") is None
        assert parse_side_length("big") is None

    def test_is_valid_side_length(self):
        assert is_valid_side_length(5)
        assert not is_valid_side_length(2)
        assert not is_valid_side_length(-3)
        assert not is_valid_side_length(True)
        assert not is_valid_side_length(3.0)


class TestConfigure:
    def test_default_is_standard(self):
        b = Board()
        assert b.side_length == STANDARD_SIDE_LENGTH
        assert b.positions == list(range(1, 10))

    @pytest.mark.parametrize("n", ODD_SIZES)
    def test_sizes(self, n):
        b = Board(n)
        assert len(b.open_positions()) == n * n
        assert len(b.squares) == n * n
        lines = b.winning_lines()
        assert len(lines) == 2 * n + 2
        assert all(len(line) == n for line in lines)

    @pytest.mark.parametrize("bad", [0, 1, 2, 4, 6, -3])
    def test_invalid_sizes(self, bad):
        with pytest.raises(InvalidConfiguration):
            Board(bad)

    def test_invalid_reconfigure_keeps_board(self):
        b = Board(5)
        b.mark_at(1, X)
        with pytest.raises(InvalidConfiguration):
            b.configure(4)
        assert b.side_length == 5
        assert b[1] is X

    def test_configure_twice_is_empty(self):
        b = Board(5)
        b.mark_at(13, X)
        b.configure(5)
        assert len(b.open_positions()) == 25
        b.configure(5)
        assert len(b.open_positions()) == 25

    def test_reconfigure_changes_size(self):
        b = Board()
        b.mark_at(5, O)
        b.configure(7)
        assert b.side_length == 7
        assert len(b.open_positions()) == 49

    def test_reset(self):
        b = Board()
        b.mark_at(1, X)
        b.reset()
        assert b.is_empty(1)
        assert len(b.squares) == 9


class TestMarking:
    def test_mark_and_get(self):
        b = Board()
        b.mark_at(4, X)
        assert b.marker_at(4) is X
        assert b[4] is X
        assert not b.is_empty(4)
        assert 4 not in b.open_positions()

    def test_occupied(self):
        b = Board()
        b.mark_at(4, X)
        with pytest.raises(SquareOccupied):
            b.mark_at(4, O)
        assert b[4] is X

    def test_occupied_same_marker(self):
        b = Board()
        b.mark_at(4, X)
        with pytest.raises(SquareOccupied):
            b.mark_at(4, X)

    @pytest.mark.parametrize("pos", [0, 10, -1, "5", None])
    def test_invalid_position(self, pos):
        b = Board()
        with pytest.raises(InvalidPosition):
            b.mark_at(pos, X)

    def test_marker_at_invalid_position(self):
        with pytest.raises(InvalidPosition):
            Board().marker_at(42)

    def test_cannot_mark_empty(self):
        with pytest.raises(ValueError):
            Board().mark_at(1, Marker.EMPTY)

    def test_open_positions_order(self):
        b = Board()
        b.mark_at(5, X)
        b.mark_at(2, O)
        assert b.open_positions() == [1, 3, 4, 6, 7, 8, 9]
        assert b.occupied_count == 2

    def test_is_full(self):
        b = Board()
        assert not b.is_full()
        _fill(b, "xox/oxo/oxo")
        assert b.is_full()

    def test_copy_is_independent(self):
        b = Board()
        b.mark_at(1, X)
        c = b.copy()
        c.mark_at(2, O)
        assert c[1] is X
        assert b.is_empty(2)


class TestLines:
    def test_rows_columns_3x3(self):
        b = Board()
        assert b.rows() == [(1, 2, 3), (4, 5, 6), (7, 8, 9)]
        assert b.columns() == [(1, 4, 7), (2, 5, 8), (3, 6, 9)]

    def test_diagonals_3x3(self):
        b = Board()
        assert b.diagonal() == (1, 5, 9)
        assert b.anti_diagonal() == (7, 5, 3)

    def test_diagonals_5x5(self):
        b = Board(5)
        assert b.diagonal() == (1, 7, 13, 19, 25)
        assert b.anti_diagonal() == (21, 17, 13, 9, 5)

    def test_winning_lines_order(self):
        b = Board()
        lines = b.winning_lines()
        assert lines[:3] == b.rows()
        assert lines[3:6] == b.columns()
        assert lines[6] == b.diagonal()
        assert lines[7] == b.anti_diagonal()

    def test_markers_in(self):
        b = Board()
        b.mark_at(1, X)
        b.mark_at(3, O)
        assert b.markers_in((1, 2, 3)) == [X, Marker.EMPTY, O]


class TestWinningMarker:
    def test_empty_board(self):
        b = Board()
        assert b.winning_marker() is None
        assert not b.someone_won()

    def test_row_win_with_empty_squares_left(self):
        b = Board()
        b.mark_at(1, X)
        b.mark_at(4, O)
        b.mark_at(2, X)
        b.mark_at(5, O)
        b.mark_at(3, X)
        assert b.winning_marker() is X
        assert b.someone_won()
        assert not b.is_full()

    def test_column_win(self):
        b = Board()
        _fill(b, "ox./ox./.x.")
        assert b.winning_marker() is X

    def test_diagonal_win(self):
        b = Board()
        _fill(b, "o.x/.o./x.o")
        assert b.winning_marker() is O

    def test_anti_diagonal_win(self):
        b = Board()
        for p in (3, 5, 7):
            b.mark_at(p, X)
        assert b.winning_marker() is X

    def test_5x5_row_win(self):
        b = Board(5)
        for p in range(11, 16):
            b.mark_at(p, O)
        assert b.winning_marker() is O

    def test_5x5_partial_row_is_not_win(self):
        b = Board(5)
        for p in range(11, 15):
            b.mark_at(p, O)
        assert b.winning_marker() is None

    def test_5x5_anti_diagonal_win(self):
        b = Board(5)
        for p in (5, 9, 13, 17, 21):
            b.mark_at(p, X)
        assert b.winning_marker() is X

    def test_tie(self):
        b = Board()
        _fill(b, "xox/oxo/oxo")
        assert b.winning_marker() is None
        assert b.is_full()


class TestCenter:
    @pytest.mark.parametrize("n, center", [(3, 5), (5, 13), (7, 25), (9, 41)])
    def test_center_square(self, n, center):
        assert Board(n).center_square() == center


def test_str():
    b = Board()
    b.mark_at(1, X)
    b.mark_at(5, O)
    assert str(b) == "x| | \n |o| \n | | "
