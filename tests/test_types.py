from tictactoe.game.types import Marker, Square, parse_marker


def test_marker_other():
    assert Marker.X.other is Marker.O
    assert Marker.O.other is Marker.X
    assert Marker.EMPTY.other is Marker.EMPTY


def test_marker_str():
    assert str(Marker.X) == "x"
    assert str(Marker.O) == "o"
    assert str(Marker.EMPTY) == " "


def test_square_starts_unmarked():
    sq = Square()
    assert sq.marker is Marker.EMPTY
    assert sq.is_unmarked
    assert not sq.is_marked


def test_square_marked():
    sq = Square(Marker.O)
    assert sq.is_marked
    assert str(sq) == "o"


def test_parse_marker():
    assert parse_marker("x") is Marker.X
    assert parse_marker(" O ") is Marker.O
    assert parse_marker("") is None
    assert parse_marker("z") is None
    assert parse_marker(" ") is None
