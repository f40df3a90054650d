from tictactoe.game.board import Board
from tictactoe.game.types import Marker
from tictactoe.ui.board_component import BANNER_COLORS, board_px, render_board_svg


def test_empty_board_svg():
    html = render_board_svg(Board())
    assert "<svg" in html
    assert "</svg>" in html
    assert "tictactoe-board" in html
    # One click target per square
    assert html.count('class="board-click"') == 9


def test_svg_size_scales_with_grid():
    html = render_board_svg(Board(5))
    assert f'width="{board_px(5)}"' in html
    assert html.count('class="board-click"') == 25


def test_svg_with_markers():
    b = Board()
    b.mark_at(5, Marker.X)
    b.mark_at(1, Marker.O)
    html = render_board_svg(b)
    assert html.count('class="board-click"') == 7
    assert 'data-pos="5"' not in html
    assert 'data-pos="1"' not in html
    assert "<circle" in html


def test_svg_not_clickable_when_disabled():
    html = render_board_svg(Board(), clickable=False)
    assert html.count('class="board-click"') == 0


def test_square_numbers_shown_on_open_squares():
    b = Board()
    b.mark_at(2, Marker.X)
    html = render_board_svg(b, clickable=False)
    assert ">1</text>" in html
    assert ">2</text>" not in html
    assert ">9</text>" in html


def test_winning_line_highlighted():
    b = Board()
    for p in (1, 2, 3):
        b.mark_at(p, Marker.X)
    html = render_board_svg(b, game_over_message="You win!")
    assert html.count("rgba(250, 204, 21, 0.35)") == 3
    assert html.count('class="board-click"') == 0


def test_game_over_banner_colors():
    assert BANNER_COLORS["win"] in render_board_svg(Board(), game_over_message="You win!")
    assert BANNER_COLORS["loss"] in render_board_svg(Board(), game_over_message="Jon wins!")
    assert BANNER_COLORS["neutral"] in render_board_svg(Board(), game_over_message="It's a tie!")
