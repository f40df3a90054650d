"""SVG board renderer + JavaScript click handler for Gradio."""

from __future__ import annotations

from tictactoe.game.board import Board
from tictactoe.game.types import Marker, Position

# Layout constants
CELL_SIZE = 80
MARGIN = 20
MARK_INSET = 18
CLICK_INSET = 4

# Colors
BG_COLOR = "#FAF7F0"
LINE_COLOR = "#4A3728"
X_COLOR = "#2563EB"
O_COLOR = "#DC2626"
LABEL_COLOR = "#B8AFA0"
WIN_COLOR = "rgba(250, 204, 21, 0.35)"

BANNER_COLORS = {
    "win": "#4ADE80",
    "loss": "#F87171",
    "neutral": "#FFFFFF",
}


def board_px(side_length: int) -> int:
    return MARGIN * 2 + CELL_SIZE * side_length


def _cell_origin(board: Board, position: Position) -> tuple[int, int]:
    """Top-left pixel corner of the square at `position`."""
    row, col = divmod(position - 1, board.side_length)
    return MARGIN + col * CELL_SIZE, MARGIN + row * CELL_SIZE


def _winning_positions(board: Board) -> set[Position]:
    marker = board.winning_marker()
    if marker is None:
        return set()
    for line in board.winning_lines():
        if all(m is marker for m in board.markers_in(line)):
            return set(line)
    return set()


def _banner_color(message: str) -> str:
    lowered = message.lower()
    if lowered.startswith("you win"):
        return BANNER_COLORS["win"]
    if "wins" in lowered:
        return BANNER_COLORS["loss"]
    return BANNER_COLORS["neutral"]


def render_board_svg(
    board: Board,
    clickable: bool = True,
    game_over_message: str = "",
    show_numbers: bool = True,
) -> str:
    """Render the board as an SVG string."""
    n = board.side_length
    size = board_px(n)
    parts: list[str] = []

    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{size}" height="{size}" '
        f'viewBox="0 0 {size} {size}" '
        f'id="tictactoe-board">'
    )
    parts.append(f'<rect width="{size}" height="{size}" fill="{BG_COLOR}" rx="6"/>')

    # Highlight the completed line, if any
    for position in sorted(_winning_positions(board)):
        x, y = _cell_origin(board, position)
        parts.append(
            f'<rect x="{x}" y="{y}" width="{CELL_SIZE}" height="{CELL_SIZE}" '
            f'fill="{WIN_COLOR}"/>'
        )

    # Inner grid lines
    far = MARGIN + n * CELL_SIZE
    for i in range(1, n):
        offset = MARGIN + i * CELL_SIZE
        parts.append(
            f'<line x1="{offset}" y1="{MARGIN}" x2="{offset}" y2="{far}" '
            f'stroke="{LINE_COLOR}" stroke-width="3" stroke-linecap="round"/>'
        )
        parts.append(
            f'<line x1="{MARGIN}" y1="{offset}" x2="{far}" y2="{offset}" '
            f'stroke="{LINE_COLOR}" stroke-width="3" stroke-linecap="round"/>'
        )

    for position in board.positions:
        x, y = _cell_origin(board, position)
        marker = board.marker_at(position)
        if marker is Marker.X:
            x1, y1 = x + MARK_INSET, y + MARK_INSET
            x2, y2 = x + CELL_SIZE - MARK_INSET, y + CELL_SIZE - MARK_INSET
            parts.append(
                f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
                f'stroke="{X_COLOR}" stroke-width="8" stroke-linecap="round"/>'
            )
            parts.append(
                f'<line x1="{x1}" y1="{y2}" x2="{x2}" y2="{y1}" '
                f'stroke="{X_COLOR}" stroke-width="8" stroke-linecap="round"/>'
            )
        elif marker is Marker.O:
            cx, cy = x + CELL_SIZE // 2, y + CELL_SIZE // 2
            parts.append(
                f'<circle cx="{cx}" cy="{cy}" r="{CELL_SIZE // 2 - MARK_INSET}" '
                f'fill="none" stroke="{O_COLOR}" stroke-width="8"/>'
            )
        elif show_numbers:
            parts.append(
                f'<text x="{x + CELL_SIZE // 2}" y="{y + CELL_SIZE // 2 + 6}" '
                f'text-anchor="middle" font-size="16" font-family="monospace" '
                f'fill="{LABEL_COLOR}">{position}</text>'
            )

    # Clickable square targets (invisible rects)
    if clickable and not game_over_message:
        for position in board.open_positions():
            x, y = _cell_origin(board, position)
            parts.append(
                f'<rect x="{x + CLICK_INSET}" y="{y + CLICK_INSET}" '
                f'width="{CELL_SIZE - 2 * CLICK_INSET}" '
                f'height="{CELL_SIZE - 2 * CLICK_INSET}" '
                f'fill="transparent" class="board-click" '
                f'data-pos="{position}" style="cursor:pointer">'
                f'<title>{position}</title></rect>'
            )

    if game_over_message:
        color = _banner_color(game_over_message)
        mid = size // 2
        parts.append(
            f'<rect x="0" y="{mid - 30}" width="{size}" height="60" '
            f'fill="rgba(0, 0, 0, 0.65)"/>'
        )
        parts.append(
            f'<text x="{mid}" y="{mid + 10}" text-anchor="middle" '
            f'font-size="28" font-weight="bold" font-family="sans-serif" '
            f'fill="{color}">{game_over_message}</text>'
        )

    parts.append("</svg>")
    return "\n".join(parts)


# JavaScript that handles clicks on the SVG and writes the square number to
# the move Textbox, then presses the submit button.
BOARD_CLICK_JS = """
() => {
    if (window._tictactoeClickBound) return;
    window._tictactoeClickBound = true;

    document.addEventListener('click', function(e) {
        const cell = e.target.closest('.board-click');
        if (!cell) return;
        const pos = cell.getAttribute('data-pos');
        if (!pos) return;

        const input = document.querySelector('#move-input textarea, #move-input input');
        if (!input) return;
        const proto = input.tagName === 'TEXTAREA'
            ? window.HTMLTextAreaElement.prototype
            : window.HTMLInputElement.prototype;
        const nativeSetter = Object.getOwnPropertyDescriptor(proto, 'value')?.set;
        if (nativeSetter) {
            nativeSetter.call(input, pos);
        } else {
            input.value = pos;
        }
        input.dispatchEvent(new Event('input', { bubbles: true }));
        const btn = document.querySelector('#move-submit');
        if (btn) btn.click();
    });
}
"""
