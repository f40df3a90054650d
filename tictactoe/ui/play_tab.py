"""Play tab: Human vs computer with an interactive SVG board."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

import gradio as gr

from tictactoe.agent.base import Agent
from tictactoe.agent.heuristic_agent import HeuristicAgent
from tictactoe.agent.random_agent import RandomAgent
from tictactoe.game.board import Board, parse_position
from tictactoe.game.errors import OutOfTurn, SquareOccupied
from tictactoe.game.match import MatchSettings, Phase, RoundResult, TicTacToeMatch
from tictactoe.game.types import parse_marker
from tictactoe.ui.board_component import render_board_svg

logger = logging.getLogger(__name__)

OPPONENT_CHOICES: dict[str, Callable[[], Agent]] = {
    "Heuristic": HeuristicAgent,
    "Random": RandomAgent,
}
SIZE_CHOICES = ["3", "5", "7", "9"]
HUMAN_NAME = "You"


@dataclass
class GameSession:
    """Per-tab match state held in gr.State."""

    match: TicTacToeMatch = field(
        default_factory=lambda: TicTacToeMatch(MatchSettings.standard(), human_name=HUMAN_NAME)
    )
    finished: Optional[RoundResult] = None

    @property
    def board(self) -> Board:
        """The board to show: the final board of a finished round, else the live one."""
        if self.finished is not None:
            return self.finished.board
        return self.match.board

    @property
    def game_over_banner(self) -> str:
        """Short text for the SVG overlay banner. Empty while a round is in play."""
        result = self.finished
        if result is None:
            return ""
        if result.winner is None:
            return "It's a tie!"
        if result.winner is self.match.human:
            return "You win the match!" if result.match_over else "You win!"
        name = result.winner.name
        return f"{name} wins the match!" if result.match_over else f"{name} wins!"

    @property
    def status_text(self) -> str:
        m = self.match
        if self.finished is not None:
            if self.finished.match_over:
                return f"Match over — {self.game_over_banner} Press Continue to play again."
            return f"Round over — {self.game_over_banner} Press Continue for the next round."
        if m.phase is Phase.AWAITING_HUMAN:
            return f"Your turn ({m.human.marker}). Open squares: {len(m.board.open_positions())}"
        return f"{m.computer.name} is thinking... ({m.computer.marker})"

    @property
    def score_text(self) -> str:
        m = self.match
        return (
            f"{m.human.name} ({m.human.marker}): {m.human.score}\n"
            f"{m.computer.name} ({m.computer.marker}): {m.computer.score}\n"
            f"First to {m.target_score} wins"
        )


def _make_board_html(session: GameSession) -> str:
    clickable = (
        session.finished is None
        and session.match.phase is Phase.AWAITING_HUMAN
    )
    return render_board_svg(
        session.board,
        clickable=clickable,
        game_over_message=session.game_over_banner,
    )


def _outputs(session: GameSession, status: Optional[str] = None):
    return (
        _make_board_html(session),
        status if status is not None else session.status_text,
        session.score_text,
        session,
    )


def _finish_if_over(session: GameSession) -> None:
    if session.match.phase is Phase.ROUND_OVER:
        result = session.match.finish_round()
        session.finished = result
        logger.info(
            "Round over: %s (score %s)",
            result.winner or "tie",
            session.match.scores,
        )


def _computer_turn(session: GameSession) -> None:
    """Let the computer move if it is its turn, then settle a finished round."""
    if session.match.phase is Phase.AWAITING_COMPUTER:
        session.match.computer_move()
    _finish_if_over(session)


def _apply_human_move(move_text: str, session: GameSession):
    """Process a human move, then let the computer respond."""
    if session.finished is not None:
        return _outputs(session) + ("",)

    if session.match.phase is not Phase.AWAITING_HUMAN:
        return _outputs(session, "Wait — it's the computer's turn.") + ("",)

    position = parse_position(move_text, session.match.board)
    if position is None:
        logger.debug("Rejected move input %r", move_text)
        size = len(session.match.board.positions)
        return _outputs(session, f"Invalid square: '{move_text}'. Pick 1-{size}.") + ("",)

    try:
        session.match.human_move(position)
    except SquareOccupied:
        return _outputs(session, f"Square {position} is already taken.") + ("",)
    except OutOfTurn:
        return _outputs(session, "Wait — it's the computer's turn.") + ("",)

    _finish_if_over(session)
    if session.finished is None:
        _computer_turn(session)

    return _outputs(session) + ("",)


def _new_match(
    size_choice: str,
    first_choice: str,
    marker_choice: str,
    opponent_choice: str,
    session: GameSession,
):
    """Start a new match. first_choice is 'You' or 'Computer'."""
    settings = MatchSettings.custom(
        side_length=int(size_choice),
        human_first=first_choice != "Computer",
        human_marker=parse_marker(marker_choice),
    )
    agent_factory = OPPONENT_CHOICES.get(opponent_choice, HeuristicAgent)
    session.match = TicTacToeMatch(settings, human_name=HUMAN_NAME, agent=agent_factory())
    session.finished = None
    logger.info(
        "New match: %dx%d, %s opens, human plays %s",
        settings.side_length,
        settings.side_length,
        session.match.first_player,
        session.match.human.marker,
    )

    _computer_turn(session)

    info = f"You are {session.match.human.marker}. {session.match.computer.name} plays {session.match.computer.marker}."
    return _outputs(session) + (info,)


def _continue(session: GameSession):
    """Move on from a finished round: next round, or a fresh match after a win."""
    if session.finished is None:
        return _outputs(session)
    if session.match.is_over:
        session.match.play_again()
        logger.info("Play again: scores reset")
    session.finished = None
    _computer_turn(session)
    return _outputs(session)


def build_play_tab() -> None:
    """Construct the Play tab UI inside a gr.Blocks context."""

    initial = GameSession()
    session_state = gr.State(initial)

    with gr.Row():
        # Left: board
        with gr.Column(scale=3):
            board_html = gr.HTML(
                value=_make_board_html(initial),
                label="Board",
            )
        # Right: controls
        with gr.Column(scale=1):
            status_text = gr.Textbox(
                value=initial.status_text,
                label="Status",
                interactive=False,
                lines=2,
            )
            score_text = gr.Textbox(
                value=initial.score_text,
                label="Score",
                interactive=False,
                lines=3,
            )
            continue_btn = gr.Button("Continue", variant="primary")

            gr.Markdown("### New Match")
            size_choice = gr.Radio(choices=SIZE_CHOICES, value="3", label="Grid size")
            first_choice = gr.Radio(
                choices=["You", "Computer"], value="You", label="Who goes first"
            )
            marker_choice = gr.Radio(
                choices=["x", "o", "Random"],
                value="x",
                label="Your marker (when you go first)",
            )
            opponent_choice = gr.Dropdown(
                choices=list(OPPONENT_CHOICES.keys()),
                value="Heuristic",
                label="Opponent",
            )
            new_match_btn = gr.Button("New Match")
            marker_info = gr.Textbox(label="Markers", interactive=False, lines=1)

            gr.Markdown("### Enter Move")
            move_input = gr.Textbox(
                label="Square number",
                placeholder="5",
                elem_id="move-input",
                lines=1,
            )
            move_submit = gr.Button("Submit Move", elem_id="move-submit")

    # Outputs shared by most callbacks
    board_outputs = [board_html, status_text, score_text, session_state]

    move_submit.click(
        fn=_apply_human_move,
        inputs=[move_input, session_state],
        outputs=board_outputs + [move_input],
    )

    new_match_btn.click(
        fn=_new_match,
        inputs=[size_choice, first_choice, marker_choice, opponent_choice, session_state],
        outputs=board_outputs + [marker_info],
    )

    continue_btn.click(
        fn=_continue,
        inputs=[session_state],
        outputs=board_outputs,
    )
