"""Console front end: prompts, a text board, scores and pacing pauses.

All text comes from a `Messages` object and all I/O goes through injected
callables, so the whole flow can be driven from tests with scripted input.
"""

from __future__ import annotations

import logging
import os
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from tictactoe.agent.base import Agent
from tictactoe.game.board import Board, parse_position, parse_side_length
from tictactoe.game.errors import SquareOccupied
from tictactoe.game.match import (
    DEFAULT_TARGET_SCORE,
    MatchSettings,
    Phase,
    Player,
    RoundResult,
    TicTacToeMatch,
)
from tictactoe.game.types import Marker, parse_marker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Messages:
    welcome: str = "=> welcome to tic tac toe"
    name: str = "=> what's your name?"
    rules: str = (
        "the rules of the game are simple:\n\n"
        "- one point per win\n"
        "- first player to {target} points wins the game\n\n"
        "ready?\n\nok...let's play"
    )
    gameplay: str = (
        "before we begin, let's set up the game play\n\n"
        "you have two options:\n\n"
        "standard\n"
        "  - 3x3 grid\n"
        "  - human marker is x\n"
        "  - computer marker is o\n"
        "  - human goes first\n\n"
        "custom\n"
        "  - choose your grid size\n"
        "  - choose who goes first\n"
        "  - choose who gets which marker\n\n"
        "enter (s) for standard gameplay\n"
        "enter (c) for custom gameplay"
    )
    invalid_choice: str = "=> sorry, that's not a valid choice. enter s or c"
    first_move: str = "=> who goes first? enter (h) for human or (c) for computer"
    invalid_player: str = "=> sorry, enter h or c"
    marker_choice: str = "=> choose your marker: x or o"
    wrong_marker: str = "=> sorry, your marker must be x or o"
    grid_size: str = (
        "=> your custom grid size must be an odd\n"
        "   number greater than or equal to 3"
    )
    wrong_grid_size: str = "=> sorry, that's not a valid grid size"
    choose_square: str = "=> choose a square: "
    wrong_square: str = "=> sorry, that's not a valid choice"
    taken_square: str = "=> sorry, that square is already taken"
    round_winner: str = "{name} wins!"
    tie: str = "it's a tie"
    match_winner: str = "{name} wins the match!"
    play_again: str = "=> would you like to play again? (y or n)"
    invalid_play_again: str = "=> sorry, enter y or n"
    goodbye: str = "=> thanks for playing tic tac toe. goodbye!"
    ceiling: str = "+-----+"
    mid_square: str = "|     |"


@dataclass(frozen=True)
class Pacing:
    """Seconds to wait at each display beat."""

    pause: float = 2.0
    long_pause: float = 3.75
    longest_pause: float = 8.5


NO_PACING = Pacing(pause=0.0, long_pause=0.0, longest_pause=0.0)


def joinor(options: Sequence[object], separator: str = ", ", joiner: str = "or") -> str:
    """Join items for a prompt: '1', '1 or 2', '1, 2, or 3'."""
    items = [str(o) for o in options]
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} {joiner} {items[1]}"
    return separator.join(items[:-1]) + f"{separator}{joiner} {items[-1]}"


def render_board_text(board: Board, messages: Messages = Messages()) -> list[str]:
    """Draw the board as boxed cells, one list entry per output line."""
    n = board.side_length
    lines: list[str] = []
    for row in board.rows():
        cells = "".join(f"|  {board.marker_at(p)}  |" for p in row)
        lines.append(messages.ceiling * n)
        lines.append(messages.mid_square * n)
        lines.append(cells)
        lines.append(messages.mid_square * n)
        lines.append(messages.ceiling * n)
    return lines


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


class ConsoleGame:
    """Interactive console session: set up a match, play it, offer a rematch."""

    def __init__(
        self,
        messages: Messages = Messages(),
        pacing: Pacing = Pacing(),
        input_fn: Optional[Callable[[], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        sleep_fn: Optional[Callable[[float], None]] = None,
        clear_fn: Optional[Callable[[], None]] = None,
        agent: Optional[Agent] = None,
        rng: Optional[random.Random] = None,
        target_score: int = DEFAULT_TARGET_SCORE,
    ) -> None:
        self.messages = messages
        self.pacing = pacing
        self._input = input_fn or input
        self._output = output_fn or print
        self._sleep = sleep_fn or time.sleep
        self._clear = clear_fn or clear_screen
        self.agent = agent
        self.rng = rng if rng is not None else random.Random()
        self.target_score = target_score
        self.match: Optional[TicTacToeMatch] = None

    # -- Low-level I/O ----------------------------------------------------

    def prompt(self, message: str) -> None:
        self._output(message)

    def ask(self) -> str:
        return self._input().strip().lower()

    def ask_choice(self, question: str, choices: Sequence[str], error: str) -> str:
        """Prompt until the answer is one of `choices`."""
        self.prompt(question)
        while True:
            answer = self.ask()
            if answer in choices:
                return answer
            logger.debug("Rejected answer %r (expected one of %s)", answer, choices)
            self.prompt(error)

    def pause(self, seconds: float) -> None:
        if seconds > 0:
            self._sleep(seconds)

    # -- Setup ------------------------------------------------------------

    def ask_name(self) -> str:
        self.prompt(self.messages.name)
        while True:
            name = self._input().strip()
            if name:
                return name
            self.prompt(self.messages.name)

    def ask_side_length(self) -> int:
        self.prompt(self.messages.grid_size)
        while True:
            side_length = parse_side_length(self._input())
            if side_length is not None:
                return side_length
            self.prompt(self.messages.wrong_grid_size)

    def ask_marker(self) -> Marker:
        self.prompt(self.messages.marker_choice)
        while True:
            marker = parse_marker(self._input())
            if marker is not None:
                return marker
            self.prompt(self.messages.wrong_marker)

    def ask_settings(self) -> MatchSettings:
        gameplay = self.ask_choice(
            self.messages.gameplay, ("s", "c"), self.messages.invalid_choice
        )
        self._clear()
        if gameplay == "s":
            return MatchSettings.standard(target_score=self.target_score)

        human_first = (
            self.ask_choice(
                self.messages.first_move, ("h", "c"), self.messages.invalid_player
            )
            == "h"
        )
        human_marker = self.ask_marker() if human_first else None
        side_length = self.ask_side_length()
        return MatchSettings.custom(
            side_length=side_length,
            human_first=human_first,
            human_marker=human_marker,
            target_score=self.target_score,
        )

    # -- Display ----------------------------------------------------------

    def display_board(self, board: Board) -> None:
        for line in render_board_text(board, self.messages):
            self.prompt(line)

    def display_player_score(self, player: Player) -> None:
        self.prompt(f"--- {player.name}")
        self.prompt(f"marker: {player.marker}")
        self.prompt(f"wins: {player.score}")

    def display_board_and_score(self) -> None:
        assert self.match is not None
        self._clear()
        self.display_board(self.match.board)
        self.prompt("")
        self.display_player_score(self.match.human)
        self.prompt("")
        self.display_player_score(self.match.computer)
        self.prompt("")

    def display_result(self, result: RoundResult) -> None:
        if result.winner is None:
            self.prompt(self.messages.tie)
        else:
            self.prompt(self.messages.round_winner.format(name=result.winner.name))
        if result.match_over and result.winner is not None:
            self.prompt(self.messages.match_winner.format(name=result.winner.name))

    # -- Game flow --------------------------------------------------------

    def human_moves(self) -> None:
        assert self.match is not None
        board = self.match.board
        self.prompt(self.messages.choose_square + joinor(board.open_positions()))
        while True:
            position = parse_position(self._input(), board)
            if position is None:
                self.prompt(self.messages.wrong_square)
                continue
            try:
                self.match.human_move(position)
            except SquareOccupied:
                self.prompt(self.messages.taken_square)
                continue
            return

    def play_round(self) -> RoundResult:
        assert self.match is not None
        self.display_board_and_score()
        while self.match.phase is not Phase.ROUND_OVER:
            if self.match.phase is Phase.AWAITING_HUMAN:
                self.human_moves()
            else:
                self.match.computer_move()
            self.display_board_and_score()

        result = self.match.finish_round()
        logger.info("Round finished: %s, scores %s", result.winner or "tie", self.match.scores)
        self.display_result(result)
        self.pause(self.pacing.long_pause)
        return result

    def play_match(self) -> Player:
        assert self.match is not None
        while not self.match.is_over:
            self.play_round()
        winner = self.match.match_winner
        assert winner is not None
        logger.info("Match won by %s", winner.name)
        return winner

    def play_again(self) -> bool:
        answer = self.ask_choice(
            self.messages.play_again, ("y", "n"), self.messages.invalid_play_again
        )
        return answer == "y"

    def run(self) -> None:
        """Whole session: welcome, setup, matches until the human quits."""
        self.pause(self.pacing.pause)
        self._clear()
        name = self.ask_name()
        self.prompt(f"{self.messages.welcome}, {name}")
        self.pause(self.pacing.long_pause)
        self._clear()
        self.prompt(self.messages.rules.format(target=self.target_score))
        self.pause(self.pacing.longest_pause)
        self._clear()

        settings = self.ask_settings()
        self.match = TicTacToeMatch(settings, human_name=name, agent=self.agent, rng=self.rng)
        logger.info(
            "Match set up: %dx%d, %s (%s) vs %s (%s), %s opens",
            self.match.board.side_length,
            self.match.board.side_length,
            self.match.human.name,
            self.match.human.marker,
            self.match.computer.name,
            self.match.computer.marker,
            self.match.first_player.name,
        )

        while True:
            self.play_match()
            if not self.play_again():
                break
            self.match.play_again()

        self.pause(self.pacing.pause)
        self._clear()
        self.prompt(self.messages.goodbye)
