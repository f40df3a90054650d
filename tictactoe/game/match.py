"""Turn coordination and match scoring for human vs computer play."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import Optional

from tictactoe.agent.base import Agent
from tictactoe.agent.heuristic_agent import HeuristicAgent

from .board import STANDARD_SIDE_LENGTH, Board
from .errors import OutOfTurn
from .types import PLAYER_MARKERS, Marker, Position

DEFAULT_TARGET_SCORE = 3
COMPUTER_NAMES = ("Jon", "Marc", "Stelios")


class Gameplay(enum.Enum):
    STANDARD = "s"
    CUSTOM = "c"


class Phase(enum.Enum):
    AWAITING_HUMAN = "awaiting_human"
    AWAITING_COMPUTER = "awaiting_computer"
    ROUND_OVER = "round_over"
    MATCH_OVER = "match_over"


@dataclass
class Player:
    name: str
    marker: Marker = Marker.EMPTY
    is_human: bool = True
    score: int = 0

    def wins(self) -> None:
        self.score += 1

    def reset_score(self) -> None:
        self.score = 0

    def __str__(self) -> str:
        return self.name


@dataclass
class MatchSettings:
    """How a match is set up. Standard play ignores the custom fields."""

    gameplay: Gameplay = Gameplay.STANDARD
    side_length: int = STANDARD_SIDE_LENGTH
    human_first: bool = True
    human_marker: Optional[Marker] = None  # None lets the computer pick
    target_score: int = DEFAULT_TARGET_SCORE

    @classmethod
    def standard(cls, target_score: int = DEFAULT_TARGET_SCORE) -> MatchSettings:
        return cls(target_score=target_score)

    @classmethod
    def custom(
        cls,
        side_length: int,
        human_first: bool,
        human_marker: Optional[Marker] = None,
        target_score: int = DEFAULT_TARGET_SCORE,
    ) -> MatchSettings:
        return cls(
            gameplay=Gameplay.CUSTOM,
            side_length=side_length,
            human_first=human_first,
            human_marker=human_marker,
            target_score=target_score,
        )


def assign_markers(settings: MatchSettings, rng: random.Random) -> tuple[Marker, Marker]:
    """Return (human_marker, computer_marker) for the given settings.

    Standard play gives the human x. In custom play whoever moves first picks:
    the human's choice when the human opens, a random marker for the computer
    otherwise. The second player always gets the remaining marker.
    """
    if settings.gameplay is Gameplay.STANDARD:
        return Marker.X, Marker.O
    if settings.human_first and settings.human_marker in PLAYER_MARKERS:
        human = settings.human_marker
    else:
        human = rng.choice(PLAYER_MARKERS).other
    return human, human.other


@dataclass
class RoundResult:
    winner: Optional[Player]
    marker: Optional[Marker]
    board: Board
    match_over: bool = False

    @property
    def is_tie(self) -> bool:
        return self.winner is None


@dataclass
class TicTacToeMatch:
    """A human and a computer playing rounds until one reaches the target score."""

    settings: MatchSettings = field(default_factory=MatchSettings)
    human_name: str = "Player"
    computer_name: Optional[str] = None
    agent: Optional[Agent] = None
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self) -> None:
        if self.settings.target_score < 1:
            raise ValueError("target_score must be at least 1")
        side_length = (
            STANDARD_SIDE_LENGTH
            if self.settings.gameplay is Gameplay.STANDARD
            else self.settings.side_length
        )
        self.board = Board(side_length)

        if self.agent is None:
            self.agent = HeuristicAgent(rng=self.rng)

        human_marker, computer_marker = assign_markers(self.settings, self.rng)
        self.human = Player(self.human_name, human_marker, is_human=True)
        self.computer = Player(
            self.computer_name or self.rng.choice(COMPUTER_NAMES),
            computer_marker,
            is_human=False,
        )
        human_first = (
            True if self.settings.gameplay is Gameplay.STANDARD else self.settings.human_first
        )
        self.first_player = self.human if human_first else self.computer
        self.current_player = self.first_player
        self.phase = self._phase_for(self.current_player)
        self.rounds: list[RoundResult] = []

    # -- State queries ----------------------------------------------------

    @property
    def target_score(self) -> int:
        return self.settings.target_score

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.MATCH_OVER

    @property
    def match_winner(self) -> Optional[Player]:
        for player in (self.human, self.computer):
            if player.score >= self.target_score:
                return player
        return None

    @property
    def scores(self) -> dict[str, int]:
        return {self.human.name: self.human.score, self.computer.name: self.computer.score}

    def player_for(self, marker: Optional[Marker]) -> Optional[Player]:
        for player in (self.human, self.computer):
            if marker is not None and player.marker is marker:
                return player
        return None

    def human_turn(self) -> bool:
        return self.current_player.marker is self.human.marker

    # -- Moves ------------------------------------------------------------

    def human_move(self, position: Position) -> None:
        """Mark `position` for the human. Board errors propagate untouched."""
        self._require(Phase.AWAITING_HUMAN)
        self.board.mark_at(position, self.human.marker)
        self._advance()

    def computer_move(self) -> Position:
        """Let the agent pick a square, mark it and return it."""
        self._require(Phase.AWAITING_COMPUTER)
        assert self.agent is not None
        position = self.agent.select_move(
            self.board, self.computer.marker, self.human.marker
        )
        self.board.mark_at(position, self.computer.marker)
        self._advance()
        return position

    def _advance(self) -> None:
        if self.board.someone_won() or self.board.is_full():
            self.phase = Phase.ROUND_OVER
            return
        self.current_player = self.computer if self.current_player is self.human else self.human
        self.phase = self._phase_for(self.current_player)

    # -- Rounds and matches -----------------------------------------------

    def finish_round(self) -> RoundResult:
        """Score the finished round and set up the next one (or end the match)."""
        self._require(Phase.ROUND_OVER)
        marker = self.board.winning_marker()
        winner = self.player_for(marker)
        if winner is not None:
            winner.wins()

        result = RoundResult(winner=winner, marker=marker, board=self.board.copy())
        self.rounds.append(result)

        if self.match_winner is not None:
            result.match_over = True
            self.phase = Phase.MATCH_OVER
        else:
            self._clear_board()
        return result

    def play_again(self) -> None:
        """Start a fresh match with the same settings and players."""
        self._require(Phase.MATCH_OVER)
        self.human.reset_score()
        self.computer.reset_score()
        self.rounds = []
        self._clear_board()

    def reconfigure(self, side_length: int) -> None:
        """Change the grid size. Only allowed before the first move or once the match is over."""
        started = bool(self.rounds) or self.board.occupied_count > 0
        if self.phase is not Phase.MATCH_OVER and started:
            raise OutOfTurn("The grid size can only change between matches")
        self.board.configure(side_length)
        self.settings.side_length = side_length

    def _clear_board(self) -> None:
        self.board.reset()
        self.current_player = self.first_player
        self.phase = self._phase_for(self.current_player)

    def _phase_for(self, player: Player) -> Phase:
        return Phase.AWAITING_HUMAN if player is self.human else Phase.AWAITING_COMPUTER

    def _require(self, phase: Phase) -> None:
        if self.phase is not phase:
            raise OutOfTurn(f"Expected {phase.value}, match is {self.phase.value}")
