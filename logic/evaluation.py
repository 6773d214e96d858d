"""
Evaluation of difficulty levels.

Plays computer-vs-computer rounds to measure how strong each difficulty
is, and samples single moves to check how a policy spreads its choices.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import numpy as np

from .board import Board, Mark, position_to_label
from .config import GameConfig
from .difficulty import Difficulty, DifficultyPolicy
from .game_state import TurnStateMachine
from .win_checker import GameStatus, Outcome

logger = logging.getLogger(__name__)


@dataclass
class MatchReport:
    """Results of a series of rounds, from the challenger's point of view."""
    challenger: Difficulty
    opponent: Difficulty
    wins: int = 0
    draws: int = 0
    losses: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.draws + self.losses

    def rates(self) -> np.ndarray:
        """[win_rate, draw_rate, loss_rate]; all zero if no games were played."""
        counts = np.array([self.wins, self.draws, self.losses], dtype=float)
        if self.games == 0:
            return counts
        return counts / self.games

    @property
    def win_rate(self) -> float:
        return float(self.rates()[0])

    @property
    def draw_rate(self) -> float:
        return float(self.rates()[1])

    @property
    def loss_rate(self) -> float:
        return float(self.rates()[2])


def play_match(
    policy: DifficultyPolicy,
    difficulties: Mapping[Mark, Difficulty],
    first_mark: Mark = Mark.A,
    start: Optional[Board] = None
) -> Outcome:
    """
    Play one round with both marks controlled by the computer.

    Args:
        policy: Picks the moves for both marks.
        difficulties: Difficulty for Mark.A and Mark.B.
        first_mark: The mark to move first (or to move in `start`).
        start: Optional position to continue from instead of an empty board.

    Returns:
        The final outcome.
    """
    if start is None:
        machine = TurnStateMachine(
            first_mark=first_mark,
            computer_players=difficulties,
            policy=policy
        )
    else:
        machine = TurnStateMachine.from_position(
            start, first_mark, computer_players=difficulties, policy=policy
        )
    return machine.play()


def evaluate(
    policy: DifficultyPolicy,
    challenger: Difficulty,
    opponent: Difficulty,
    games: int,
    challenger_mark: Mark = Mark.A,
    first_mark: Mark = Mark.A,
    start: Optional[Board] = None
) -> MatchReport:
    """
    Play a series of rounds between two difficulties.

    Args:
        policy: Shared policy; seed its rng for reproducible reports.
        challenger: Difficulty being measured.
        opponent: Difficulty it plays against.
        games: Number of rounds.
        challenger_mark: Mark played by the challenger.
        first_mark: Mark that moves first in every round.
        start: Optional starting position for every round.

    Returns:
        MatchReport with wins, draws and losses for the challenger.
    """
    difficulties = {
        challenger_mark: challenger,
        challenger_mark.opposite(): opponent,
    }
    report = MatchReport(challenger=challenger, opponent=opponent)

    for _ in range(games):
        outcome = play_match(policy, difficulties, first_mark=first_mark, start=start)
        if outcome.status == GameStatus.DRAW:
            report.draws += 1
        elif outcome.winner == challenger_mark:
            report.wins += 1
        else:
            report.losses += 1

    logger.info(
        "%s vs %s over %d games: %d wins, %d draws, %d losses",
        challenger.label, opponent.label, games,
        report.wins, report.draws, report.losses
    )
    return report


def move_distribution(
    policy: DifficultyPolicy,
    board: Board,
    difficulty: Difficulty,
    mark: Mark,
    trials: int
) -> np.ndarray:
    """
    Count which cell a policy picks over many independent tries.

    Args:
        policy: Policy to sample.
        board: Position to pick from (left unchanged).
        difficulty: Difficulty to sample.
        mark: Mark the policy plays.
        trials: Number of samples.

    Returns:
        Array of length 9; entry label-1 counts how often that cell was picked.
    """
    labels = np.empty(trials, dtype=int)
    for i in range(trials):
        labels[i] = position_to_label(policy.select_move(board, difficulty, mark)) - 1
    return np.bincount(labels, minlength=GameConfig.CELL_COUNT)
