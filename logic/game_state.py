"""
Turn management for TicTacToe.
Drives alternating turns on one board until the round is won or drawn.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Union

from .board import Board, CellOccupied, Mark, Position
from .config import GameConfig
from .difficulty import Difficulty, DifficultyPolicy
from .win_checker import Outcome, WinChecker

logger = logging.getLogger(__name__)


# Asks a human for a move, given the empty cells; blocks until answered
MoveRequest = Callable[[List[Position]], Position]


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Half-move index in the round (0-8)


@dataclass(frozen=True)
class AwaitingMove:
    """The round waits for a move from this mark."""
    mark: Mark


@dataclass(frozen=True)
class Finished:
    """The round is over; no more moves are accepted."""
    outcome: Outcome


TurnState = Union[AwaitingMove, Finished]


class TurnStateMachine:
    """
    Runs one round of TicTacToe at a time.

    Starts in AwaitingMove(first_mark) on an empty board. Every accepted
    move is followed by WinChecker.classify: a win or draw moves the round
    to Finished, otherwise the turn passes to the other mark.

    Marks listed in computer_players are played by the DifficultyPolicy at
    the given difficulty, every other mark is human-controlled.
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        first_mark: Optional[Mark] = None,
        computer_players: Optional[Mapping[Mark, Difficulty]] = None,
        policy: Optional[DifficultyPolicy] = None,
        win_checker: Optional[WinChecker] = None
    ):
        """
        Initialize a round.

        Args:
            board: The board to play on; it is reset (default: new Board).
            first_mark: Which mark moves first (default: GameConfig.FIRST_MARK).
            computer_players: Difficulty per computer-controlled mark.
            policy: Picks computer moves (default: new DifficultyPolicy).
            win_checker: Classifies the board (default: new WinChecker).
        """
        self.board = board if board is not None else Board()
        self.first_mark = first_mark or Mark[GameConfig.FIRST_MARK]
        # Fixed for the lifetime of the machine
        self.computer_players = MappingProxyType(dict(computer_players or {}))
        self.policy = policy or DifficultyPolicy()
        self.win_checker = win_checker or WinChecker()

        self.moves: List[Move] = []
        self.state: TurnState = AwaitingMove(self.first_mark)
        self.new_round()

    @classmethod
    def from_position(
        cls,
        board: Board,
        to_move: Mark,
        computer_players: Optional[Mapping[Mark, Difficulty]] = None,
        policy: Optional[DifficultyPolicy] = None
    ) -> "TurnStateMachine":
        """
        Continue a round from an existing position.

        Args:
            board: Position to start from (copied, not reset).
            to_move: The mark whose turn it is.
            computer_players: Difficulty per computer-controlled mark.
            policy: Picks computer moves.

        Returns:
            A machine awaiting to_move, or already Finished if the
            position is terminal.
        """
        machine = cls(
            first_mark=to_move,
            computer_players=computer_players,
            policy=policy
        )
        machine.board = board.copy()
        outcome = machine.win_checker.classify(machine.board)
        if outcome.is_terminal:
            machine.state = Finished(outcome)
        return machine

    def new_round(self, first_mark: Optional[Mark] = None):
        """
        Reset the board and start over.

        Args:
            first_mark: Who moves first in the new round (default: unchanged).
        """
        if first_mark is not None:
            self.first_mark = first_mark
        self.board.reset()
        self.moves = []
        self.state = AwaitingMove(self.first_mark)

    @property
    def is_finished(self) -> bool:
        return isinstance(self.state, Finished)

    @property
    def current_mark(self) -> Optional[Mark]:
        """The mark to move, or None once the round is finished."""
        if isinstance(self.state, AwaitingMove):
            return self.state.mark
        return None

    @property
    def outcome(self) -> Outcome:
        """Outcome of the board right now."""
        if isinstance(self.state, Finished):
            return self.state.outcome
        return Outcome.in_progress()

    def is_computer(self, mark: Mark) -> bool:
        return mark in self.computer_players

    def legal_moves(self) -> List[Position]:
        return self.board.legal_moves()

    def submit(self, position: Position) -> Outcome:
        """
        Play a move for the mark whose turn it is.

        Args:
            position: (row, col) of the cell.

        Returns:
            The outcome after the move.

        Raises:
            CellOccupied: The cell is taken; the turn does not change.
        """
        mark = self._awaiting()
        self.board.place(position, mark)

        row, col = position
        self.moves.append(Move(mark=mark, row=row, col=col, move_number=len(self.moves)))

        outcome = self.win_checker.classify(self.board)
        if outcome.is_terminal:
            self.state = Finished(outcome)
            logger.info("Round finished after %d moves: %s", len(self.moves), outcome)
        else:
            self.state = AwaitingMove(mark.opposite())
        return outcome

    def computer_move(self) -> Outcome:
        """Let the policy play for the current (computer) mark."""
        mark = self._awaiting()
        difficulty = self.computer_players.get(mark)
        if difficulty is None:
            raise RuntimeError(f"{mark.value} is not a computer player")

        position = self.policy.select_move(self.board, difficulty, mark)
        logger.debug("Computer (%s, %s) plays %s", mark.value, difficulty.label, position)
        return self.submit(position)

    def step(self, request_move: Optional[MoveRequest] = None) -> Outcome:
        """
        Play one half-move.

        Computer marks move through the policy. Human marks are asked with
        request_move until they pick an empty cell.

        Args:
            request_move: Gets a human move from the empty cells.

        Returns:
            The outcome after the move.
        """
        mark = self._awaiting()
        if self.is_computer(mark):
            return self.computer_move()

        if request_move is None:
            raise RuntimeError(f"No move source for human player {mark.value}")

        while True:
            position = request_move(self.board.legal_moves())
            try:
                return self.submit(position)
            except CellOccupied as e:
                logger.info("Rejected move for %s: %s", mark.value, e)

    def play(
        self,
        request_move: Optional[MoveRequest] = None,
        on_half_move: Optional[Callable[["TurnStateMachine", Outcome], None]] = None
    ) -> Outcome:
        """
        Play until the round is finished.

        Args:
            request_move: Gets human moves (not needed if both marks are computers).
            on_half_move: Called with (machine, outcome) after every move.

        Returns:
            The final outcome (Win or Draw).
        """
        while not self.is_finished:
            outcome = self.step(request_move)
            if on_half_move is not None:
                on_half_move(self, outcome)
        return self.outcome

    def _awaiting(self) -> Mark:
        if isinstance(self.state, Finished):
            raise RuntimeError("Game is already over!")
        return self.state.mark
