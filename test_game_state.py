import random

import pytest

from logic.board import Board, CellOccupied, Mark
from logic.difficulty import Difficulty, DifficultyPolicy
from logic.game_state import AwaitingMove, Finished, Move, TurnStateMachine
from logic.win_checker import Outcome

A, B, _ = Mark.A, Mark.B, None


def scripted(*positions):
    """Move source that answers with the given positions in order."""
    answers = iter(positions)
    asked = []

    def request(legal_moves):
        asked.append(list(legal_moves))
        return next(answers)

    request.asked = asked
    return request


def test_initial_state():
    machine = TurnStateMachine()
    assert machine.state == AwaitingMove(A)
    assert machine.current_mark == A
    assert machine.outcome == Outcome.in_progress()
    assert len(machine.legal_moves()) == 9
    assert machine.moves == []


def test_given_board_is_reset():
    board = Board.from_rows([
        [A, B, _],
        [_, _, _],
        [_, _, _],
    ])
    machine = TurnStateMachine(board=board)
    assert machine.board is board
    assert board == Board()


def test_submit_flips_turn_and_records_move():
    machine = TurnStateMachine()
    outcome = machine.submit((1, 1))
    assert outcome == Outcome.in_progress()
    assert machine.state == AwaitingMove(B)
    assert machine.moves == [Move(mark=A, row=1, col=1, move_number=0)]


def test_occupied_cell_keeps_state():
    machine = TurnStateMachine()
    machine.submit((1, 1))
    before = machine.board.snapshot()
    with pytest.raises(CellOccupied):
        machine.submit((1, 1))
    assert machine.state == AwaitingMove(B)
    assert machine.board.snapshot() == before
    assert len(machine.moves) == 1


def test_win_finishes_the_round():
    machine = TurnStateMachine()
    for position in [(0, 0), (1, 0), (0, 1), (1, 1)]:
        machine.submit(position)
    outcome = machine.submit((0, 2))
    assert outcome == Outcome.win(A)
    assert machine.state == Finished(Outcome.win(A))
    assert machine.is_finished
    assert machine.current_mark is None


def test_draw_finishes_the_round():
    machine = TurnStateMachine()
    moves = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]
    for position in moves[:-1]:
        assert machine.submit(position) == Outcome.in_progress()
    assert machine.submit(moves[-1]) == Outcome.draw()
    assert machine.state == Finished(Outcome.draw())


def test_no_moves_after_finish():
    machine = TurnStateMachine()
    for position in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        machine.submit(position)
    with pytest.raises(RuntimeError):
        machine.submit((2, 2))
    with pytest.raises(RuntimeError):
        machine.step(scripted((2, 2)))


def test_step_asks_again_after_occupied_cell():
    machine = TurnStateMachine()
    machine.submit((0, 0))
    request = scripted((0, 0), (0, 0), (2, 2))
    machine.step(request)
    assert machine.board.get((2, 2)) == B
    assert len(request.asked) == 3
    assert machine.state == AwaitingMove(A)


def test_human_step_needs_a_move_source():
    with pytest.raises(RuntimeError):
        TurnStateMachine().step()


def test_computer_step_uses_policy():
    machine = TurnStateMachine(computer_players={B: Difficulty.HARD})
    machine.step(scripted((0, 0)))
    machine.step()
    # Only the center holds against a corner opening
    assert machine.board.get((1, 1)) == B
    assert machine.moves[-1].mark == B
    assert machine.current_mark == A


def test_computer_move_on_human_mark():
    with pytest.raises(RuntimeError):
        TurnStateMachine().computer_move()


def test_computer_players_are_fixed_for_the_round():
    players = {B: Difficulty.EASY}
    machine = TurnStateMachine(computer_players=players)
    players[A] = Difficulty.HARD
    assert not machine.is_computer(A)
    with pytest.raises(TypeError):
        machine.computer_players[B] = Difficulty.HARD


def test_play_reports_every_half_move():
    policy = DifficultyPolicy(rng=random.Random(5))
    machine = TurnStateMachine(computer_players={A: Difficulty.EASY, B: Difficulty.EASY}, policy=policy)
    seen = []
    outcome = machine.play(on_half_move=lambda m, o: seen.append(o))
    assert outcome.is_terminal
    assert seen[-1] == outcome
    assert all(not o.is_terminal for o in seen[:-1])
    assert len(seen) == len(machine.moves)
    counts = (machine.board.count(A), machine.board.count(B))
    assert counts[0] - counts[1] in (0, 1)


def test_human_against_hard_never_wins():
    machine = TurnStateMachine(computer_players={B: Difficulty.HARD})

    def first_empty(legal_moves):
        return legal_moves[0]

    outcome = machine.play(first_empty)
    assert outcome.winner != A


def test_new_round():
    machine = TurnStateMachine(computer_players={B: Difficulty.EASY})
    machine.submit((1, 1))
    machine.new_round(first_mark=B)
    assert machine.board == Board()
    assert machine.moves == []
    assert machine.state == AwaitingMove(B)
    assert machine.is_computer(B)


def test_from_position():
    start = Board.from_rows([
        [A, _, _],
        [_, B, _],
        [_, _, _],
    ])
    machine = TurnStateMachine.from_position(start, A)
    assert machine.state == AwaitingMove(A)
    assert machine.board == start
    assert machine.board is not start


def test_from_terminal_position_is_finished():
    start = Board.from_rows([
        [A, A, A],
        [B, B, _],
        [_, _, _],
    ])
    machine = TurnStateMachine.from_position(start, B)
    assert machine.state == Finished(Outcome.win(A))
