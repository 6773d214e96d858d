import pytest

from logic.board import Board, Mark
from logic.win_checker import GameStatus, Outcome, WinChecker

A, B, _ = Mark.A, Mark.B, None


@pytest.fixture
def checker():
    return WinChecker()


@pytest.mark.parametrize("mark", [A, B])
@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_every_line_wins_for_both_marks(checker, line, mark):
    board = Board()
    for position in line:
        board.place(position, mark)

    assert checker.has_line(board, mark)
    assert not checker.has_line(board, mark.opposite())
    assert checker.classify(board) == Outcome.win(mark)
    assert checker.get_winning_line(board) == line


def test_eight_winning_lines():
    assert len(WinChecker.WINNING_LINES) == 8


def test_top_row_win(checker):
    board = Board.from_rows([
        [A, A, A],
        [_, _, _],
        [_, _, _],
    ])
    outcome = checker.classify(board)
    assert outcome.status == GameStatus.WIN
    assert outcome.winner == A
    assert outcome.is_terminal


def test_full_board_without_line_is_draw(checker):
    board = Board.from_rows([
        [A, B, A],
        [B, A, B],
        [B, A, B],
    ])
    assert checker.classify(board) == Outcome.draw()
    assert checker.score(board, A) == 0
    assert checker.get_winning_line(board) is None


def test_no_false_positives(checker):
    board = Board.from_rows([
        [A, B, _],
        [_, A, _],
        [B, _, _],
    ])
    outcome = checker.classify(board)
    assert outcome == Outcome.in_progress()
    assert not outcome.is_terminal
    assert checker.check_winner(board) is None
    assert not checker.is_terminal(board)


def test_empty_board_in_progress(checker):
    assert checker.classify(Board()) == Outcome.in_progress()


def test_score_is_relative_to_mark(checker):
    board = Board.from_rows([
        [B, _, A],
        [_, B, A],
        [_, _, B],
    ])
    assert checker.score(board, B) == 10
    assert checker.score(board, A) == -10


def test_score_of_unfinished_board_is_zero(checker):
    board = Board.from_rows([
        [A, A, _],
        [B, B, _],
        [_, _, _],
    ])
    assert checker.score(board, A) == 0
    assert checker.score(board, B) == 0


def test_win_on_last_cell_is_not_a_draw(checker):
    board = Board.from_rows([
        [A, B, A],
        [B, A, B],
        [B, A, A],
    ])
    assert board.is_full()
    assert checker.classify(board) == Outcome.win(A)


def test_outcome_str():
    assert str(Outcome.win(B)) == "Win(B)"
    assert str(Outcome.draw()) == "Draw"
    assert str(Outcome.in_progress()) == "InProgress"
