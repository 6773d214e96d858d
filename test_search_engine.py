import pytest

from logic.board import Board, Mark
from logic.difficulty import Difficulty, DifficultyPolicy
from logic.evaluation import play_match
from logic.search_engine import SearchEngine
from logic.win_checker import Outcome, WinChecker

A, B, _ = Mark.A, Mark.B, None


@pytest.fixture(scope="module")
def engine():
    return SearchEngine()


def assert_never_loses(engine, checker, board, mark):
    """mark plays best_move, the other side tries every reply."""
    move = engine.best_move(board, mark)
    board.place(move, mark)
    try:
        if checker.is_terminal(board):
            assert checker.score(board, mark) >= 0, board
            return
        for reply in board.legal_moves():
            board.place(reply, mark.opposite())
            try:
                if checker.is_terminal(board):
                    assert checker.score(board, mark) >= 0, board
                else:
                    assert_never_loses(engine, checker, board, mark)
            finally:
                board.undo(reply)
    finally:
        board.undo(move)


def test_empty_board_picks_first_corner_with_draw_value(engine):
    board = Board()
    result = engine.choose(board, A)
    assert result.move == (0, 0)
    assert result.score == 0
    # Full tree, no pruning
    assert result.nodes > 500_000
    assert board == Board()


def test_blocks_a_win(engine):
    board = Board.from_rows([
        [A, A, _],
        [_, B, _],
        [_, _, _],
    ])
    assert engine.best_move(board, B) == (0, 2)


def test_takes_a_win(engine):
    board = Board.from_rows([
        [B, B, _],
        [_, A, _],
        [A, _, A],
    ])
    result = engine.choose(board, B)
    assert result.move == (0, 2)
    assert result.score == 10


def test_equal_wins_keep_row_major_order(engine):
    # (1, 2) wins at once, but (0, 2) sets up a fork that also wins.
    # Scores ignore depth, so the first one found is kept.
    board = Board.from_rows([
        [A, A, _],
        [B, B, _],
        [_, _, A],
    ])
    result = engine.choose(board, B)
    assert result.score == 10
    assert result.move == (0, 2)


def test_lost_position_scores_minus_ten(engine):
    # A has two open threats, B can only block one
    board = Board.from_rows([
        [A, _, A],
        [_, B, _],
        [A, _, B],
    ])
    result = engine.choose(board, B)
    assert result.score == -10


def test_search_restores_board(engine):
    board = Board.from_rows([
        [A, _, _],
        [_, B, _],
        [_, _, A],
    ])
    before = board.snapshot()
    engine.best_move(board, B)
    assert board.snapshot() == before


def test_search_scores_from_root_mark(engine):
    board = Board.from_rows([
        [A, A, A],
        [B, B, _],
        [_, _, _],
    ])
    assert engine.search(board, B, True, A) == 10
    assert engine.search(board, B, True, B) == -10


def test_full_board_has_no_move(engine):
    board = Board.from_rows([
        [A, B, A],
        [B, A, B],
        [B, A, B],
    ])
    result = engine.choose(board, A)
    assert result.move is None
    assert result.score == 0


@pytest.mark.parametrize("first_mark", [A, B])
def test_hard_vs_hard_is_a_draw(first_mark):
    policy = DifficultyPolicy()
    outcome = play_match(policy, {A: Difficulty.HARD, B: Difficulty.HARD}, first_mark=first_mark)
    assert outcome == Outcome.draw()


@pytest.mark.parametrize("opening", [(row, col) for row in range(3) for col in range(3)])
def test_second_player_never_loses(engine, opening):
    board = Board()
    board.place(opening, A)
    assert_never_loses(engine, WinChecker(), board, B)


def test_first_player_never_loses_from_empty_board(engine):
    assert_never_loses(engine, WinChecker(), Board(), A)


def test_first_player_never_loses_from_midgame(engine):
    board = Board.from_rows([
        [_, B, _],
        [_, A, _],
        [_, _, _],
    ])
    assert_never_loses(engine, WinChecker(), board, A)
