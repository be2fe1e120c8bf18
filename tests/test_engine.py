from __future__ import annotations

import random

import pytest

from minimax import (
    AnalyticsUnavailableError,
    Engine,
    EngineConfigurationError,
    InvalidDepthError,
    NoPossibleMovesError,
    NotPlayersTurnError,
)
from minimax.config import EngineSettings
from minimax.games import TicTacToePlayer, TicTacToeState

X = TicTacToePlayer.X
O = TicTacToePlayer.O


class ZeroScoresState(TicTacToeState):
    """Tic-tac-toe where every position scores zero."""

    def evaluate_score(self, player):
        return 0


class ShuffledMovesState(TicTacToeState):
    """Tic-tac-toe that lists its possible moves in random order."""

    def __init__(self, rng: random.Random, **kwargs) -> None:
        super().__init__(**kwargs)
        self.rng = rng

    def get_possible_moves(self):
        moves = super().get_possible_moves()
        self.rng.shuffle(moves)
        return moves


def play(state: TicTacToeState, *moves):
    for row, column in moves:
        state = state.play(row, column)
    return state


def test_engine_decides():
    clean = TicTacToeState()
    assert clean.filled_count() == 0

    new_state = Engine(X, 3).decide(clean)
    assert new_state.filled_count() == 1
    assert clean.filled_count() == 0


def test_engine_decides_when_all_scores_zero():
    # Regression: used to report "no possible moves"
    clean = ZeroScoresState()

    new_state = Engine(X, 3).decide(clean)
    assert new_state.filled_count() == 1
    assert isinstance(new_state, ZeroScoresState)


def test_engine_takes_a_win_1():
    # XX
    #  O
    #   O
    state = play(TicTacToeState(), (0, 0), (1, 1), (0, 1), (2, 2))

    new_state = Engine(X, 3).decide(state)
    assert new_state.cell(0, 2) is X, "Upper-right field must be taken by X"


def test_engine_takes_a_win_2():
    # Rotated version of the above; a win in two turns must not be
    # preferred over the win in one
    # O
    #  O
    #  XX
    state = play(TicTacToeState(), (2, 2), (1, 1), (2, 1), (0, 0))

    new_state = Engine(X, 3).decide(state)
    assert new_state.cell(2, 0) is X, "Lower-left field must be taken by X"


def test_engine_prevents_a_loss_1():
    # X
    # X
    # OO
    state = play(TicTacToeState(), (0, 0), (2, 0), (1, 0), (2, 1))

    new_state = Engine(X, 3).decide(state)
    assert new_state.cell(2, 2) is X, "Lower-right field must be taken by X"


def test_engine_prevents_a_loss_2():
    # OXX
    # O
    #
    state = play(TicTacToeState(), (0, 1), (0, 0), (0, 2), (1, 0))

    new_state = Engine(X, 3).decide(state)
    assert new_state.cell(2, 0) is X, "Lower-left field must be taken by X"


def test_engine_forces_a_win_1():
    # O X
    #  O
    # X
    state = play(TicTacToeState(), (2, 0), (0, 0), (0, 2), (1, 1))

    new_state = Engine(X, 3).decide(state)
    assert new_state.cell(2, 2) is X, "Bottom-right field must be taken by X"


def test_engine_forces_a_win_2():
    # X O
    #  O
    #   X
    state = play(TicTacToeState(), (2, 2), (0, 2), (0, 0), (1, 1))

    new_state = Engine(X, 3).decide(state)
    assert new_state.cell(2, 0) is X, "Bottom-left field must be taken by X"


@pytest.mark.parametrize("seed", range(5))
def test_engine_forces_a_win_in_any_move_order(seed):
    # Same position as above, moves enumerated in random order
    state = play(ShuffledMovesState(random.Random(seed)), (2, 2), (0, 2), (0, 0), (1, 1))

    new_state = Engine(X, 3).decide(state)
    assert new_state.cell(2, 0) is X, "Bottom-left field must be taken by X"


def test_engine_handles_one_draw_option():
    # OXX
    #  OO
    # XOX
    state = play(
        TicTacToeState(),
        (2, 0), (0, 0), (0, 2), (1, 1), (0, 1), (2, 1), (2, 2), (1, 2),
    )

    new_state = Engine(X, 3).decide(state)
    assert new_state.cell(1, 0) is X, "Middle-left field must be taken by X"


def test_engine_plays_against_itself():
    # Perfect play on both sides always ends in a draw
    state = TicTacToeState()
    engine_x = Engine(X, 6)
    engine_o = Engine(O, 6)

    for _ in range(4):
        state = engine_x.decide(state)
        state = engine_o.decide(state)
    state = engine_x.decide(state)

    assert state.filled_count() == 9, "All fields must be full"
    assert state.evaluate_score(X) == 0, "Player X must not win"
    assert state.evaluate_score(O) == 0, "Player O must not win"


def test_engine_is_deterministic():
    state = play(TicTacToeState(), (1, 1))
    engine = Engine(O, 4)

    first = engine.decide(state)
    second = engine.decide(state)
    assert first.cells == second.cells


def test_exception_when_not_our_turn():
    with pytest.raises(NotPlayersTurnError):
        Engine(O, 3).decide(TicTacToeState())


def test_exception_when_no_moves_left():
    # OXX
    # XOO
    # XOX
    state = play(
        TicTacToeState(),
        (2, 0), (0, 0), (0, 2), (1, 1), (0, 1), (2, 1), (2, 2), (1, 2), (1, 0),
    )

    with pytest.raises(NoPossibleMovesError, match="no possible moves"):
        Engine(O, 3).decide(state)


def test_exception_when_game_already_won():
    state = play(TicTacToeState(), (0, 0), (1, 0), (0, 1), (1, 1), (0, 2))

    with pytest.raises(NoPossibleMovesError):
        Engine(O, 3).decide(state)


def test_exception_when_invalid_max_depth():
    engine = Engine(X, 0)

    with pytest.raises(InvalidDepthError):
        engine.decide(TicTacToeState())
    with pytest.raises(AnalyticsUnavailableError):
        engine.get_analytics()


def test_invalid_depth_is_a_configuration_error():
    with pytest.raises(EngineConfigurationError):
        Engine(X, 0).decide(TicTacToeState())


def test_exception_when_getting_analytics_before_running():
    engine = Engine(X, 0)

    with pytest.raises(AnalyticsUnavailableError, match=r"Please run decide\(\) first\."):
        engine.get_analytics()


def test_analytics_after_decide():
    engine = Engine(X, 2)
    engine.decide(TicTacToeState())

    analytics = engine.get_analytics()
    assert analytics.nodes_evaluated == analytics.leaf_nodes_evaluated + analytics.internal_nodes_evaluated
    # Root, nine replies to consider, at most eight answers to each
    assert analytics.internal_nodes_evaluated >= 2
    assert analytics.nodes_evaluated <= 1 + 9 + 9 * 8


def test_pruning_matches_exhaustive_search():
    positions = [
        TicTacToeState(),
        play(TicTacToeState(), (0, 0)),
        play(TicTacToeState(), (0, 1), (0, 0), (0, 2), (1, 0)),
        play(TicTacToeState(), (0, 0), (1, 1), (0, 1), (2, 2)),
        play(TicTacToeState(), (2, 0), (0, 0), (0, 2), (1, 1)),
        play(TicTacToeState(), (1, 1), (0, 0)),
    ]
    for state in positions:
        player = state.get_next_player()
        pruned = Engine(player, 4, settings=EngineSettings(alpha_beta_pruning=True))
        exhaustive = Engine(player, 4, settings=EngineSettings(alpha_beta_pruning=False))

        pruned_move = pruned.decide(state)
        exhaustive_move = exhaustive.decide(state)

        assert pruned_move.cells == exhaustive_move.cells
        assert pruned.last_evaluation == exhaustive.last_evaluation
        assert pruned_move.last_move in state.empty_fields()
        assert pruned.get_analytics().nodes_evaluated <= exhaustive.get_analytics().nodes_evaluated
