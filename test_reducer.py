"""
Tests for the reducer: screen flow, moves, scoring, and rounds.

Usage:
    pytest test_reducer.py
"""

from dataclasses import replace

import pytest

from logic.actions import (
    SelectMode,
    SelectDifficulty,
    SelectSymbol,
    StartGame,
    MakeMove,
    AIMove,
    SetAITimer,
    NewGame,
    RestartGame,
    BackToMenu,
)
from logic.board import create_board, parse_board
from logic.game_state import (
    GameState,
    GameMode,
    GameResult,
    Difficulty,
    Player,
    Scores,
    Screen,
    INITIAL_STATE,
)
from logic.reducer import reduce


X, O = Player.X, Player.O


def run(state, *actions):
    for action in actions:
        state = reduce(state, action)
    return state


def moves(*indices):
    return [MakeMove(i) for i in indices]


def multiplayer_state():
    return reduce(INITIAL_STATE, SelectMode(GameMode.MULTIPLAYER))


def ai_game(human=X, difficulty=Difficulty.HARD):
    return run(
        INITIAL_STATE,
        SelectMode(GameMode.AI),
        SelectDifficulty(difficulty),
        SelectSymbol(human),
        StartGame(),
    )


def test_initial_state():
    state = INITIAL_STATE
    assert state.screen == Screen.MENU
    assert state.board == create_board()
    assert state.scores == Scores(0, 0, 0)
    assert state.round_number == 0
    assert state.result == GameResult.PLAYING
    assert state.winning_line is None
    assert not state.is_ai_turn
    assert state.ai_timer_id is None


def test_select_mode_ai_goes_to_setup():
    state = reduce(INITIAL_STATE, SelectMode(GameMode.AI))
    assert state.screen == Screen.SETUP
    assert state.mode == GameMode.AI


def test_select_mode_multiplayer_goes_to_game():
    state = multiplayer_state()
    assert state.screen == Screen.GAME
    assert state.mode == GameMode.MULTIPLAYER
    assert state.current_player == X


def test_select_mode_resets_the_board():
    state = run(multiplayer_state(), *moves(0, 4))
    state = replace(state, is_ai_turn=True, ai_timer_id="after#1")
    state = reduce(state, SelectMode(GameMode.AI))

    assert state.board == create_board()
    assert state.current_player == X
    assert state.result == GameResult.PLAYING
    assert not state.is_ai_turn
    assert state.ai_timer_id is None


def test_select_difficulty_and_symbol_only_change_their_field():
    setup = reduce(INITIAL_STATE, SelectMode(GameMode.AI))

    state = reduce(setup, SelectDifficulty(Difficulty.EASY))
    assert state == replace(setup, difficulty=Difficulty.EASY)

    state = reduce(setup, SelectSymbol(O))
    assert state == replace(setup, human_symbol=O)
    assert state.ai_symbol == X


def test_start_game_human_x():
    state = ai_game(human=X)
    assert state.screen == Screen.GAME
    assert state.current_player == X
    assert not state.is_ai_turn


def test_start_game_human_o_lets_ai_open():
    state = ai_game(human=O)
    assert state.current_player == X
    assert state.is_ai_turn


def test_multiplayer_win_scenario():
    state = run(multiplayer_state(), *moves(0, 3, 1, 4, 2))
    assert state.result == GameResult.WIN_X
    assert state.winning_line == (0, 1, 2)
    assert state.scores == Scores(x=1, o=0, draws=0)
    assert not state.is_ai_turn


def test_multiplayer_draw_scenario():
    # X O X / X O O / O X X
    state = run(multiplayer_state(), *moves(0, 1, 2, 4, 3, 5, 7, 6, 8))
    assert state.result == GameResult.DRAW
    assert state.winning_line is None
    assert state.scores == Scores(x=0, o=0, draws=1)


def test_o_win_is_scored_for_o():
    state = run(multiplayer_state(), *moves(0, 3, 1, 4, 8, 5))
    assert state.result == GameResult.WIN_O
    assert state.winning_line == (3, 4, 5)
    assert state.scores.o == 1


def test_make_move_advances_player():
    state = reduce(multiplayer_state(), MakeMove(4))
    assert state.board[4] == X
    assert state.current_player == O
    assert state.result == GameResult.PLAYING


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_make_move_out_of_range_is_ignored(index):
    state = multiplayer_state()
    assert reduce(state, MakeMove(index)) is state


def test_make_move_on_occupied_cell_is_ignored():
    state = reduce(multiplayer_state(), MakeMove(0))
    assert reduce(state, MakeMove(0)) is state


def test_make_move_after_result_is_ignored():
    state = run(multiplayer_state(), *moves(0, 3, 1, 4, 2))
    assert reduce(state, MakeMove(8)) is state
    assert reduce(state, AIMove(8)) is state


def test_human_move_hands_turn_to_ai():
    state = reduce(ai_game(human=X), MakeMove(4))
    assert state.current_player == O
    assert state.is_ai_turn


def test_human_winning_move_does_not_hand_turn_to_ai():
    state = replace(
        ai_game(human=X),
        board=parse_board("XX. OO. ..."),
    )
    state = reduce(state, MakeMove(2))
    assert state.result == GameResult.WIN_X
    assert not state.is_ai_turn


def test_ai_move_clears_flag_and_timer():
    state = ai_game(human=O)
    state = reduce(state, SetAITimer("after#7"))
    assert state.ai_timer_id == "after#7"

    state = reduce(state, AIMove(4))
    assert state.board[4] == X
    assert state.current_player == O
    assert not state.is_ai_turn
    assert state.ai_timer_id is None


def test_ai_move_scores_like_a_human_move():
    state = replace(ai_game(human=X), board=parse_board("XX. OO. X.."), current_player=O)
    state = reduce(state, AIMove(5))
    assert state.result == GameResult.WIN_O
    assert state.winning_line == (3, 4, 5)
    assert state.scores.o == 1


def test_ai_move_on_bad_cell_is_ignored():
    state = reduce(ai_game(human=O), AIMove(4))
    state = replace(state, is_ai_turn=True)
    assert reduce(state, AIMove(4)) is state
    assert reduce(state, AIMove(11)) is state


def test_set_ai_timer_has_no_game_effect():
    state = ai_game(human=O)
    new_state = reduce(state, SetAITimer(99))
    assert new_state == replace(state, ai_timer_id=99)


def test_new_game_keeps_scores_and_counts_rounds():
    state = run(multiplayer_state(), *moves(0, 3, 1, 4, 2))
    state = reduce(state, NewGame())

    assert state.board == create_board()
    assert state.result == GameResult.PLAYING
    assert state.winning_line is None
    assert state.scores == Scores(x=1, o=0, draws=0)
    assert state.round_number == 1


@pytest.mark.parametrize("k", range(6))
def test_multiplayer_rounds_alternate_first_player(k):
    state = run(multiplayer_state(), *[NewGame()] * k)
    assert state.round_number == k
    assert state.current_player == (X if k % 2 == 0 else O)


def test_ai_mode_new_game_always_opens_with_x():
    state = ai_game(human=X)
    for _ in range(3):
        state = reduce(state, NewGame())
        assert state.current_player == X
        assert not state.is_ai_turn

    state = ai_game(human=O)
    for _ in range(3):
        state = reduce(state, NewGame())
        assert state.current_player == X
        assert state.is_ai_turn


def test_restart_game_scenario():
    state = replace(
        multiplayer_state(),
        board=parse_board("XO. .X. ..."),
        current_player=O,
        scores=Scores(x=2, o=0, draws=1),
        round_number=3,
    )
    state = reduce(state, RestartGame())

    assert state.board == create_board()
    assert state.scores == Scores(x=2, o=0, draws=1)
    assert state.result == GameResult.PLAYING
    assert state.round_number == 3
    assert state.current_player == X


def test_restart_game_after_result():
    state = run(multiplayer_state(), *moves(0, 3, 1, 4, 2))
    state = reduce(state, RestartGame())
    assert state.result == GameResult.PLAYING
    assert state.scores.x == 1
    assert state.round_number == 0


def test_restart_in_ai_mode_schedules_ai_when_it_plays_x():
    state = reduce(ai_game(human=O), AIMove(0))
    state = reduce(state, RestartGame())
    assert state.is_ai_turn
    assert reduce(reduce(ai_game(human=X), MakeMove(0)), RestartGame()).is_ai_turn is False


def test_back_to_menu_resets_everything():
    state = run(multiplayer_state(), *moves(0, 3, 1, 4, 2), NewGame())
    state = reduce(state, BackToMenu())
    assert state == INITIAL_STATE
    assert state.scores == Scores(0, 0, 0)
    assert state.round_number == 0


def test_reducer_is_pure():
    state = run(multiplayer_state(), *moves(0, 3))
    snapshot = replace(state)

    for action in [MakeMove(1), NewGame(), RestartGame(), BackToMenu(), SetAITimer(1)]:
        first = reduce(state, action)
        second = reduce(state, action)
        assert first == second
        assert state == snapshot


def test_total_rounds_match_counters():
    state = multiplayer_state()
    results = []
    for game in ([0, 3, 1, 4, 2], [0, 1, 2, 4, 3, 5, 7, 6, 8], [0, 3, 1, 4, 2]):
        state = run(state, *moves(*game), NewGame())
        results.append(state.scores.total)
    assert results == [1, 2, 3]
    assert state.scores.x + state.scores.o + state.scores.draws == 3


def test_unknown_action_is_rejected():
    with pytest.raises(TypeError):
        reduce(INITIAL_STATE, "MAKE_MOVE")
