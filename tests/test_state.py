"""
STATE MACHINE TESTS

transition() is pure, so every legal and illegal pair is checked directly.
"""
import pytest

from game.collector.state import (
    GameState, IllegalTransitionError, Trigger, can_activate, transition,
)


class TestLegalTransitions:

    @pytest.mark.parametrize("start", [GameState.IDLE, GameState.WON, GameState.GAMEOVER])
    def test_activate_starts_playing(self, start):
        state, high = transition(start, Trigger.ACTIVATE, score=70, high_score=40)
        assert state == GameState.PLAYING
        # activation never touches the high score
        assert high == 40

    def test_timeout_ends_in_gameover(self):
        state, high = transition(GameState.PLAYING, Trigger.TIMEOUT, score=30, high_score=10)
        assert state == GameState.GAMEOVER
        assert high == 30

    def test_all_collected_ends_in_won(self):
        state, high = transition(GameState.PLAYING, Trigger.ALL_COLLECTED, score=160, high_score=200)
        assert state == GameState.WON
        assert high == 200

    @pytest.mark.parametrize("score,previous,expected", [
        (0, 0, 0),
        (50, 0, 50),
        (50, 50, 50),
        (20, 90, 90),
    ])
    def test_high_score_is_max(self, score, previous, expected):
        _, high = transition(GameState.PLAYING, Trigger.TIMEOUT, score, previous)
        assert high == expected


class TestIllegalTransitions:

    @pytest.mark.parametrize("state,trigger", [
        (GameState.PLAYING, Trigger.ACTIVATE),
        (GameState.IDLE, Trigger.TIMEOUT),
        (GameState.IDLE, Trigger.ALL_COLLECTED),
        (GameState.WON, Trigger.TIMEOUT),
        (GameState.WON, Trigger.ALL_COLLECTED),
        (GameState.GAMEOVER, Trigger.TIMEOUT),
        (GameState.GAMEOVER, Trigger.ALL_COLLECTED),
    ])
    def test_rejected(self, state, trigger):
        with pytest.raises(IllegalTransitionError) as exc_info:
            transition(state, trigger, 0, 0)
        assert exc_info.value.state == state
        assert exc_info.value.trigger == trigger

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            transition(GameState.PLAYING, Trigger.ACTIVATE, 0, 0)

    def test_no_path_back_to_idle(self):
        for trigger in Trigger:
            try:
                state, _ = transition(GameState.PLAYING, trigger, 0, 0)
            except IllegalTransitionError:
                continue
            assert state != GameState.IDLE


def test_can_activate():
    assert can_activate(GameState.IDLE)
    assert can_activate(GameState.WON)
    assert can_activate(GameState.GAMEOVER)
    assert not can_activate(GameState.PLAYING)


def test_terminal_states():
    assert GameState.WON.is_terminal
    assert GameState.GAMEOVER.is_terminal
    assert not GameState.IDLE.is_terminal
    assert not GameState.PLAYING.is_terminal


def test_module_source_compiles_cleanly():
    import warnings
    from pathlib import Path

    from game.collector import state

    source = Path(state.__file__).read_text(encoding="utf-8")
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        compile(source, state.__file__, "exec")
    assert "PLAYING --all collected--> WON" in state.__doc__
