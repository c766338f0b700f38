"""
Round state machine

    IDLE --activate--> PLAYING --timeout--> GAMEOVER
    PLAYING --all collected--> WON
    WON | GAMEOVER --activate--> PLAYING

transition() is pure: the high score goes in and comes back out, so callers
own it explicitly.
"""

from enum import Enum
from typing import Tuple


class GameState(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    WON = "won"
    GAMEOVER = "gameover"

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.WON, GameState.GAMEOVER)


class Trigger(Enum):
    ACTIVATE = "activate"
    TIMEOUT = "timeout"
    ALL_COLLECTED = "all_collected"


class IllegalTransitionError(ValueError):
    """Raised when a trigger is not valid in the current state"""

    def __init__(self, state: GameState, trigger: Trigger):
        super().__init__(f"Cannot apply {trigger.value!r} in state {state.value!r}")
        self.state = state
        self.trigger = trigger


TRANSITIONS = {
    (GameState.IDLE, Trigger.ACTIVATE): GameState.PLAYING,
    (GameState.WON, Trigger.ACTIVATE): GameState.PLAYING,
    (GameState.GAMEOVER, Trigger.ACTIVATE): GameState.PLAYING,
    (GameState.PLAYING, Trigger.TIMEOUT): GameState.GAMEOVER,
    (GameState.PLAYING, Trigger.ALL_COLLECTED): GameState.WON,
}


def can_activate(state: GameState) -> bool:
    return (state, Trigger.ACTIVATE) in TRANSITIONS


def transition(state: GameState, trigger: Trigger, score: int,
               high_score: int) -> Tuple[GameState, int]:
    """
    Apply a trigger to the current state.

    Args:
        state: current state
        trigger: what happened
        score: round score at the moment of the trigger
        high_score: best score so far

    Returns:
        (next state, high score). Entering a terminal state records
        max(high_score, score); other transitions pass it through.
    """
    try:
        new_state = TRANSITIONS[(state, trigger)]
    except KeyError:
        raise IllegalTransitionError(state, trigger) from None

    if new_state.is_terminal:
        high_score = max(high_score, score)
    return new_state, high_score
