"""
Read-only view model for the renderer.

Everything the HUD and overlays show is derived here from a World, so the
text and colour rules can be checked without opening a window.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .config import COLORS, LOW_TIME_WARNING
from .state import GameState
from .world import World

TITLE = "Star Collector"
RESTART_HINT = "Click or Press R to Restart"


@dataclass(frozen=True)
class Overlay:
    title: str
    subtitle: str
    color: Tuple[int, ...]
    hint: Optional[str] = None


def score_text(world: World) -> str:
    return f"Score: {world.score}"


def timer_text(world: World) -> str:
    return f"Time: {world.time_left:.1f}"


def timer_color(world: World) -> Tuple[int, ...]:
    if world.time_left < LOW_TIME_WARNING:
        return COLORS["HUD_ALERT"]
    return COLORS["HUD_TEXT"]


def best_text(world: World) -> str:
    return f"Best: {world.high_score}"


def status_line(world: World) -> Optional[str]:
    """Caption shown while a round is running"""
    if world.state != GameState.PLAYING:
        return None
    return f"Score: {world.score} | High Score: {world.high_score}"


def overlay(world: World) -> Optional[Overlay]:
    if world.state == GameState.IDLE:
        return Overlay(TITLE, "Click to Start", COLORS["ACCENT"])
    if world.state == GameState.WON:
        return Overlay("Mission Complete!", f"Final Score: {world.score}",
                       COLORS["WON"], RESTART_HINT)
    if world.state == GameState.GAMEOVER:
        return Overlay("Time Up!", "Try Again", COLORS["GAMEOVER"], RESTART_HINT)
    return None
