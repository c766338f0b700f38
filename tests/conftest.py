"""Shared fixtures for gameplay tests. No display required."""
import pytest

from game.collector.config import DEFAULT_CONFIG
from game.collector.entities import Collectible, Player
from game.collector.state import GameState
from game.collector.world import World


# A star nothing can reach keeps a round from being won by accident
UNREACHABLE = (-10_000.0, -10_000.0)


def make_world(stars=None, player=None, time_left=None, score=0, high_score=0,
               width=800, height=600):
    """A PLAYING world with explicit contents"""
    if stars is None:
        stars = [Collectible(*UNREACHABLE, radius=10.0)]
    return World(
        width=width,
        height=height,
        player=player or Player(x=400.0, y=300.0),
        collectibles=stars,
        state=GameState.PLAYING,
        score=score,
        time_left=DEFAULT_CONFIG.time_limit if time_left is None else time_left,
        high_score=high_score,
    )


@pytest.fixture
def world():
    return make_world()


@pytest.fixture
def dt():
    return DEFAULT_CONFIG.dt
