"""
World state owned by one game session, plus spawning and reset.
"""

from __future__ import annotations
import math
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .config import DEFAULT_CONFIG, GameConfig
from .entities import Collectible, Player
from .state import GameState, Trigger, can_activate, transition
from .utils import distance


@dataclass
class World:
    """Everything the simulation step mutates and the renderer reads"""
    width: float
    height: float
    player: Player
    collectibles: List[Collectible] = field(default_factory=list)
    state: GameState = GameState.IDLE
    score: int = 0
    time_left: float = DEFAULT_CONFIG.time_limit
    high_score: int = 0  # survives resets

    @property
    def remaining(self) -> int:
        return sum(1 for c in self.collectibles if not c.collected)

    @property
    def collected_count(self) -> int:
        return len(self.collectibles) - self.remaining


def create_player(config: GameConfig = DEFAULT_CONFIG) -> Player:
    x, y = config.player_start
    return Player(x=x, y=y, size=config.player_size)


def new_world(width: Optional[float] = None, height: Optional[float] = None,
              config: GameConfig = DEFAULT_CONFIG) -> World:
    """A world in the IDLE state, waiting for the first activation"""
    return World(
        width=config.width if width is None else width,
        height=config.height if height is None else height,
        player=create_player(config),
        time_left=config.time_limit,
    )


def spawn_collectibles(width: float, height: float, player: Player,
                       config: GameConfig = DEFAULT_CONFIG,
                       rng: Optional[random.Random] = None) -> List[Collectible]:
    """
    Place config.star_count stars inside the spawn margin, re-rolling any
    position closer than min_spawn_distance to the player.
    """
    rng = rng or random.Random()
    margin = config.spawn_margin
    lo_x, hi_x = margin, max(margin, width - margin)
    lo_y, hi_y = margin, max(margin, height - margin)

    # the farthest corner of the spawn area bounds what any re-roll can reach
    reach = max(
        distance(cx, cy, player.x, player.y)
        for cx in (lo_x, hi_x) for cy in (lo_y, hi_y)
    )
    if reach < config.min_spawn_distance:
        raise ValueError(
            f"Field {width}x{height} is too small to place stars "
            f"{config.min_spawn_distance} units away from the player"
        )

    r_lo, r_hi = config.star_radius_range
    stars = []
    for _ in range(config.star_count):
        while True:
            x = rng.uniform(lo_x, hi_x)
            y = rng.uniform(lo_y, hi_y)
            if distance(x, y, player.x, player.y) >= config.min_spawn_distance:
                break
        stars.append(Collectible(x=x, y=y, radius=rng.uniform(r_lo, r_hi)))
    return stars


def reset_session(world: World, config: GameConfig = DEFAULT_CONFIG,
                  rng: Optional[random.Random] = None):
    """Rebuild player, stars, score and timer together; keeps high_score"""
    player = create_player(config)
    collectibles = spawn_collectibles(world.width, world.height, player, config, rng)
    world.player = player
    world.collectibles = collectibles
    world.score = 0
    world.time_left = config.time_limit


def activate(world: World, config: GameConfig = DEFAULT_CONFIG,
             rng: Optional[random.Random] = None) -> bool:
    """
    Start or restart a round. Ignored while a round is in progress.

    Returns:
        True if a new round started
    """
    if not can_activate(world.state):
        return False
    state, high_score = transition(world.state, Trigger.ACTIVATE, world.score, world.high_score)
    reset_session(world, config, rng)
    world.state, world.high_score = state, high_score
    return True


def time_bonus(time_left: float, config: GameConfig = DEFAULT_CONFIG) -> int:
    """Points awarded for finishing with time_left seconds on the clock"""
    return math.ceil(time_left) * config.time_bonus
