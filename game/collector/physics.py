"""
Fixed-step simulation for one round.

step() is the only code that mutates a World while it is PLAYING. Each stage
is a separate function so it can be exercised on its own.
"""

from typing import Optional, Tuple

from .config import DEFAULT_CONFIG, GameConfig
from .entities import Player
from .input import Controls
from .state import GameState, Trigger, transition
from .utils import circle_overlap, clamp, vec_len
from .world import World, time_bonus


def step(world: World, controls: Controls, dt: float,
         config: GameConfig = DEFAULT_CONFIG) -> Optional[Trigger]:
    """
    Advance the world by one fixed step.

    Returns:
        The trigger fired this step (TIMEOUT or ALL_COLLECTED), else None.
    """
    if world.state != GameState.PLAYING:
        return None

    # Timer first: a step that runs out of time never wins
    world.time_left -= dt
    if world.time_left <= 0:
        world.time_left = 0.0
        return _finish(world, Trigger.TIMEOUT)

    p = world.player
    apply_controls(p, controls, dt, config.player_accel)
    apply_friction(p, config.friction)
    clamp_speed(p, config.player_max_speed)
    integrate(p, dt)
    resolve_boundaries(p, world.width, world.height)

    world.score += collect_items(world, config.pickup_bonus)

    if world.remaining == 0:
        world.score += time_bonus(world.time_left, config)
        return _finish(world, Trigger.ALL_COLLECTED)
    return None


def _finish(world: World, trigger: Trigger) -> Trigger:
    world.state, world.high_score = transition(
        world.state, trigger, world.score, world.high_score
    )
    return trigger


def apply_controls(p: Player, controls: Controls, dt: float, accel: float):
    # opposing keys cancel out
    dv = accel * dt
    if controls.left:
        p.vx -= dv
    if controls.right:
        p.vx += dv
    if controls.up:
        p.vy -= dv
    if controls.down:
        p.vy += dv


def apply_friction(p: Player, friction: float):
    # per step, not scaled by dt: tuned for the fixed simulation rate
    p.vx *= friction
    p.vy *= friction


def clamp_speed(p: Player, max_speed: float):
    speed = vec_len(p.vx, p.vy)
    if speed > max_speed:
        scale = max_speed / speed
        p.vx *= scale
        p.vy *= scale


def integrate(p: Player, dt: float):
    p.x += p.vx * dt
    p.y += p.vy * dt


def resolve_boundaries(p: Player, width: float, height: float) -> Tuple[bool, bool]:
    """
    Keep the player's square inside [0, width] x [0, height].
    Each clamped axis loses its velocity.

    Returns:
        (x clamped, y clamped)
    """
    half = p.half
    x = clamp(p.x, half, width - half)
    y = clamp(p.y, half, height - half)
    hit_x = x != p.x
    hit_y = y != p.y
    if hit_x:
        p.x, p.vx = x, 0.0
    if hit_y:
        p.y, p.vy = y, 0.0
    return hit_x, hit_y


def collect_items(world: World, bonus: int) -> int:
    """Flag every star the player touches; returns the points earned"""
    p = world.player
    earned = 0
    for star in world.collectibles:
        if star.collected:
            continue
        if circle_overlap(p.x, p.y, p.half, star.x, star.y, star.radius):
            star.collected = True
            earned += bonus
    return earned
