"""
Arcade front end: key wiring, the play window and the scene renderer.
This is a thin adapter; no game rules live here.
"""

import time
from typing import Optional

import arcade

from .config import COLORS, DEFAULT_CONFIG, GRID_SPACING, GameConfig
from .game import CollectorGame
from .hud import TITLE, best_text, overlay, score_text, status_line, timer_color, timer_text
from .input import DOWN, LEFT, RIGHT, UP, KeyboardInput
from .state import GameState
from .world import World


KEY_MAP = {
    arcade.key.UP: UP,
    arcade.key.W: UP,
    arcade.key.DOWN: DOWN,
    arcade.key.S: DOWN,
    arcade.key.LEFT: LEFT,
    arcade.key.A: LEFT,
    arcade.key.RIGHT: RIGHT,
    arcade.key.D: RIGHT,
}
RESTART_KEYS = (arcade.key.R,)


class MissingSurfaceError(RuntimeError):
    """No drawing surface to render into; startup cannot continue"""


def keyboard_input() -> KeyboardInput:
    return KeyboardInput(KEY_MAP, RESTART_KEYS)


class SceneRenderer:
    """
    Draws a World onto an Arcade window.

    Game coordinates have y pointing down; Arcade's point up, so every y is
    flipped against the current surface height. Reads the world, never writes.
    """

    def __init__(self, surface: Optional[arcade.Window], world_ref):
        if surface is None:
            raise MissingSurfaceError("Drawing surface not found")
        # a window without a GL context has nothing to draw into
        if getattr(surface, "ctx", None) is None:
            raise MissingSurfaceError(f"{type(surface).__name__} has no rendering context")
        self.surface = surface
        self._world_ref = world_ref

    @property
    def world(self) -> World:
        return self._world_ref()

    def _y(self, y: float) -> float:
        return self.world.height - y

    def draw(self):
        world = self.world
        self.surface.clear(color=COLORS["BACKGROUND"])
        self._draw_grid(world)

        if world.state != GameState.IDLE:
            for star in world.collectibles:
                if not star.collected:
                    self._draw_star(star)
            self._draw_player(world)
            self._draw_hud(world)

        panel = overlay(world)
        if panel is not None:
            self._draw_overlay(world, panel)

    def _draw_grid(self, world: World):
        points = []
        x = 0
        while x <= world.width:
            points += [(x, 0), (x, world.height)]
            x += GRID_SPACING
        y = 0
        while y <= world.height:
            points += [(0, y), (world.width, y)]
            y += GRID_SPACING
        arcade.draw_lines(points, COLORS["GRID"], 1)

    def _draw_star(self, star):
        y = self._y(star.y)
        arcade.draw_circle_filled(star.x, y, star.radius * 2.5, COLORS["STAR_GLOW"])
        arcade.draw_circle_filled(star.x, y, star.radius, COLORS["STAR_CORE"])

    def _draw_player(self, world: World):
        p = world.player
        y = self._y(p.y)
        arcade.draw_lrbt_rectangle_filled(
            p.x - p.half, p.x + p.half, y - p.half, y + p.half, COLORS["PLAYER"]
        )

    def _draw_hud(self, world: World):
        top = world.height - 35
        arcade.draw_text(score_text(world), 20, top, COLORS["HUD_TEXT"], 20, bold=True)
        arcade.draw_text(timer_text(world), world.width - 20, top, timer_color(world), 20,
                         anchor_x="right", bold=True)
        arcade.draw_text(best_text(world), world.width / 2, top, COLORS["HUD_DIM"], 16,
                         anchor_x="center")

    def _draw_overlay(self, world: World, panel):
        cx, cy = world.width / 2, world.height / 2
        arcade.draw_lrbt_rectangle_filled(0, world.width, 0, world.height, COLORS["OVERLAY"])
        arcade.draw_text(panel.title, cx, cy + 20, panel.color, 48,
                         anchor_x="center", bold=True)
        arcade.draw_text(panel.subtitle, cx, cy - 30, COLORS["HUD_TEXT"], 24, anchor_x="center")
        if panel.hint:
            arcade.draw_text(panel.hint, cx, cy - 70, COLORS["HINT"], 16, anchor_x="center")


class CollectorWindow(arcade.Window):
    """Arcade window driving a CollectorGame"""

    def __init__(self, game: CollectorGame, keys: KeyboardInput, clock=time.perf_counter):
        world = game.world
        super().__init__(int(world.width), int(world.height), TITLE, resizable=True,
                         update_rate=game.config.dt, draw_rate=game.config.dt)
        self.game = game
        self.keys = keys
        self.clock = clock
        self.renderer = SceneRenderer(self, lambda: self.game.world)
        self._caption = TITLE
        game.set_renderer(self.renderer.draw)
        game.start(clock())

    def on_draw(self):
        # one frame callback: steps as needed, then the renderer draws once
        self.game.on_frame(self.clock())
        caption = status_line(self.game.world) or TITLE
        if caption != self._caption:
            self._caption = caption
            self.set_caption(caption)

    def on_key_press(self, symbol: int, modifiers: int):
        self.keys.key_down(symbol)

    def on_key_release(self, symbol: int, modifiers: int):
        self.keys.key_up(symbol)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        self.game.activate()

    def on_deactivate(self):
        self.keys.release_all()

    def on_resize(self, width: int, height: int):
        super().on_resize(width, height)
        self.game.resize(width, height)


def run_game(config: GameConfig = DEFAULT_CONFIG, width: Optional[int] = None,
             height: Optional[int] = None, seed: Optional[int] = None):
    """Open the window and run until it is closed"""
    keys = keyboard_input()
    game = CollectorGame(keys, config=config, width=width, height=height, seed=seed)
    CollectorWindow(game, keys)
    arcade.run()
    return game
