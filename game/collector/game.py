"""
CollectorGame - wires input, world, physics and scheduler together.
No rendering code here; a renderer is any zero-argument callable.
"""

import random
from typing import Callable, Optional

from .config import DEFAULT_CONFIG, GameConfig
from .input import InputSource
from .physics import step
from .scheduler import FixedTimestepScheduler
from .state import Trigger
from .world import World, activate, new_world


class CollectorGame:
    """
    One game session.

    Usage:
        game = CollectorGame(KeyboardInput(...))
        game.activate()                 # click to start
        game.on_frame(time.perf_counter())
    """

    def __init__(
        self,
        input_source: InputSource,
        config: GameConfig = DEFAULT_CONFIG,
        width: Optional[float] = None,
        height: Optional[float] = None,
        seed: Optional[int] = None,
        render: Optional[Callable[[], None]] = None,
    ):
        self.config = config
        self.input = input_source
        self.rng = random.Random(seed)
        self.world: World = new_world(width, height, config)
        self.scheduler = FixedTimestepScheduler(
            config.dt, self.update, render, max_frame_time=config.max_frame_time
        )
        self.last_trigger: Optional[Trigger] = None

    @property
    def high_score(self) -> int:
        return self.world.high_score

    def set_renderer(self, render: Optional[Callable[[], None]]):
        self.scheduler.render = render

    def activate(self) -> bool:
        """Pointer click or restart key: start a round unless one is running"""
        return activate(self.world, self.config, self.rng)

    def resize(self, width: float, height: float):
        # picked up by the next step's boundary clamp
        self.world.width = width
        self.world.height = height

    def update(self, dt: float) -> Optional[Trigger]:
        """One simulation step: restart edge, input poll, physics"""
        if self.input.consume_restart():
            self.activate()
        trigger = step(self.world, self.input.poll(), dt, self.config)
        if trigger is not None:
            self.last_trigger = trigger
        return trigger

    def start(self, now: float):
        self.scheduler.start(now)

    def on_frame(self, now: float) -> int:
        return self.scheduler.on_frame(now)
