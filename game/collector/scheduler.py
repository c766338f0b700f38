"""Fixed-timestep scheduler.

Variable frame timestamps are turned into a whole number of fixed simulation
steps; leftover time carries over to the next frame. Rendering happens once
per frame, with no interpolation.
"""

from typing import Callable, Optional


class FixedTimestepScheduler:
    def __init__(self, dt: float, step: Callable[[float], None],
                 render: Optional[Callable[[], None]] = None,
                 max_frame_time: float = 0.25):
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        if max_frame_time <= 0:
            raise ValueError(f"max_frame_time must be positive, got {max_frame_time}")
        self.dt = dt
        self.step = step
        self.render = render
        self.max_frame_time = max_frame_time
        self.accumulator = 0.0
        self.last_time: Optional[float] = None
        self.steps_run = 0

    def start(self, now: float):
        self.last_time = now
        self.accumulator = 0.0

    def on_frame(self, now: float) -> int:
        """Frame callback with an absolute timestamp in seconds"""
        if self.last_time is None:
            self.start(now)
            frame_time = 0.0
        else:
            frame_time = now - self.last_time
            self.last_time = now
        return self.advance(frame_time)

    def advance(self, frame_time: float) -> int:
        """
        Consume frame_time seconds of wall clock, run the steps it pays for,
        then render once.

        Returns:
            number of simulation steps executed
        """
        # a clock going backwards contributes nothing
        frame_time = min(max(frame_time, 0.0), self.max_frame_time)
        self.accumulator += frame_time

        steps = 0
        while self.accumulator >= self.dt:
            self.step(self.dt)
            self.accumulator -= self.dt
            steps += 1
        self.steps_run += steps

        if self.render is not None:
            self.render()
        return steps
