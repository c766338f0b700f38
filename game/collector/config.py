"""
Game configuration for the star collector
Constants are fixed at startup; nothing here is mutated while a round runs.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple


# Gameplay parameters
GAME_CONFIG = {
    "fps": 60,                       # simulation steps per second
    "friction": 0.92,                # per-step velocity multiplier
    "star_count": 5,
    "player_accel": 900.0,           # units/s^2
    "player_max_speed": 320.0,       # units/s
    "time_limit": 15.0,              # 15 seconds to collect all stars
    "player_size": 28.0,
    "player_start": (100.0, 100.0),
    "star_radius_range": (7.0, 12.0),
    "spawn_margin": 40.0,            # stars keep this far from the edges
    "min_spawn_distance": 100.0,     # from the player start position
    "pickup_bonus": 10,              # points per star
    "time_bonus": 10,                # points per remaining second on a win
    "max_frame_time": 0.25,          # seconds; guards against stalls
    "width": 800,
    "height": 600,
}

# Render palette (RGB / RGBA)
COLORS = {
    "BACKGROUND": (11, 16, 32),
    "GRID": (255, 255, 255, 8),
    "PLAYER": (76, 201, 240),
    "STAR_CORE": (255, 215, 0),
    "STAR_GLOW": (255, 216, 0, 100),
    "HUD_TEXT": (255, 255, 255),
    "HUD_DIM": (255, 255, 255, 128),
    "HUD_ALERT": (231, 76, 60),
    "OVERLAY": (0, 0, 0, 191),
    "HINT": (170, 170, 170),
    "ACCENT": (76, 201, 240),
    "WON": (46, 204, 113),
    "GAMEOVER": (231, 76, 60),
}

GRID_SPACING = 40
LOW_TIME_WARNING = 5.0


@dataclass(frozen=True)
class GameConfig:
    """Immutable view of GAME_CONFIG used by the simulation"""
    fps: int = 60
    friction: float = 0.92
    star_count: int = 5
    player_accel: float = 900.0
    player_max_speed: float = 320.0
    time_limit: float = 15.0
    player_size: float = 28.0
    player_start: Tuple[float, float] = (100.0, 100.0)
    star_radius_range: Tuple[float, float] = (7.0, 12.0)
    spawn_margin: float = 40.0
    min_spawn_distance: float = 100.0
    pickup_bonus: int = 10
    time_bonus: int = 10
    max_frame_time: float = 0.25
    width: int = 800
    height: int = 600

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if not 0.0 < self.friction <= 1.0:
            raise ValueError(f"friction must be in (0, 1], got {self.friction}")
        if self.star_count < 1:
            raise ValueError(f"star_count must be at least 1, got {self.star_count}")
        if self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}")
        if self.player_max_speed <= 0:
            raise ValueError(f"player_max_speed must be positive, got {self.player_max_speed}")
        lo, hi = self.star_radius_range
        if not 0 < lo <= hi:
            raise ValueError(f"invalid star_radius_range: {self.star_radius_range}")
        if self.max_frame_time <= 0:
            raise ValueError(f"max_frame_time must be positive, got {self.max_frame_time}")

    @property
    def dt(self) -> float:
        """Fixed simulation step in seconds"""
        return 1.0 / self.fps

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "GameConfig":
        """Build a config from a dict, rejecting unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**config)


DEFAULT_CONFIG = GameConfig.from_dict(GAME_CONFIG)
