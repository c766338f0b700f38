"""
Game entity dataclasses
"""

from dataclasses import dataclass


@dataclass
class Player:
    """Player square; (x, y) is the centre"""
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    size: float = 28.0

    @property
    def half(self) -> float:
        return self.size / 2


@dataclass
class Collectible:
    """Star the player picks up by touching it"""
    x: float
    y: float
    radius: float = 10.0
    collected: bool = False
