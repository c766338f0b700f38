"""
Input sources for the simulation.

The simulation never sees raw key events. Once per step it polls an
InputSource for a Controls snapshot and asks whether a restart was requested.
"""

from typing import Dict, Iterable, NamedTuple, Protocol, Set


UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class Controls(NamedTuple):
    """Directional intent for one simulation step"""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    @classmethod
    def from_directions(cls, held: Iterable[str]) -> "Controls":
        held = set(held)
        return cls(*(d in held for d in DIRECTIONS))


NO_CONTROLS = Controls()


class InputSource(Protocol):
    def poll(self) -> Controls:
        ...

    def consume_restart(self) -> bool:
        ...


class KeyboardInput:
    """
    Mirrors key-down / key-up events into pollable state.

    Args:
        key_map: physical key code -> direction name. Several codes may map
            to the same direction (arrows and WASD).
        restart_keys: key codes that request a restart.
    """

    def __init__(self, key_map: Dict[int, str], restart_keys: Iterable[int] = ()):
        unknown = set(key_map.values()) - set(DIRECTIONS)
        if unknown:
            raise ValueError(f"Unknown directions in key map: {sorted(unknown)}")
        self.key_map = dict(key_map)
        self.restart_keys = frozenset(restart_keys)
        self._held: Set[int] = set()
        self._restart_pending = False

    def key_down(self, key: int):
        if key in self.restart_keys and key not in self._held:
            # only the press edge counts; autorepeat keeps the key held
            self._restart_pending = True
        if key in self.key_map or key in self.restart_keys:
            self._held.add(key)

    def key_up(self, key: int):
        self._held.discard(key)

    def release_all(self):
        """Forget held keys, e.g. when the window loses focus"""
        self._held.clear()

    def poll(self) -> Controls:
        return Controls.from_directions(
            self.key_map[k] for k in self._held if k in self.key_map
        )

    def consume_restart(self) -> bool:
        pending = self._restart_pending
        self._restart_pending = False
        return pending


class ScriptedInput:
    """Fixed controls plus a counter of queued restarts (tests, headless runs)"""

    def __init__(self, controls: Controls = NO_CONTROLS, restarts: int = 0):
        self.controls = controls
        self.restarts = restarts

    def poll(self) -> Controls:
        return self.controls

    def consume_restart(self) -> bool:
        if self.restarts > 0:
            self.restarts -= 1
            return True
        return False
