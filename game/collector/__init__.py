"""2D Game module - Star collector arcade game"""

from .config import DEFAULT_CONFIG, GAME_CONFIG, GameConfig
from .entities import Collectible, Player
from .game import CollectorGame
from .input import Controls, KeyboardInput, ScriptedInput
from .physics import step
from .scheduler import FixedTimestepScheduler
from .state import GameState, IllegalTransitionError, Trigger, transition
from .world import World, activate, new_world

__all__ = [
    'DEFAULT_CONFIG', 'GAME_CONFIG', 'GameConfig',
    'Collectible', 'Player',
    'CollectorGame',
    'Controls', 'KeyboardInput', 'ScriptedInput',
    'step',
    'FixedTimestepScheduler',
    'GameState', 'IllegalTransitionError', 'Trigger', 'transition',
    'World', 'activate', 'new_world',
]
