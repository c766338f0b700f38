"""
WORLD TESTS

Spawning rules, session reset and activation.
"""
import random

import pytest

from game.collector.config import DEFAULT_CONFIG, GAME_CONFIG, GameConfig
from game.collector.entities import Player
from game.collector.state import GameState
from game.collector.utils import distance
from game.collector.world import (
    activate, create_player, new_world, reset_session, spawn_collectibles, time_bonus,
)


class TestSpawning:

    @pytest.mark.parametrize("seed", range(20))
    def test_placement_rules(self, seed):
        player = create_player()
        stars = spawn_collectibles(800, 600, player, rng=random.Random(seed))

        assert len(stars) == DEFAULT_CONFIG.star_count
        lo, hi = DEFAULT_CONFIG.star_radius_range
        for s in stars:
            assert distance(s.x, s.y, player.x, player.y) >= DEFAULT_CONFIG.min_spawn_distance
            assert 40 <= s.x <= 760
            assert 40 <= s.y <= 560
            assert lo <= s.radius <= hi
            assert not s.collected

    def test_same_seed_same_layout(self):
        player = create_player()
        a = spawn_collectibles(800, 600, player, rng=random.Random(5))
        b = spawn_collectibles(800, 600, player, rng=random.Random(5))
        assert a == b

    def test_field_too_small_raises(self):
        with pytest.raises(ValueError, match="too small"):
            spawn_collectibles(120, 120, create_player(), rng=random.Random(0))

    def test_custom_count(self):
        config = GameConfig.from_dict({**GAME_CONFIG, "star_count": 9})
        stars = spawn_collectibles(800, 600, Player(x=100.0, y=100.0), config, random.Random(1))
        assert len(stars) == 9


class TestNewWorld:

    def test_starts_idle(self):
        world = new_world()
        assert world.state == GameState.IDLE
        assert (world.width, world.height) == (DEFAULT_CONFIG.width, DEFAULT_CONFIG.height)
        assert world.collectibles == []
        assert world.score == 0
        assert world.high_score == 0
        assert world.time_left == DEFAULT_CONFIG.time_limit

    def test_player_at_start(self):
        world = new_world(400, 300)
        assert (world.player.x, world.player.y) == DEFAULT_CONFIG.player_start
        assert world.player.size == DEFAULT_CONFIG.player_size
        assert (world.player.vx, world.player.vy) == (0.0, 0.0)


class TestActivate:

    def test_first_activation(self):
        world = new_world()
        assert activate(world, rng=random.Random(0))
        assert world.state == GameState.PLAYING
        assert len(world.collectibles) == DEFAULT_CONFIG.star_count

    @pytest.mark.parametrize("terminal", [GameState.WON, GameState.GAMEOVER])
    @pytest.mark.parametrize("seed", range(5))
    def test_restart_from_terminal(self, terminal, seed):
        world = new_world()
        activate(world, rng=random.Random(seed))
        world.player.x, world.player.vx = 500.0, 120.0
        world.collectibles[0].collected = True
        world.score = 90
        world.time_left = 2.5
        world.high_score = 90
        world.state = terminal

        assert activate(world, rng=random.Random(seed + 100))

        assert world.state == GameState.PLAYING
        assert world.time_left == DEFAULT_CONFIG.time_limit
        assert world.score == 0
        assert world.high_score == 90
        assert (world.player.x, world.player.vx) == (100.0, 0.0)
        assert len(world.collectibles) == DEFAULT_CONFIG.star_count
        for s in world.collectibles:
            assert not s.collected
            assert distance(s.x, s.y, world.player.x, world.player.y) >= 100

    def test_ignored_while_playing(self):
        world = new_world()
        activate(world, rng=random.Random(0))
        world.score = 20
        stars = world.collectibles

        assert not activate(world, rng=random.Random(1))

        assert world.state == GameState.PLAYING
        assert world.score == 20
        assert world.collectibles is stars

    def test_reset_replaces_player_instance(self):
        world = new_world()
        old_player = world.player
        reset_session(world, rng=random.Random(0))
        assert world.player is not old_player
        assert world.state == GameState.IDLE


def test_time_bonus_rounds_up():
    assert time_bonus(10.4) == 110
    assert time_bonus(10.0) == 100
    assert time_bonus(0.01) == 10


class TestConfig:

    def test_defaults_match_dict(self):
        assert DEFAULT_CONFIG.fps == 60
        assert DEFAULT_CONFIG.friction == 0.92
        assert DEFAULT_CONFIG.dt == pytest.approx(1 / 60)

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="Unknown config keys"):
            GameConfig.from_dict({**GAME_CONFIG, "gravity": 9.8})

    @pytest.mark.parametrize("key,value", [
        ("fps", 0),
        ("friction", 1.5),
        ("friction", 0.0),
        ("star_count", 0),
        ("time_limit", -1.0),
        ("star_radius_range", (12.0, 7.0)),
    ])
    def test_invalid_values_rejected(self, key, value):
        with pytest.raises(ValueError):
            GameConfig.from_dict({**GAME_CONFIG, key: value})
