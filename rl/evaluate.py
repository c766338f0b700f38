"""
Evaluation script for scripted star collector policies
"""

import argparse
import time
from typing import Callable, Dict, Optional

import numpy as np

from game.collector.collector_env import CollectorEnv
from rl.configs.collector_config import ENV_CONFIG, EVAL_CONFIG, GREEDY_DEADZONE


def random_policy(env: CollectorEnv) -> np.ndarray:
    """Press a random subset of the four keys"""
    return env.action_space.sample()


def greedy_policy(env: CollectorEnv, deadzone: float = GREEDY_DEADZONE) -> np.ndarray:
    """Steer toward the nearest uncollected star"""
    world = env.world
    p = world.player
    remaining = [s for s in world.collectibles if not s.collected]
    if not remaining:
        return np.zeros(4, dtype=np.int8)

    target = min(remaining, key=lambda s: (s.x - p.x) ** 2 + (s.y - p.y) ** 2)
    dx = target.x - p.x
    dy = target.y - p.y
    # (up, down, left, right)
    return np.array([dy < -deadzone, dy > deadzone, dx < -deadzone, dx > deadzone],
                    dtype=np.int8)


POLICIES: Dict[str, Callable[[CollectorEnv], np.ndarray]] = {
    "random": random_policy,
    "greedy": greedy_policy,
}


def run_episode(env: CollectorEnv, policy: Callable[[CollectorEnv], np.ndarray],
                seed: Optional[int] = None, render_sleep: float = 0.0) -> Dict[str, float]:
    """Play one round and return its summary"""
    obs, info = env.reset(seed=seed)
    terminated = truncated = False
    total_reward = 0.0
    steps = 0

    while not (terminated or truncated):
        action = policy(env)
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += reward
        steps += 1
        if render_sleep > 0:
            time.sleep(render_sleep)

    return {
        "reward": total_reward,
        "length": steps,
        "won": info["state"] == "won",
        "collected": info["collected"],
        "high_score": info["high_score"],
    }


def evaluate_policy(
    policy: str = "greedy",
    n_episodes: int = 10,
    render: bool = False,
    seed: Optional[int] = None,
):
    """
    Evaluate a scripted policy

    Args:
        policy: 'random' or 'greedy'
        n_episodes: Number of episodes to evaluate
        render: Whether to render the environment
        seed: Base random seed; episode i uses seed + i
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    if n_episodes < 1:
        raise ValueError(f"n_episodes must be at least 1, got {n_episodes}")

    render_mode = "human" if render else None
    env = CollectorEnv(render_mode=render_mode, **ENV_CONFIG)
    if seed is not None:
        env.action_space.seed(seed)
    render_sleep = EVAL_CONFIG["render_sleep"] if render else 0.0

    results = []
    for episode in range(n_episodes):
        ep_seed = None if seed is None else seed + episode
        result = run_episode(env, POLICIES[policy], seed=ep_seed, render_sleep=render_sleep)
        results.append(result)
        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Score = {result['reward']:.0f}, Length = {result['length']}, "
              f"Stars = {result['collected']}, {'WON' if result['won'] else 'time up'}")

    env.close()

    # Compute statistics
    rewards = np.array([r["reward"] for r in results])
    lengths = np.array([r["length"] for r in results])
    win_rate = np.mean([r["won"] for r in results])

    print("\n" + "=" * 50)
    print(f"Evaluation Results ({policy}, {n_episodes} episodes):")
    print(f"Mean Score: {rewards.mean():.2f} ± {rewards.std():.2f}")
    print(f"Mean Episode Length: {lengths.mean():.1f}")
    print(f"Win Rate: {win_rate:.0%}")
    print(f"High Score: {results[-1]['high_score']}")
    print("=" * 50)

    return {
        "mean_reward": float(rewards.mean()),
        "std_reward": float(rewards.std()),
        "mean_length": float(lengths.mean()),
        "win_rate": float(win_rate),
    }


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Evaluate scripted star collector policies")
    parser.add_argument("--policy", type=str, default="greedy",
                        choices=list(POLICIES),
                        help="Policy to evaluate")
    parser.add_argument("--episodes", type=int, default=EVAL_CONFIG["n_episodes"],
                        help="Number of evaluation episodes")
    parser.add_argument("--no-render", action="store_true",
                        help="Disable rendering")
    parser.add_argument("--seed", type=int, default=EVAL_CONFIG["seed"],
                        help="Random seed")

    args = parser.parse_args()

    evaluate_policy(
        policy=args.policy,
        n_episodes=args.episodes,
        render=not args.no_render,
        seed=args.seed,
    )
