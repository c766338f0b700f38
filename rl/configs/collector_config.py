"""
Evaluation configuration for the star collector environment
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # pass --render to watch episodes instead
    "width": 800,
    "height": 600,
}

# ==============================================================================
# EVALUATION SETTINGS
# ==============================================================================

EVAL_CONFIG = {
    "n_episodes": 10,
    "seed": 42,
    "render_sleep": 1 / 60,   # seconds between rendered steps
}

# Greedy policy: keys are pressed only when the target is farther than this
# along an axis, which stops the player oscillating around a star.
GREEDY_DEADZONE = 4.0
