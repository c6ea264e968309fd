"""Policy robustness under alternative transition noise models."""

from __future__ import annotations

from collections.abc import Mapping

from gridmdp.config import actions
from gridmdp.mdp import value_iteration

# (left deviation, intended direction, right deviation)
NOISE_MODELS: tuple[tuple[float, float, float], ...] = (
    (0.1, 0.8, 0.1),
    (0.05, 0.9, 0.05),
    (0.15, 0.7, 0.15),
    (0.25, 0.5, 0.25),
)

ROBUSTNESS_EPSILON = 0.01

# For each action: the direction taken on a "left" slip and on a "right" slip.
_SIDES: dict[str, tuple[str, str]] = {
    "N": ("O", "E"),
    "S": ("O", "E"),
    "E": ("N", "S"),
    "O": ("N", "S"),
}


def build_noise_model(
    left: float, center: float, right: float
) -> dict[str, dict[str, float]]:
    """Return a transition model with the given slip probabilities.

    For north and south, left is west and right is east; for east and west,
    left is north and right is south.
    """
    model: dict[str, dict[str, float]] = {}
    for action in actions():
        left_dir, right_dir = _SIDES[action]
        model[action] = {action: center, right_dir: right, left_dir: left}
    return model


def evaluate_robustness(
    base_policy: Mapping[str, str], discount: float
) -> list[tuple[str, int]]:
    """Count, for each noise model, the states whose optimal action differs.

    Returns ``(label, changes)`` pairs in the order of ``NOISE_MODELS``; the
    label is the intended-direction probability as a percentage. A state of
    the base policy missing from the adapted policy counts as a change.
    """
    results: list[tuple[str, int]] = []
    for left, center, right in NOISE_MODELS:
        label = f"{int(center * 100)}%"
        model = build_noise_model(left, center, right)
        _, adapted = value_iteration(discount, ROBUSTNESS_EPSILON, model)
        changes = sum(
            1
            for state, action in base_policy.items()
            if adapted.get(state) != action
        )
        print(f"Ruido {label}: {changes} cambios")
        results.append((label, changes))
    return results