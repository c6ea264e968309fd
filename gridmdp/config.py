"""Grid layout, rewards, actions and the default transition model."""

from __future__ import annotations

ROWS = 6
COLUMNS = 8

GOAL = "M"

DANGER_STATES: tuple[str, ...] = ("P1", "P2", "P3", "P4")
OBSTACLES: tuple[str, ...] = (
    "O1", "O2", "O3", "O4", "O5", "O6", "O7", "O8", "O9", "O10",
)

STATE_MAP: tuple[tuple[str, ...], ...] = (
    ("S0", "S1", "P1", "O1", "S3", "O2", "S4", "S5"),
    ("O3", "S6", "S7", "S8", "S9", "S10", "S11", "O4"),
    ("S12", "P2", "S14", "O5", "S15", "P3", "S17", "S18"),
    ("S19", "S20", "S21", "S22", "M", "S24", "S25", "O6"),
    ("S26", "O7", "O8", "S27", "S28", "S29", "P4", "S31"),
    ("S32", "O9", "S33", "S34", "O10", "S35", "S36", "S37"),
)

GOAL_REWARD = 10.0
DANGER_REWARD = -0.5
STEP_REWARD = -0.1


def rewards() -> dict[str, float]:
    """Return the reward of every cell on the map, obstacles included."""
    table: dict[str, float] = {}
    for row in STATE_MAP:
        for state in row:
            if state == GOAL:
                table[state] = GOAL_REWARD
            elif state in DANGER_STATES:
                table[state] = DANGER_REWARD
            else:
                table[state] = STEP_REWARD
    return table


def actions() -> list[str]:
    """Return the actions: north, south, east and west."""
    return ["N", "S", "E", "O"]


def transition_probabilities() -> dict[str, dict[str, float]]:
    """Return the default model: 80% intended direction, 10% to each side."""
    return {
        "N": {"N": 0.8, "E": 0.1, "O": 0.1},
        "S": {"S": 0.8, "E": 0.1, "O": 0.1},
        "E": {"E": 0.8, "N": 0.1, "S": 0.1},
        "O": {"O": 0.8, "N": 0.1, "S": 0.1},
    }