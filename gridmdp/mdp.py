"""Grid lookups, movement and value iteration."""

from __future__ import annotations

import math
from collections.abc import Mapping

from gridmdp.config import (
    COLUMNS,
    GOAL,
    OBSTACLES,
    ROWS,
    STATE_MAP,
    actions,
    rewards,
    transition_probabilities,
)

_POSITIONS: dict[str, tuple[int, int]] = {
    state: (row, col)
    for row, cells in enumerate(STATE_MAP)
    for col, state in enumerate(cells)
}

_OFFSETS: dict[str, tuple[int, int]] = {
    "N": (-1, 0),
    "S": (1, 0),
    "E": (0, 1),
    "O": (0, -1),
}


def position_of(state: str) -> tuple[int, int] | None:
    """Return the (row, col) of a state name, or None if it is not on the map."""
    return _POSITIONS.get(state)


def state_at(row: int, col: int) -> str | None:
    """Return the state at a cell, or None when off the map or on an obstacle."""
    if 0 <= row < ROWS and 0 <= col < COLUMNS:
        state = STATE_MAP[row][col]
        if state in OBSTACLES:
            return None
        return state
    return None


def move(row: int, col: int, action: str) -> tuple[int, int]:
    """Return the cell one step away in the action's direction, unchecked.

    An unknown action leaves the position unchanged.
    """
    d_row, d_col = _OFFSETS.get(action, (0, 0))
    return row + d_row, col + d_col


def _destination(state: str, row: int, col: int, direction: str) -> str:
    target = state_at(*move(row, col, direction))
    return state if target is None else target


def value_iteration(
    discount: float,
    epsilon: float = 0.001,
    model: Mapping[str, Mapping[str, float]] | None = None,
) -> tuple[dict[str, float], dict[str, str]]:
    """Compute state values and the greedy policy.

    Iterates the Bellman update over every cell until no value changes by
    more than ``epsilon``. ``model`` maps each action to its outcome
    directions and probabilities; the default model is used when omitted.
    Moves into walls or obstacles leave the robot where it is.
    """
    if model is None:
        model = transition_probabilities()
    reward = rewards()
    states = [state for cells in STATE_MAP for state in cells]

    values: dict[str, float] = dict.fromkeys(states, 0.0)
    policy: dict[str, str] = {}

    changed = True
    while changed:
        changed = False
        new_values = dict(values)
        for state in states:
            if state == GOAL:
                new_values[state] = reward[state]
                continue

            row, col = _POSITIONS[state]
            best_value = -math.inf
            best_action = ""
            for action in actions():
                expected = sum(
                    probability * values[_destination(state, row, col, direction)]
                    for direction, probability in model[action].items()
                )
                total = reward[state] + discount * expected
                if total > best_value:
                    best_value = total
                    best_action = action

            new_values[state] = best_value
            if abs(values[state] - best_value) > epsilon:
                changed = True
            policy[state] = best_action
        values = new_values

    return values, policy