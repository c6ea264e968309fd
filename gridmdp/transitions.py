"""Per-action transition matrices and their CSV export."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from gridmdp.config import OBSTACLES, STATE_MAP, actions, transition_probabilities
from gridmdp.mdp import move, position_of, state_at


def transition_states() -> list[str]:
    """Return the non-obstacle states in map order; these index the matrices."""
    return [
        state
        for cells in STATE_MAP
        for state in cells
        if state and state not in OBSTACLES
    ]


def build_transition_matrix(action: str) -> np.ndarray:
    """Return P(s' | s, action) as a float32 matrix over ``transition_states()``.

    Rows are origin states and columns destination states. Moves off the map
    or into obstacles keep the robot in place. An unknown action gives a
    matrix of zeros.
    """
    model = transition_probabilities()
    states = transition_states()
    index = {state: i for i, state in enumerate(states)}
    matrix = np.zeros((len(states), len(states)), dtype=np.float32)

    outcomes = model.get(action)
    if outcomes is None:
        return matrix

    for origin in states:
        position = position_of(origin)
        if position is None:
            continue
        row, col = position
        for direction, probability in outcomes.items():
            target = state_at(*move(row, col, direction)) or origin
            if target in OBSTACLES:
                target = origin
            matrix[index[origin], index[target]] += np.float32(probability)

    return matrix


def save_transition_matrices(directory: str | Path = ".") -> list[Path]:
    """Write ``matriz_transicion_<ACTION>.csv`` for every action.

    Each row is an origin state, each column a destination, with values to
    two decimals. Returns the paths written.
    """
    directory = Path(directory)
    written: list[Path] = []
    for action in actions():
        matrix = build_transition_matrix(action)
        path = directory / f"matriz_transicion_{action}.csv"
        with path.open("w", encoding="utf-8", newline="") as handle:
            for row in matrix:
                handle.write(",".join(f"{float(value):.2f}" for value in row))
                handle.write("\n")
        written.append(path)
    return written