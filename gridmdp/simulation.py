"""Step-counting simulation and an animated pygame run of a policy."""

from __future__ import annotations

import random
import time
from collections.abc import Mapping, MutableMapping

from gridmdp.config import (
    COLUMNS,
    DANGER_STATES,
    GOAL,
    OBSTACLES,
    ROWS,
    STATE_MAP,
    actions,
    rewards,
)
from gridmdp.mdp import position_of, state_at

CELL_SIZE = 80
MARGIN = 2
EXPLORATION_RATE = 0.8
MOVE_INTERVAL = 0.5

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_NORMAL = (130, 130, 130)
_DANGER = (230, 41, 55)
_GOAL = (0, 228, 48)
_ROBOT = (0, 121, 241)
_OBSTACLE = (80, 80, 80)


def valid_start_states() -> list[str]:
    """Return every state that is neither the goal nor an obstacle."""
    return [
        state
        for cells in STATE_MAP
        for state in cells
        if state != GOAL and state not in OBSTACLES
    ]


def grid_step(row: int, col: int, action: str) -> tuple[int, int]:
    """Return the cell after an action, clamped at zero but not at the far edges."""
    if action == "N":
        return max(row - 1, 0), col
    if action == "S":
        return row + 1, col
    if action == "E":
        return row, col + 1
    if action == "O":
        return row, max(col - 1, 0)
    return row, col


def _advance(state: str, action: str) -> str:
    position = position_of(state)
    if position is None:
        return state
    target = state_at(*grid_step(*position, action))
    return state if target is None else target


def simulate_steps(
    policy: Mapping[str, str],
    max_steps: int = 1000,
    rng: random.Random | None = None,
) -> tuple[int, int]:
    """Follow ``policy`` for ``max_steps`` steps and count outcomes.

    Reaching the goal or a danger state is counted and the robot restarts
    from a random valid state. The run stops early at a state the policy
    has no action for. Returns ``(goals_reached, dangers_entered)``.
    """
    rng = rng or random.Random()
    starts = valid_start_states()
    reward = rewards()
    state = rng.choice(starts)

    goals = 0
    dangers = 0
    total_reward = 0.0

    for _ in range(max_steps):
        total_reward += reward.get(state, 0.0)
        if state == GOAL:
            goals += 1
            state = rng.choice(starts)
            continue
        if state in DANGER_STATES:
            dangers += 1
            state = rng.choice(starts)
            continue
        action = policy.get(state)
        if action is None:
            break
        state = _advance(state, action)

    print(f"Llegadas a meta: {goals}")
    print(f"Caídas en peligro: {dangers}")
    print(f"Recompensa total: {total_reward:.2f}")
    return goals, dangers


def _cell_colour(state: str, current: str) -> tuple[int, int, int]:
    if state in OBSTACLES:
        return _OBSTACLE
    if state in DANGER_STATES:
        return _DANGER
    if state == GOAL:
        return _GOAL
    if state == current:
        return _ROBOT
    return _NORMAL


def run_visual_simulation(
    policy: Mapping[str, str],
    steps: int = 70,
    rewards: MutableMapping[str, float] | None = None,
    rng: random.Random | None = None,
) -> str:
    """Animate the robot in a pygame window and return the state it ends in.

    The robot starts at a random valid state and moves every half second,
    taking a random action with probability 0.8 and the policy's action
    otherwise. It stops after ``steps`` moves, on reaching the goal, or when
    the window is closed. Reaching the goal adds 1 to ``rewards[GOAL]``.
    """
    import pygame

    rng = rng or random.Random()
    state = rng.choice(valid_start_states())
    step = 0

    pygame.init()
    try:
        screen = pygame.display.set_mode((COLUMNS * CELL_SIZE, ROWS * CELL_SIZE))
        pygame.display.set_caption("Simulacion MDP Robot")
        font = pygame.font.Font(None, 24)
        clock = pygame.time.Clock()
        last_move = time.monotonic()
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break

            screen.fill(_WHITE)
            for row, cells in enumerate(STATE_MAP):
                for col, cell in enumerate(cells):
                    pygame.draw.rect(
                        screen,
                        _cell_colour(cell, state),
                        pygame.Rect(
                            col * CELL_SIZE + MARGIN,
                            row * CELL_SIZE + MARGIN,
                            CELL_SIZE - 2 * MARGIN,
                            CELL_SIZE - 2 * MARGIN,
                        ),
                    )
            label = font.render(f"Paso: {step} - Estado: {state}", True, _BLACK)
            screen.blit(label, (10, 5))
            pygame.display.flip()
            clock.tick(60)

            now = time.monotonic()
            if now - last_move < MOVE_INTERVAL:
                continue
            last_move = now

            if step >= steps or state == GOAL:
                break

            if rng.random() < EXPLORATION_RATE:
                action = rng.choice(actions())
            else:
                action = policy[state]
            state = _advance(state, action)
            step += 1
    finally:
        pygame.quit()

    if state == GOAL and rewards is not None:
        rewards[GOAL] += 1.0
    return state