import random

import pytest

from gridmdp.config import GOAL, OBSTACLES, rewards
from gridmdp.mdp import value_iteration
from gridmdp.simulation import (
    grid_step,
    run_visual_simulation,
    simulate_steps,
    valid_start_states,
)


@pytest.fixture(scope="module")
def optimal_policy():
    return value_iteration(0.9, 0.001)[1]


def test_valid_start_states_exclude_goal_and_obstacles():
    starts = valid_start_states()
    assert GOAL not in starts
    assert not set(starts) & set(OBSTACLES)
    assert "S0" in starts
    assert "P1" in starts
    assert len(starts) == len(set(starts))


@pytest.mark.parametrize(
    "row, col, action, expected",
    [
        (0, 0, "N", (0, 0)),
        (0, 0, "O", (0, 0)),
        (2, 3, "N", (1, 3)),
        (2, 3, "S", (3, 3)),
        (2, 3, "E", (2, 4)),
        (2, 3, "O", (2, 2)),
        (5, 7, "S", (6, 7)),
        (5, 7, "E", (5, 8)),
        (2, 3, "X", (2, 3)),
    ],
)
def test_grid_step(row, col, action, expected):
    assert grid_step(row, col, action) == expected


def test_zero_steps_counts_nothing(optimal_policy):
    assert simulate_steps(optimal_policy, 0, random.Random(1)) == (0, 0)


def test_empty_policy_never_reaches_goal():
    goals, dangers = simulate_steps({}, 1000, random.Random(3))
    assert goals == 0
    assert dangers >= 0


def test_optimal_policy_reaches_goal(optimal_policy):
    goals, dangers = simulate_steps(optimal_policy, 1000, random.Random(7))
    assert goals > 0
    assert goals + dangers <= 1000


def test_same_seed_same_result(optimal_policy):
    first = simulate_steps(optimal_policy, 500, random.Random(42))
    second = simulate_steps(optimal_policy, 500, random.Random(42))
    assert first == second


def test_all_north_policy_bounded():
    policy = {state: "N" for state in valid_start_states()}
    goals, dangers = simulate_steps(policy, 300, random.Random(5))
    assert goals + dangers <= 300


def test_visual_zero_steps_stays_at_start(monkeypatch, optimal_policy):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    table = rewards()
    final = run_visual_simulation(optimal_policy, 0, table, random.Random(11))
    assert final == random.Random(11).choice(valid_start_states())
    assert table[GOAL] == rewards()[GOAL]


def test_visual_run_updates_goal_reward(monkeypatch, optimal_policy):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    table = rewards()
    final = run_visual_simulation(optimal_policy, 2, table, random.Random(2))
    assert final in valid_start_states() or final == GOAL
    if final == GOAL:
        assert table[GOAL] == rewards()[GOAL] + 1.0
    else:
        assert table[GOAL] == rewards()[GOAL]