# gridmdp

A small grid-world Markov decision process for robot navigation. A robot
moves on a 6×8 map of free cells, obstacles, danger pits and one goal
cell `M`. Moves are stochastic: by default an intended move succeeds 80%
of the time and slips to either side 10% of the time. Moving off the map
or into an obstacle leaves the robot where it is.

Rewards: the goal is worth +10, a pit −0.5 and every other cell −0.1.
Actions are `"N"`, `"S"`, `"E"` and `"O"` (north, south, east, west).

## Modules

- `gridmdp.config` – the map (`STATE_MAP`, `GOAL`, `DANGER_STATES`,
  `OBSTACLES`), `rewards()`, `actions()` and the default model
  `transition_probabilities()`.
- `gridmdp.mdp` – `position_of(state)`, `state_at(row, col)`,
  `move(row, col, action)` and `value_iteration(discount, epsilon, model)`,
  which returns the state values and the greedy policy. `model` maps each
  action to its outcome directions and probabilities; `None` means the
  default model.
- `gridmdp.transitions` – `build_transition_matrix(action)` returns
  P(s' | s, a) as a float32 NumPy array over `transition_states()` (the
  non-obstacle states in map order); `save_transition_matrices(directory)`
  writes `matriz_transicion_<ACTION>.csv` for every action with values to
  two decimals.
- `gridmdp.robustness` – `build_noise_model(left, center, right)` and
  `evaluate_robustness(base_policy, discount)`, which re-solves the MDP
  under 80%, 90%, 70% and 50% success models and counts, for each, the
  states whose action differs from `base_policy`.
- `gridmdp.simulation` – `simulate_steps(policy, max_steps, rng)` follows a
  policy and returns `(goals_reached, dangers_entered)`, restarting from a
  random cell after each goal or pit; `run_visual_simulation(policy, steps,
  rewards, rng)` animates the robot in a pygame window, taking a random
  action with probability 0.8, and returns the final state.
- `gridmdp.plots` – `plot_final_results(robustness_results, summary,
  directory)` saves `robustez_politicas.png` and `simulacion_1000pasos.png`.

## Installation

```
pip install .
```

## Command line

```
gridmdp
```

For each discount factor (0.86, 0.90, 0.94 and 0.98 by default) this runs
value iteration, prints the state values and the policy, shows the
animated simulation, evaluates robustness and runs a 1000-step
simulation. It then saves the two charts and the four transition-matrix
CSV files.

Options:

- `--discounts D [D ...]` – discount factors to solve for.
- `--output-dir DIR` – where the PNG and CSV files go (created if missing;
  default the current directory).
- `--no-visual` – skip the animated window, e.g. on a machine without a
  display.
- `--seed N` – seed for the random starts and exploration.

```
gridmdp --no-visual --seed 1 --output-dir results
```

## Library use

```python
from gridmdp.mdp import value_iteration
from gridmdp.simulation import simulate_steps
from gridmdp.robustness import evaluate_robustness

values, policy = value_iteration(0.9, 0.001, None)
print(policy["S0"])

goals, pits = simulate_steps(policy, 1000, None)
print(goals, pits)

for label, changes in evaluate_robustness(policy, 0.9):
    print(label, changes)
```

## Limitations

The map, rewards and default model are fixed in `gridmdp.config`; there is
no option to load another map. The animated simulation needs a display
for its pygame window.

## Tests

```
pip install .[test]
pytest
```