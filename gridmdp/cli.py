"""Command line entry point: solve, simulate, evaluate and chart the grid MDP."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from gridmdp.config import rewards
from gridmdp.mdp import value_iteration
from gridmdp.plots import plot_final_results
from gridmdp.robustness import evaluate_robustness
from gridmdp.simulation import run_visual_simulation, simulate_steps
from gridmdp.transitions import save_transition_matrices

DEFAULT_DISCOUNTS = (0.86, 0.90, 0.94, 0.98)
VALUE_EPSILON = 0.001
VISUAL_STEPS = 70
SIMULATION_STEPS = 1000


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridmdp",
        description="Solve the robot grid MDP for several discount factors, "
        "simulate the policies and save charts and transition matrices.",
    )
    parser.add_argument(
        "--discounts",
        type=float,
        nargs="+",
        default=list(DEFAULT_DISCOUNTS),
        help="discount factors to solve for",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="directory for the PNG charts and CSV matrices",
    )
    parser.add_argument(
        "--no-visual",
        action="store_true",
        help="skip the animated simulation window",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the whole pipeline and return the exit status."""
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    output_dir: Path = args.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    robustness_results: list[tuple[float, list[tuple[str, int]]]] = []
    summary: list[tuple[float, int, int]] = []
    reward_table = rewards()

    for discount in args.discounts:
        print(f"\n=== Ejecutando Value Iteration para λ = {discount:.2f} ===")
        values, policy = value_iteration(discount, VALUE_EPSILON)

        print("\nValor de los estados:")
        for state in sorted(values):
            print(f"{state}: {values[state]:.2f}")

        print("\nPolítica óptima:")
        for state in sorted(policy):
            print(f'{state}: "{policy[state]}"')

        if not args.no_visual:
            print("\n→ Iniciando simulación visual...")
            run_visual_simulation(policy, VISUAL_STEPS, reward_table, rng)

        robustness_results.append((discount, evaluate_robustness(policy, discount)))
        goals, dangers = simulate_steps(policy, SIMULATION_STEPS, rng)
        summary.append((discount, goals, dangers))

    try:
        plot_final_results(robustness_results, summary, output_dir)
    except (OSError, ValueError) as error:
        print(f"Error al graficar resultados: {error!r}", file=sys.stderr)

    for path in save_transition_matrices(output_dir):
        print(f"✅ {path.name} guardada.")
    return 0


if __name__ == "__main__":
    sys.exit(main())