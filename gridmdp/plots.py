"""Charts of policy robustness and of step-simulation outcomes."""

from __future__ import annotations

import math
from collections.abc import Sequence
from pathlib import Path

from matplotlib.figure import Figure

ROBUSTNESS_FILE = "robustez_politicas.png"
SUMMARY_FILE = "simulacion_1000pasos.png"

_DPI = 100
_ROBUSTNESS_SIZE = (960, 640)
_SUMMARY_SIZE = (800, 500)
_GRID_COLUMNS = 2


def _figure(size: tuple[int, int]) -> Figure:
    width, height = size
    return Figure(figsize=(width / _DPI, height / _DPI), dpi=_DPI, facecolor="white")


def _robustness_figure(
    robustness_results: Sequence[tuple[float, Sequence[tuple[str, int]]]],
) -> Figure:
    figure = _figure(_ROBUSTNESS_SIZE)
    rows = math.ceil(len(robustness_results) / _GRID_COLUMNS)
    for index, (discount, results) in enumerate(robustness_results, start=1):
        axes = figure.add_subplot(rows, _GRID_COLUMNS, index)
        labels = [label for label, _ in results]
        changes = [count for _, count in results]
        axes.bar(
            range(len(changes)),
            changes,
            width=1.0,
            align="edge",
            color="blue",
            alpha=0.5,
        )
        axes.set_xticks([position + 0.5 for position in range(len(labels))])
        axes.set_xticklabels(labels)
        axes.set_xlim(0, max(len(labels), 1))
        axes.set_ylim(0, max(changes, default=0) + 1)
        axes.set_title(f"λ = {discount:.2f}")
    figure.tight_layout()
    return figure


def _summary_figure(summary: Sequence[tuple[float, int, int]]) -> Figure:
    figure = _figure(_SUMMARY_SIZE)
    axes = figure.add_subplot(1, 1, 1)
    discounts = [discount for discount, _, _ in summary]
    goals = [count for _, count, _ in summary]
    dangers = [count for _, _, count in summary]
    positions = range(len(summary))

    axes.bar(positions, goals, width=1.0, align="edge", color="green",
             alpha=0.5, label="Llegadas a Meta")
    axes.bar(positions, dangers, width=1.0, align="edge", color="red",
             alpha=0.5, label="En peligro")
    axes.set_xticks([position + 0.5 for position in positions])
    axes.set_xticklabels([f"λ = {discount:.2f}" for discount in discounts])
    axes.set_xlim(0, max(len(summary), 1))
    axes.set_ylim(0, max(goals + dangers, default=0) + 10)
    axes.set_title("Desempeño de Políticas (1000 pasos)")
    axes.legend(facecolor="white", framealpha=0.8)
    figure.tight_layout()
    return figure


def plot_final_results(
    robustness_results: Sequence[tuple[float, Sequence[tuple[str, int]]]],
    summary: Sequence[tuple[float, int, int]],
    directory: str | Path = ".",
) -> tuple[Path, Path]:
    """Save the robustness and step-simulation charts as PNG files.

    ``robustness_results`` holds ``(discount, [(noise label, changes), ...])``
    entries, drawn as a grid of bar charts two columns wide. ``summary`` holds
    ``(discount, goals, dangers)`` entries, drawn as one bar chart. Returns the
    paths of the robustness and summary images.
    """
    directory = Path(directory)
    robustness_path = directory / ROBUSTNESS_FILE
    summary_path = directory / SUMMARY_FILE

    _robustness_figure(robustness_results).savefig(robustness_path, dpi=_DPI)
    _summary_figure(summary).savefig(summary_path, dpi=_DPI)

    print(f"✅ Imagen '{ROBUSTNESS_FILE}' guardada correctamente.")
    print(f"✅ Imagen '{SUMMARY_FILE}' guardada correctamente.")
    return robustness_path, summary_path