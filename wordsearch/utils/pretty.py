"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..core.models import GenerationResult


def format_grid(rows: Sequence[str]) -> str:
    width = len(rows[0]) if rows else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(rows):
        row_render = " ".join(f"{letter:>2}" for letter in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(rows: Sequence[str], *, label: str | None = None, stream=None) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(rows), file=stream)


def print_result_stats(result: GenerationResult, *, stream=None) -> None:
    """Print grid + placement summary for a generation result."""

    stream = stream or sys.stdout
    print(format_grid(result.grid), file=stream)

    total_cells = result.width * result.height
    covered = {cell for placement in result.placements for cell in placement.cells}
    directions = Counter(placement.direction.value for placement in result.placements)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {result.height} x {result.width} ({total_cells} cells)", file=stream)
    if total_cells:
        print(f"  Word cells:    {len(covered)} ({len(covered) / total_cells * 100:.0f}%)", file=stream)
    print(f"  Intersections: {result.intersections}", file=stream)
    if result.iterations:
        print(f"  Iterations:    {result.iterations}", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(result.placements)} (H:{directions['H']} V:{directions['V']})", file=stream)
    for placement in result.placements:
        print(
            f"  {placement.word:<12} ({placement.row},{placement.col}) {placement.direction.value}",
            file=stream,
        )
    if result.partial:
        print("  Partial:       not every word could be placed", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
