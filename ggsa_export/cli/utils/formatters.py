"""Output formatting utilities for CLI."""

from typing import List, Sequence

import click


def format_success(message: str) -> str:
    """Format a success message in green."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message in red."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message in yellow."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message in blue."""
    return click.style(f"ℹ {message}", fg="blue")


def format_table(
    headers: List[str], rows: Sequence[Sequence[object]], max_width: int = 60
) -> str:
    """Format data as a plain-text table.

    Args:
        headers: Column headers
        rows: Data rows; cells are converted with str() and truncated
        max_width: Maximum width of a column

    Returns:
        Table as a string, empty when there are no headers
    """
    if not headers:
        return ""

    cells = [[str(cell) for cell in row[: len(headers)]] for row in rows]
    widths = [
        min(max([len(h)] + [len(row[i]) for row in cells if i < len(row)]), max_width)
        for i, h in enumerate(headers)
    ]

    def line(values: Sequence[str]) -> str:
        padded = [f" {v[:w]:<{w}} " for v, w in zip(values, widths)]
        return "|" + "|".join(padded) + "|"

    separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    lines = [separator, line(headers), separator]
    if cells:
        lines.extend(line(row) for row in cells)
        lines.append(separator)
    return "\n".join(lines)
