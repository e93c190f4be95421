"""Shared utility functions for Gradle Bootstrap.

Provides Rich-based console reporting (status messages, summary tables and a
tree view of render plans) plus small filesystem helpers used by the exporter
and the archive builder.
"""

from __future__ import annotations

import shutil
from pathlib import Path, PurePosixPath
from typing import Iterable

from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from .models import RenderPlan, RenderReport

console = Console()


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    A regular file sitting where the directory belongs is removed first.

    Returns:
        The directory as a ``Path``.
    """
    dir_path = Path(path)
    if dir_path.exists() and not dir_path.is_dir():
        dir_path.unlink()
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def clear_path(path: str | Path) -> None:
    """Delete a file or directory tree.  Does nothing if *path* is missing."""
    target = Path(path)
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    elif target.exists() or target.is_symlink():
        target.unlink()


def walk_sorted(root: Path) -> list[Path]:
    """Every path below *root* (root excluded), sorted by relative POSIX path."""
    return sorted(root.rglob("*"), key=lambda p: p.relative_to(root).as_posix())


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def plan_tree(plan: RenderPlan, label: str = ".") -> Tree:
    """Build a Rich tree of every directory and file in *plan*."""
    tree = Tree(f"[bold]{label}[/bold]")
    nodes: dict[str, Tree] = {"": tree}

    def _node(parts: Iterable[str]) -> Tree:
        key = ""
        for part in parts:
            parent = nodes[key]
            key = f"{key}/{part}" if key else part
            if key not in nodes:
                nodes[key] = parent.add(f"[blue]{part}/[/blue]")
        return nodes[key]

    for directory in plan.directories:
        _node(PurePosixPath(directory).parts)
    for entry in plan.files:
        parts = PurePosixPath(entry.path).parts
        _node(parts[:-1]).add(parts[-1])
    return tree


def print_report(report: RenderReport) -> None:
    """Print a summary of an export report."""
    print_summary_table(
        {
            "Root": str(report.root),
            "Directories": str(len(report.directories)),
            "Files": str(len(report.files)),
        },
        title="Export",
    )
