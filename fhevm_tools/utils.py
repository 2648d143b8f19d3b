"""Shared utility functions for the FHEVM tools.

Provides Rich-based console reporting, JSON manifest I/O, filtered directory
copying and name helpers used by every generator.
"""

from __future__ import annotations

import json
import re
import shutil
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def kebab_case(name: str) -> str:
    """Convert a contract or file name to a hyphenated lowercase slug.

    Examples::

        kebab_case("ArtifactAuction") -> "artifact-auction"
        kebab_case("FHECounter")      -> "fhe-counter"
        kebab_case("fhe_counter")     -> "fhe-counter"
    """
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1-\2", name.strip())
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", s1)
    slug = re.sub(r"[^a-zA-Z0-9]+", "-", s2).lower()
    return slug.strip("-")


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the document is not a JSON object.
    """
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    return data


def save_json(data: dict[str, Any], path: str | Path) -> Path:
    """Save data as JSON indented by two spaces, creating parent directories."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return file_path


def update_manifest(path: str | Path, name: str, description: str) -> dict[str, Any]:
    """Rewrite the ``name`` and ``description`` fields of a ``package.json``.

    Every other field is preserved in its original order.
    """
    manifest = load_json(path)
    manifest["name"] = name
    manifest["description"] = description
    save_json(manifest, path)
    return manifest


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text(path: str | Path, content: str) -> Path:
    """Create parent dirs and write *content*, overwriting any existing file."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path


def copy_tree(
    source: str | Path,
    destination: str | Path,
    *,
    excluded_dirs: Iterable[str] = (),
    skipped_entries: Iterable[str] = (),
    excluded_paths: Iterable[str | Path] = (),
) -> Path:
    """Recursively copy *source* into *destination* with name-based filtering.

    Args:
        source: Directory to copy from.
        destination: Directory to create. Must not exist yet.
        excluded_dirs: Directory names skipped at any depth (build output,
            dependency caches).
        skipped_entries: File or directory names skipped at any depth.
        excluded_paths: Directories skipped wherever they resolve to, such as
            an output root holding earlier projects.

    Returns:
        The destination path.

    When *destination* lies inside *source* it is never descended into, so a
    project generated under the examples root does not copy itself.
    """
    excluded = set(excluded_dirs)
    skipped = set(skipped_entries)
    pruned = {Path(p).resolve() for p in excluded_paths}
    pruned.add(Path(destination).resolve())

    def _ignore(directory: str, names: list[str]) -> set[str]:
        ignored: set[str] = set()
        for name in names:
            entry = Path(directory) / name
            if name in skipped:
                ignored.add(name)
            elif entry.is_dir() and (name in excluded or entry.resolve() in pruned):
                ignored.add(name)
        return ignored

    shutil.copytree(source, destination, ignore=_ignore)
    return Path(destination)


def list_files(root: str | Path) -> list[Path]:
    """Return every file under *root* as sorted relative paths."""
    base = Path(root)
    return sorted(p.relative_to(base) for p in base.rglob("*") if p.is_file())


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_info(message: str) -> None:
    """Print a blue informational message."""
    console.print(f"[blue]Info:[/blue] {message}", highlight=False)


def print_step(message: str) -> None:
    """Print a cyan step heading preceded by a blank line."""
    console.print()
    console.print(f"[bold cyan]{message}[/bold cyan]", highlight=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]Success:[/bold green] {message}", highlight=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}", highlight=False)


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {message}", highlight=False)


def print_banner(message: str, color: str = "green") -> None:
    """Print a full-width rule framing a completion message."""
    console.print()
    console.print(Rule(f"[bold {color}]{message}[/bold {color}]", style=color))


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


def print_next_steps(project_dir: str | Path, commands: Iterable[str]) -> None:
    """Print the ``cd`` hint followed by the commands to run next."""
    console.print()
    console.print("[bold yellow]Next steps:[/bold yellow]")
    console.print(f"  cd {_display_path(project_dir)}", highlight=False)
    for command in commands:
        console.print(f"  {command}", highlight=False)


def _display_path(path: str | Path) -> str:
    """Return *path* relative to the working directory when possible."""
    target = Path(path).resolve()
    try:
        return str(target.relative_to(Path.cwd()))
    except ValueError:
        return str(target)
