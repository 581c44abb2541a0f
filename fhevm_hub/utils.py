"""Shared utility functions for the FHEVM example hub tooling.

Provides the soft-failing source reader, file-system helpers and Rich-based
console reporting used by both generators.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Source reading
# ---------------------------------------------------------------------------


def read_source(path: str | Path) -> str:
    """Read a contract or test source file as text.

    Never raises: a missing file yields ``// File not found: <path>`` and any
    other read or decode failure yields ``// Error reading file: <path>: ...``
    so a rendered document simply shows the placeholder instead.

    Content is returned exactly as stored (line endings are not translated).
    """
    file_path = Path(path)
    try:
        with open(file_path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except FileNotFoundError:
        return f"// File not found: {file_path}"
    except (OSError, UnicodeDecodeError) as exc:
        return f"// Error reading file: {file_path}: {exc}"


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def capitalize_first(text: str) -> str:
    """Upper-case the first character only (``"basic"`` -> ``"Basic"``)."""
    return text[:1].upper() + text[1:]


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories first."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


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


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_example_names(names: list[str], stream: Console | None = None) -> None:
    """Print one ``  - <name>`` line per registry key."""
    target = stream or err_console
    target.print("Available examples:")
    for name in names:
        target.print(f"  - {name}", markup=False, highlight=False)
