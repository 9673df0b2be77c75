"""Shared utility functions for the Example Hub.

Provides Rich-based console output, newline-preserving file I/O wrapped in
classified error handling, and a small synchronous command runner used for
the optional Markdown formatting pass.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .errors import translate_os_errors

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def print_hints(hints: list[str], title: str = "Possible fixes:") -> None:
    """Print remedy hints as an indented bullet list on stderr."""
    if not hints:
        return
    err_console.print(f"\n{title}")
    for hint in hints:
        err_console.print(f"  - {escape(hint)}")


def print_step(message: str) -> None:
    """Print a dimmed progress line."""
    console.print(f"  [dim]{escape(message)}[/dim]")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def read_text(path: str | Path, action: str = "read file") -> str:
    """Read a UTF-8 text file without newline translation.

    Bytes that are not valid UTF-8 are replaced with U+FFFD rather than
    aborting the command.

    Raises:
        SourceMissingError: If the file does not exist.
        FilesystemError: For any other classified OS failure.
    """
    file_path = Path(path)
    with translate_os_errors(action, file_path):
        with open(file_path, encoding="utf-8", errors="replace", newline="") as fh:
            return fh.read()


def write_text(path: str | Path, content: str, action: str = "write file") -> Path:
    """Write *content* to *path* verbatim (no newline translation).

    The parent directory must already exist; scaffold and docs commands
    create their directories explicitly so a missing parent is reported.
    """
    file_path = Path(path)
    with translate_os_errors(action, file_path):
        with open(file_path, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    return file_path


def copy_file(src: str | Path, dest: str | Path, action: str = "copy file") -> Path:
    """Copy *src* to *dest* byte-for-byte."""
    dest_path = Path(dest)
    with translate_os_errors(action, dest_path):
        shutil.copyfile(src, dest_path)
    return dest_path


def ensure_dir(path: str | Path, action: str = "create directory") -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The ``Path`` object.
    """
    dir_path = Path(path)
    with translate_os_errors(action, dir_path):
        dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------


def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 60,
) -> tuple[int, str, str]:
    """Run an external command synchronously.

    A missing executable or a timeout is reported through the return code
    rather than raised, since every caller treats the command as optional.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  ``returncode`` is ``-1``
        when the command could not be started or timed out.
    """
    try:
        completed = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError:
        return (-1, "", f"Command not found: {cmd[0]}")
    except OSError as exc:
        return (-1, "", f"Could not start {cmd[0]}: {exc}")
    except subprocess.TimeoutExpired:
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    return (completed.returncode, completed.stdout.strip(), completed.stderr.strip())
