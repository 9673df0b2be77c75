"""Error taxonomy for the Example Hub.

Every fatal condition raised by the catalog, scaffolder, test-stub generator
and doc generator is a :class:`HubError`.  Components never terminate the
process themselves; the CLI dispatcher catches these, prints the message and
the remedy hints, and chooses the exit code.

OS-level failures are funnelled through :func:`classify_os_error` so that the
user sees *why* a filesystem call failed (permissions, full disk, read-only
mount, ...) instead of a bare traceback.
"""

from __future__ import annotations

import errno
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------


class HubError(Exception):
    """Base class for every error surfaced to the CLI user.

    Attributes:
        message: One-line description of what failed.
        hints: Suggested remedies, printed as a bullet list.
    """

    def __init__(self, message: str, hints: list[str] | None = None) -> None:
        self.message = message
        self.hints = list(hints or [])
        super().__init__(message)


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class ExampleNotFoundError(HubError):
    """Raised when a requested example name is not in the catalog."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(
            f"Unknown example: {name}",
            hints=["Run the 'list' command to see every available example"],
        )


class DestinationExistsError(HubError):
    """Raised when a target directory or file is already present."""

    def __init__(self, path: str | Path, what: str = "Destination") -> None:
        self.path = Path(path)
        super().__init__(
            f"{what} already exists: {self.path}",
            hints=[
                "Remove the existing path or choose a different output directory",
            ],
        )


class SourceMissingError(HubError):
    """Raised when a required input file is absent."""

    def __init__(self, path: str | Path, what: str = "Source file") -> None:
        self.path = Path(path)
        self.what = what
        super().__init__(
            f"{what} not found: {self.path}",
            hints=[f"Ensure {self.path.name} exists before running this command"],
        )


class FsErrorKind(str, Enum):
    """Classified filesystem failure kinds."""

    PERMISSION_DENIED = "permission-denied"
    IS_A_DIRECTORY = "is-a-directory"
    NO_SPACE = "no-space"
    READ_ONLY = "read-only"
    OTHER = "other"


_KIND_BY_ERRNO: dict[int, FsErrorKind] = {
    errno.EACCES: FsErrorKind.PERMISSION_DENIED,
    errno.EPERM: FsErrorKind.PERMISSION_DENIED,
    errno.EISDIR: FsErrorKind.IS_A_DIRECTORY,
    errno.ENOSPC: FsErrorKind.NO_SPACE,
    errno.EROFS: FsErrorKind.READ_ONLY,
}


class FilesystemError(HubError):
    """A classified OS error raised while reading or writing a path."""

    def __init__(
        self,
        kind: FsErrorKind,
        action: str,
        path: str | Path,
        code: str | None = None,
        detail: str = "",
    ) -> None:
        self.kind = kind
        self.action = action
        self.path = Path(path)
        self.code = code
        message, hints = _describe(kind, action, self.path, code)
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, hints=hints)


class ManifestError(HubError):
    """Raised when a copied ``package.json`` cannot be parsed."""

    def __init__(self, path: str | Path, detail: str) -> None:
        self.path = Path(path)
        super().__init__(
            f"Failed to update {self.path.name}: {detail}",
            hints=[
                "Check that the package.json contains valid JSON",
                f"Path: {self.path}",
            ],
        )


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def _describe(
    kind: FsErrorKind, action: str, path: Path, code: str | None
) -> tuple[str, list[str]]:
    """Return the message and remedy hints for a classified failure."""
    if kind is FsErrorKind.PERMISSION_DENIED:
        return (
            f"Failed to {action}: permission denied: {path}",
            ["Check file and directory permissions and try again"],
        )
    if kind is FsErrorKind.IS_A_DIRECTORY:
        return (
            f"Failed to {action}: path is a directory, not a file: {path}",
            ["Point the command at a file path instead of a directory"],
        )
    if kind is FsErrorKind.NO_SPACE:
        return (
            f"Failed to {action}: no space left on device: {path}",
            ["Free up disk space and try again"],
        )
    if kind is FsErrorKind.READ_ONLY:
        return (
            f"Failed to {action}: read-only file system: {path}",
            ["Choose an output location on a writable file system"],
        )
    return (
        f"Failed to {action}: {path}",
        [f"Error code: {code or 'unknown'}"],
    )


def classify_os_error(exc: OSError, action: str, path: str | Path) -> HubError:
    """Map an :class:`OSError` to the matching :class:`HubError` subclass.

    ``ENOENT`` becomes :class:`SourceMissingError` and ``EEXIST`` becomes
    :class:`DestinationExistsError`; everything else is a
    :class:`FilesystemError`, with unknown errnos reported by their symbolic
    name (e.g. ``EIO``).
    """
    target = Path(exc.filename) if exc.filename else Path(path)
    if exc.errno == errno.ENOENT:
        return SourceMissingError(target)
    if exc.errno == errno.EEXIST:
        return DestinationExistsError(target)

    kind = _KIND_BY_ERRNO.get(exc.errno or -1, FsErrorKind.OTHER)
    code = errno.errorcode.get(exc.errno) if exc.errno is not None else None
    detail = (exc.strerror or "") if kind is FsErrorKind.OTHER else ""
    return FilesystemError(kind, action, target, code=code, detail=detail)


@contextmanager
def translate_os_errors(action: str, path: str | Path) -> Iterator[None]:
    """Re-raise any :class:`OSError` inside the block as a classified error.

    Usage::

        with translate_os_errors("copy contract file", dest):
            shutil.copyfile(src, dest)
    """
    try:
        yield
    except OSError as exc:
        raise classify_os_error(exc, action, path) from exc
