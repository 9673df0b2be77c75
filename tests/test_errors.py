"""Unit tests for the error taxonomy (example_hub.errors).

Tests cover:
- classify_os_error for every classified errno plus the fallback
- translate_os_errors context manager
- Messages and hints of the concrete HubError subclasses
"""

from __future__ import annotations

import errno
from pathlib import Path

import pytest

from example_hub.errors import (
    DestinationExistsError,
    ExampleNotFoundError,
    FilesystemError,
    FsErrorKind,
    HubError,
    ManifestError,
    SourceMissingError,
    classify_os_error,
    translate_os_errors,
)

pytestmark = pytest.mark.unit


def _os_error(code: int, filename: str = "/tmp/target") -> OSError:
    return OSError(code, "boom", filename)


class TestClassifyOsError:
    @pytest.mark.parametrize(
        "code,kind,needle",
        [
            (errno.EACCES, FsErrorKind.PERMISSION_DENIED, "permission denied"),
            (errno.EPERM, FsErrorKind.PERMISSION_DENIED, "permission denied"),
            (errno.EISDIR, FsErrorKind.IS_A_DIRECTORY, "path is a directory"),
            (errno.ENOSPC, FsErrorKind.NO_SPACE, "no space left on device"),
            (errno.EROFS, FsErrorKind.READ_ONLY, "read-only file system"),
        ],
    )
    def test_classified_kinds(self, code, kind, needle):
        error = classify_os_error(_os_error(code), "write file", "/tmp/target")
        assert isinstance(error, FilesystemError)
        assert error.kind is kind
        assert needle in error.message
        assert "write file" in error.message
        assert error.hints

    def test_unknown_errno_carries_code(self):
        error = classify_os_error(_os_error(errno.EIO), "copy file", "/tmp/x")
        assert isinstance(error, FilesystemError)
        assert error.kind is FsErrorKind.OTHER
        assert error.code == "EIO"
        assert any("EIO" in hint for hint in error.hints)

    def test_enoent_is_source_missing(self):
        error = classify_os_error(_os_error(errno.ENOENT, "/src/A.sol"), "read", "/src/A.sol")
        assert isinstance(error, SourceMissingError)
        assert error.path == Path("/src/A.sol")

    def test_eexist_is_destination_exists(self):
        error = classify_os_error(_os_error(errno.EEXIST), "create", "/tmp/target")
        assert isinstance(error, DestinationExistsError)

    def test_falls_back_to_given_path(self):
        error = classify_os_error(OSError(errno.EACCES, "denied"), "read", "/given")
        assert error.path == Path("/given")


class TestTranslateOsErrors:
    def test_reraises_classified(self):
        with pytest.raises(FilesystemError) as exc_info:
            with translate_os_errors("write file", "/tmp/out.md"):
                raise PermissionError(errno.EACCES, "Permission denied", "/tmp/out.md")
        assert exc_info.value.kind is FsErrorKind.PERMISSION_DENIED
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_passes_through_without_error(self):
        with translate_os_errors("noop", "/tmp"):
            value = 1
        assert value == 1

    def test_non_os_errors_untouched(self):
        with pytest.raises(ValueError):
            with translate_os_errors("noop", "/tmp"):
                raise ValueError("not an OSError")


class TestHubErrors:
    def test_all_are_hub_errors(self):
        for error in (
            ExampleNotFoundError("x", ["a"]),
            DestinationExistsError("/tmp/x"),
            SourceMissingError("/tmp/x"),
            ManifestError("/tmp/package.json", "invalid JSON"),
        ):
            assert isinstance(error, HubError)
            assert str(error) == error.message

    def test_not_found_message(self):
        error = ExampleNotFoundError("nope", ["counter", "arithmetic"])
        assert error.message == "Unknown example: nope"
        assert error.available == ["counter", "arithmetic"]

    def test_destination_exists_label(self):
        error = DestinationExistsError("/tmp/FHECounter.ts", what="Test file")
        assert error.message == "Test file already exists: /tmp/FHECounter.ts"
