"""Shared pytest fixtures for the Example Hub test suite.

Provides reusable fixtures for:
- A writable copy of the miniature example-hub source root
- Configuration and catalog objects wired to that copy
- Pre-built scaffolder, test-stub and doc generators
- Sample NatSpec-annotated contract sources
"""

from __future__ import annotations

import hashlib
import shutil
import textwrap
from pathlib import Path

import pytest

from example_hub.catalog import (
    Category,
    ExampleCatalog,
    ExampleDescriptor,
    default_catalog,
)
from example_hub.config import DocsConfig, HubConfig
from example_hub.reporter import DocGenerator
from example_hub.scaffolder import ExampleScaffolder, TestStubGenerator

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def hub_root(tmp_path: Path) -> Path:
    """Writable copy of ``tests/fixtures/hub`` (auto-cleanup)."""
    root = tmp_path / "hub"
    shutil.copytree(FIXTURES_DIR / "hub", root)
    yield root


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Parent directory for scaffold targets; the targets themselves do not exist."""
    path = tmp_path / "out"
    path.mkdir()
    yield path


# ---------------------------------------------------------------------------
# Configuration & catalog
# ---------------------------------------------------------------------------


@pytest.fixture
def hub_config(hub_root: Path) -> HubConfig:
    """Configuration pointing at the copied source root, formatter disabled."""
    return HubConfig(source_root=hub_root, docs=DocsConfig(run_formatter=False))


@pytest.fixture
def catalog() -> ExampleCatalog:
    """The built-in catalog."""
    return default_catalog()


@pytest.fixture
def fixture_catalog() -> ExampleCatalog:
    """A catalog limited to the examples whose contracts exist in the fixture."""
    keep = {"counter", "arithmetic", "blind-auction", "anti-overflow"}
    return ExampleCatalog(e for e in default_catalog() if e.name in keep)


@pytest.fixture
def notice_example() -> ExampleDescriptor:
    """A descriptor for the synthetic ``Notices.sol`` contract."""
    return ExampleDescriptor(
        name="notices",
        description="Three notices in a row",
        category=Category.BASIC,
        source_file="Notices.sol",
        concepts=("euint8",),
    )


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------


@pytest.fixture
def scaffolder(catalog: ExampleCatalog, hub_config: HubConfig) -> ExampleScaffolder:
    return ExampleScaffolder(catalog, hub_config)


@pytest.fixture
def stub_generator(catalog: ExampleCatalog, hub_config: HubConfig) -> TestStubGenerator:
    return TestStubGenerator(catalog, hub_config)


@pytest.fixture
def doc_generator(fixture_catalog: ExampleCatalog, hub_config: HubConfig) -> DocGenerator:
    return DocGenerator(fixture_catalog, hub_config)


# ---------------------------------------------------------------------------
# Sample sources
# ---------------------------------------------------------------------------


@pytest.fixture
def notice_source() -> str:
    """Contract source with exactly three ``@notice`` lines: A, B, C."""
    return textwrap.dedent("""\
        // SPDX-License-Identifier: MIT
        pragma solidity ^0.8.24;

        /// @notice A
        contract Notices {
            /// @notice B
            function first() external {}

            /// @notice C
            function second(uint8 x) external returns (uint8) { return x; }
        }
        """)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def sha256_of():
    """Return a helper computing the hex digest of a file's bytes."""

    def _digest(path: Path) -> str:
        return hashlib.sha256(path.read_bytes()).hexdigest()

    return _digest


@pytest.fixture
def snapshot_tree():
    """Return a helper mapping every file under a root to its bytes."""

    def _snapshot(root: Path) -> dict[str, bytes]:
        return {
            p.relative_to(root).as_posix(): p.read_bytes()
            for p in sorted(root.rglob("*"))
            if p.is_file()
        }

    return _snapshot
