"""Example Hub configuration.

Centralised, typed configuration for the CLI.  All settings use Pydantic v2
models so they can be validated at construction time and serialised to/from
JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_CONFIG_FILES: list[str] = [
    "hardhat.config.ts",
    "tsconfig.json",
    "package.json",
    ".eslintrc.yml",
    ".eslintignore",
    ".prettierrc.yml",
    ".prettierignore",
    ".solhint.json",
    ".solhintignore",
    ".solcover.js",
    ".gitignore",
]


class ScaffoldConfig(BaseModel):
    """Settings for ``scaffold``: what is copied and how it is adjusted."""

    prefix: str = Field(
        default="fhevm-example",
        min_length=1,
        description="Prefix for default target directories and package names",
    )
    config_files: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CONFIG_FILES),
        description="Shared project files copied from the source root",
    )
    subdirectories: list[str] = Field(
        default_factory=lambda: ["contracts", "test", "deploy", "tasks"],
    )
    canonical_contract: str = Field(
        default="FHECounter",
        description="Contract identifier used by the deploy template",
    )
    canonical_var: str = Field(
        default="fheCounter",
        description="Variable-name form of the canonical identifier",
    )
    canonical_task_import: str = Field(
        default='import "./tasks/FHECounter";',
        description="hardhat.config.ts line removed from every scaffold",
    )
    deploy_template: str = Field(default="deploy/deploy.ts")
    task_helper: str = Field(default="tasks/accounts.ts")
    manifest_file: str = Field(default="package.json")
    build_config_file: str = Field(default="hardhat.config.ts")


class DocsConfig(BaseModel):
    """Settings for ``docs``."""

    output_dir: str = Field(default="docs")
    index_name: str = Field(default="README.md")
    run_formatter: bool = Field(default=True, description="Run the Markdown formatter afterwards")
    formatter_command: list[str] = Field(
        default_factory=lambda: ["npx", "prettier", "--write"],
        description="Formatter invocation; generated file paths are appended",
    )
    formatter_timeout: int = Field(default=60, ge=1, description="Formatter timeout in seconds")


class HubConfig(BaseModel):
    """Global Example Hub configuration.

    Instances are created once by the CLI entry point and then passed to the
    scaffolder, test-stub generator and doc generator.
    """

    source_root: Path = Field(default=Path("."))
    contracts_dir: str = Field(default="contracts")
    tests_dir: str = Field(default="test")
    scaffold: ScaffoldConfig = Field(default_factory=ScaffoldConfig)
    docs: DocsConfig = Field(default_factory=DocsConfig)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def contracts_path(self) -> Path:
        """Directory holding the example contract sources."""
        return self.source_root / self.contracts_dir

    @property
    def tests_path(self) -> Path:
        """Directory holding hand-written example tests."""
        return self.source_root / self.tests_dir

    @property
    def docs_path(self) -> Path:
        """Directory where generated documentation is written."""
        return self.source_root / self.docs.output_dir

    @property
    def docs_index_path(self) -> Path:
        return self.docs_path / self.docs.index_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "HubConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "HubConfig":
        """Build a ``HubConfig`` from environment variables.

        Recognised variables (all optional):
            HUB_SOURCE_ROOT, HUB_SCAFFOLD_PREFIX, HUB_DOCS_DIR,
            HUB_FORMAT_DOCS, HUB_FORMATTER_TIMEOUT.

        Raises:
            ValidationError: If a variable holds an invalid value (e.g. a
                non-numeric or zero timeout).
        """
        scaffold_kwargs: dict[str, Any] = {}
        if os.environ.get("HUB_SCAFFOLD_PREFIX"):
            scaffold_kwargs["prefix"] = os.environ["HUB_SCAFFOLD_PREFIX"]

        docs_kwargs: dict[str, Any] = {}
        if os.environ.get("HUB_DOCS_DIR"):
            docs_kwargs["output_dir"] = os.environ["HUB_DOCS_DIR"]
        if os.environ.get("HUB_FORMAT_DOCS"):
            docs_kwargs["run_formatter"] = os.environ["HUB_FORMAT_DOCS"].strip().lower() not in (
                "0",
                "false",
                "no",
                "off",
            )
        if os.environ.get("HUB_FORMATTER_TIMEOUT"):
            docs_kwargs["formatter_timeout"] = os.environ["HUB_FORMATTER_TIMEOUT"]

        return cls(
            source_root=Path(os.environ.get("HUB_SOURCE_ROOT", ".")),
            scaffold=ScaffoldConfig(**scaffold_kwargs),
            docs=DocsConfig(**docs_kwargs),
        )
