"""Main scaffolding orchestrator.

Takes an example name from the catalog and materialises a standalone Hardhat
project for it: shared configuration copied from the source root, the
example contract, a test file (copied or synthesised), a deploy script, an
adjusted ``package.json`` and a generated README.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

from example_hub.catalog import ExampleCatalog, ExampleDescriptor
from example_hub.config import HubConfig
from example_hub.errors import DestinationExistsError, HubError, ManifestError
from example_hub.utils import (
    copy_file,
    ensure_dir,
    print_step,
    print_warning,
    read_text,
    write_text,
)

from .templates import TemplateRenderer
from .test_gen import TestStubGenerator


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class ScaffoldResult(BaseModel):
    """Outcome of a successful scaffold run."""

    example: str = Field(..., description="Catalog name of the scaffolded example")
    target_dir: Path = Field(..., description="Absolute path of the new project")
    files: list[str] = Field(
        default_factory=list, description="Written files, relative to target_dir"
    )
    test_source: Literal["copied", "generated", "missing"] = Field(default="missing")
    warnings: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ExampleScaffolder:
    """Create a self-contained project directory for one example.

    Optional inputs (shared config files, the contract, the task helper, the
    deploy template) that are missing from the source root produce warnings;
    any filesystem failure while writing the scaffold is raised as a
    :class:`~example_hub.errors.HubError`.
    """

    def __init__(
        self,
        catalog: ExampleCatalog,
        config: HubConfig,
        test_generator: TestStubGenerator | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.catalog = catalog
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.test_generator = test_generator or TestStubGenerator(
            catalog, config, renderer=self.renderer
        )

    # -- Public API --------------------------------------------------------

    def default_target(self, name: str) -> Path:
        """Directory used when no output directory is given."""
        return Path(f"{self.config.scaffold.prefix}-{name}")

    def scaffold(self, name: str, output_dir: str | Path | None = None) -> ScaffoldResult:
        """Scaffold the example called *name*.

        Args:
            name: Catalog name of the example.
            output_dir: Target directory; must not exist yet.  Defaults to
                ``<prefix>-<name>`` in the current directory.

        Returns:
            A :class:`ScaffoldResult` describing what was written.

        Raises:
            ExampleNotFoundError: Unknown example.
            DestinationExistsError: The target directory already exists.
            FilesystemError: A copy or write failed.
            ManifestError: The copied ``package.json`` is not valid JSON.
        """
        example = self.catalog.require(name)
        target = Path(output_dir) if output_dir else self.default_target(name)
        target = target.resolve()

        if target.exists():
            raise DestinationExistsError(target, what="Directory")

        result = ScaffoldResult(example=example.name, target_dir=target)

        # 1. Skeleton directory structure
        self._create_directory_structure(target)

        # 2. Shared configuration files
        self._copy_config_files(target, result)

        # 3. Example contract
        self._copy_contract(example, target, result)

        # 4. Test file (hand-written if available, synthesised otherwise)
        self._provide_test(example, target, result)

        # 5. Task helper required by hardhat.config.ts
        self._copy_task_helper(target, result)

        # 6. Deploy script adapted to this contract
        self._render_deploy_script(example, target, result)

        # 7. package.json name/description
        self._update_manifest(example, target, result)

        # 8. hardhat.config.ts without the demo task import
        self._update_build_config(target, result)

        # 9. README
        self._render_readme(example, target, result)

        return result

    # -- Steps -------------------------------------------------------------

    def _create_directory_structure(self, root: Path) -> None:
        """Create the target and its fixed subdirectories."""
        ensure_dir(root, action="create directory structure")
        for sub in self.config.scaffold.subdirectories:
            ensure_dir(root / sub, action="create directory structure")

    def _copy_config_files(self, root: Path, result: ScaffoldResult) -> None:
        for file_name in self.config.scaffold.config_files:
            src = self.config.source_root / file_name
            if not src.exists():
                _warn(result, f"Configuration file not found (skipping): {file_name}")
                continue
            copy_file(src, root / file_name, action=f"copy {file_name}")
            result.files.append(file_name)

    def _copy_contract(
        self, example: ExampleDescriptor, root: Path, result: ScaffoldResult
    ) -> None:
        src = self.config.contracts_path / example.source_file
        rel = f"contracts/{example.source_file}"
        if not src.exists():
            _warn(
                result,
                f"Contract file not found: {src}. "
                "The scaffolded project may be incomplete without the main contract file.",
            )
            return
        copy_file(src, root / rel, action="copy contract file")
        result.files.append(rel)

    def _provide_test(
        self, example: ExampleDescriptor, root: Path, result: ScaffoldResult
    ) -> None:
        rel = f"test/{example.test_file_name}"
        src = self.config.tests_path / example.test_file_name
        if src.exists():
            copy_file(src, root / rel, action="copy test file")
            result.files.append(rel)
            result.test_source = "copied"
            print_step("Copied existing test file")
            return

        print_step("Generating test file...")
        contract_src = self.config.contracts_path / example.source_file
        try:
            content = self.test_generator.render(example, contract_src)
        except HubError as exc:
            _warn(
                result,
                f"Failed to generate test file: {exc.message}. "
                f"You can generate it later using: generate-tests {example.name}",
            )
            return
        write_text(root / rel, content, action="write test file")
        result.files.append(rel)
        result.test_source = "generated"
        print_step("Test file generated")

    def _copy_task_helper(self, root: Path, result: ScaffoldResult) -> None:
        rel = self.config.scaffold.task_helper
        src = self.config.source_root / rel
        if not src.exists():
            _warn(result, f"Task helper not found (skipping): {rel}")
            return
        copy_file(src, root / rel, action=f"copy {rel}")
        result.files.append(rel)

    def _render_deploy_script(
        self, example: ExampleDescriptor, root: Path, result: ScaffoldResult
    ) -> None:
        rel = self.config.scaffold.deploy_template
        src = self.config.source_root / rel
        if not src.exists():
            return
        content = read_text(src, action="read deploy template")
        content = rename_demo_identifier(
            content,
            self.config.scaffold.canonical_contract,
            self.config.scaffold.canonical_var,
            example.contract_name,
        )
        write_text(root / rel, content, action="write deploy script")
        result.files.append(rel)

    def _update_manifest(
        self, example: ExampleDescriptor, root: Path, result: ScaffoldResult
    ) -> None:
        manifest = self.config.scaffold.manifest_file
        path = root / manifest
        if not path.exists():
            _warn(result, f"{manifest} was not copied; skipping name/description update")
            return
        raw = read_text(path, action=f"read {manifest}")
        try:
            data: dict[str, Any] = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ManifestError(path, f"invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ManifestError(path, "top-level value is not an object")

        data["name"] = f"{self.config.scaffold.prefix}-{example.name}"
        data["description"] = example.description
        write_text(
            path,
            json.dumps(data, indent=2, ensure_ascii=False),
            action=f"update {manifest}",
        )

    def _update_build_config(self, root: Path, result: ScaffoldResult) -> None:
        build_config = self.config.scaffold.build_config_file
        path = root / build_config
        if not path.exists():
            _warn(result, f"{build_config} was not copied; skipping task import cleanup")
            return
        content = read_text(path, action=f"read {build_config}")
        content = strip_import_line(content, self.config.scaffold.canonical_task_import)
        write_text(path, content, action=f"update {build_config}")

    def _render_readme(
        self, example: ExampleDescriptor, root: Path, result: ScaffoldResult
    ) -> None:
        context = {
            "example": example,
            "category": example.category.value,
            "contract_name": example.contract_name,
        }
        self.renderer.render_to_file("README.md.j2", root / "README.md", context)
        result.files.append("README.md")


# ---------------------------------------------------------------------------
# Text rewrites
# ---------------------------------------------------------------------------


def rename_demo_identifier(
    text: str, canonical: str, canonical_var: str, contract_name: str
) -> str:
    """Replace the demo contract identifier in a copied script.

    Every ``canonical`` becomes ``contract_name`` and then every
    ``canonical_var`` becomes ``contract_name.lower()``.  The replacement is
    literal, so ``FHECounterV2`` turns into ``<contract_name>V2``.
    """
    text = text.replace(canonical, contract_name)
    return text.replace(canonical_var, contract_name.lower())


def strip_import_line(text: str, import_line: str) -> str:
    """Delete every occurrence of *import_line* together with its newline."""
    return re.sub(re.escape(import_line) + r"\n?", "", text)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _warn(result: ScaffoldResult, message: str) -> None:
    print_warning(message)
    result.warnings.append(message)
