"""Markdown documentation generator.

Produces one ``docs/<name>.md`` per catalog example (metadata, verbatim
source and NatSpec annotations) plus a ``docs/README.md`` index.  Output is
deterministic: running the generator twice over unchanged sources yields
byte-identical files.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from example_hub.catalog import ExampleCatalog, ExampleDescriptor
from example_hub.config import HubConfig
from example_hub.parser import RegexSourceScanner, SourceScanner
from example_hub.scaffolder.templates import TemplateRenderer
from example_hub.utils import (
    console,
    ensure_dir,
    print_warning,
    read_text,
    run_command,
    write_text,
)


# ---------------------------------------------------------------------------
# Data Models
# ---------------------------------------------------------------------------


class IndexEntry(BaseModel):
    """One line of the documentation index."""

    name: str
    file_name: str
    description: str


class DocsResult(BaseModel):
    """Outcome of a documentation run."""

    docs_dir: Path
    index_path: Path
    documents: list[Path] = Field(default_factory=list)
    skipped: list[str] = Field(
        default_factory=list, description="Examples whose contract file is absent"
    )
    formatted: bool = Field(default=False)
    warnings: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# DocGenerator
# ---------------------------------------------------------------------------


class DocGenerator:
    """Generates per-example Markdown documentation from contract sources.

    Unlike the scaffolder, a contract that exists but cannot be read is
    fatal: the documents exist to reproduce the source commentary, so a
    partial run would silently drop content.

    Usage::

        generator = DocGenerator(catalog, config)
        result = generator.generate()
    """

    def __init__(
        self,
        catalog: ExampleCatalog,
        config: HubConfig,
        scanner: SourceScanner | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.catalog = catalog
        self.config = config
        self.scanner = scanner or RegexSourceScanner()
        self.renderer = renderer or TemplateRenderer()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self) -> DocsResult:
        """Generate every example document and the index.

        Raises:
            FilesystemError: The docs directory or a document cannot be
                written, or a contract cannot be read.
        """
        docs_dir = ensure_dir(self.config.docs_path, action="create docs directory")
        result = DocsResult(docs_dir=docs_dir, index_path=self.config.docs_index_path)
        entries: list[IndexEntry] = []

        for example in self.catalog:
            contract_path = self.config.contracts_path / example.source_file
            if not contract_path.exists():
                message = f"Contract not found, skipping docs for {example.name}: {contract_path}"
                print_warning(message)
                result.warnings.append(message)
                result.skipped.append(example.name)
                continue

            source = read_text(contract_path, action=f"read {example.source_file}")
            doc_path = docs_dir / f"{example.name}.md"
            write_text(
                doc_path,
                self.render_document(example, source),
                action=f"write {doc_path.name}",
            )
            result.documents.append(doc_path)
            entries.append(
                IndexEntry(
                    name=example.name,
                    file_name=doc_path.name,
                    description=example.description,
                )
            )
            console.print(f"  [green]✓[/green] {doc_path.name}")

        self.renderer.render_to_file(
            "docs_index.md.j2", result.index_path, {"entries": entries}
        )
        console.print(f"[green]Documentation generated in {docs_dir}[/green]")

        if self.config.docs.run_formatter:
            result.formatted = self._format([*result.documents, result.index_path], result)

        return result

    def render_document(self, example: ExampleDescriptor, source: str) -> str:
        """Render the Markdown document for one example."""
        context = {
            "example": example,
            "category": example.category.value,
            "contract_name": example.contract_name,
            "source": source,
            "annotations": self.scanner.annotations(source),
        }
        return self.renderer.render("doc.md.j2", context)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def _format(self, paths: list[Path], result: DocsResult) -> bool:
        """Run the external Markdown formatter; failure is only a warning."""
        console.print("  [dim]Formatting with prettier...[/dim]")
        # Absolute paths: the formatter runs with the source root as its cwd.
        cmd = [*self.config.docs.formatter_command, *(str(p.resolve()) for p in paths)]
        returncode, _, stderr = run_command(
            cmd,
            cwd=self.config.source_root,
            timeout=self.config.docs.formatter_timeout,
        )
        if returncode != 0:
            message = "Formatting skipped (formatter not available)"
            if stderr:
                message = f"{message}: {stderr.splitlines()[0]}"
            print_warning(message)
            result.warnings.append(message)
            return False
        console.print("  [green]Formatting complete[/green]")
        return True
