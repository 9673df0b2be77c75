"""Jinja2 rendering for every generated text file.

The README of a scaffolded project, synthesised test stubs, per-example
documentation pages and the docs index are all ``.j2`` files bundled in
``example_hub/scaffolder/templates/``.  The same context always renders to
the same bytes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from example_hub.utils import write_text

BUNDLED_TEMPLATES = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


def lower_first(value: str) -> str:
    """``FHECounter`` -> ``fHECounter``; the rest of the string is untouched."""
    return value[:1].lower() + value[1:]


def bullets(values: Iterable[Any], code: bool = False) -> str:
    """Markdown bullet list, one item per line, optionally as inline code."""
    if code:
        return "\n".join(f"- `{v}`" for v in values)
    return "\n".join(f"- {v}" for v in values)


FILTERS: dict[str, Callable[..., str]] = {
    "lower_first": lower_first,
    "bullets": bullets,
}


def _build_environment(template_dir: Path) -> Environment:
    # Output is Markdown and TypeScript, never HTML: no autoescaping.
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters.update(FILTERS)
    return env


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Thin wrapper around a Jinja2 environment rooted at a template directory.

    A variable missing from the context raises ``jinja2.UndefinedError``
    instead of rendering as an empty string.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir else BUNDLED_TEMPLATES
        self.env = _build_environment(self.template_dir)

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render *template_path* (relative, forward slashes) with *context*."""
        return self.env.get_template(template_path).render(**context)

    def render_string(self, source: str, context: dict[str, Any]) -> str:
        return self.env.from_string(source).render(**context)

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render and write to *output_path*, whose parent must already exist."""
        output_path = Path(output_path)
        return write_text(
            output_path,
            self.render(template_path, context),
            action=f"write {output_path.name}",
        )

    def list_templates(self, prefix: str = "") -> list[str]:
        """Sorted ``.j2`` paths below *prefix*, relative to the template root."""
        root = self.template_dir / prefix if prefix else self.template_dir
        if not root.is_dir():
            return []
        found = (p.relative_to(self.template_dir).as_posix() for p in root.rglob("*.j2"))
        return sorted(found)
