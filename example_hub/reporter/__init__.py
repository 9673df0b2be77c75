"""Documentation engine for the Example Hub.

Renders one Markdown document per catalog example from its contract source
and NatSpec comments, plus an index page.
"""

from example_hub.reporter.docs import DocGenerator, DocsResult, IndexEntry

__all__ = [
    "DocGenerator",
    "DocsResult",
    "IndexEntry",
]
