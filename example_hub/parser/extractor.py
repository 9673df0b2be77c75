"""Heuristic Solidity source scanner.

Extracts NatSpec ``/// @tag text`` annotations and the names of externally
callable functions from contract source text.  Uses pure line-by-line regex
matching, not a Solidity parser: multi-line parameter lists, string literals
and commented-out code are handled on a best-effort basis only.

Callers depend on the :class:`SourceScanner` protocol, so a stricter scanner
can be swapped in without touching the scaffolder or doc generator.
"""

from __future__ import annotations

import re
from typing import Protocol


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_NATSPEC_PATTERN = re.compile(r"///\s*@(\w+)\s+(.+)")
_EXTERNAL_FUNCTION_PATTERN = re.compile(r"function\s+(\w+)\s*\([^)]*\)\s+external")


# ---------------------------------------------------------------------------
# Interface
# ---------------------------------------------------------------------------


class SourceScanner(Protocol):
    """Anything able to pull annotations and function names out of a source."""

    def annotations(self, source: str) -> dict[str, list[str]]:
        ...

    def external_functions(self, source: str) -> list[str]:
        ...


# ---------------------------------------------------------------------------
# Regex implementation
# ---------------------------------------------------------------------------


class RegexSourceScanner:
    """Default :class:`SourceScanner` built on two regular expressions."""

    def annotations(self, source: str) -> dict[str, list[str]]:
        """Group NatSpec values by tag.

        Tags appear in first-seen order and values keep their encounter order
        within a tag, so the result is stable for an unchanged source.

        Example::

            >>> RegexSourceScanner().annotations("/// @notice A\\n/// @notice B")
            {'notice': ['A', 'B']}
        """
        grouped: dict[str, list[str]] = {}
        for line in source.splitlines():
            match = _NATSPEC_PATTERN.search(line)
            if match is None:
                continue
            tag, value = match.group(1), match.group(2).rstrip()
            grouped.setdefault(tag, []).append(value)
        return grouped

    def external_functions(self, source: str) -> list[str]:
        """Return external function names in source order, without duplicates."""
        names: list[str] = []
        for match in _EXTERNAL_FUNCTION_PATTERN.finditer(source):
            name = match.group(1)
            if name not in names:
                names.append(name)
        return names


def extract_annotations(source: str) -> dict[str, list[str]]:
    """Module-level shortcut for :meth:`RegexSourceScanner.annotations`."""
    return RegexSourceScanner().annotations(source)


def extract_external_functions(source: str) -> list[str]:
    """Module-level shortcut for :meth:`RegexSourceScanner.external_functions`."""
    return RegexSourceScanner().external_functions(source)
