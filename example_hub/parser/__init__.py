"""Example Hub source scanner.

Scrapes NatSpec annotations and external function names out of example
contract sources for documentation and test-stub generation.

Usage::

    from example_hub.parser import RegexSourceScanner

    scanner = RegexSourceScanner()
    scanner.annotations(source)          # {"notice": ["..."], ...}
    scanner.external_functions(source)   # ["increment", "decrement"]
"""

from example_hub.parser.extractor import (
    RegexSourceScanner,
    SourceScanner,
    extract_annotations,
    extract_external_functions,
)

__all__ = [
    "RegexSourceScanner",
    "SourceScanner",
    "extract_annotations",
    "extract_external_functions",
]
