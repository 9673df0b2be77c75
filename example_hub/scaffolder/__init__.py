"""Example Hub scaffolder -- generates standalone example projects.

Quick usage::

    from example_hub.catalog import default_catalog
    from example_hub.config import HubConfig
    from example_hub.scaffolder import ExampleScaffolder

    scaffolder = ExampleScaffolder(default_catalog(), HubConfig(source_root=hub))
    result = scaffolder.scaffold("counter", "/tmp/fhevm-example-counter")
"""

from example_hub.scaffolder.generator import ExampleScaffolder, ScaffoldResult
from example_hub.scaffolder.templates import TemplateRenderer
from example_hub.scaffolder.test_gen import TestStubGenerator

__all__ = [
    "ExampleScaffolder",
    "ScaffoldResult",
    "TemplateRenderer",
    "TestStubGenerator",
]
