"""Example Hub command-line interface.

Dispatches one of four subcommands:

list            -- Print the catalog grouped by category.
scaffold        -- Create a standalone project for one example.
generate-tests  -- Synthesise a test stub for one example.
docs            -- Render Markdown documentation for every example.

Usage::

    fhevm-hub list
    fhevm-hub scaffold counter ./my-counter
    fhevm-hub generate-tests arithmetic
    fhevm-hub --root ../fhevm-examples docs --no-format

This module is the only place that turns errors into exit codes; every
component below it raises :class:`~example_hub.errors.HubError` instead.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError
from rich.markup import escape
from rich.rule import Rule

from example_hub.catalog import ExampleCatalog, default_catalog
from example_hub.config import HubConfig
from example_hub.errors import ExampleNotFoundError, HubError
from example_hub.reporter import DocGenerator
from example_hub.scaffolder import ExampleScaffolder, TestStubGenerator
from example_hub.utils import (
    console,
    err_console,
    print_error,
    print_hints,
    print_success,
)

USAGE = """
FHEVM Example Hub CLI

Usage:
  fhevm-hub list                                  - List available examples
  fhevm-hub scaffold <name> [output-dir]          - Create a new example project
  fhevm-hub generate-tests <name> [output-dir]    - Generate test file for an example
  fhevm-hub docs                                  - Generate documentation

Options:
  --root PATH      Example hub checkout to read from (default: current directory)
  --config FILE    Load settings from a saved JSON configuration
  --no-format      Skip the prettier pass after generating docs
"""

COMMANDS = ("list", "scaffold", "generate-tests", "docs")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_list(catalog: ExampleCatalog) -> int:
    """Print every example grouped by category."""
    console.print()
    console.print(Rule("[bold]Available FHEVM Examples[/bold]"))
    for category, examples in catalog.by_category().items():
        if not examples:
            continue
        console.print(f"\n[bold cyan]{category.value.upper()}[/bold cyan]\n")
        for example in examples:
            console.print(f"  [bold]{escape(example.name)}[/bold]")
            console.print(f"    └─ {escape(example.description)}")
            console.print(f"    └─ Concepts: {escape(', '.join(example.concepts))}")
    console.print()
    console.print(Rule())
    console.print("\nUsage: fhevm-hub scaffold <example-name>\n", markup=False)
    return 0


def cmd_scaffold(
    catalog: ExampleCatalog, config: HubConfig, name: str, output_dir: str | None
) -> int:
    """Scaffold one example and print next steps."""
    scaffolder = ExampleScaffolder(catalog, config)
    example = catalog.require(name)
    target = Path(output_dir) if output_dir else scaffolder.default_target(name)

    console.print(f'\n[bold]Scaffolding "{escape(example.name)}" example...[/bold]')
    console.print(f"   Target: {escape(str(target.resolve()))}\n")

    result = scaffolder.scaffold(name, output_dir)

    print_success("Scaffolding complete!")
    if result.warnings:
        console.print(f"[yellow]{len(result.warnings)} warning(s) reported above[/yellow]")
    console.print("\nNext steps:")
    console.print(f"  cd {escape(str(target))}", highlight=False)
    console.print("  npm install")
    console.print("  npm run compile")
    console.print("  npm run test\n")
    return 0


def cmd_generate_tests(
    catalog: ExampleCatalog, config: HubConfig, name: str, output_dir: str | None
) -> int:
    """Write a test stub for one example and print next steps."""
    example = catalog.require(name)
    console.print(f'\n[bold]Generating test file for "{escape(example.name)}"...[/bold]')

    path = TestStubGenerator(catalog, config).generate(name, output_dir)

    print_success(f"Test file generated: {path}")
    console.print("\nNext steps:")
    console.print("  1. Review the generated test file")
    console.print("  2. Complete the TODO sections with specific test logic")
    console.print("  3. Run tests with: npm run test\n")
    return 0


def cmd_docs(catalog: ExampleCatalog, config: HubConfig) -> int:
    """Generate documentation for the whole catalog."""
    console.print("\n[bold]Generating documentation...[/bold]\n")
    result = DocGenerator(catalog, config).generate()
    print_success(f"{len(result.documents)} document(s) written to {result.docs_dir}")
    return 0


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


class _InvalidInvocation(Exception):
    """Raised by the parser instead of printing its own error and exiting."""


class _HubArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise _InvalidInvocation(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _HubArgumentParser(
        prog="fhevm-hub",
        description="FHEVM Example Hub -- scaffold example projects and generate docs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=USAGE,
    )
    parser.add_argument("command", nargs="?", help="list | scaffold | generate-tests | docs")
    parser.add_argument("name", nargs="?", help="Example name (scaffold, generate-tests)")
    parser.add_argument("output_dir", nargs="?", help="Optional output directory")
    parser.add_argument("--root", default=None, help="Example hub source root")
    parser.add_argument("--config", default=None, help="Path to a saved HubConfig JSON file")
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Skip the Markdown formatter after docs generation",
    )
    return parser


def _resolve_config(args: argparse.Namespace, config: HubConfig | None) -> HubConfig:
    """Merge the base configuration with command-line overrides."""
    if config is None:
        config = HubConfig.load(Path(args.config)) if args.config else HubConfig.from_env()
    if args.root:
        config = config.model_copy(update={"source_root": Path(args.root)})
    if args.no_format:
        docs = config.docs.model_copy(update={"run_formatter": False})
        config = config.model_copy(update={"docs": docs})
    return config


def _usage_error(command: str) -> int:
    print_error("Please specify an example name")
    err_console.print(f"Usage: fhevm-hub {command} <example-name> [output-dir]", markup=False)
    return 1


def _print_usage() -> int:
    console.print(USAGE, markup=False, highlight=False)
    return 0


def run(
    argv: list[str] | None = None,
    config: HubConfig | None = None,
    catalog: ExampleCatalog | None = None,
) -> int:
    """Run the CLI and return the process exit code.

    Unknown commands, surplus arguments and malformed options print the
    usage text and return 0.

    Args:
        argv: Arguments without the program name.  Defaults to ``sys.argv[1:]``.
        config: Base configuration.  Defaults to ``--config`` or the
            environment.
        catalog: Example catalog.  Defaults to the built-in examples.
    """
    try:
        args, extra = _build_parser().parse_known_args(argv)
    except _InvalidInvocation:
        return _print_usage()
    if extra or args.command not in COMMANDS:
        return _print_usage()

    if catalog is None:
        catalog = default_catalog()

    # list only reads the catalog, so a broken configuration cannot fail it.
    if args.command == "list":
        return cmd_list(catalog)

    try:
        config = _resolve_config(args, config)
    except (OSError, ValidationError) as exc:
        print_error(f"Could not load configuration: {exc}")
        return 1

    try:
        if args.command == "scaffold":
            if not args.name:
                return _usage_error("scaffold")
            return cmd_scaffold(catalog, config, args.name, args.output_dir)
        if args.command == "generate-tests":
            if not args.name:
                return _usage_error("generate-tests")
            return cmd_generate_tests(catalog, config, args.name, args.output_dir)
        return cmd_docs(catalog, config)
    except ExampleNotFoundError as exc:
        print_error(exc.message)
        err_console.print("\nAvailable examples:")
        for name in exc.available:
            err_console.print(f"  - {name}", markup=False, highlight=False)
        return 1
    except HubError as exc:
        print_error(exc.message)
        print_hints(exc.hints)
        return 1


def main() -> None:
    """CLI entry point for ``fhevm-hub`` and ``python -m example_hub.cli``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
