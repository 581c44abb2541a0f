"""Command-line entry point for the FHEVM example hub tooling.

Usage::

    fhevm-hub create fhe-counter ./out/fhe-counter
    fhevm-hub docs music-royalty
    fhevm-hub docs --all --docs-dir ./docs/examples
    fhevm-hub list

    python -m fhevm_hub.cli create arithmetic ./out/arithmetic
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from fhevm_hub.config import HubConfig
from fhevm_hub.registry import ExampleRegistry, RegistryError, UnknownExampleError
from fhevm_hub.reporter import DocumentationGenerator
from fhevm_hub.scaffolder import RepositoryGenerator, ScaffoldError
from fhevm_hub.utils import console, print_error, print_example_names


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fhevm-hub",
        description="FHEVM example hub -- scaffold example repositories and generate docs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  fhevm-hub create fhe-counter ./out/fhe-counter\n"
            "  fhevm-hub docs music-royalty\n"
            "  fhevm-hub docs --all\n"
            "  fhevm-hub list\n"
        ),
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Hub checkout that contract/test paths are relative to (default: .)",
    )
    parser.add_argument(
        "--registry",
        default=None,
        help="Registry YAML file (default: the packaged registry)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file with saved hub settings; flags override its values",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Scaffold a standalone example repository")
    create.add_argument("example", help="Registry name of the example")
    create.add_argument("output", help="Output directory for the generated project")
    create.add_argument(
        "--force",
        action="store_true",
        help="Write into a non-empty directory that does not hold a generated example",
    )

    docs = sub.add_parser("docs", help="Generate markdown documentation")
    target = docs.add_mutually_exclusive_group(required=True)
    target.add_argument("example", nargs="?", help="Registry name of the example")
    target.add_argument("--all", action="store_true", help="Document every example and write SUMMARY.md")
    docs.add_argument(
        "--docs-dir",
        default=None,
        help="Documentation output directory (default: examples)",
    )

    sub.add_parser("list", help="List available examples")

    return parser


def build_config(args: argparse.Namespace) -> HubConfig:
    """Build the hub configuration from a saved file and CLI flags."""
    config = HubConfig.load(Path(args.config)) if args.config else HubConfig()
    overrides: dict[str, Path] = {}
    if args.root:
        overrides["source_root"] = Path(args.root)
    if args.registry:
        overrides["registry_path"] = Path(args.registry)
    if getattr(args, "docs_dir", None):
        overrides["docs_dir"] = Path(args.docs_dir)
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def load_registry(config: HubConfig) -> ExampleRegistry:
    if config.registry_path is not None:
        return ExampleRegistry.load(config.registry_path)
    return ExampleRegistry.default()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_create(args: argparse.Namespace, registry: ExampleRegistry, config: HubConfig) -> int:
    generator = RepositoryGenerator(registry, config)
    generator.generate(args.example, args.output, force=args.force)
    return 0


def cmd_docs(args: argparse.Namespace, registry: ExampleRegistry, config: HubConfig) -> int:
    generator = DocumentationGenerator(registry, config)
    if args.all:
        generator.generate_all()
    else:
        generator.generate_one(args.example)
    return 0


def cmd_list(args: argparse.Namespace, registry: ExampleRegistry, config: HubConfig) -> int:
    table = Table(title="Available examples", show_header=True, header_style="bold cyan")
    table.add_column("Name", no_wrap=True)
    table.add_column("Title")
    table.add_column("Category", style="dim")
    for entry in registry:
        table.add_row(escape(entry.name), escape(entry.title), escape(entry.category))
    console.print(table)
    return 0


COMMANDS = {
    "create": cmd_create,
    "docs": cmd_docs,
    "list": cmd_list,
}


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``fhevm-hub`` and ``python -m fhevm_hub.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
        registry = load_registry(config)
        code = COMMANDS[args.command](args, registry, config)
    except UnknownExampleError as exc:
        print_error(f'Error: Example "{exc.name}" not found')
        print_example_names(exc.valid_names)
        sys.exit(1)
    except (RegistryError, ScaffoldError, ValidationError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    except OSError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
