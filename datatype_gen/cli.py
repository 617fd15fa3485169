"""
Command-line interface for datatype generation.

Usage:
    datatype-gen generate schema.json --output-dir src/main/java --namespace-dirs
    datatype-gen generate --url https://example.com/schema.json --dry-run
    datatype-gen --list-languages
"""

import argparse
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    ConfigError,
    GenerationResult,
    RegistryError,
    generate_code,
    get_generator,
    list_all_language_info,
    list_supported_languages,
    load_config,
)
from .codegen.registry import get_registry
from .logging_config import get_logger, setup_logging
from .utils import SchemaLoaderError, load_schema

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its ``generate`` subcommand."""
    parser = argparse.ArgumentParser(
        prog="datatype-gen",
        description="Generate immutable datatype source code from a schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  datatype-gen generate schema.json --output-dir src/main/java --namespace-dirs
  datatype-gen generate --url https://example.com/schema.json --dry-run
  datatype-gen --list-languages
        """.strip(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging and show generation metadata",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )

    subparsers = parser.add_subparsers(dest="command")
    generate = subparsers.add_parser(
        "generate",
        help="Generate source units from a schema",
        description="Generate one source unit per definition of a schema",
    )

    input_group = generate.add_mutually_exclusive_group(required=True)
    input_group.add_argument("schema", nargs="?", help="Schema file (JSON)")
    input_group.add_argument("--url", help="URL to fetch the schema from")

    generate.add_argument(
        "--language", "-l", default="java", help="Target language (default: java)"
    )
    generate.add_argument(
        "--output-dir",
        "-o",
        default=".",
        help="Directory receiving the generated units (default: current directory)",
    )
    generate.add_argument("--config", help="Configuration file path (JSON)")
    generate.add_argument("--namespace", help="Override the schema namespace")
    generate.add_argument(
        "--lazy-type", help="Container type for lazy fields (needs a get() method)"
    )
    generate.add_argument("--optional-type", help="Container type for optional fields")
    generate.add_argument(
        "--no-comments", action="store_true", help="Don't emit documentation comments"
    )
    generate.add_argument(
        "--namespace-dirs",
        action="store_true",
        help="Write units under directories derived from the namespace",
    )
    generate.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated units instead of writing them",
    )
    generate.set_defaults(func=_handle_generate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line interface.

    Args:
        argv: Arguments to parse (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")

    if args.list_languages:
        return _list_languages()

    if args.command is None:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("CLI error", exc_info=True)
        return 1


def _handle_generate(args: argparse.Namespace) -> int:
    """Handle the ``generate`` subcommand."""
    if not _validate_language(args.language):
        return 1

    try:
        source, schema = load_schema(file_path=args.schema, url=args.url)
    except (SchemaLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load schema: {e}") from e

    console.print(f"📄 Loaded: {source}")

    try:
        generator = get_generator(args.language, _build_config(args))
    except RegistryError as e:
        raise CLIError(str(e)) from e

    result = generate_code(generator, schema)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    if args.dry_run:
        _print_units(result, generator.language_name)
    else:
        _write_units(result, Path(args.output_dir), args.namespace_dirs)

    if args.verbose and result.metadata:
        _print_metadata(result)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    return 0


def _validate_language(language: str) -> bool:
    """Validate that a language (or alias) is supported."""
    if get_registry().is_supported(language):
        return True

    console.print(f"[red]✗ Unsupported language '{language}'[/red]")
    console.print(
        f"[dim]Supported languages: {', '.join(list_supported_languages())}[/dim]"
    )
    return False


def _build_config(args: argparse.Namespace):
    """Build the generator configuration from a config file and CLI options."""
    config_dict = {}
    custom = {}

    if args.namespace:
        config_dict["namespace"] = args.namespace

    if args.no_comments:
        config_dict["add_comments"] = False

    if args.lazy_type:
        custom["lazy_type"] = args.lazy_type

    if args.optional_type:
        custom["optional_type"] = args.optional_type

    if custom:
        config_dict["custom"] = custom

    try:
        language = get_registry().resolve(args.language)
        return load_config(language, custom_config=config_dict, config_file=args.config)
    except (ConfigError, RegistryError) as e:
        raise CLIError(f"Configuration error: {e}") from e


def _unit_directory(output_dir: Path, namespace: str, namespace_dirs: bool) -> Path:
    if not namespace_dirs:
        return output_dir
    return output_dir.joinpath(*namespace.split("."))


def _write_units(result: GenerationResult, output_dir: Path, namespace_dirs: bool):
    """Write every generated unit to disk."""
    target = _unit_directory(output_dir, result.metadata["namespace"], namespace_dirs)

    try:
        target.mkdir(parents=True, exist_ok=True)
        for unit_name, code in sorted(result.units.items()):
            path = target / unit_name
            path.write_text(code, encoding="utf-8")
            logger.debug("Wrote %s", path)
    except OSError as e:
        raise CLIError(f"Failed to write to {target}: {e}") from e

    console.print(
        f"[green]✓[/green] Generated {len(result.units)} unit(s) in [cyan]{target}[/cyan]"
    )


def _print_units(result: GenerationResult, language: str):
    """Print every generated unit with syntax highlighting."""
    for unit_name, code in sorted(result.units.items()):
        console.print()
        console.rule(f"[green]📄 {unit_name}[/green]")
        console.print(Syntax(code, language, theme="monokai"))


def _print_metadata(result: GenerationResult):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)


def _list_languages() -> int:
    """List supported languages with details."""
    try:
        language_info = list_all_language_info()
    except RegistryError as e:
        console.print(f"[red]✗ Error listing languages:[/red] {e}")
        return 1

    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(lang_name, info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print(
        Panel(
            "[bold]Usage:[/bold] datatype-gen generate [dim]schema.json[/dim] "
            "--language [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0
