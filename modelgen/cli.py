"""
Command-line interface for modelgen.

Subcommands render models, DAOs and converters to stdout, or write them
into a project workspace.
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
    GeneratorConfig,
    GeneratorError,
    convert_struct_source,
    generate_from_sql,
    generate_model,
    get_generator,
    get_target_info,
    is_target_supported,
    list_all_target_info,
    list_supported_targets,
    get_config_manager,
    load_config,
)
from .codegen.languages.rust.dao import RustDaoGenerator
from .codegen.core.generator import generate_code
from .logging_config import configure_logging, get_logger
from .utils import TextLoaderError, load_text
from .workspace import Workspace, find_project_root, require_model_spec

logger = get_logger(__name__)

# Initialize rich console
console = Console()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="modelgen",
        description="Generate Dart and Rust model code from terse field specs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  modelgen model Todo --fields "title:z,done:b,tags:z[]"
  modelgen model Todo --fields "title:z,done:b" --write
  modelgen dao Todo --fields "title:z,done:b" --new-file
  modelgen from-sql schema.sql --append
  modelgen api-convert --stdin < models.rs
  modelgen list-targets
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    # model
    model_parser = subparsers.add_parser(
        "model", help="Generate a model class from a field spec"
    )
    model_parser.add_argument("name", help="Model name, e.g. Todo")
    model_parser.add_argument(
        "--fields", "-f", required=True, metavar="SPEC", help="Field spec, e.g. 'title:z,done:b'"
    )
    model_parser.add_argument(
        "--target", "-t", default="dart", help="Target name or alias (default: dart)"
    )
    model_parser.add_argument("--root", metavar="DIR", help="Project root (default: discovered)")
    model_parser.add_argument(
        "--write",
        action="store_true",
        help="Write the Dart model into the project instead of printing it",
    )
    model_parser.add_argument("--output", "-o", metavar="FILE", help="Output file (default: stdout)")
    model_parser.set_defaults(func=_handle_model)

    # dao
    dao_parser = subparsers.add_parser("dao", help="Generate a Diesel DAO")
    dao_parser.add_argument("name", help="Model name, e.g. Todo")
    dao_parser.add_argument("--fields", "-f", required=True, metavar="SPEC", help="Field spec")
    dao_parser.add_argument(
        "--new-file",
        action="store_true",
        help="Write a DAO module and register it in lib.rs and dao.rs",
    )
    dao_parser.add_argument("--root", metavar="DIR", help="Project root (default: discovered)")
    dao_parser.set_defaults(func=_handle_dao)

    # from-sql
    sql_parser = subparsers.add_parser(
        "from-sql", help="Generate a Rust model from a CREATE TABLE statement"
    )
    _add_input_args(sql_parser, "SQL file to read")
    sql_parser.add_argument(
        "--append", action="store_true", help="Append the model to src/models.rs"
    )
    sql_parser.add_argument("--root", metavar="DIR", help="Project root (default: discovered)")
    sql_parser.set_defaults(func=_handle_from_sql)

    # api-convert
    convert_parser = subparsers.add_parser(
        "api-convert", help="Generate a ToApiType impl from a Rust struct"
    )
    _add_input_args(convert_parser, "Rust source holding one struct")
    convert_parser.set_defaults(func=_handle_api_convert)

    # information
    list_parser = subparsers.add_parser("list-targets", help="List supported targets")
    list_parser.set_defaults(func=_handle_list_targets)

    info_parser = subparsers.add_parser("target-info", help="Show details about a target")
    info_parser.add_argument("target", help="Target name or alias")
    info_parser.set_defaults(func=_handle_target_info)

    return parser


def _add_input_args(parser: argparse.ArgumentParser, file_help: str):
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("file", nargs="?", help=file_help)
    input_group.add_argument("--url", help="URL to fetch input from")
    input_group.add_argument("--stdin", action="store_true", help="Read from standard input")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the ``modelgen`` command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logger.debug("Running command %s", args.command)

    try:
        return args.func(args)
    except (GeneratorError, ConfigError, TextLoaderError, CLIError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except FileNotFoundError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]✗ Unexpected error:[/red] {e}")
        return 1


# Command handlers


def _handle_model(args: argparse.Namespace) -> int:
    if not is_target_supported(args.target):
        _print_unsupported(args.target)
        return 1

    target = get_target_info(args.target)["name"]

    if args.write:
        if target != "dart":
            raise CLIError("--write is only supported for the dart target")
        _load_config("dart", args)
        root = _resolve_root(args, "dart")
        written = Workspace(root, config_file=args.config).write_dart_model(
            args.name, args.fields
        )
        _print_warnings(written.warnings)
        console.print(f"[green]✓[/green] Wrote {written.path}")
        return 0

    config = _load_config(target, args)
    result = generate_model(args.name, args.fields, target, config)
    return _output_result(result, args)


def _handle_dao(args: argparse.Namespace) -> int:
    if args.new_file:
        _load_config("rust-dao", args)
        root = _resolve_root(args, "rust")
        written = Workspace(root, config_file=args.config).write_dao(args.name, args.fields)
        _print_warnings(written.warnings)
        console.print(f"[green]✓[/green] Wrote {written.path}")
        for registry in written.updated_registries:
            console.print(f"[green]✓[/green] Updated {registry}")
        return 0

    spec = require_model_spec(args.name, args.fields)
    generator = RustDaoGenerator(_load_config("rust-dao", args))
    return _output_result(generate_code(generator, spec), args)


def _handle_from_sql(args: argparse.Namespace) -> int:
    _, ddl_text = load_text(args.file, url=args.url, stdin=args.stdin)

    if args.append:
        _load_config("rust", args)
        root = _resolve_root(args, "rust")
        written = Workspace(root, config_file=args.config).append_sql_model(ddl_text)
        _print_warnings(written.warnings)
        console.print(f"[green]✓[/green] Appended model to {written.path}")
        return 0

    config = _load_config("rust", args)
    return _output_result(generate_from_sql(ddl_text, "rust", config), args)


def _handle_api_convert(args: argparse.Namespace) -> int:
    _, source = load_text(args.file, url=args.url, stdin=args.stdin)
    return _output_result(convert_struct_source(source), args)


def _handle_list_targets(args: argparse.Namespace) -> int:
    target_info = list_all_target_info()

    if not target_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(title="📋 Supported Targets", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Target", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for target_name, info in sorted(target_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {target_name}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] modelgen model [dim]Name[/dim] --fields [dim]SPEC[/dim] --target [cyan]TARGET[/cyan]\n"
            "[bold]Info:[/bold] modelgen target-info [cyan]TARGET[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _handle_target_info(args: argparse.Namespace) -> int:
    if not is_target_supported(args.target):
        _print_unsupported(args.target)
        return 1

    info = get_target_info(args.target)

    info_text = f"""[bold]Target:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name']} Generator", border_style="green")
    )

    generator = get_generator(info["name"], _load_config(info["name"], args))

    config_table = Table(
        title="⚙️  Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    config_table.add_row("Indent Size", str(generator.config.indent_size))
    config_table.add_row("Add Comments", str(generator.config.add_comments))
    for key, value in sorted(generator.config.custom.items()):
        config_table.add_row(key, str(value))

    console.print()
    console.print(config_table)
    return 0


# Helpers


def _load_config(target: str, args: argparse.Namespace) -> GeneratorConfig:
    """Load the merged configuration for a target and report what looks wrong in it."""
    config = load_config(target, config_file=args.config)
    _print_warnings(get_config_manager().validate_config(config, target))
    return config


def _resolve_root(args: argparse.Namespace, kind: str) -> Path:
    if args.root:
        return Path(args.root)
    return find_project_root(Path.cwd(), kind)


def _output_result(result: GenerationResult, args: argparse.Namespace) -> int:
    """Print or save a generation result."""
    if not result.success:
        console.print(f"[yellow]⚠️ {result.error_message}[/yellow]")
        return 1

    _print_warnings(result.warnings)

    output = getattr(args, "output", None)
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.code + "\n", encoding="utf-8")
        console.print(f"[green]✓[/green] Generated code saved to {output_path}")
    else:
        syntax_name = result.metadata.get("syntax", "text")
        console.print(Syntax(result.code, syntax_name, theme="monokai", line_numbers=False))

    if args.verbose and result.metadata:
        _print_metadata(result.metadata)

    return 0


def _print_metadata(metadata: dict):
    table = Table(title="📊 Generation Details", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Key", style="bold")
    table.add_column("Value", style="green")
    for key, value in metadata.items():
        table.add_row(key.replace("_", " ").title(), str(value))
    console.print(table)


def _print_warnings(warnings: List[str]):
    for warning in warnings:
        console.print(f"[yellow]⚠️ {warning}[/yellow]")


def _print_unsupported(target: str):
    console.print(f"[red]✗ Unsupported target '{target}'[/red]")
    console.print(f"[dim]Supported targets: {', '.join(list_supported_targets())}[/dim]")
