"""
Command-line interface for the Go to TypeScript generator.

This module provides the CLI using Click framework for argument parsing
and drives the generation pipeline.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from go_ts_generator import __version__
from go_ts_generator.config import Config, find_config_file, load_config
from go_ts_generator.generator import collect_types, generate_types, parse_source_dirs
from go_ts_generator.logging_config import configure_logging

console = Console()


def _load_config(config_path: Optional[Path]) -> Config:
    if config_path is None:
        config_path = find_config_file(Path.cwd())
    return load_config(config_path)


@click.group()
@click.version_option(version=__version__, prog_name="go-ts-generator")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging.",
)
@click.option(
    "--log-json",
    is_flag=True,
    help="Emit log records as JSON lines on stderr.",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool, log_json: bool) -> None:
    """Go to TypeScript generator - Turn Go type declarations into TypeScript."""
    configure_logging(verbose=verbose, log_json=log_json)

    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = _load_config(config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort()
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("source_dirs")
@click.argument("target_file", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def generate(ctx: click.Context, source_dirs: str, target_file: Path) -> None:
    """Generate TypeScript definitions for SOURCE_DIRS into TARGET_FILE.

    SOURCE_DIRS is a comma-separated list of Go source directories. When two
    directories declare the same type, the one listed first wins.
    """
    config: Config = ctx.obj["config"]
    roots = parse_source_dirs(source_dirs)
    if not roots:
        console.print("[red]Error:[/red] No source directories given")
        raise click.Abort()

    if ctx.obj["verbose"]:
        for root in roots:
            console.print(f"[blue]Source directory:[/blue] {root}", soft_wrap=True)

    try:
        written = generate_types(roots, target_file, config=config)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}", soft_wrap=True)
        raise click.Abort()

    console.print(f"TypeScript type definitions generated: {written}", soft_wrap=True)


@cli.command("list")
@click.argument("source_dirs")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file path. If not specified, prints to stdout.",
)
@click.pass_context
def list_types(
    ctx: click.Context,
    source_dirs: str,
    output_format: str,
    output: Optional[Path],
) -> None:
    """List the Go type declarations collected from SOURCE_DIRS."""
    from go_ts_generator.output.formatters import get_formatter

    config: Config = ctx.obj["config"]

    try:
        registry = collect_types(parse_source_dirs(source_dirs), config)

        formatter = get_formatter(output_format)
        formatted_output = formatter.format(registry)

        if output:
            output.write_text(formatted_output, encoding="utf-8")
            console.print(f"[green]Results written to:[/green] {output}", soft_wrap=True)
        else:
            # Print directly to stdout to preserve ANSI codes from formatter
            sys.stdout.write(formatted_output)
            sys.stdout.flush()
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}", soft_wrap=True)
        raise click.Abort()


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
