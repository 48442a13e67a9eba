"""Command-line interface for Chip CLI."""

import logging
import sys
from pathlib import Path

import click
from rich.logging import RichHandler

from .app import Chip
from .config import load_config, resolve_config_path, save_config
from .theme import get_themed_console
from .ui import ConsoleUi


def setup_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    handler = RichHandler(
        console=get_themed_console(file=sys.stderr),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


@click.group(invoke_without_command=True)
@click.option("--config", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--data-file", "-f", type=click.Path(dir_okay=False), help="Task data file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config, data_file, verbose):
    """Chip - a small task tracker you talk to in short commands."""
    config_path = Path(config) if config else None
    cfg = load_config(config_path)
    if data_file:
        cfg.data_file = data_file

    setup_logging("DEBUG" if verbose else cfg.log_level)

    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg
    ctx.obj['config_path'] = config_path
    ctx.obj['verbose'] = verbose

    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.pass_context
def chat(ctx):
    """Start an interactive session (the default)."""
    cfg = ctx.obj['config']
    console = get_themed_console(no_color=cfg.no_color)
    session = Chip.from_config(cfg)
    session.run(ConsoleUi(console=console, separator_width=cfg.separator_width))


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def ask(ctx, words):
    """Run a single command and print the response.

    Example: chip ask deadline Submit report /by 2024-12-31 1800
    """
    cfg = ctx.obj['config']
    session = Chip.from_config(cfg)
    if session.startup_warning:
        click.echo(f"Warning: {session.startup_warning}", err=True)
    click.echo(session.get_response(" ".join(words)))


@main.command("config")
@click.option("--init", is_flag=True, help="Write the active configuration to the config file")
@click.pass_context
def show_config(ctx, init):
    """Show the active configuration as YAML."""
    cfg = ctx.obj['config']
    if init:
        try:
            path = save_config(cfg, ctx.obj['config_path'])
        except OSError as e:
            raise click.ClickException(f"Failed to save config to {resolve_config_path(ctx.obj['config_path'])}: {e}")
        click.echo(f"Configuration saved to {path}")
    click.echo(cfg.to_yaml(), nl=False)


if __name__ == "__main__":
    main()
