#!/usr/bin/env python3

import logging
import os
import sys
from typing import List, Optional, Tuple

import click

from .common import normalize_file_path
from .errors import EditorConfigError
from .glob_pattern import pattern_matches
from .resolver import Resolver
from .version import VERSION


def configure_logging(log_file: str = "edconf.log") -> None:
    """Configure logging to write to the console and, optionally, a file.

    The log level is determined from the configuration file.
    It can be overridden by setting the EDCONF_DEBUG_LEVEL environment variable,
    and EDCONF_DEBUG forces DEBUG.
    Example: EDCONF_DEBUG=1 edconf resolve src/main.c

    The log directory is read from the configuration file's logger.path setting.
    By default, logs are written to $HOME/.edconf; an empty path disables the file.
    """
    from .config import get_logger_path, get_logger_verbosity

    log_level_str = os.environ.get("EDCONF_DEBUG_LEVEL") or get_logger_verbosity()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    # Convert string to logging level, default to WARNING if invalid
    log_level = log_level_map.get(log_level_str.upper(), logging.WARNING)

    if os.environ.get("EDCONF_DEBUG"):
        log_level = logging.DEBUG

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear any existing handlers
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Console output goes to stderr so it never mixes with resolved properties
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_dir = get_logger_path()
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, log_file)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.info(f"Logging configured. Log file: {log_path}")

    logging.info(f"Log level set to: {logging.getLevelName(log_level)}")


def format_properties(properties: List[Tuple[str, str]]) -> str:
    return "\n".join(f"{key}={value}" for key, value in properties)


@click.group()
def cli() -> None:
    """edconf: resolve EditorConfig properties for files."""
    configure_logging()


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path())
@click.option(
    "-f",
    "--config-filename",
    default=None,
    help="Name of the config file to look for (default: .editorconfig)",
)
@click.option(
    "-b",
    "--version",
    "required_version",
    default=VERSION,
    help="Behave like the given EditorConfig core version",
)
@click.option(
    "--stop-dir",
    multiple=True,
    type=click.Path(),
    help="Directory where the search stops even without root=true",
)
def resolve(
    files: Tuple[str, ...],
    config_filename: Optional[str],
    required_version: str,
    stop_dir: Tuple[str, ...],
) -> None:
    """Print the properties that apply to each FILE.

    With more than one FILE, each block of properties is preceded by [FILE].
    """
    from .config import get_config_filename, get_stop_dirs

    resolver = Resolver(
        config_filename=config_filename or get_config_filename(),
        version=required_version,
    )
    stop_dirs = [normalize_file_path(d) for d in (*get_stop_dirs(), *stop_dir)]

    for file_path in files:
        try:
            properties = resolver.resolve(normalize_file_path(file_path), stop_dirs)
        except (EditorConfigError, OSError, UnicodeDecodeError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        if len(files) > 1:
            click.echo(f"[{file_path}]")
        if properties:
            click.echo(format_properties(properties))


@cli.command()
@click.argument("base_dir", type=click.Path())
@click.argument("pattern")
@click.argument("path", type=click.Path())
def match(base_dir: str, pattern: str, path: str) -> None:
    """Check whether PATH matches the section header PATTERN under BASE_DIR.

    Prints true or false; the exit code is 0 on a match and 1 otherwise.
    """
    try:
        matched = pattern_matches(
            normalize_file_path(base_dir), pattern, normalize_file_path(path)
        )
    except EditorConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    click.echo("true" if matched else "false")
    if not matched:
        sys.exit(1)


@cli.command(name="version")
def show_version() -> None:
    """Print the EditorConfig core version."""
    click.echo(f"EditorConfig Python Core Version {VERSION}")
