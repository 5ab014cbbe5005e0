"""
i3-snapshot CLI

Main entry point. The mode is picked from stdin:

    i3-snapshot > snapshot.txt      capture the current layout
    i3-snapshot < snapshot.txt      restore a captured layout

Exit codes:
    0 - Success (also --help, --version, and restore with --continue)
    1 - Invalid tree, unknown option, IPC failure, or a failed move
"""

import logging
import sys
from typing import TextIO

import click
from rich.console import Console

from . import __version__
from .codec import format_record
from .config import Mode, SnapshotConfig
from .connection import I3Connection
from .errors import SnapshotError
from .replay import ReplayDriver
from .walker import walk

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag.

    Args:
        debug: Enable DEBUG logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s [%(name)s] %(message)s",
    )


class SnapshotCommand(click.Command):
    """Click command whose usage errors exit with status 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def capture(connection, config: SnapshotConfig) -> int:
    """Write one line per window to stdout as the tree is walked."""
    codec = config.field_codec()
    tree = connection.get_tree()

    count = 0
    for record in walk(tree):
        click.echo(format_record(record, codec))
        count += 1

    logger.info(f"Captured {count} windows")
    return 0


def restore(connection, config: SnapshotConfig, lines: TextIO, console: Console) -> int:
    """Replay snapshot lines from stdin."""
    driver = ReplayDriver(
        connection,
        config.addressing(),
        config.field_codec(),
        fail_fast=config.fail_fast,
        echo=click.echo if config.debug else None,
    )
    result = driver.run(lines)

    if result.failures and not result.aborted:
        console.print(
            f"{len(result.failures)} of {result.processed} records failed to restore",
            style="yellow",
            markup=False,
        )
    return result.exit_status


@click.command(cls=SnapshotCommand, context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "-v", "--version", prog_name="i3-snapshot", message="%(prog)s %(version)s")
@click.option("-c", "--continue", "continue_on_error", is_flag=True,
              help="On a failed move, report it and keep going instead of aborting")
@click.option("-d", "--debug", is_flag=True, help="Print each i3 command before sending it")
@click.option("-r", "--rawstrings", "raw_strings", is_flag=True,
              help="Write names verbatim instead of base64 (spaces in titles become _)")
@click.option("-t", "--title", "by_title", is_flag=True,
              help="Restore by workspace name and window title instead of container id")
@click.option("-o", "--output", "force_output", is_flag=True,
              help="Capture to stdout even if stdin is piped")
@click.option("--socket", "socket_path", type=click.Path(dir_okay=False), default=None,
              help="i3/sway IPC socket (default: I3SOCK, SWAYSOCK or i3 --get-socketpath)")
def cli(continue_on_error: bool, debug: bool, raw_strings: bool, by_title: bool,
        force_output: bool, socket_path):
    """
    Save and restore window containment in i3-wm.

    \b
    Generate a snapshot:  i3-snapshot > snapshot.txt
    Replay a snapshot:    i3-snapshot < snapshot.txt
    """
    setup_logging(debug)
    console = Console(stderr=True)

    config = SnapshotConfig(
        fail_fast=not continue_on_error,
        debug=debug,
        raw_strings=raw_strings,
        address_by_title=by_title,
        force_capture=force_output,
        socket_path=socket_path,
    )

    stdin = click.get_text_stream("stdin")
    mode = config.mode(stdin_is_tty=stdin.isatty())
    logger.debug(f"Running in {mode.value} mode with {config}")

    try:
        connection = I3Connection(config.socket_path)
        if mode is Mode.CAPTURE:
            status = capture(connection, config)
        else:
            status = restore(connection, config, stdin, console)

    except SnapshotError as e:
        logger.debug(f"Fatal: {e.to_dict()}")
        console.print(f"Error: {e.message}", style="red", markup=False)
        sys.exit(1)

    sys.exit(status)


def main():
    cli(prog_name="i3-snapshot")
