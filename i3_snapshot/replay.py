"""
Replay Driver

Reads snapshot lines and puts every window back where it was:

1. Move the recorded workspace to the recorded output
2. Move the window into the recorded workspace

The workspace has to be on the right output before the window moves into
it, otherwise the window follows whichever workspace currently owns that
name.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from .codec import parse_record
from .errors import MoveFailedError, RecordParseError, SnapshotError
from .models import Record

logger = logging.getLogger(__name__)


def quote(value: str) -> str:
    """Quote a command argument for the i3 command parser."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def exact_match(value: str) -> str:
    """Quoted regex matching value exactly (i3 criteria values are PCRE)."""
    return quote(f"^{re.escape(value)}$")


class IdAddressing:
    """
    Address containers by con_id.

    Precise, but ids only live as long as the i3 session that issued them.
    """

    def workspace_criteria(self, record: Record) -> str:
        return f"[con_id={record.workspace_id}]"

    def window_criteria(self, record: Record) -> str:
        return f"[con_id={record.window_id}]"


class TitleAddressing:
    """
    Address workspaces by name and windows by title.

    Survives an i3 restart, but windows sharing a title are ambiguous.
    """

    def workspace_criteria(self, record: Record) -> str:
        return f"[workspace={exact_match(record.workspace_name)}]"

    def window_criteria(self, record: Record) -> str:
        return f"[title={exact_match(record.window_title)}]"


def build_commands(record: Record, addressing) -> List[str]:
    """
    Build the two move commands for a record, in the order they must be sent.

    Args:
        record: Record to restore
        addressing: IdAddressing or TitleAddressing

    Returns:
        [move-workspace-to-output, move-window-to-workspace]
    """
    return [
        f"{addressing.workspace_criteria(record)} move workspace to output {quote(record.output_name)}",
        f"{addressing.window_criteria(record)} move container to workspace {quote(record.workspace_name)}",
    ]


@dataclass
class ReplayResult:
    """Outcome of one restore pass."""
    processed: int = 0
    commands_sent: int = 0
    failures: List[SnapshotError] = field(default_factory=list)
    aborted: bool = False

    @property
    def exit_status(self) -> int:
        return 1 if self.aborted else 0


class ReplayDriver:
    """
    Replays snapshot lines against an i3 connection.

    With fail_fast (the default) the first failing record stops the run.
    Otherwise failures are logged and the remaining records still run.
    """

    def __init__(
        self,
        connection,
        addressing,
        codec,
        fail_fast: bool = True,
        echo: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize replay driver

        Args:
            connection: Object with send_command(text) -> bool
            addressing: IdAddressing or TitleAddressing
            codec: Field codec the snapshot was written with
            fail_fast: Stop at the first failure
            echo: Called with "i3-msg <command>" before each command is sent
        """
        self.connection = connection
        self.addressing = addressing
        self.codec = codec
        self.fail_fast = fail_fast
        self.echo = echo

    def restore_record(self, record: Record, result: ReplayResult) -> None:
        """
        Send both move commands for a record.

        Raises:
            MoveFailedError: i3 rejected a command; the rest are not sent
        """
        for command in build_commands(record, self.addressing):
            if self.echo:
                self.echo(f"i3-msg {command}")

            logger.debug(f"Sending: {command}")
            result.commands_sent += 1
            if not self.connection.send_command(command):
                raise MoveFailedError(record.window_id, record.window_title, command)

    def run(self, lines: Iterable[str]) -> ReplayResult:
        """
        Replay every line until the stream ends (or the first failure in
        fail-fast mode). Blank lines are malformed records.

        Args:
            lines: Snapshot lines, e.g. sys.stdin

        Returns:
            ReplayResult with counts and failures
        """
        result = ReplayResult()

        for line_number, line in enumerate(lines, start=1):
            result.processed += 1
            try:
                record = parse_record(line, self.codec, line_number=line_number)
                self.restore_record(record, result)
            except RecordParseError as e:
                logger.error(e.message)
                result.failures.append(e)
            except MoveFailedError as e:
                logger.error(f"{e.message} at line {line_number}: {e.command}")
                result.failures.append(e)
            else:
                continue

            if self.fail_fast:
                logger.error("Aborting.")
                result.aborted = True
                break

        logger.info(
            f"Replayed {result.processed} records, {result.commands_sent} commands, "
            f"{len(result.failures)} failed"
        )
        return result
