"""
Error handling for i3-snapshot.

Every failure the tool reports maps to an ErrorCode. The CLI is the only
place that turns a SnapshotError into a diagnostic and an exit status.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """
    Error codes for i3-snapshot.

    - 100-199: Capture errors
    - 200-299: Snapshot line errors
    - 300-399: Restore errors
    - 400-499: i3 IPC errors
    """

    # Capture errors (100-199)
    INVALID_TREE_STATE = 100

    # Snapshot line errors (200-299)
    RECORD_PARSE_FAILED = 200

    # Restore errors (300-399)
    MOVE_FAILED = 300

    # i3 IPC errors (400-499)
    IPC_CONNECTION_FAILED = 400


class SnapshotError(Exception):
    """Base exception for i3-snapshot errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize snapshot error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a dictionary for logging."""
        result = {
            "code": self.code.value,
            "message": self.message
        }
        if self.context:
            result["context"] = self.context
        return result


class InvalidTreeStateError(SnapshotError):
    """A window was reached before its output or workspace ancestor."""

    def __init__(self, window_id: int, window_title: str):
        super().__init__(
            ErrorCode.INVALID_TREE_STATE,
            "Invalid tree state, aborting.",
            context={"window_id": window_id, "window_title": window_title}
        )


class RecordParseError(SnapshotError):
    """A snapshot line could not be turned into a Record."""

    def __init__(self, reason: str, line: str, line_number: Optional[int] = None):
        self.reason = reason
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(
            ErrorCode.RECORD_PARSE_FAILED,
            f"Malformed snapshot {where}{reason}",
            context={"line": line, "line_number": line_number}
        )


class MoveFailedError(SnapshotError):
    """i3 refused one of the two move commands for a record."""

    def __init__(self, window_id: int, window_title: str, command: str):
        self.window_id = window_id
        self.window_title = window_title
        self.command = command
        super().__init__(
            ErrorCode.MOVE_FAILED,
            f"Failed to move {window_id} ({window_title})",
            context={"command": command}
        )


class IpcConnectionError(SnapshotError):
    """Could not reach the i3/sway IPC socket."""

    def __init__(self, message: str, socket_path: Optional[str] = None):
        super().__init__(
            ErrorCode.IPC_CONNECTION_FAILED,
            message,
            context={"socket_path": socket_path} if socket_path else None
        )
