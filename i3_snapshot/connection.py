"""i3 IPC connection used by capture and restore.

Only two calls are needed: GET_TREE for capture and RUN_COMMAND for restore.
Socket discovery (I3SOCK, SWAYSOCK, `i3 --get-socketpath`) is left to i3ipc.
"""

import logging
from pathlib import Path
from typing import Optional

import i3ipc

from .errors import IpcConnectionError

logger = logging.getLogger(__name__)


class I3Connection:
    """Synchronous i3ipc connection with boolean command results.

    Any socket error, at connect time or later (e.g. i3 restarting during a
    restore), surfaces as IpcConnectionError.
    """

    def __init__(self, socket_path: Optional[Path] = None) -> None:
        """Connect to i3 (or sway).

        Args:
            socket_path: IPC socket path (default: discovered by i3ipc)

        Raises:
            IpcConnectionError: If the socket cannot be found or reached
        """
        self.socket_path = str(socket_path) if socket_path else None
        try:
            self.conn = i3ipc.Connection(socket_path=self.socket_path, auto_reconnect=False)
        except Exception as e:
            raise IpcConnectionError(f"Failed to connect to i3 IPC: {e}", socket_path=self.socket_path) from e

        logger.debug(f"Connected to i3 IPC at {self.conn.socket_path}")

    def get_tree(self):
        """Get the root container of the current i3 tree."""
        try:
            return self.conn.get_tree()
        except Exception as e:
            raise IpcConnectionError(f"Failed to get i3 tree: {e}", socket_path=self.socket_path) from e

    def send_command(self, command: str) -> bool:
        """Run an i3 command.

        Args:
            command: Command text, e.g. '[con_id=7] move workspace to output "eDP-1"'

        Returns:
            True if i3 reported success for every part of the command

        Raises:
            IpcConnectionError: If the command could not be delivered
        """
        try:
            replies = self.conn.command(command)
        except Exception as e:
            raise IpcConnectionError(f"Failed to send i3 command: {e}", socket_path=self.socket_path) from e

        if not replies:
            logger.warning(f"No reply for command: {command}")
            return False

        success = True
        for reply in replies:
            if not reply.success:
                logger.debug(f"i3 rejected '{command}': {reply.error}")
                success = False
        return success
