"""Run configuration for i3-snapshot.

Built once from the command line; everything downstream reads from it.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .codec import Base64FieldCodec, RawFieldCodec
from .replay import IdAddressing, TitleAddressing


class Mode(str, Enum):
    """Which of the two pipelines runs"""
    CAPTURE = "capture"
    RESTORE = "restore"


def resolve_mode(force_capture: bool, stdin_is_tty: bool) -> Mode:
    """Restore when input is piped in, unless capture is forced."""
    if force_capture or stdin_is_tty:
        return Mode.CAPTURE
    return Mode.RESTORE


class SnapshotConfig(BaseModel):
    """Options for one invocation"""
    fail_fast: bool = Field(default=True, description="Abort restore at the first failed move")
    debug: bool = Field(default=False, description="Echo each command before sending it")
    raw_strings: bool = Field(default=False, description="Write fields verbatim instead of base64")
    address_by_title: bool = Field(default=False, description="Match workspaces by name and windows by title")
    force_capture: bool = Field(default=False, description="Capture even when stdin is piped")
    socket_path: Optional[Path] = None

    def field_codec(self):
        return RawFieldCodec() if self.raw_strings else Base64FieldCodec()

    def addressing(self):
        return TitleAddressing() if self.address_by_title else IdAddressing()

    def mode(self, stdin_is_tty: bool) -> Mode:
        return resolve_mode(self.force_capture, stdin_is_tty)
