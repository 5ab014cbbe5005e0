"""
Line Codec

Snapshot lines hold five whitespace-separated fields:

    <output> <workspace> <workspace id> <window id> <window title>

Text fields go through a field codec first. The default base64 codec makes
every token whitespace-free, so any name or title survives the round trip.
The raw codec writes text as-is and only swaps spaces in titles for
underscores, which is lossy.
"""

import base64
import binascii

from .errors import RecordParseError
from .models import Record

FIELD_COUNT = 5


class Base64FieldCodec:
    """Standard base64 (with padding) over UTF-8 text."""

    raw = False

    def encode_field(self, text: str) -> str:
        return base64.b64encode(text.encode("utf-8", "surrogatepass")).decode("ascii")

    def decode_field(self, token: str) -> str:
        try:
            data = base64.b64decode(token, validate=True)
            return data.decode("utf-8", "surrogatepass")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValueError(f"invalid base64 field {token!r}: {e}") from e

    def encode_title(self, title: str) -> str:
        return self.encode_field(title)


class RawFieldCodec:
    """Verbatim text; spaces in titles become underscores."""

    raw = True

    def encode_field(self, text: str) -> str:
        return text

    def decode_field(self, token: str) -> str:
        return token

    def encode_title(self, title: str) -> str:
        return title.replace(" ", "_")


def format_record(record: Record, codec) -> str:
    """
    Serialize a record to a single snapshot line (no trailing newline).

    Args:
        record: Record to serialize
        codec: Base64FieldCodec or RawFieldCodec

    Returns:
        Line with the five fields in fixed order
    """
    return " ".join([
        codec.encode_field(record.output_name),
        codec.encode_field(record.workspace_name),
        str(record.workspace_id),
        str(record.window_id),
        codec.encode_title(record.window_title),
    ])


def _parse_id(token: str, field_name: str, line: str, line_number):
    # int() would also take "+7", " 7" or "7_000"
    if not token.isascii() or not token.isdigit():
        raise RecordParseError(f"{field_name} is not a non-negative integer: {token!r}", line, line_number)
    return int(token)


def parse_record(line: str, codec, line_number=None) -> Record:
    """
    Parse one snapshot line back into a Record.

    A line with four fields is accepted as a record with an empty title,
    because an empty title encodes to an empty token in both codecs.

    Args:
        line: Snapshot line (trailing newline allowed)
        codec: Codec the snapshot was written with
        line_number: 1-based position in the input, for diagnostics

    Returns:
        Decoded Record

    Raises:
        RecordParseError: Empty line, wrong field count, bad id, or undecodable field
    """
    tokens = line.split()

    if not tokens:
        raise RecordParseError("empty line", line, line_number)
    if len(tokens) == FIELD_COUNT - 1:
        tokens.append("")
    elif len(tokens) != FIELD_COUNT:
        raise RecordParseError(
            f"expected {FIELD_COUNT} fields, got {len(tokens)}", line, line_number
        )

    output_token, workspace_token, workspace_id_token, window_id_token, title_token = tokens

    workspace_id = _parse_id(workspace_id_token, "workspace id", line, line_number)
    window_id = _parse_id(window_id_token, "window id", line, line_number)

    try:
        output_name = codec.decode_field(output_token)
        workspace_name = codec.decode_field(workspace_token)
        window_title = codec.decode_field(title_token)
    except ValueError as e:
        raise RecordParseError(str(e), line, line_number) from e

    if not output_name or not workspace_name:
        raise RecordParseError("empty output or workspace name", line, line_number)

    return Record(
        output_name=output_name,
        workspace_name=workspace_name,
        workspace_id=workspace_id,
        window_id=window_id,
        window_title=window_title,
    )
