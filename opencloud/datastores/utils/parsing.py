"""Wire-format helpers: tolerant JSON, checksums and timestamps."""

from __future__ import annotations

import base64
import hashlib
import json
import re
from datetime import UTC, datetime, timedelta
from typing import Any

# Overflows to float("inf") under json.loads
_INFINITY_LITERAL = "1e500"

# Service timestamps carry up to 7 fractional digits ("...:59.9244932Z")
_ISO_FRACTION = re.compile(r"(\.\d{1,6})\d*")

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def normalize_infinity(text: str) -> str:
    """Rewrite bare ``inf`` tokens outside of string literals as ``1e500``.

    The service may emit infinity as a bare identifier, which strict JSON
    rejects. Occurrences inside quoted strings are left untouched; a quote
    escaped with a backslash does not end a string.
    """
    out: list[str] = []
    inside_string = False
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if inside_string:
            out.append(char)
            if char == "\\" and i + 1 < length:
                out.append(text[i + 1])
                i += 2
                continue
            if char == '"':
                inside_string = False
            i += 1
        elif char == '"':
            inside_string = True
            out.append(char)
            i += 1
        elif text.startswith("inf", i):
            out.append(_INFINITY_LITERAL)
            i += 3
        else:
            out.append(char)
            i += 1
    return "".join(out)


def parse_json(text: str) -> Any:
    """Parse a response body, accepting bare ``inf`` as positive infinity."""
    return json.loads(normalize_infinity(text))


def dump_json(value: Any, *, ascii_only: bool = False) -> str:
    """Serialize a value the way it is sent over the wire (compact).

    Non-finite floats are rejected with ValueError. Bodies keep non-ASCII
    characters as is and are sent UTF-8 encoded; header values need
    ``ascii_only=True``.
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=ascii_only, allow_nan=False)


def checksum(data: bytes) -> str:
    """Base64-encoded MD5 digest, as expected by the ``content-md5`` header."""
    return base64.b64encode(hashlib.md5(data).digest()).decode("ascii")


def iso_to_millis(value: str) -> int:
    """Convert an ISO-8601 timestamp to epoch milliseconds.

    Args:
        value: Timestamp such as ``2022-02-18T22:38:59.9244932Z``

    Returns:
        Milliseconds since the Unix epoch (UTC assumed when no offset is given)
    """
    text = _ISO_FRACTION.sub(lambda m: m.group(1), value.strip(), count=1)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return (dt - _EPOCH) // timedelta(milliseconds=1)


def millis_to_iso(value: int) -> str:
    """Format epoch milliseconds as an ISO-8601 UTC string with ``Z`` suffix."""
    dt = _EPOCH + timedelta(milliseconds=value)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
