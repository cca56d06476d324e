"""The text around the compressed notes :

    ChartClip:notes:<version>:<base64 body>

Changing any of these constants makes every existing clipboard payload
unreadable"""

import base64
import re
from typing import Tuple

from chartclip.errors import InvalidEncoding, InvalidPrefix, InvalidVersionField

from .layouts import rules_for

MARKER = "ChartClip:notes"
SEPARATOR = ":"
PREFIX = MARKER + SEPARATOR

VERSION_FIELD = re.compile("([0-9]+)" + re.escape(SEPARATOR))


def wrap(version: int, compressed: bytes) -> str:
    if version < 0:
        raise ValueError(f"version cannot be negative : {version}")

    body = base64.b64encode(compressed).decode("ascii")
    return f"{MARKER}{SEPARATOR}{version}{SEPARATOR}{body}"


def unwrap(text: str) -> Tuple[int, bytes]:
    if not text.startswith(PREFIX):
        raise InvalidPrefix(f"Clipboard data does not start with {PREFIX!r}")

    rest = text[len(PREFIX) :]
    match = VERSION_FIELD.match(rest)
    if match is None:
        raise InvalidVersionField(
            f"Expected a version number followed by {SEPARATOR!r} after {PREFIX!r}"
        )

    try:
        version = int(match.group(1))
    except ValueError:
        # python refuses to convert ridiculously long digit strings
        raise InvalidVersionField("Version number is too long") from None

    # Unknown versions are refused before looking at the body at all
    rules_for(version)

    body = rest[match.end() :]
    try:
        compressed = base64.b64decode(body, validate=True)
    except ValueError as e:
        raise InvalidEncoding(f"Invalid base64 body : {e}") from e

    return version, compressed
