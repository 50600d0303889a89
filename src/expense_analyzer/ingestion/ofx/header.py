"""Validation of the KEY:VALUE header block that precedes the <OFX> body."""

from __future__ import annotations

import re
from typing import Optional

OFX_MARKER = re.compile(r"<OFX", re.IGNORECASE)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# The one header profile accepted (OFX 1.0.2 SGML, US-ASCII, cp1252).
REQUIRED_HEADER: dict[str, str] = {
    "OFXHEADER": "100",
    "DATA": "OFXSGML",
    "VERSION": "102",
    "SECURITY": "NONE",
    "ENCODING": "USASCII",
    "CHARSET": "1252",
    "COMPRESSION": "NONE",
    "OLDFILEUID": "NONE",
    "NEWFILEUID": "NONE",
}


def split_header(text: str) -> Optional[tuple[str, str]]:
    """Split raw text at the first ``<OFX`` marker.

    Returns:
        ``(header_text, body_text)`` or None when there is no marker.
    """
    match = OFX_MARKER.search(text)
    if match is None:
        return None
    return text[: match.start()], text[match.start():]


def parse_header_fields(header_text: str) -> dict[str, str]:
    """Read ``KEY:VALUE`` lines into an upper-cased key/value mapping.

    Lines without a colon are ignored. A repeated key keeps its last value.
    """
    fields: dict[str, str] = {}
    for line in _LINE_BREAK.split(header_text):
        if ":" not in line:
            continue
        key, _, value = line.partition(":")
        key = key.strip().upper()
        if key:
            fields[key] = value.strip().upper()
    return fields


def header_mismatches(header_text: str) -> list[str]:
    """Describe every required header key that is missing or has the wrong value."""
    fields = parse_header_fields(header_text)
    problems = []
    for key, expected in REQUIRED_HEADER.items():
        actual = fields.get(key)
        if actual is None:
            problems.append(f"{key} missing (expected {expected})")
        elif actual != expected:
            problems.append(f"{key}:{actual} (expected {expected})")
    return problems


def validate_header(header_text: str) -> bool:
    """True when all nine required header keys carry the expected values."""
    return not header_mismatches(header_text)
