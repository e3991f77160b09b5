"""Decode one ``TIME:V1;V2;...`` record into a timestamp and channel values."""
from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["MAX_TIMESTAMP", "ParsedRecord", "parse_record"]

MAX_TIMESTAMP = 2**64 - 1
_MAX_TIMESTAMP_DIGITS = len(str(MAX_TIMESTAMP))

_TIMESTAMP_RE = re.compile(r"\s*(\d+)", re.ASCII)
_VALUE_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


@dataclass(frozen=True)
class ParsedRecord:
    timestamp: int
    values: tuple[float, ...]

    @property
    def count(self) -> int:
        return len(self.values)


def _to_text(raw: bytes | bytearray | str) -> str:
    if isinstance(raw, (bytes, bytearray)):
        text = bytes(raw).decode("ascii", errors="replace")
    else:
        text = raw
    nul = text.find("\0")
    if nul >= 0:
        text = text[:nul]
    return text


def parse_record(raw: bytes | bytearray | str, max_channels: int) -> ParsedRecord | None:
    """Parse a single record strictly left to right.

    Returns ``None`` when the record is rejected: no integer timestamp, no
    ``:`` right after it, a timestamp that does not fit in 64 bits, or no
    value at all. Values are read until one fails to parse, a separator other
    than ``;`` follows, or ``max_channels`` values have been collected; the
    valid prefix is kept.
    """
    if max_channels <= 0:
        raise ValueError("max_channels must be positive")

    text = _to_text(raw)
    match = _TIMESTAMP_RE.match(text)
    if match is None:
        return None
    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > _MAX_TIMESTAMP_DIGITS:
        return None
    timestamp = int(digits)
    if timestamp > MAX_TIMESTAMP:
        return None
    pos = match.end()
    if pos >= len(text) or text[pos] != ":":
        return None
    pos += 1

    values: list[float] = []
    while len(values) < max_channels:
        match = _VALUE_RE.match(text, pos)
        if match is None:
            break
        values.append(float(match.group(1)))
        pos = match.end()
        if pos < len(text) and text[pos] == ";":
            pos += 1
            continue
        break

    if not values:
        return None
    return ParsedRecord(timestamp, tuple(values))
