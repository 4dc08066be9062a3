from __future__ import annotations

import logging

from battery_tap.logging_utils import TRACE_LEVEL
from battery_tap.units import strip_whitespace

logger = logging.getLogger(__name__)

# Bytes in 1..19 are read as a length prefix; everything else is skipped.
MIN_PREFIX = 1
MAX_PREFIX = 19
SEPARATOR = "-"


def extract_strings(data: bytes) -> list[str]:
    """Scan ``data`` for length-prefixed ASCII chunks.

    The layout of the manufacturer blob is undocumented, so this is a
    heuristic: a byte in 1..19 followed by at least that many bytes is taken
    as a chunk length. Chunks that fail strict ASCII decoding or are blank
    after stripping are dropped but still skipped over.
    """
    data = bytes(data)
    length = len(data)
    strings: list[str] = []
    pos = 0
    while pos < length:
        prefix = data[pos]
        if pos < length - 1 and MIN_PREFIX <= prefix <= MAX_PREFIX:
            if pos + prefix < length:
                chunk = data[pos + 1 : pos + 1 + prefix]
                try:
                    text = chunk.decode("ascii")
                except UnicodeDecodeError:
                    text = ""
                if strip_whitespace(text):
                    strings.append(text)
                pos += prefix + 1
            else:
                pos += 1
        else:
            pos += 1
    return strings


def decode_battery_id(data: bytes) -> str | None:
    """Join the chunks found in the manufacturer blob, or ``None`` if none."""
    if logger.isEnabledFor(TRACE_LEVEL):
        logger.log(TRACE_LEVEL, "Raw manufacturer data hex: %s", bytes(data).hex())
    strings = [text for text in extract_strings(data) if text]
    logger.debug("Extracted strings from manufacturer data: %s", strings)
    if not strings:
        return None
    return SEPARATOR.join(strings)
