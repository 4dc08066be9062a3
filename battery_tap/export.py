from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
import json
from typing import Any

from battery_tap.readings import TelemetryReading

SCHEMA_NAME = "battery-readings"
SCHEMA_VERSION = 1


def format_text(readings: Iterable[TelemetryReading]) -> str:
    """Render readings as ``label: value`` lines in sequence order."""
    return "\n".join(str(reading) for reading in readings)


def build_payload(
    readings: Iterable[TelemetryReading],
    source: str,
    ts: str | None = None,
) -> dict[str, Any]:
    # Readings stay a list so that order and repeated labels survive.
    return {
        "schema": {"name": SCHEMA_NAME, "version": SCHEMA_VERSION},
        "ts": ts or datetime.now(timezone.utc).isoformat(),
        "source": source,
        "readings": [
            {"label": reading.label, "value": reading.value} for reading in readings
        ],
    }


def format_json(payload: dict[str, Any], pretty: bool = False) -> str:
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return json.dumps(payload, ensure_ascii=False)
