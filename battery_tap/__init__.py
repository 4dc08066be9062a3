"""Battery Tap battery telemetry reader."""

from battery_tap.assembler import TelemetryAssembler, assemble_readings
from battery_tap.collector import BatteryCollector
from battery_tap.config import AppConfig, load_config
from battery_tap.export import build_payload, format_text
from battery_tap.readings import TelemetryReading
from battery_tap.schema import validate_payload

__all__ = [
    "AppConfig",
    "BatteryCollector",
    "TelemetryAssembler",
    "TelemetryReading",
    "assemble_readings",
    "build_payload",
    "format_text",
    "load_config",
    "validate_payload",
]
