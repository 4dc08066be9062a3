from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
from typing import Any

from battery_tap import readings as labels
from battery_tap.blob import decode_battery_id
from battery_tap.derived import charge_percent, health_percent, power
from battery_tap.logging_utils import TRACE_LEVEL
from battery_tap.properties import Candidate, ValueKind, get_value, resolve, resolve_candidate
from battery_tap.readings import TelemetryReading, TelemetrySequence
from battery_tap.units import (
    format_adapter_current,
    format_adapter_voltage,
    format_adapter_watts,
    format_amperage,
    format_flag,
    format_quantity,
    format_temperature,
    format_voltage,
    strip_whitespace,
)

INT = ValueKind.INTEGER
BOOL = ValueKind.BOOLEAN
TEXT = ValueKind.TEXT

RAW_CURRENT_CAPACITY = "AppleRawCurrentCapacity"
RAW_MAX_CAPACITY = "AppleRawMaxCapacity"
DESIGN_CAPACITY = "DesignCapacity"
MANUFACTURER_DATA = "ManufacturerData"
ADAPTER_DETAILS = "AdapterDetails"

CURRENT_CAPACITY_CHAIN = (
    Candidate(RAW_CURRENT_CAPACITY, INT, "mAh"),
    Candidate("AbsoluteCapacity", INT, "mAh"),
    Candidate("CurrentCapacity", INT, "units"),
)
MAX_CAPACITY_CHAIN = (
    Candidate(RAW_MAX_CAPACITY, INT, "mAh"),
    Candidate("MaxCapacity", INT, "units"),
)
DESIGN_CAPACITY_CHAIN = (Candidate(DESIGN_CAPACITY, INT, "mAh"),)
CYCLE_COUNT_CHAIN = (Candidate("CycleCount", INT),)
MAX_DISCHARGE_CURRENT_CHAIN = (
    Candidate(("BatteryData", "LifetimeData", "MaximumDischargeCurrent"), TEXT, "mA"),
)
TEMPERATURE_CHAIN = (Candidate("Temperature", INT),)
VOLTAGE_CHAIN = (Candidate("Voltage", INT),)
AMPERAGE_CHAIN = (
    Candidate("InstantAmperage", INT),
    Candidate("Amperage", INT),
)

Producer = Callable[[Mapping[str, Any]], "str | None"]


@dataclass(frozen=True)
class MetricRow:
    label: str
    produce: Producer


def _quantity(chain: tuple[Candidate, ...]) -> Producer:
    def produce(bag: Mapping[str, Any]) -> str | None:
        resolved = resolve_candidate(bag, chain)
        if resolved is None:
            return None
        candidate, value = resolved
        return format_quantity(value, candidate.unit)

    return produce


def _converted(chain: tuple[Candidate, ...], convert: Callable[[Any], str]) -> Producer:
    def produce(bag: Mapping[str, Any]) -> str | None:
        value = resolve(bag, chain)
        if value is None:
            return None
        return convert(value)

    return produce


def _flag(key: str) -> Producer:
    return _converted((Candidate(key, BOOL),), format_flag)


def _text(key: str | tuple[str, ...], strip: bool = False) -> Producer:
    def produce(bag: Mapping[str, Any]) -> str | None:
        value = get_value(bag, key, TEXT)
        if value is None:
            return None
        if strip:
            value = strip_whitespace(value)
        return value or None

    return produce


def _adapter(field: str) -> tuple[str, str]:
    return (ADAPTER_DETAILS, field)


def _power(bag: Mapping[str, Any]) -> str | None:
    return power(resolve(bag, VOLTAGE_CHAIN), resolve(bag, AMPERAGE_CHAIN))


def _charge_percent(bag: Mapping[str, Any]) -> str | None:
    return charge_percent(
        get_value(bag, RAW_CURRENT_CAPACITY, INT),
        get_value(bag, RAW_MAX_CAPACITY, INT),
    )


def _battery_health(bag: Mapping[str, Any]) -> str | None:
    return health_percent(
        get_value(bag, RAW_MAX_CAPACITY, INT),
        get_value(bag, DESIGN_CAPACITY, INT),
    )


def _battery_id(bag: Mapping[str, Any]) -> str | None:
    data = get_value(bag, MANUFACTURER_DATA, ValueKind.BYTES)
    if data is None:
        return None
    return decode_battery_id(data)


# Emission order of the output sequence. Temperature is listed twice and is
# emitted twice.
METRIC_TABLE: tuple[MetricRow, ...] = (
    MetricRow(labels.CURRENT_CAPACITY, _quantity(CURRENT_CAPACITY_CHAIN)),
    MetricRow(labels.MAX_CAPACITY, _quantity(MAX_CAPACITY_CHAIN)),
    MetricRow(labels.DESIGN_CAPACITY, _quantity(DESIGN_CAPACITY_CHAIN)),
    MetricRow(labels.CYCLE_COUNT, _quantity(CYCLE_COUNT_CHAIN)),
    MetricRow(labels.MAX_DISCHARGE_CURRENT, _quantity(MAX_DISCHARGE_CURRENT_CHAIN)),
    MetricRow(labels.TEMPERATURE, _converted(TEMPERATURE_CHAIN, format_temperature)),
    MetricRow(labels.VOLTAGE, _converted(VOLTAGE_CHAIN, format_voltage)),
    MetricRow(labels.AMPERAGE, _converted(AMPERAGE_CHAIN, format_amperage)),
    MetricRow(labels.POWER, _power),
    MetricRow(labels.CHARGING, _flag("IsCharging")),
    MetricRow(labels.FULLY_CHARGED, _flag("FullyCharged")),
    MetricRow(labels.CHARGE_PERCENT, _charge_percent),
    MetricRow(labels.BATTERY_HEALTH, _battery_health),
    MetricRow(labels.TEMPERATURE, _converted(TEMPERATURE_CHAIN, format_temperature)),
    MetricRow(labels.BATTERY_ID, _battery_id),
    MetricRow(labels.SERIAL_NUMBER, _text("Serial")),
    MetricRow(
        labels.ADAPTER_WATTAGE,
        _converted((Candidate(_adapter("Watts"), INT),), format_adapter_watts),
    ),
    MetricRow(labels.ADAPTER_NAME, _text(_adapter("Name"), strip=True)),
    MetricRow(
        labels.ADAPTER_VOLTAGE,
        _converted((Candidate(_adapter("AdapterVoltage"), INT),), format_adapter_voltage),
    ),
    MetricRow(
        labels.ADAPTER_CURRENT,
        _converted((Candidate(_adapter("Current"), INT),), format_adapter_current),
    ),
    MetricRow(labels.ADAPTER_SERIAL, _text(_adapter("SerialString"))),
    MetricRow(labels.ADAPTER_MANUFACTURER, _text(_adapter("Manufacturer"))),
    MetricRow(labels.AC_ADAPTER_CONNECTED, _flag("ExternalConnected")),
)


class TelemetryAssembler:
    def __init__(self, table: tuple[MetricRow, ...] = METRIC_TABLE) -> None:
        self.table = table
        self.logger = logging.getLogger(self.__class__.__name__)

    def labels(self) -> tuple[str, ...]:
        return tuple(row.label for row in self.table)

    def assemble(self, bag: Mapping[str, Any]) -> TelemetrySequence:
        """Build the ordered reading sequence for one property snapshot.

        Rows whose inputs are absent or fail their guard are omitted.
        """
        output: list[TelemetryReading] = []
        for row in self.table:
            value = row.produce(bag)
            if value is None:
                self.logger.log(TRACE_LEVEL, "No value for %s.", row.label)
                continue
            output.append(TelemetryReading(row.label, value))
        return tuple(output)


def assemble_readings(bag: Mapping[str, Any]) -> TelemetrySequence:
    return TelemetryAssembler().assemble(bag)
