from __future__ import annotations

from dataclasses import dataclass

CURRENT_CAPACITY = "Current Capacity"
MAX_CAPACITY = "Max Capacity"
DESIGN_CAPACITY = "Design Capacity"
CYCLE_COUNT = "Cycle Count"
MAX_DISCHARGE_CURRENT = "Max Discharge Current"
TEMPERATURE = "Temperature"
VOLTAGE = "Voltage"
AMPERAGE = "Amperage"
POWER = "Power"
CHARGING = "Charging"
FULLY_CHARGED = "Fully Charged"
CHARGE_PERCENT = "Charge %"
BATTERY_HEALTH = "Battery Health"
BATTERY_ID = "Battery ID"
SERIAL_NUMBER = "Serial Number"
ADAPTER_WATTAGE = "Adapter Wattage"
ADAPTER_NAME = "Adapter Name"
ADAPTER_VOLTAGE = "Adapter Voltage"
ADAPTER_CURRENT = "Adapter Current"
ADAPTER_SERIAL = "Adapter Serial"
ADAPTER_MANUFACTURER = "Adapter Manufacturer"
AC_ADAPTER_CONNECTED = "AC Adapter Connected"

LABELS = (
    CURRENT_CAPACITY,
    MAX_CAPACITY,
    DESIGN_CAPACITY,
    CYCLE_COUNT,
    MAX_DISCHARGE_CURRENT,
    TEMPERATURE,
    VOLTAGE,
    AMPERAGE,
    POWER,
    CHARGING,
    FULLY_CHARGED,
    CHARGE_PERCENT,
    BATTERY_HEALTH,
    BATTERY_ID,
    SERIAL_NUMBER,
    ADAPTER_WATTAGE,
    ADAPTER_NAME,
    ADAPTER_VOLTAGE,
    ADAPTER_CURRENT,
    ADAPTER_SERIAL,
    ADAPTER_MANUFACTURER,
    AC_ADAPTER_CONNECTED,
)


@dataclass(frozen=True)
class TelemetryReading:
    label: str
    value: str

    def __str__(self) -> str:
        return f"{self.label}: {self.value}"


TelemetrySequence = tuple[TelemetryReading, ...]
