"""Composite metrics computed from several raw properties.

Each function takes already-resolved raw values (``None`` when absent) and
returns the formatted display string, or ``None`` when a required input is
missing or a divisor fails its guard.
"""
from __future__ import annotations

from battery_tap.units import format_percent


def ratio_percent(numerator: int | None, denominator: int | None) -> float | None:
    if numerator is None or denominator is None:
        return None
    if denominator <= 0:
        return None
    return numerator / denominator * 100


def charge_percent(raw_current: int | None, raw_max: int | None) -> str | None:
    percent = ratio_percent(raw_current, raw_max)
    if percent is None:
        return None
    return format_percent(percent)


def health_percent(raw_max: int | None, design_capacity: int | None) -> str | None:
    """Health as raw (uncalibrated) max capacity over design capacity."""
    percent = ratio_percent(raw_max, design_capacity)
    if percent is None:
        return None
    return format_percent(percent)


def power(voltage: int | None, amperage: int | None) -> str | None:
    """Signed power in watts from millivolts and milliamps.

    Voltage is required; a missing amperage counts as zero. Only a positive
    wattage carries a sign, so discharge power shows as a bare magnitude.
    """
    if voltage is None:
        return None
    amperage = amperage or 0
    if amperage == 0:
        return "0.00 W"
    watts = voltage * amperage / 1_000_000
    sign = "+" if watts > 0 else ""
    return "%s%.2f W" % (sign, abs(watts))
