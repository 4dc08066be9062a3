"""Formatting of raw registry integers into display strings.

All formats are fixed-point and locale independent.
"""
from __future__ import annotations

# Tab through carriage return, NEL, and the Unicode space separators.
# The ASCII information separators 0x1c-0x1f are not whitespace here.
WHITESPACE = (
    "\t\n\x0b\x0c\r\x85"
    " \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def strip_whitespace(text: str) -> str:
    return text.strip(WHITESPACE)


def format_flag(value: bool) -> str:
    return "Yes" if value else "No"


def format_quantity(value: int | str, unit: str) -> str:
    if not unit:
        return f"{value}"
    return f"{value} {unit}"


def format_temperature(centi_celsius: int) -> str:
    celsius = centi_celsius / 100.0
    fahrenheit = celsius * 9 / 5 + 32
    return "%.1f°C / %.1f°F" % (celsius, fahrenheit)


def format_voltage(millivolts: int) -> str:
    return "%.2f V" % (millivolts / 1000.0)


def current_sign(value: int) -> str:
    if value > 0:
        return "+"
    if value < 0:
        return "-"
    return ""


def format_amperage(milliamps: int) -> str:
    return f"{current_sign(milliamps)}{abs(milliamps)} mA"


def format_percent(percent: float) -> str:
    return "%.1f%%" % percent


def format_adapter_watts(watts: int) -> str:
    return f"{watts}W"


def format_adapter_voltage(millivolts: int) -> str:
    return "%.1f V" % (millivolts / 1000.0)


def format_adapter_current(milliamps: int) -> str:
    return "%.2f A" % (milliamps / 1000.0)
