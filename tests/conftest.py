"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import pytest


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "macos: mark test as exercising the macOS registry source"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )


@pytest.fixture
def full_bag():
    """Property bag resembling an AppleSmartBattery registry entry."""
    return {
        "AppleRawCurrentCapacity": 2500,
        "AppleRawMaxCapacity": 4000,
        "CurrentCapacity": 62,
        "MaxCapacity": 100,
        "DesignCapacity": 5000,
        "CycleCount": 312,
        "BatteryData": {"LifetimeData": {"MaximumDischargeCurrent": "4820"}},
        "Temperature": 2500,
        "Voltage": 12000,
        "InstantAmperage": -500,
        "Amperage": -480,
        "IsCharging": False,
        "FullyCharged": False,
        "ManufacturerData": bytes([3]) + b"ABC" + bytes([2]) + b"XY",
        "Serial": "F8Y1234ABCD",
        "AdapterDetails": {
            "Watts": 96,
            "Name": "  96W USB-C Power Adapter  ",
            "AdapterVoltage": 20000,
            "Current": 4700,
            "SerialString": "C04123",
            "Manufacturer": "Apple Inc.",
        },
        "ExternalConnected": True,
    }
