"""Tests for typed property access and fallback resolution."""
from __future__ import annotations

from types import MappingProxyType

import pytest

from battery_tap.properties import (
    Candidate,
    ValueKind,
    freeze,
    get_value,
    resolve,
    resolve_candidate,
)


class TestGetValue:
    def test_returns_matching_integer(self):
        assert get_value({"CycleCount": 12}, "CycleCount", ValueKind.INTEGER) == 12

    def test_missing_key_is_absent(self):
        assert get_value({}, "CycleCount", ValueKind.INTEGER) is None

    def test_type_mismatch_is_absent(self):
        assert get_value({"CycleCount": "12"}, "CycleCount", ValueKind.INTEGER) is None

    def test_bool_is_not_an_integer(self):
        assert get_value({"Voltage": True}, "Voltage", ValueKind.INTEGER) is None

    def test_integer_is_not_a_bool(self):
        assert get_value({"IsCharging": 1}, "IsCharging", ValueKind.BOOLEAN) is None

    def test_false_is_a_present_boolean(self):
        assert get_value({"IsCharging": False}, "IsCharging", ValueKind.BOOLEAN) is False

    def test_bytes_kinds(self):
        assert get_value({"Data": b"\x01"}, "Data", ValueKind.BYTES) == b"\x01"
        assert get_value({"Data": bytearray(b"\x01")}, "Data", ValueKind.BYTES) == b"\x01"
        assert get_value({"Data": "01"}, "Data", ValueKind.BYTES) is None

    def test_nested_path(self):
        bag = {"BatteryData": {"LifetimeData": {"MaximumDischargeCurrent": "4820"}}}
        path = ("BatteryData", "LifetimeData", "MaximumDischargeCurrent")
        assert get_value(bag, path, ValueKind.TEXT) == "4820"

    def test_path_through_non_mapping_is_absent(self):
        bag = {"BatteryData": 7}
        path = ("BatteryData", "LifetimeData")
        assert get_value(bag, path, ValueKind.MAPPING) is None

    def test_mapping_kind_accepts_read_only_mapping(self):
        inner = MappingProxyType({"Watts": 60})
        assert get_value({"AdapterDetails": inner}, "AdapterDetails", ValueKind.MAPPING) is inner


class TestResolve:
    CHAIN = (
        Candidate("AppleRawCurrentCapacity", ValueKind.INTEGER, "mAh"),
        Candidate("AbsoluteCapacity", ValueKind.INTEGER, "mAh"),
        Candidate("CurrentCapacity", ValueKind.INTEGER, "units"),
    )

    def test_prefers_first_candidate(self):
        bag = {"AppleRawCurrentCapacity": 2500, "CurrentCapacity": 60}
        assert resolve(bag, self.CHAIN) == 2500

    def test_falls_back_in_order(self):
        bag = {"AbsoluteCapacity": 2400, "CurrentCapacity": 60}
        candidate, value = resolve_candidate(bag, self.CHAIN)
        assert candidate.key == "AbsoluteCapacity"
        assert value == 2400

    def test_skips_mistyped_candidate(self):
        bag = {"AppleRawCurrentCapacity": "2500", "CurrentCapacity": 60}
        candidate, value = resolve_candidate(bag, self.CHAIN)
        assert candidate.unit == "units"
        assert value == 60

    def test_all_absent(self):
        assert resolve({}, self.CHAIN) is None
        assert resolve_candidate({}, self.CHAIN) is None


class TestFreeze:
    def test_nested_structures_become_read_only(self):
        frozen = freeze({"AdapterDetails": {"Watts": 60}, "Cells": [1, 2]})
        assert isinstance(frozen, MappingProxyType)
        assert isinstance(frozen["AdapterDetails"], MappingProxyType)
        assert frozen["Cells"] == (1, 2)
        with pytest.raises(TypeError):
            frozen["Voltage"] = 1
