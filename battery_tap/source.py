"""Snapshot providers for the raw battery property bag."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
import logging
import platform
import plistlib
import subprocess
from types import MappingProxyType
from typing import Any
from xml.parsers.expat import ExpatError

import psutil

from battery_tap.config import SourceConfig
from battery_tap.logging_utils import TRACE_LEVEL
from battery_tap.properties import freeze

EMPTY_BAG: Mapping[str, Any] = MappingProxyType({})

_UINT64_SIGN = 1 << 63
_UINT64_RANGE = 1 << 64

logger = logging.getLogger(__name__)


def to_signed(value: Any) -> Any:
    """Undo the unsigned rendering ioreg applies to negative CFNumbers."""
    if isinstance(value, Mapping):
        return {key: to_signed(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_signed(item) for item in value]
    if isinstance(value, int) and not isinstance(value, bool):
        if _UINT64_SIGN <= value < _UINT64_RANGE:
            return value - _UINT64_RANGE
    return value


class IoregSource:
    name = "ioreg"

    def __init__(self, config: SourceConfig) -> None:
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)

    def snapshot(self) -> Mapping[str, Any]:
        output = self._run_command(
            [self.config.ioreg_path, "-r", "-n", self.config.service_name, "-a"]
        )
        if not output:
            self.logger.debug("No registry output for %s.", self.config.service_name)
            return EMPTY_BAG
        try:
            entries = plistlib.loads(output.encode("utf-8"))
        except (plistlib.InvalidFileException, ExpatError, ValueError):
            self.logger.debug("Failed to parse ioreg plist output.")
            return EMPTY_BAG
        if isinstance(entries, list):
            entries = entries[0] if entries else None
        if not isinstance(entries, dict):
            self.logger.debug("Service %s not found in registry.", self.config.service_name)
            return EMPTY_BAG
        bag = freeze(to_signed(entries))
        if self.logger.isEnabledFor(TRACE_LEVEL):
            for key in sorted(bag):
                self.logger.log(TRACE_LEVEL, "%s: %s", key, bag[key])
        return bag

    def _run_command(self, command: list[str]) -> str | None:
        try:
            result = subprocess.run(
                command,
                check=False,
                text=True,
                capture_output=True,
            )
        except FileNotFoundError:
            self.logger.debug("Command not found: %s", command[0])
            return None
        if result.returncode != 0:
            self.logger.debug(
                "Command failed (%s): %s", result.returncode, " ".join(command)
            )
            if result.stderr:
                self.logger.log(TRACE_LEVEL, "stderr: %s", result.stderr.strip())
            return None
        return result.stdout


class PsutilSource:
    """Minimal property bag from psutil for hosts without an IORegistry."""

    name = "psutil"

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    def snapshot(self) -> Mapping[str, Any]:
        if not hasattr(psutil, "sensors_battery"):
            self.logger.debug("Battery sensors not supported on this platform.")
            return EMPTY_BAG
        battery = psutil.sensors_battery()
        if battery is None:
            self.logger.debug("No battery data available from psutil.")
            return EMPTY_BAG
        bag: dict[str, Any] = {"CurrentCapacity": int(round(battery.percent))}
        if battery.power_plugged is not None:
            bag["ExternalConnected"] = bool(battery.power_plugged)
        return freeze(bag)


def select_source(config: SourceConfig) -> IoregSource | PsutilSource:
    backend = config.backend
    if backend == "auto":
        backend = "ioreg" if platform.system().lower() == "darwin" else "psutil"
    logger.debug("Using %s battery source.", backend)
    if backend == "ioreg":
        return IoregSource(config)
    return PsutilSource()


@contextmanager
def registry_snapshot(source: IoregSource | PsutilSource) -> Iterator[Mapping[str, Any]]:
    logger.debug("Acquiring %s snapshot.", source.name)
    try:
        yield source.snapshot()
    finally:
        logger.debug("Released %s snapshot.", source.name)
