from __future__ import annotations

import logging
from typing import Any

from battery_tap.assembler import TelemetryAssembler
from battery_tap.config import SourceConfig
from battery_tap.export import build_payload
from battery_tap.readings import TelemetrySequence
from battery_tap.source import registry_snapshot, select_source


class BatteryCollector:
    def __init__(self, config: SourceConfig) -> None:
        self.config = config
        self.source = select_source(config)
        self.assembler = TelemetryAssembler()
        self.logger = logging.getLogger(self.__class__.__name__)

    def collect(self) -> TelemetrySequence:
        self.logger.debug("Collecting battery readings.")
        with registry_snapshot(self.source) as bag:
            readings = self.assembler.assemble(bag)
        if not readings:
            self.logger.info("No battery readings available from %s.", self.source.name)
        self.logger.debug("Collected %s battery readings.", len(readings))
        return readings

    def collect_payload(self) -> dict[str, Any]:
        return build_payload(self.collect(), source=self.source.name)
