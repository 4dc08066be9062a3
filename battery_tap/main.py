from __future__ import annotations

import argparse
from dataclasses import replace
import logging

from battery_tap.collector import BatteryCollector
from battery_tap.config import BACKENDS, load_config
from battery_tap.export import format_json, format_text
from battery_tap.logging_utils import configure_logging, resolve_log_level
from battery_tap.schema import validate_payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Battery telemetry snapshot")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to CFG configuration file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Enable debug logging (-v) or trace logging (-vv)",
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        help="Override the configured battery source",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the readings as a JSON payload",
    )
    parser.add_argument(
        "--dump",
        help="Also write the rendered output to a file",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = resolve_log_level(args.verbose, args.log_level)
    configure_logging(level)
    logger = logging.getLogger("battery_tap")
    config = load_config(args.config)

    source_config = config.source
    if args.backend:
        source_config = replace(source_config, backend=args.backend)
    use_json = args.json or config.output.format == "json"
    dump_path = args.dump or config.output.dump_path

    collector = BatteryCollector(source_config)
    if use_json:
        payload = collector.collect_payload()
        schema_errors = validate_payload(payload)
        if schema_errors:
            logger.warning("Schema validation failed with %s errors.", len(schema_errors))
            logger.debug("Schema errors: %s", schema_errors)
        else:
            logger.debug("Schema validation passed.")
        rendered = format_json(payload, pretty=level <= logging.DEBUG)
    else:
        rendered = format_text(collector.collect())

    if dump_path:
        with open(dump_path, "w", encoding="utf-8") as handle:
            handle.write(rendered)
    if rendered:
        print(rendered)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
