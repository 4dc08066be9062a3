from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import configparser

BACKENDS = ("auto", "ioreg", "psutil")
OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class SourceConfig:
    backend: str = "auto"
    ioreg_path: str = "ioreg"
    service_name: str = "AppleSmartBattery"


@dataclass(frozen=True)
class OutputConfig:
    format: str = "text"
    dump_path: str | None = None


@dataclass(frozen=True)
class AppConfig:
    source: SourceConfig = field(default_factory=SourceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _get_optional(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def _get_choice(value: str, choices: tuple[str, ...], name: str) -> str:
    value = value.strip().lower()
    if value not in choices:
        raise ValueError(f"Invalid {name} {value!r}; expected one of {', '.join(choices)}")
    return value


def load_config(path: str | Path | None) -> AppConfig:
    if path is None:
        return AppConfig()

    parser = configparser.ConfigParser()
    read_files = parser.read(path)
    if not read_files:
        raise FileNotFoundError(f"Config file not found: {path}")

    # Use parser.get with fallback to handle missing sections
    source = SourceConfig(
        backend=_get_choice(
            parser.get("source", "backend", fallback="auto"), BACKENDS, "backend"
        ),
        ioreg_path=parser.get("source", "ioreg_path", fallback="ioreg"),
        service_name=parser.get("source", "service_name", fallback="AppleSmartBattery"),
    )

    output = OutputConfig(
        format=_get_choice(
            parser.get("output", "format", fallback="text"), OUTPUT_FORMATS, "format"
        ),
        dump_path=_get_optional(parser.get("output", "dump_path", fallback=None)),
    )

    return AppConfig(source=source, output=output)
