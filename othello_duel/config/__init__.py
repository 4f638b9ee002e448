"""Settings loaded from packaged TOML defaults and an optional user file."""

from __future__ import annotations

import logging
import os
import pathlib
import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_HOME = pathlib.Path(os.path.expanduser("~/.othello_duel"))
CONFIG_PATH = CONFIG_HOME / "config.toml"
DEFAULTS_PATH = pathlib.Path(__file__).resolve().parent / "defaults.toml"

SEAT_KINDS = ("human", "cpu")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class SeatSettings:
    black: str = "human"
    white: str = "cpu"


@dataclass(frozen=True)
class DisplaySettings:
    black: str = "●"
    white: str = "○"
    empty: str = "."


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"
    file: str = "othello-duel.log"
    overwrite: bool = True


@dataclass(frozen=True)
class Settings:
    seats: SeatSettings = SeatSettings()
    display: DisplaySettings = DisplaySettings()
    logging: LoggingSettings = LoggingSettings()
    cpu_seed: Optional[int] = None


def _read_toml(path: pathlib.Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def settings_from_dict(cfg: Dict[str, Any]) -> Settings:
    seats_cfg = cfg.get("seats", {}) or {}
    display_cfg = cfg.get("display", {}) or {}
    log_cfg = cfg.get("logging", {}) or {}
    cpu_cfg = cfg.get("cpu", {}) or {}

    seats = SeatSettings(
        black=str(seats_cfg.get("black", "human")).lower(),
        white=str(seats_cfg.get("white", "cpu")).lower(),
    )
    for name in (seats.black, seats.white):
        if name not in SEAT_KINDS:
            raise ConfigError(f"unknown seat kind {name!r}; expected one of {', '.join(SEAT_KINDS)}")

    display = DisplaySettings(
        black=str(display_cfg.get("black", "●")),
        white=str(display_cfg.get("white", "○")),
        empty=str(display_cfg.get("empty", ".")),
    )
    glyphs = (display.black, display.white, display.empty)
    if any(len(g) != 1 for g in glyphs) or len(set(glyphs)) != 3:
        raise ConfigError(f"display glyphs must be three distinct characters, got {glyphs}")

    level = str(log_cfg.get("level", "INFO")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"invalid logging level {level!r}")
    overwrite = log_cfg.get("overwrite", True)
    if not isinstance(overwrite, bool):
        raise ConfigError(f"logging.overwrite must be true or false, got {overwrite!r}")
    log_settings = LoggingSettings(
        level=level,
        file=str(log_cfg.get("file", "othello-duel.log")),
        overwrite=overwrite,
    )

    seed = cpu_cfg.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigError(f"cpu.seed must be an integer, got {seed!r}")

    return Settings(seats=seats, display=display, logging=log_settings, cpu_seed=seed)


def load_settings(path: Optional[pathlib.Path] = None) -> Settings:
    """Load packaged defaults, then overlay `path` or the user config if present.

    An explicit `path` must exist; the user config in CONFIG_HOME is optional.
    """
    cfg = _read_toml(DEFAULTS_PATH)
    if path is not None:
        if not path.exists():
            raise ConfigError(f"config file not found: {path}")
        cfg = _merge(cfg, _read_toml(path))
        logging.getLogger(__name__).info("Loaded config from %s", path)
    elif CONFIG_PATH.exists():
        cfg = _merge(cfg, _read_toml(CONFIG_PATH))
        logging.getLogger(__name__).info("Loaded config from %s", CONFIG_PATH)
    return settings_from_dict(cfg)
