"""
Harvest configuration loader and validator.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from nba_salary_harvest.data_collection.export_salaries import SUPPORTED_SUFFIXES


CONFIG_DIR = Path("config/harvest")
DEFAULT_CONFIG_NAME = "default"


class HarvestConfigError(ValueError):
    pass


@dataclass(frozen=True)
class HarvestConfig:
    name: str
    first_start_year: int
    last_start_year: int
    current_start_year: int
    output_paths: Tuple[str, ...]
    timeout_sec: float
    delay_sec: float
    retries: int
    config_hash: str = ""

    @property
    def seasons(self) -> int:
        return self.last_start_year - self.first_start_year + 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "seasons": {
                "first_start_year": self.first_start_year,
                "last_start_year": self.last_start_year,
                "current_start_year": self.current_start_year,
            },
            "request": {
                "timeout_sec": self.timeout_sec,
                "delay_sec": self.delay_sec,
                "retries": self.retries,
            },
            "output": {"paths": list(self.output_paths)},
        }


def _require_keys(obj: Dict[str, Any], keys: set, prefix: str) -> None:
    if not isinstance(obj, dict):
        raise HarvestConfigError(f"{prefix} must be a mapping")
    missing = [k for k in keys if k not in obj]
    extra = [k for k in obj.keys() if k not in keys]
    if missing:
        raise HarvestConfigError(f"{prefix} missing keys: {sorted(missing)}")
    if extra:
        raise HarvestConfigError(f"{prefix} unknown keys: {sorted(extra)}")


def _validate_config(config: Dict[str, Any]) -> None:
    _require_keys(config, {"name", "seasons", "request", "output"}, "root")
    _require_keys(config["seasons"], {"first_start_year", "last_start_year", "current_start_year"}, "seasons")
    _require_keys(config["request"], {"timeout_sec", "delay_sec", "retries"}, "request")
    _require_keys(config["output"], {"paths"}, "output")

    seasons = config["seasons"]
    first, last = int(seasons["first_start_year"]), int(seasons["last_start_year"])
    if first > last:
        raise HarvestConfigError("seasons.first_start_year must not exceed seasons.last_start_year")
    if int(seasons["current_start_year"]) < first:
        raise HarvestConfigError("seasons.current_start_year must not precede seasons.first_start_year")

    request = config["request"]
    if float(request["timeout_sec"]) <= 0:
        raise HarvestConfigError("request.timeout_sec must be positive")
    if float(request["delay_sec"]) < 0:
        raise HarvestConfigError("request.delay_sec must not be negative")
    if int(request["retries"]) < 0:
        raise HarvestConfigError("request.retries must not be negative")

    paths = config["output"]["paths"]
    if not isinstance(paths, list) or not paths:
        raise HarvestConfigError("output.paths must be a non-empty list")
    for p in paths:
        if Path(str(p)).suffix.lower() not in SUPPORTED_SUFFIXES:
            raise HarvestConfigError(f"output.paths entry has unsupported format: {p}")


def _hash_config(config: Dict[str, Any]) -> str:
    content = yaml.safe_dump(config, sort_keys=True).encode("utf-8")
    return hashlib.sha256(content).hexdigest()[:12]


def build_harvest_config(config: Dict[str, Any]) -> HarvestConfig:
    _validate_config(config)
    seasons = config["seasons"]
    request = config["request"]
    return HarvestConfig(
        name=str(config["name"]),
        first_start_year=int(seasons["first_start_year"]),
        last_start_year=int(seasons["last_start_year"]),
        current_start_year=int(seasons["current_start_year"]),
        output_paths=tuple(str(p) for p in config["output"]["paths"]),
        timeout_sec=float(request["timeout_sec"]),
        delay_sec=float(request["delay_sec"]),
        retries=int(request["retries"]),
        config_hash=_hash_config(config),
    )


def apply_overrides(config: HarvestConfig, overrides: Dict[str, Any]) -> HarvestConfig:
    """Return a revalidated copy with CLI-style overrides applied (None values are ignored)."""
    data = config.to_dict()
    for key, value in overrides.items():
        if value is None:
            continue
        if key in data["seasons"]:
            data["seasons"][key] = value
        elif key in data["request"]:
            data["request"][key] = value
        elif key == "output_paths":
            data["output"]["paths"] = list(value)
        else:
            raise HarvestConfigError(f"unknown override: {key}")
    return build_harvest_config(data)


def load_harvest_config_file(path: str) -> HarvestConfig:
    p = Path(path)
    if not p.exists():
        raise HarvestConfigError(f"config not found: {p}")

    with p.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    return build_harvest_config(config)


@lru_cache(maxsize=8)
def load_harvest_config(name: str = DEFAULT_CONFIG_NAME) -> HarvestConfig:
    return load_harvest_config_file(str(CONFIG_DIR / f"{name}.yaml"))
