from pathlib import Path

import pytest
import yaml

from nba_salary_harvest.models import harvest_config
from nba_salary_harvest.models.harvest_config import (
    HarvestConfigError,
    apply_overrides,
    build_harvest_config,
    load_harvest_config_file,
)


DEFAULT_CONFIG = Path(__file__).parent.parent / "config" / "harvest" / "default.yaml"


def _raw_config():
    return yaml.safe_load(DEFAULT_CONFIG.read_text(encoding="utf-8"))


def test_default_config_covers_eleven_seasons():
    config = load_harvest_config_file(str(DEFAULT_CONFIG))

    assert config.name == "default"
    assert (config.first_start_year, config.last_start_year) == (2014, 2024)
    assert config.current_start_year == 2024
    assert config.seasons == 11
    assert config.output_paths == ("data/raw/nba_salaries.xlsx",)
    assert config.retries == 0
    assert len(config.config_hash) == 12


def test_load_by_name_reads_from_config_dir(monkeypatch, tmp_path):
    target = tmp_path / "small.yaml"
    raw = _raw_config()
    raw["name"] = "small"
    raw["seasons"]["last_start_year"] = 2015
    target.write_text(yaml.safe_dump(raw), encoding="utf-8")

    monkeypatch.setattr(harvest_config, "CONFIG_DIR", tmp_path)
    harvest_config.load_harvest_config.cache_clear()
    try:
        config = harvest_config.load_harvest_config("small")
    finally:
        harvest_config.load_harvest_config.cache_clear()

    assert config.name == "small"
    assert config.seasons == 2


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(HarvestConfigError, match="config not found"):
        load_harvest_config_file(str(tmp_path / "nope.yaml"))


def test_unknown_and_missing_keys_are_rejected():
    raw = _raw_config()
    raw["seasons"]["extra"] = 1
    with pytest.raises(HarvestConfigError, match="unknown keys"):
        build_harvest_config(raw)

    raw = _raw_config()
    del raw["output"]
    with pytest.raises(HarvestConfigError, match="missing keys"):
        build_harvest_config(raw)


@pytest.mark.parametrize(
    "section,key,value,message",
    [
        ("seasons", "first_start_year", 2030, "must not exceed"),
        ("seasons", "current_start_year", 2000, "must not precede"),
        ("request", "timeout_sec", 0, "timeout_sec"),
        ("request", "delay_sec", -1, "delay_sec"),
        ("output", "paths", [], "non-empty"),
        ("output", "paths", ["data/raw/salaries.json"], "unsupported format"),
    ],
)
def test_semantic_validation(section, key, value, message):
    raw = _raw_config()
    raw[section][key] = value
    with pytest.raises(HarvestConfigError, match=message):
        build_harvest_config(raw)


def test_apply_overrides_revalidates_and_ignores_none():
    config = load_harvest_config_file(str(DEFAULT_CONFIG))

    updated = apply_overrides(config, {
        "first_start_year": 2020,
        "last_start_year": None,
        "output_paths": ["out/a.csv", "out/b.xlsx"],
    })
    assert updated.first_start_year == 2020
    assert updated.last_start_year == 2024
    assert updated.output_paths == ("out/a.csv", "out/b.xlsx")

    with pytest.raises(HarvestConfigError):
        apply_overrides(config, {"first_start_year": 2025})
    with pytest.raises(HarvestConfigError, match="unknown override"):
        apply_overrides(config, {"colour": "red"})
