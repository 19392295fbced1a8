"""
One-command salary harvest.

Steps:
1. Load harvest config
2. Scrape each season in order
3. Write the combined table to every configured output
"""

from __future__ import annotations

import argparse
from typing import Any, Dict, Optional

import requests

from nba_salary_harvest.data_collection import export_salaries, get_salary_hoopshype
from nba_salary_harvest.models.harvest_config import (
    DEFAULT_CONFIG_NAME,
    HarvestConfig,
    apply_overrides,
    load_harvest_config,
    load_harvest_config_file,
)
from nba_salary_harvest.modules.season_types import SeasonSuccess


class HarvestFailedError(RuntimeError):
    pass


def _log(msg: str) -> None:
    print(f"[harvest] {msg}")


def run_harvest(
    config: HarvestConfig,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """
    Scrape every configured season and export the combined table.

    Returns per-season status and the written artifact paths. Raises
    HarvestFailedError when no season produced a table; nothing is written
    in that case.
    """
    _log("starting harvest")
    _log(
        f"seasons={config.first_start_year}..{config.last_start_year} "
        f"current={config.current_start_year} config={config.name}:{config.config_hash or 'n/a'}"
    )

    result = get_salary_hoopshype.harvest_salaries(
        start_year=config.first_start_year,
        end_year=config.last_start_year,
        current_start_year=config.current_start_year,
        session=session,
        delay_sec=config.delay_sec,
        timeout=config.timeout_sec,
        retries=config.retries,
    )

    status: Dict[str, Any] = {
        "seasons": {
            o.season.label: "ok" if isinstance(o, SeasonSuccess) else o.reason.value
            for o in result.outcomes
        },
        "seasons_ok": len(result.succeeded),
        "seasons_failed": len(result.failed),
        "records": len(result.records),
    }

    if result.all_failed:
        raise HarvestFailedError("every season failed; nothing written")

    status["outputs"] = export_salaries.write_harvest(result.to_frame(), config.output_paths)
    for path in status["outputs"]:
        _log(f"salaries written: {path}")

    _log("harvest finished")
    return status


def main() -> int:
    parser = argparse.ArgumentParser(description="Harvest NBA player salaries across seasons")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_NAME, help="Config name under config/harvest")
    parser.add_argument("--config-file", type=str, default=None, help="Explicit config YAML path")
    parser.add_argument("--start", type=int, default=None, help="Override first season start year")
    parser.add_argument("--end", type=int, default=None, help="Override last season start year")
    parser.add_argument("--current", type=int, default=None, help="Override current season start year")
    parser.add_argument("--delay", type=float, default=None, help="Override delay between seasons (sec)")
    parser.add_argument("--output", type=str, action="append", help="Override output file(s); repeatable")
    args = parser.parse_args()

    try:
        if args.config_file:
            config = load_harvest_config_file(args.config_file)
        else:
            config = load_harvest_config(args.config)

        config = apply_overrides(config, {
            "first_start_year": args.start,
            "last_start_year": args.end,
            "current_start_year": args.current,
            "delay_sec": args.delay,
            "output_paths": args.output,
        })
        run_harvest(config)
        return 0
    except Exception as exc:
        _log(f"ERROR: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
