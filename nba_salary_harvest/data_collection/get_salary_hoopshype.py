"""
NBA player salary collection.
Scrapes HoopsHype season salary tables across a range of seasons.
"""

from __future__ import annotations

import math
import re
import time
from typing import List, Optional

import requests
from bs4 import BeautifulSoup
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from nba_salary_harvest.config import (
    CURRENT_START_YEAR,
    FIRST_START_YEAR,
    LAST_START_YEAR,
    REQUEST_DELAY_SEC,
    REQUEST_RETRIES,
    REQUEST_TIMEOUT_SEC,
)
from nba_salary_harvest.modules.season_types import (
    FailureReason,
    HarvestResult,
    SalaryRecord,
    SeasonFailure,
    SeasonIdentifier,
    SeasonOutcome,
    SeasonSuccess,
)


_DECIMAL_PAT = re.compile(r"[+-]?\d+(\.\d+)?")


def _log(msg: str) -> None:
    print(f"[harvest] {msg}")


def _build_session(retries: int = REQUEST_RETRIES) -> requests.Session:
    session = requests.Session()
    retry = Retry(
        total=retries,
        backoff_factor=0.8,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.headers.update({
        "User-Agent": (
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
            "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        )
    })
    return session


def build_season(start_year: int, current_start_year: int = CURRENT_START_YEAR) -> SeasonIdentifier:
    return SeasonIdentifier(start_year=start_year, is_current=start_year == current_start_year)


def season_url(season: SeasonIdentifier) -> str:
    return season.url


def normalize_salary(text: Optional[str]) -> Optional[float]:
    """Strip "$" and "," and parse the rest; anything unparsable is missing."""
    if text is None:
        return None
    cleaned = str(text).replace("$", "").replace(",", "").strip()
    if not _DECIMAL_PAT.fullmatch(cleaned):
        return None
    value = float(cleaned)
    if not math.isfinite(value):
        return None
    return value


def find_tables(html: str) -> list:
    soup = BeautifulSoup(html, "html.parser")
    return soup.find_all("table")


def extract_salary_rows(table) -> List[dict]:
    """
    Read a salary table positionally: Rank, Player, Salary.

    Header rows (<thead> or <th>-only) are skipped. In every other row <td>
    and <th> cells both count as columns and the first three are
    authoritative. Rank is dropped. Short rows are padded with None.
    """
    rows = []
    for tr in table.find_all("tr"):
        if tr.find_parent("thead") is not None:
            continue
        cells = tr.find_all(["td", "th"], recursive=False)
        if not any(c.name == "td" for c in cells):
            continue
        cells = [c.get_text(" ", strip=True) for c in cells]
        cells += [None] * (3 - len(cells))
        rows.append({"player": cells[1], "salary_text": cells[2]})
    return rows


def fetch_season_page(
    session: requests.Session,
    season: SeasonIdentifier,
    timeout: float = REQUEST_TIMEOUT_SEC,
) -> str:
    """Return the page HTML; raise requests.RequestException on any fetch problem."""
    response = session.get(season.url, timeout=timeout)
    if response.status_code != 200:
        raise requests.HTTPError(f"HTTP {response.status_code} for {season.url}")
    return response.text


def harvest_season(
    session: requests.Session,
    season: SeasonIdentifier,
    timeout: float = REQUEST_TIMEOUT_SEC,
) -> SeasonOutcome:
    try:
        html = fetch_season_page(session, season, timeout=timeout)
    except requests.RequestException as exc:
        return SeasonFailure(season=season, reason=FailureReason.FETCH_FAILURE, detail=str(exc))

    tables = find_tables(html)
    if not tables:
        return SeasonFailure(season=season, reason=FailureReason.NO_TABLE_FOUND)

    # First table in document order; no attempt to pick a better one.
    records = [
        SalaryRecord(
            player=row["player"],
            salary=normalize_salary(row["salary_text"]),
            season=season.label,
        )
        for row in extract_salary_rows(tables[0])
    ]
    return SeasonSuccess(season=season, records=records)


def report_outcome(outcome: SeasonOutcome) -> None:
    label = outcome.season.label
    if isinstance(outcome, SeasonSuccess):
        print(f"Successfully scraped season: {label}")
        if outcome.unparsed_salaries:
            print(f"Unparsed salary values for season: {label} ({outcome.unparsed_salaries} rows)")
    elif outcome.reason is FailureReason.NO_TABLE_FOUND:
        print(f"No table found for season: {label}")
    else:
        print(f"Failed to access page for season: {label}")


def harvest_salaries(
    start_year: int = FIRST_START_YEAR,
    end_year: int = LAST_START_YEAR,
    current_start_year: int = CURRENT_START_YEAR,
    session: Optional[requests.Session] = None,
    delay_sec: float = REQUEST_DELAY_SEC,
    timeout: float = REQUEST_TIMEOUT_SEC,
    retries: int = REQUEST_RETRIES,
) -> HarvestResult:
    """Scrape every season from start_year to end_year (inclusive), one at a time."""
    if session is None:
        session = _build_session(retries=retries)

    result = HarvestResult()
    years = list(range(start_year, end_year + 1))
    for i, year in enumerate(years):
        season = build_season(year, current_start_year)
        outcome = harvest_season(session, season, timeout=timeout)
        report_outcome(outcome)
        result.outcomes.append(outcome)
        if delay_sec and i < len(years) - 1:
            time.sleep(delay_sec)

    _log(f"{len(result.succeeded)}/{len(years)} seasons scraped, {len(result.records)} records")
    return result
