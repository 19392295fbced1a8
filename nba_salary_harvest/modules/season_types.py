"""
Types for the season salary harvester.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

import pandas as pd

from nba_salary_harvest.config import HOOPSHYPE_PLAYERS_URL


RECORD_COLUMNS = ["Player", "Salary", "Season"]


class FailureReason(str, Enum):
    FETCH_FAILURE = "fetch_failure"
    NO_TABLE_FOUND = "no_table_found"


@dataclass(frozen=True)
class SeasonIdentifier:
    start_year: int
    is_current: bool = False

    @property
    def end_year(self) -> int:
        return self.start_year + 1

    @property
    def label(self) -> str:
        return f"{self.start_year}-{self.end_year}"

    @property
    def url(self) -> str:
        # The current season only lives at the root listing.
        if self.is_current:
            return HOOPSHYPE_PLAYERS_URL
        return f"{HOOPSHYPE_PLAYERS_URL}{self.start_year}-{self.end_year}/"


@dataclass(frozen=True)
class SalaryRecord:
    player: str
    salary: Optional[float]
    season: str

    def as_row(self) -> dict:
        return {"Player": self.player, "Salary": self.salary, "Season": self.season}


@dataclass
class SeasonSuccess:
    season: SeasonIdentifier
    records: List[SalaryRecord] = field(default_factory=list)

    @property
    def unparsed_salaries(self) -> int:
        return sum(1 for r in self.records if r.salary is None)


@dataclass
class SeasonFailure:
    season: SeasonIdentifier
    reason: FailureReason
    detail: str = ""


SeasonOutcome = Union[SeasonSuccess, SeasonFailure]


@dataclass
class HarvestResult:
    outcomes: List[SeasonOutcome] = field(default_factory=list)

    @property
    def records(self) -> List[SalaryRecord]:
        rows: List[SalaryRecord] = []
        for outcome in self.outcomes:
            if isinstance(outcome, SeasonSuccess):
                rows.extend(outcome.records)
        return rows

    @property
    def succeeded(self) -> List[SeasonIdentifier]:
        return [o.season for o in self.outcomes if isinstance(o, SeasonSuccess)]

    @property
    def failed(self) -> List[SeasonFailure]:
        return [o for o in self.outcomes if isinstance(o, SeasonFailure)]

    @property
    def all_failed(self) -> bool:
        return not self.succeeded

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame([r.as_row() for r in self.records], columns=RECORD_COLUMNS)
        df["Salary"] = pd.to_numeric(df["Salary"], errors="coerce").astype(float)
        return df
