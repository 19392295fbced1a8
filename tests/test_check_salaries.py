import pandas as pd

from nba_salary_harvest.data_collection import check_salaries


def _frame():
    return pd.DataFrame(
        [
            {"Player": "A", "Salary": 30_000_000.0, "Season": "2015-2016"},
            {"Player": "B", "Salary": None, "Season": "2015-2016"},
            {"Player": "C", "Salary": 10_000_000.0, "Season": "2015-2016"},
            {"Player": "D", "Salary": 5_000_000.0, "Season": "2014-2015"},
        ]
    )


def test_summarize_seasons_keeps_first_seen_order():
    summary = check_salaries.summarize_seasons(_frame())

    assert list(summary["Season"]) == ["2015-2016", "2014-2015"]
    first = summary.iloc[0]
    assert first["PLAYERS"] == 3
    assert first["MISSING_SALARY"] == 1
    assert first["TOTAL_SALARY_M"] == 40.0
    assert first["MEDIAN_SALARY_M"] == 20.0
    assert summary.iloc[1]["MISSING_SALARY"] == 0


def test_check_harvest_prints_missing_rows(tmp_path, capsys):
    path = tmp_path / "salaries.csv"
    _frame().to_csv(path, index=False)

    summary = check_salaries.check_harvest(str(path))

    out = capsys.readouterr().out
    assert len(summary) == 2
    assert "Rows with missing salary:" in out
    assert "B" in out.split("Rows with missing salary:")[1]
