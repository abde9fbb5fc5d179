from pathlib import Path

import pytest

from hztimeline.timeline import main


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ["HZT_CATALOG_PATH", "HZT_LOG_FILE", "HZT_DEFAULT_DISTANCE"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HZT_RESULTS_DIR", str(tmp_path / "results"))
    monkeypatch.setenv("HZT_LOG_LEVEL", "WARNING")


def test_list(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "0: 1.0 M☉ (12.3 Gy)" in out
    assert "3: 3.0 M☉ (420 My)" in out


def test_writes_chart(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "chart.png"
    assert main(["--star", "0", "--distance", "1", "--position", "0.5", "--output", str(output)]) == 0
    assert output.exists()
    out = capsys.readouterr().out
    assert "1.0 M☉ at 1 AU, 6 Gy" in out


def test_default_output_goes_to_results_dir(tmp_path: Path) -> None:
    assert main(["--star", "1", "--distance", "2.5"]) == 0
    assert (tmp_path / "results" / "hz_1.5Msun_2.5AU.png").exists()


def test_unknown_star() -> None:
    assert main(["--star", "9"]) == 2


def test_broken_catalog(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HZT_CATALOG_PATH", str(tmp_path / "missing.json"))
    assert main(["--list"]) == 1


def test_non_finite_timespan_is_rejected(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    catalog = tmp_path / "stars.json"
    catalog.write_text(
        '[{"label": "odd", "mass": 1.0, "timespan": NaN, "dataTable": ['
        '{"time": 0, "logRadius": 0.0, "logTemp": 3.76},'
        '{"time": 10, "logRadius": 0.0, "logTemp": 3.76}]}]',
        encoding="utf-8",
    )
    monkeypatch.setenv("HZT_CATALOG_PATH", str(catalog))
    assert main(["--star", "0"]) == 1
