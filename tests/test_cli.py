import json
from pathlib import Path

import pytest

from coachtree.cli import main
from coachtree.ingest import SAMPLE_CSV


def test_cli_sample_writes_outputs(tmp_path: Path, capsys):
    output = tmp_path / "tree.json"
    positions = tmp_path / "positions.csv"

    main(["--sample", "--output", str(output), "--positions", str(positions), "--coach", "Matt LaFleur"])

    out = capsys.readouterr().out
    assert "Loaded 18 connections between 17 coaches across 4 levels (canvas 1260x800)" in out
    assert "Matt LaFleur:" in out
    assert "  2019 Green Bay Packers - Head Coach (13-3-0)" in out
    assert "  2018 Los Angeles Rams - Offensive Coordinator (13-3-0)" in out
    assert json.loads(output.read_text(encoding="utf-8"))["width"] == 1260
    assert positions.read_text(encoding="utf-8").startswith("name,level,x,y,was_head_coach")


def test_cli_reads_csv_and_settings(tmp_path: Path, capsys):
    rows = tmp_path / "staff.csv"
    rows.write_text(SAMPLE_CSV, encoding="utf-8")
    settings = tmp_path / "layout.json"
    settings.write_text('{"layout": {"min_width": 2000}}', encoding="utf-8")

    main([str(rows), "--settings", str(settings), "--coach", "Nobody"])

    out = capsys.readouterr().out
    assert "(canvas 2000x800)" in out
    assert "No coach named 'Nobody'" in out


def test_cli_saves_settings(tmp_path: Path):
    saved = tmp_path / "saved.json"

    main(["--sample", "--save-settings", str(saved)])

    assert json.loads(saved.read_text(encoding="utf-8"))["layout"]["node_spacing"] == 180


def test_cli_reports_malformed_csv(tmp_path: Path):
    rows = tmp_path / "bad.csv"
    rows.write_text("Season,head_coach\n2021,Andy Reid\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([str(rows)])

    assert "Missing required headers" in str(excinfo.value)


def test_cli_reports_empty_csv(tmp_path: Path):
    rows = tmp_path / "empty.csv"
    rows.write_text("Season,head_coach,coordinator,role,team,wins,losses,ties\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([str(rows)])

    assert "no coaching rows" in str(excinfo.value)


def test_cli_missing_file(tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.csv")])

    assert "Unable to read" in str(excinfo.value)


def test_cli_requires_input():
    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 2


def test_cli_reports_malformed_settings(tmp_path: Path):
    settings = tmp_path / "layout.json"
    settings.write_text('{"layout": {"min_width": null}}', encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--sample", "--settings", str(settings)])

    assert "Invalid settings" in str(excinfo.value)
