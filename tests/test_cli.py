import json
from pathlib import Path

import pytest

from jsxlint import cli

SAMPLES = Path(__file__).resolve().parent.parent / "samples"


def test_cli_generates_json_report(tmp_path, capsys):
    output_path = tmp_path / "lint.json"

    exit_code = cli.main(
        [
            str(SAMPLES / "unsafe"),
            "--out",
            str(output_path),
        ]
    )

    captured = capsys.readouterr()
    assert "Lint Summary" in captured.out
    assert "help: simplify props or memoize props in the parent component" in captured.out
    assert exit_code == 0  # warnings alone do not fail the run
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["summary"]["warning"] == 3
    assert {entry["rule"] for entry in data["diagnostics"]} == {"react-perf/no-jsx-as-prop"}
    assert [entry["line"] for entry in data["diagnostics"]] == [11, 13, 14]
    assert data["passed"] is True


def test_cli_deny_warnings_fails_unsafe_sample(capsys):
    exit_code = cli.main([str(SAMPLES / "unsafe"), "--deny-warnings"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "ItemList.jsx:11:" in captured.out


def test_cli_passes_on_safe_sample(tmp_path, capsys):
    output_path = tmp_path / "clean.json"

    exit_code = cli.main(
        [
            str(SAMPLES / "safe"),
            "--deny-warnings",
            "--out",
            str(output_path),
        ]
    )

    captured = capsys.readouterr()
    assert "Status    : PASS" in captured.out
    assert exit_code == 0
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["summary"]["warning"] == 0
    assert data["summary"]["files"] == 1
    assert data["passed"] is True


def test_cli_prints_json_when_requested(tmp_path, capsys):
    source = tmp_path / "Item.jsx"
    source.write_text("<Item jsx={<SubItem />} />\n", encoding="utf-8")
    config_path = tmp_path / "lint.yaml"
    config_path.write_text("rules:\n  react-perf/no-jsx-as-prop: error\n", encoding="utf-8")

    exit_code = cli.main([str(source), "--config", str(config_path), "--format", "json"])

    captured = capsys.readouterr()
    assert exit_code == 1
    payload = captured.out.split("JSON Report\n", 1)[1]
    data = json.loads(payload)
    assert data["summary"]["error"] == 1
    assert data["diagnostics"][0]["span"] == {"start": 11, "end": 22}


def test_cli_rejects_bad_config(tmp_path):
    config_path = tmp_path / "lint.yaml"
    config_path.write_text("rules:\n  react/unknown: warn\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path), "--config", str(config_path)])

    assert "Failed to load configuration" in str(excinfo.value)
