from __future__ import annotations

import importlib.util
import json
from pathlib import Path
from types import ModuleType

import pytest

_SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "replay_fixes.py"


def _load_script() -> ModuleType:
    spec = importlib.util.spec_from_file_location("replay_fixes", _SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_replay_json_lines(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    trip = tmp_path / "trip.jsonl"
    trip.write_text(
        "\n".join(
            [
                json.dumps({"lat": 0, "lng": 0}),
                json.dumps({"latitude": "0", "longitude": "0.001"}),
                "null",
                json.dumps({"data": {"gpsLatitude": 0.001, "gpsLongitude": 0.001}}),
                json.dumps({"lat": 0.002, "lng": 0.001}),
            ]
        ),
        encoding="utf-8",
    )

    assert _load_script().main([str(trip), "--json"]) == 0

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert [(line["index"], line["label"]) for line in lines] == [(1, "E"), (3, "N"), (4, "N")]


def test_replay_json_array_text_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    trip = tmp_path / "trip.json"
    trip.write_text(json.dumps([{"lat": 0, "lng": 0.001}, {"lat": 0, "lng": 0}]), encoding="utf-8")

    assert _load_script().main([str(trip)]) == 0

    out = capsys.readouterr().out
    assert " W " in out
    assert "270°" in out


def test_replay_validate_rejects_out_of_range(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    trip = tmp_path / "trip.json"
    trip.write_text(json.dumps([{"lat": 0, "lng": 0}, {"lat": 95, "lng": 0}]), encoding="utf-8")

    assert _load_script().main([str(trip), "--validate"]) == 1
    assert "out of range" in capsys.readouterr().err
