from __future__ import annotations

import json
from pathlib import Path

import pytest

from rigid_inertia.__main__ import main
from rigid_inertia.io.param_tree import load_inertial


EXAMPLES = Path(__file__).resolve().parent.parent / "examples" / "inertials"


def test_single_document(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(EXAMPLES / "box_link.json")]) == 0
    out = capsys.readouterr().out
    assert "mass: 2.0" in out
    assert "principal moments:" in out


def test_compose_and_save(tmp_path: Path) -> None:
    out = tmp_path / "total.json"
    code = main([str(EXAMPLES / "box_link.json"), str(EXAMPLES / "rotor.json"), "--out", str(out)])
    assert code == 0
    element = load_inertial(out)
    assert element.get("mass") == 2.5
    assert element.get("pose").position[0] == pytest.approx(0.5 * 0.3 / 2.5)


def test_offset_and_update(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        [
            str(EXAMPLES / "box_link.json"),
            "--offset",
            "0",
            "0",
            "0.1",
            "0",
            "0",
            "0",
            "--update",
            json.dumps({"mass": 4.0}),
        ]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "mass: 4.0" in out
    assert "[0.0, 0.0, 0.0, 0.0, 0.0, 0.0]" in out


def test_bad_input_returns_error(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"schema_version": 2}), encoding="utf-8")
    assert main([str(bad)]) == 1
    assert main([str(EXAMPLES / "box_link.json"), "--update", "{\"density\": 1}"]) == 1
