from __future__ import annotations

import yaml
from conftest import power_law_core
from typer.testing import CliRunner

from inductor_materials.cli import app

runner = CliRunner()


def _core_file(tmp_path):
    path = tmp_path / "core.yaml"
    path.write_text(yaml.safe_dump({"type": "core", "data": [power_law_core()]}))
    return str(path)


def test_show_builtin_table() -> None:
    result = runner.invoke(app, ["show-table", "winding"])
    assert result.exit_code == 0, result.output
    assert "71um" in result.output
    assert "strand_diameter" in result.output


def test_core_loss_sinusoidal(tmp_path) -> None:
    result = runner.invoke(
        app,
        ["core-loss", _core_file(tmp_path), "--material", "N87", "--frequency", "1e5", "--ac-flux", "0.1"],
    )
    assert result.exit_code == 0, result.output
    assert "sinusoidal" in result.output
    assert "True" in result.output


def test_core_loss_triangular(tmp_path) -> None:
    result = runner.invoke(
        app,
        [
            "--verbose",
            "core-loss",
            _core_file(tmp_path),
            "--material",
            "N87",
            "--frequency",
            "1e5",
            "--ac-flux",
            "0.1",
            "--duty-cycle",
            "0.3",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "triangular" in result.output
    assert "alpha" in result.output


def test_winding_loss_builtin() -> None:
    result = runner.invoke(
        app,
        [
            "winding-loss",
            "winding",
            "--material",
            "100um",
            "--frequency",
            "50e3",
            "--current-density",
            "3e6",
            "--field",
            "200",
            "--temperature",
            "80",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "ac_hf" in result.output


def test_unknown_material_is_a_usage_error() -> None:
    result = runner.invoke(
        app, ["winding-loss", "winding", "--material", "30um", "--frequency", "1e3", "--current-density", "1e6"]
    )
    assert result.exit_code != 0


def test_missing_table_is_a_usage_error(tmp_path) -> None:
    result = runner.invoke(app, ["show-table", str(tmp_path / "nope.yaml")])
    assert result.exit_code != 0


def test_malformed_table_is_a_usage_error(tmp_path) -> None:
    record = power_law_core()
    record["interp"]["frequency"] = list(reversed(record["interp"]["frequency"]))
    path = tmp_path / "core.yaml"
    path.write_text(yaml.safe_dump({"type": "core", "data": [record]}))
    result = runner.invoke(app, ["show-table", str(path)])
    assert result.exit_code == 2
    assert "Invalid material table" in result.output
