"""Command-line entry points for inspecting material tables."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import numpy as np
import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .errors import MaterialError
from .materials import MaterialTable, resolve_table
from .models import CoreLossModel, WindingLossModel

app = typer.Typer(add_completion=False, help="Inductor materials CLI")
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(source: str) -> MaterialTable:
    try:
        return resolve_table(source)
    except FileNotFoundError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except (ValidationError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Invalid material table {source}: {exc}") from exc


@app.command()
def show_table(source: str) -> None:
    """Validate a material table (file or built-in name) and list its records."""
    table = _load(source)
    title = f"{table.type} materials"
    if table.description:
        title = f"{title}: {table.description}"
    grid = Table(title=title)
    grid.add_column("id")
    grid.add_column("parameter")
    grid.add_column("value", justify="right")
    grid.add_column("interpolation")
    for record in table.data:
        interp = getattr(record, "interp", None)
        axes = ""
        if interp is not None:
            axes = ", ".join(
                f"{name}[{len(values)}]"
                for name, values in interp.model_dump().items()
                if name not in {"loss_density", "conductivity"}
            )
        for i, (key, value) in enumerate(record.param.scalars().items()):
            grid.add_row(record.id if i == 0 else "", key, f"{value:.6g}", axes if i == 0 else "")
    console.print(grid)


@app.command()
def core_loss(
    source: str,
    material: str = typer.Option(..., help="Material id."),
    frequency: float = typer.Option(..., help="Frequency (Hz)."),
    ac_flux: float = typer.Option(..., help="AC peak flux density (T)."),
    dc_flux: float = typer.Option(0.0, help="DC flux density (T)."),
    temperature: float = typer.Option(25.0, help="Core temperature (degC)."),
    duty_cycle: Optional[float] = typer.Option(None, help="Duty cycle, selects a triangular flux."),
) -> None:
    """Evaluate the core loss density of a single operating point."""
    model = _build(CoreLossModel, _load(source), [material], [1.0])
    point = ([frequency], [ac_flux], [dc_flux], [temperature])
    if duty_cycle is None:
        is_valid, P = model.get_losses_sinusoidal(*point)
        result: Dict[str, Any] = {"waveform": "sinusoidal"}
    else:
        is_valid, P = model.get_losses_triangular(point[0], [duty_cycle], *point[1:])
        _, k, alpha, beta = model.get_steinmetz_parameters(*point)
        result = {"waveform": "triangular", "k": k[0], "alpha": alpha[0], "beta": beta[0]}
    result.update({"loss_density (W/m3)": P[0], "valid": bool(is_valid[0])})
    _render_summary(f"Core loss: {material}", result)


@app.command()
def winding_loss(
    source: str,
    material: str = typer.Option(..., help="Material id."),
    frequency: float = typer.Option(..., help="Frequency (Hz)."),
    current_density: float = typer.Option(..., help="AC peak current density (A/m2)."),
    field: float = typer.Option(0.0, help="AC peak magnetic field (A/m)."),
    dc_current_density: float = typer.Option(0.0, help="DC current density (A/m2)."),
    temperature: float = typer.Option(25.0, help="Winding temperature (degC)."),
    fill_pack: float = typer.Option(1.0, help="Packing fill factor."),
) -> None:
    """Evaluate the winding loss density of a single sinusoidal operating point."""
    model = _build(WindingLossModel, _load(source), [material], [1.0], [fill_pack])
    is_valid, P, P_dc, P_ac_lf, P_ac_hf = model.get_losses(
        np.array([[frequency]]),
        np.array([[current_density]]),
        np.array([[field]]),
        [dc_current_density],
        [temperature],
    )
    result = {
        "loss_density (W/m3)": P[0],
        "dc (W/m3)": P_dc[0],
        "ac_lf (W/m3)": P_ac_lf[0],
        "ac_hf (W/m3)": P_ac_hf[0],
        "valid": bool(is_valid[0]),
    }
    _render_summary(f"Winding loss: {material}", result)


def _build(factory: Any, *args: Any) -> Any:
    try:
        return factory(*args)
    except MaterialError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _render_summary(title: str, result: Dict[str, Any]) -> None:
    table = Table(title=title)
    table.add_column("Field")
    table.add_column("Value")
    for key, value in result.items():
        text = f"{value:.6g}" if isinstance(value, (float, np.floating)) else str(value)
        table.add_row(str(key), text)
    console.print(table)


def app_entry() -> None:  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    app_entry()
