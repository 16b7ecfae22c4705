"""Synthetic material tables shared by the tests."""
from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from inductor_materials.materials import MaterialTable

FREQUENCY = [1e4, 3e4, 1e5, 3e5, 1e6]
AC_FLUX_PEAK = [0.01, 0.03, 0.1, 0.3]
DC_BIAS = [0.0, 0.1]
TEMPERATURE = [25.0, 100.0]


def power_law_core(
    material_id: str = "N87",
    k: float = 2.0,
    alpha: float = 1.5,
    beta: float = 2.5,
    **param: Any,
) -> dict[str, Any]:
    """Core record whose loss map is k*f**alpha*B**beta, flat in DC bias and temperature."""
    f = np.array(FREQUENCY)
    B = np.array(AC_FLUX_PEAK)
    P = k * f[:, None] ** alpha * B[None, :] ** beta
    loss = np.broadcast_to(P[:, :, None, None], P.shape + (len(DC_BIAS), len(TEMPERATURE)))
    params = {
        "density": 4800.0,
        "cost_per_mass": 10.0,
        "cost_offset": 0.5,
        "temperature_max": 120.0,
        "flux_density_max": 0.35,
        "loss_density_max": 1e9,
        "loss_scale": 1.0,
        "igse_factor": 0.01,
    }
    params.update(param)
    return {
        "id": material_id,
        "param": params,
        "interp": {
            "frequency": list(FREQUENCY),
            "ac_flux_peak": list(AC_FLUX_PEAK),
            "dc_bias": list(DC_BIAS),
            "temperature": list(TEMPERATURE),
            "loss_density": loss.tolist(),
        },
    }


def litz_winding(material_id: str = "71um", sigma: float = 23.5e6, **param: Any) -> dict[str, Any]:
    """Winding record with a temperature-independent conductivity."""
    params = {
        "fill_litz": 0.49,
        "strand_diameter": 71e-6,
        "density_conductor": 8960.0,
        "density_filler": 1500.0,
        "cost_per_mass_conductor": 23.5,
        "cost_per_mass_filler": 5.0,
        "cost_offset": 0.3,
        "temperature_max": 140.0,
        "loss_density_max": 1000e3,
        "current_density_max": 15e6,
        "frequency_max": 1e6,
        "loss_scale_lf": 1.1,
        "loss_scale_hf": 1.1,
    }
    params.update(param)
    return {
        "id": material_id,
        "param": params,
        "interp": {"temperature": [20.0, 150.0], "conductivity": [sigma, sigma]},
    }


def table(material_class: str, *records: dict[str, Any]) -> MaterialTable:
    return MaterialTable.model_validate({"type": material_class, "data": list(records)})


@pytest.fixture
def core_table() -> MaterialTable:
    return table("core", power_law_core())


@pytest.fixture
def winding_table() -> MaterialTable:
    return table("winding", litz_winding())


@pytest.fixture
def iso_table() -> MaterialTable:
    return table(
        "iso",
        {
            "id": "default",
            "param": {"density": 1500.0, "cost_per_mass": 5.0, "cost_offset": 0.3, "temperature_max": 130.0},
        },
    )
