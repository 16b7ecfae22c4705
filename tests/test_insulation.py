from __future__ import annotations

import numpy as np
import pytest

from inductor_materials.errors import MaterialClassError, UnknownMaterialError
from inductor_materials.materials import load_builtin_table
from inductor_materials.models import InsulationModel


def test_mass_and_cost(iso_table) -> None:
    model = InsulationModel(iso_table, ["default"], [2e-6])
    assert model.get_mass()[0] == pytest.approx(3e-3, rel=1e-12)
    assert model.get_cost()[0] == pytest.approx(0.315, rel=1e-12)
    assert model.get_temperature_limit()[0] == 130.0


def test_builtin_insulation_broadcast() -> None:
    model = InsulationModel(load_builtin_table("iso"), ["default"] * 5, np.full(5, 2e-6))
    assert model.get_mass() == pytest.approx(np.full(5, 3e-3))
    assert model.get_temperature_limit().shape == (5,)


def test_construction_errors(iso_table, core_table) -> None:
    with pytest.raises(MaterialClassError):
        InsulationModel(core_table, ["N87"], [1e-6])
    with pytest.raises(UnknownMaterialError):
        InsulationModel(iso_table, ["epoxy"], [1e-6])
