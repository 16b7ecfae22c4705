from __future__ import annotations

import numpy as np
import pytest
import yaml
from conftest import power_law_core

from inductor_materials import MaterialCatalog


def test_default_catalog_builds_winding_and_insulation() -> None:
    catalog = MaterialCatalog.from_files()
    winding = catalog.winding_model(["71um", "100um"], [1e-6, 2e-6], [0.8, 0.7])
    iso = catalog.insulation_model(["default", "default"], [1e-6, 2e-6])
    assert winding.get_mass().shape == (2,)
    assert iso.get_cost() == pytest.approx([0.3 + 1e-6 * 7500.0, 0.3 + 2e-6 * 7500.0])
    assert set(catalog.metadata) == {"winding", "iso"}
    with pytest.raises(ValueError):
        catalog.core_model(["N87"], [1e-6])


def test_catalog_with_core_file(tmp_path) -> None:
    path = tmp_path / "core.yaml"
    path.write_text(yaml.safe_dump({"type": "core", "data": [power_law_core()]}))
    catalog = MaterialCatalog.from_files(core=path)
    core = catalog.core_model(["N87"] * 3, np.full(3, 1e-6))
    is_valid, P = core.get_losses_sinusoidal(np.full(3, 1e5), np.full(3, 0.1), np.zeros(3), np.full(3, 25.0))
    assert is_valid.all()
    assert P.shape == (3,)
