"""Shared construction for the vectorized per-sample material models."""
from __future__ import annotations

import logging
from typing import Any, ClassVar, Sequence

import numpy as np

from ..errors import MaterialClassError
from ..interp import GridInterpolator
from ..materials.indexer import SampleIndexer, readonly
from ..materials.schema import MaterialTable

logger = logging.getLogger(__name__)


class MaterialModel:
    """Maps every sample onto a material record and broadcasts its constant properties."""

    material_class: ClassVar[str]

    def __init__(self, table: MaterialTable, ids: Any, volume: Any):
        if table.type != self.material_class:
            raise MaterialClassError(self.material_class, table.type)
        self.table = table
        self.indexer = SampleIndexer(table.ids, ids)
        self.params = self.indexer.broadcast([record.param.scalars() for record in table.data])
        self.volume = readonly(self.indexer.check("volume", volume).copy())
        logger.debug(
            "Mapped %d samples onto %d %s material(s)",
            self.n_samples,
            self.indexer.n_materials,
            self.material_class,
        )

    @property
    def n_samples(self) -> int:
        return self.indexer.n_samples

    @property
    def index(self) -> np.ndarray:
        return self.indexer.index

    def get_mass(self) -> np.ndarray:
        return self.volume * self.params["density"]

    def get_cost(self) -> np.ndarray:
        cost_per_volume = self.params["density"] * self.params["cost_per_mass"]
        return self.params["cost_offset"] + self.volume * cost_per_volume

    def get_temperature_limit(self) -> np.ndarray:
        return self.params["temperature_max"]

    def _vector(self, name: str, values: Any) -> np.ndarray:
        return self.indexer.check(name, values)

    def _interpolate(self, surfaces: Sequence[GridInterpolator], *coords: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """Evaluate each material's surface on the samples using that material."""
        is_valid = np.zeros(self.n_samples, dtype=bool)
        values = np.zeros(self.n_samples, dtype=float)
        for row, mask in self.indexer.groups():
            valid_row, values_row = surfaces[row](*(coord[mask] for coord in coords))
            is_valid[mask] = valid_row
            values[mask] = values_row
        return is_valid, values
