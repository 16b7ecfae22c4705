"""Map per-sample material ids onto table rows and broadcast constant properties."""
from __future__ import annotations

from typing import Any, Iterator, Mapping, Sequence

import numpy as np

from ..errors import SampleShapeError, UnknownMaterialError
from .schema import material_key


def readonly(values: np.ndarray) -> np.ndarray:
    values.setflags(write=False)
    return values


class SampleIndexer:
    """Resolves sample ids to rows of a material table (arena + index)."""

    def __init__(self, table_ids: Sequence[Any], sample_ids: Any):
        self.table_ids = [material_key(value) for value in table_ids]
        self._rows = {key: row for row, key in enumerate(self.table_ids)}
        if len(self._rows) != len(self.table_ids):
            raise ValueError("Material table ids must be unique")
        ids = np.asarray(sample_ids)
        if ids.ndim != 1:
            raise SampleShapeError(f"Sample ids must be a 1-D vector, got shape {ids.shape}")
        self.index = readonly(self._map(ids))
        self._groups = [(int(row), readonly(self.index == row)) for row in np.unique(self.index)]

    def _map(self, ids: np.ndarray) -> np.ndarray:
        if ids.size == 0:
            return np.zeros(0, dtype=np.intp)
        if ids.dtype == object:
            # mixed id types only sort once normalized
            ids = np.array([material_key(value) for value in ids], dtype=str)
        unique, inverse = np.unique(ids, return_inverse=True)
        keys = [material_key(value) for value in unique]
        missing = sorted({key for key in keys if key not in self._rows})
        if missing:
            raise UnknownMaterialError(missing, list(self.table_ids))
        rows = np.array([self._rows[key] for key in keys], dtype=np.intp)
        return rows[inverse.reshape(-1)]

    @property
    def n_samples(self) -> int:
        return int(self.index.size)

    @property
    def n_materials(self) -> int:
        return len(self.table_ids)

    def broadcast(self, params: Sequence[Mapping[str, float]]) -> dict[str, np.ndarray]:
        """Gather each scalar property of the table rows into an N-length array."""
        if len(params) != self.n_materials:
            raise ValueError(f"Expected {self.n_materials} parameter sets, got {len(params)}")
        keys: list[str] = []
        for entry in params:
            keys.extend(key for key in entry if key not in keys)
        broadcast: dict[str, np.ndarray] = {}
        for key in keys:
            column = np.array([entry.get(key, np.nan) for entry in params], dtype=float)
            broadcast[key] = readonly(column[self.index])
        return broadcast

    def groups(self) -> Iterator[tuple[int, np.ndarray]]:
        """(row, sample mask) for every table row used by at least one sample, built once."""
        return iter(self._groups)

    def check(self, name: str, values: Any) -> np.ndarray:
        """Return ``values`` as a float vector co-indexed with the samples."""
        arr = np.asarray(values, dtype=float)
        if arr.shape != (self.n_samples,):
            raise SampleShapeError(
                f"'{name}' must have shape ({self.n_samples},), got {arr.shape}"
            )
        return arr
