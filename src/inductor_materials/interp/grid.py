"""Gridded interpolation that clamps out-of-range queries instead of extrapolating."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

import numpy as np
from scipy.interpolate import RegularGridInterpolator


@dataclass(frozen=True, eq=False)
class Axis:
    """Named grid axis; ``log`` axes are interpolated on log10 of the coordinate."""

    name: str
    values: np.ndarray = field(repr=False)
    log: bool = False

    def __post_init__(self) -> None:
        values = np.array(self.values, dtype=float)
        if values.ndim != 1 or values.size < 2:
            raise ValueError(f"Axis '{self.name}' needs at least two sample points")
        if np.any(np.diff(values) <= 0.0):
            raise ValueError(f"Axis '{self.name}' must be strictly ascending")
        if self.log and values[0] <= 0.0:
            raise ValueError(f"Log axis '{self.name}' must be positive")
        values.setflags(write=False)
        object.__setattr__(self, "values", values)

    @property
    def lower(self) -> float:
        return float(self.values[0])

    @property
    def upper(self) -> float:
        return float(self.values[-1])

    @property
    def grid(self) -> np.ndarray:
        return np.log10(self.values) if self.log else self.values

    def clamp(self, query: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """Return (inside, clamped); NaN queries are reported outside and pinned to the lower bound."""
        inside = (query >= self.lower) & (query <= self.upper)
        clamped = np.clip(query, self.lower, self.upper)
        clamped = np.where(np.isnan(clamped), self.lower, clamped)
        return inside, clamped


class GridInterpolator:
    """Linear interpolation on a rectangular grid with clamp-and-flag bounds."""

    def __init__(self, axes: Sequence[Axis], values: Any, log_values: bool = False):
        self.axes = tuple(axes)
        if not self.axes:
            raise ValueError("At least one axis is required")
        self.log_values = log_values
        table = np.array(values, dtype=float)
        shape = tuple(axis.values.size for axis in self.axes)
        if table.shape != shape:
            raise ValueError(f"Value table has shape {table.shape}, expected {shape}")
        if log_values:
            if np.any(table <= 0.0):
                raise ValueError("Values interpolated in log space must be positive")
            table = np.log10(table)
        table.setflags(write=False)
        self._table = table
        self._grids = [axis.grid for axis in self.axes]
        self._rgi: RegularGridInterpolator | None = None
        if len(self.axes) > 1:
            self._rgi = RegularGridInterpolator(
                self._grids, table, method="linear", bounds_error=False, fill_value=None
            )

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(axis.name for axis in self.axes)

    def out_of_range(self, *coords: Any) -> np.ndarray:
        """Per-sample, per-axis clamp flags with shape (N, K)."""
        queries = self._queries(coords)
        return np.column_stack([~axis.clamp(q)[0] for axis, q in zip(self.axes, queries)])

    def __call__(self, *coords: Any) -> tuple[np.ndarray, np.ndarray]:
        """Evaluate at N query points, returning (is_valid, values)."""
        queries = self._queries(coords)
        n = queries[0].size
        is_valid = np.ones(n, dtype=bool)
        points = []
        for axis, query in zip(self.axes, queries):
            inside, clamped = axis.clamp(query)
            is_valid &= inside
            points.append(np.log10(clamped) if axis.log else clamped)
        if n == 0:
            return is_valid, np.zeros(0, dtype=float)
        if self._rgi is None:
            result = np.interp(points[0], self._grids[0], self._table)
        else:
            result = self._rgi(np.column_stack(points))
        if self.log_values:
            result = 10.0 ** result
        return is_valid, np.asarray(result, dtype=float)

    def _queries(self, coords: Sequence[Any]) -> list[np.ndarray]:
        if len(coords) != len(self.axes):
            raise ValueError(f"Expected {len(self.axes)} coordinates ({', '.join(self.names)}), got {len(coords)}")
        queries = [np.atleast_1d(np.asarray(c, dtype=float)) for c in coords]
        shape = queries[0].shape
        if len(shape) != 1 or any(q.shape != shape for q in queries):
            raise ValueError("Query coordinates must be 1-D vectors of equal length")
        return queries
