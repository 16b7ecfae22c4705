"""Litz wire winding losses (DC, AC LF and AC HF proximity) for Fourier excitations.

Details of the loss model: M. Leibl, "Three-Phase PFC Rectifier and High-Voltage
Generator", 2017. Harmonic inputs are peak amplitudes given as matrices whose
rows are the harmonics and whose columns are the samples.
"""
from __future__ import annotations

from typing import Any

import numpy as np

from ..constants import MU_0
from ..errors import SampleShapeError
from ..interp import Axis, GridInterpolator
from ..materials.indexer import readonly
from ..materials.schema import ConductivityCurve, MaterialTable
from .base import MaterialModel


def reduce_harmonics(
    f_harmonics: np.ndarray, J_harmonics: np.ndarray, H_harmonics: np.ndarray
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return the proximity-equivalent frequency and the RMS current density and field.

    Samples without any field harmonic get an equivalent frequency of zero.
    """
    J_ac_rms = np.sqrt(np.sum(J_harmonics ** 2, axis=0)) / np.sqrt(2.0)
    H_ac_rms = np.sqrt(np.sum(H_harmonics ** 2, axis=0)) / np.sqrt(2.0)
    prox_factor = np.sqrt(np.sum(f_harmonics ** 2 * H_harmonics ** 2, axis=0)) / np.sqrt(2.0)
    f = np.divide(prox_factor, H_ac_rms, out=np.zeros_like(prox_factor), where=H_ac_rms > 0.0)
    return f, J_ac_rms, H_ac_rms


def skin_depth(sigma: np.ndarray, f: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore"):
        return 1.0 / np.sqrt(np.pi * MU_0 * sigma * f)


class WindingLossModel(MaterialModel):
    """Vectorized litz wire winding model for a chunk of design samples."""

    material_class = "winding"

    def __init__(self, table: MaterialTable, ids: Any, volume: Any, fill_pack: Any):
        super().__init__(table, ids, volume)
        self.fill_pack = readonly(self._vector("fill_pack", fill_pack).copy())
        self.surfaces = [self._build_surface(record.interp) for record in table.data]

    @staticmethod
    def _build_surface(curve: ConductivityCurve) -> GridInterpolator:
        return GridInterpolator([Axis("temperature", curve.temperature)], curve.conductivity)

    @property
    def fill(self) -> np.ndarray:
        """Total conductor fill factor (litz wire times packing)."""
        return self.params["fill_litz"] * self.fill_pack

    def get_mass(self) -> np.ndarray:
        fill = self.fill
        rho = self.params["density_conductor"] * fill + self.params["density_filler"] * (1.0 - fill)
        return self.volume * rho

    def get_cost(self) -> np.ndarray:
        fill = self.fill
        lambda_conductor = self.params["density_conductor"] * self.params["cost_per_mass_conductor"]
        lambda_filler = self.params["density_filler"] * self.params["cost_per_mass_filler"]
        cost_per_volume = lambda_conductor * fill + lambda_filler * (1.0 - fill)
        return self.params["cost_offset"] + self.volume * cost_per_volume

    def get_current_density_limit(self) -> np.ndarray:
        return self.params["current_density_max"]

    def get_conductivity(self, T: Any) -> tuple[np.ndarray, np.ndarray]:
        """Conductivity at the winding temperature; clamped samples are invalid."""
        T = self._vector("T", T)
        return self._interpolate(self.surfaces, T)

    def get_losses(
        self, f_harmonics: Any, J_harmonics: Any, H_harmonics: Any, J_dc: Any, T: Any
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Losses (W) for an arbitrary excitation.

        Returns ``(is_valid, P, P_dc, P_ac_lf, P_ac_hf)``, all scaled by the volume.
        """
        f_harmonics = self._harmonics("f_harmonics", f_harmonics)
        J_harmonics = self._harmonics("J_harmonics", J_harmonics)
        H_harmonics = self._harmonics("H_harmonics", H_harmonics)
        if not f_harmonics.shape == J_harmonics.shape == H_harmonics.shape:
            raise SampleShapeError("Harmonic matrices must share the same shape")
        J_dc = np.abs(self._vector("J_dc", J_dc))

        f, J_ac_rms, H_ac_rms = reduce_harmonics(f_harmonics, J_harmonics, H_harmonics)
        is_valid_interp, sigma = self.get_conductivity(T)

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            delta = skin_depth(sigma, f)
            P_dc = self._lf_loss_density(sigma, J_dc)
            P_ac_lf = self._lf_loss_density(sigma, J_ac_rms)
            P_ac_hf = self._hf_loss_density(sigma, delta, H_ac_rms)
            P = P_dc + P_ac_lf + P_ac_hf

        J_rms_tot = np.hypot(J_ac_rms, J_dc)
        is_valid = is_valid_interp & (self.fill_pack > 0.0) & (self.fill_pack <= 1.0)
        is_valid = is_valid & (P <= self.params["loss_density_max"])
        is_valid = is_valid & (J_rms_tot <= self.params["current_density_max"])
        is_valid = is_valid & (f <= self.params["frequency_max"])

        volume = self.volume
        return is_valid, volume * P, volume * P_dc, volume * P_ac_lf, volume * P_ac_hf

    def _harmonics(self, name: str, values: Any) -> np.ndarray:
        arr = np.atleast_2d(np.asarray(values, dtype=float))
        if arr.ndim != 2 or arr.shape[1] != self.n_samples:
            raise SampleShapeError(
                f"'{name}' must have shape (n_harmonics, {self.n_samples}), got {arr.shape}"
            )
        return arr

    def _lf_loss_density(self, sigma: np.ndarray, J_rms: np.ndarray) -> np.ndarray:
        fact = self.params["loss_scale_lf"] / (self.fill * sigma)
        return fact * J_rms ** 2

    def _hf_loss_density(self, sigma: np.ndarray, delta: np.ndarray, H_rms: np.ndarray) -> np.ndarray:
        # proximity loss factor of a single strand
        d_strand = self.params["strand_diameter"]
        gr = (np.pi ** 2 * d_strand ** 6) / (128.0 * delta ** 4)
        fact = self.params["loss_scale_hf"] * gr * (32.0 * self.fill) / (sigma * np.pi ** 2 * d_strand ** 4)
        return fact * H_rms ** 2
