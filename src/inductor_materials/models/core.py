"""Core (ferrite) losses from a tabulated loss map, sinusoidal and triangular flux.

The loss map stores the loss density over frequency, AC peak flux density, DC
bias and temperature. Sinusoidal losses are read from the map directly. For a
triangular (PWM) flux, local Steinmetz parameters are extracted from the map
gradient around the operating point and the iGSE is applied in closed form
(K. Venkatachalam, 2002; R. Burkart, 2016).
"""
from __future__ import annotations

from typing import Any

import numpy as np
from scipy.special import gamma

from ..interp import Axis, GridInterpolator
from ..materials.schema import CoreLossMap, MaterialTable
from .base import MaterialModel


def igse_coefficient(k: np.ndarray, alpha: np.ndarray, beta: np.ndarray) -> np.ndarray:
    """Convert the Steinmetz coefficient ``k`` into the iGSE coefficient ``ki``."""
    t1 = (2.0 * np.pi) ** (alpha - 1.0)
    t2 = 2.0 * np.sqrt(np.pi) * gamma(0.5 + alpha / 2.0) / gamma(1.0 + alpha / 2.0)
    t3 = 2.0 ** (beta - alpha)
    return k / (t1 * t2 * t3)


def igse_triangular_loss_density(
    k: np.ndarray,
    alpha: np.ndarray,
    beta: np.ndarray,
    f: np.ndarray,
    duty_cycle: np.ndarray,
    B_ac_peak: np.ndarray,
) -> np.ndarray:
    """iGSE loss density for a triangular flux with rise time ``duty_cycle / f``."""
    ki = igse_coefficient(k, alpha, beta)
    t_1 = duty_cycle / f
    t_2 = (1.0 - duty_cycle) / f
    B_peak_peak = 2.0 * B_ac_peak
    v_1 = (np.abs(B_peak_peak / t_1) ** alpha) * t_1
    v_2 = (np.abs(B_peak_peak / t_2) ** alpha) * t_2
    return f * ki * B_peak_peak ** (beta - alpha) * (v_1 + v_2)


class CoreLossModel(MaterialModel):
    """Vectorized core material model for a chunk of design samples."""

    material_class = "core"

    def __init__(self, table: MaterialTable, ids: Any, volume: Any):
        super().__init__(table, ids, volume)
        self.surfaces = [self._build_surface(record.interp) for record in table.data]

    @staticmethod
    def _build_surface(loss_map: CoreLossMap) -> GridInterpolator:
        axes = [
            Axis("frequency", loss_map.frequency, log=True),
            Axis("ac_flux_peak", loss_map.ac_flux_peak, log=True),
            Axis("dc_bias", loss_map.dc_bias),
            Axis("temperature", loss_map.temperature),
        ]
        return GridInterpolator(axes, loss_map.loss_density, log_values=True)

    def get_flux_density_limit(self) -> np.ndarray:
        return self.params["flux_density_max"]

    def get_loss_density(self, f: Any, B_ac_peak: Any, B_dc: Any, T: Any) -> tuple[np.ndarray, np.ndarray]:
        """Interpolate the scaled loss density; samples clamped on any axis are invalid."""
        f, B_ac_peak, B_dc, T = self._operating_point(f=f, B_ac_peak=B_ac_peak, B_dc=B_dc, T=T)
        is_valid, P = self._interpolate(self.surfaces, f, B_ac_peak, B_dc, T)
        return is_valid, self.params["loss_scale"] * P

    def get_losses_sinusoidal(self, f: Any, B_ac_peak: Any, B_dc: Any, T: Any) -> tuple[np.ndarray, np.ndarray]:
        """Losses (W) for a sinusoidal flux, read from the loss map."""
        f, B_ac_peak, B_dc, T = self._operating_point(f=f, B_ac_peak=B_ac_peak, B_dc=B_dc, T=T)
        is_valid, P = self.get_loss_density(f, B_ac_peak, B_dc, T)
        is_valid = self._check_losses(is_valid, P, B_ac_peak + B_dc)
        return is_valid, self.volume * P

    def get_steinmetz_parameters(
        self, f: Any, B_ac_peak: Any, B_dc: Any, T: Any
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Local Steinmetz parameters ``(is_valid, k, alpha, beta)`` at the operating point.

        The exponents are the log-space gradients of the loss map, computed from
        the losses at ``f*(1+eps)``, ``f/(1+eps)``, ``B*(1+eps)`` and ``B/(1+eps)``.
        ``k`` is then set to reproduce the loss density at the operating point.
        """
        f, B_ac_peak, B_dc, T = self._operating_point(f=f, B_ac_peak=B_ac_peak, B_dc=B_dc, T=T)
        eps = self.params["igse_factor"]
        f_1 = f * (1.0 + eps)
        f_2 = f / (1.0 + eps)
        B_ac_peak_1 = B_ac_peak * (1.0 + eps)
        B_ac_peak_2 = B_ac_peak / (1.0 + eps)

        is_valid, P_ref = self.get_loss_density(f, B_ac_peak, B_dc, T)

        # frequency gradient
        is_valid_f_1, P_f_1 = self.get_loss_density(f_1, B_ac_peak, B_dc, T)
        is_valid_f_2, P_f_2 = self.get_loss_density(f_2, B_ac_peak, B_dc, T)

        # flux density gradient
        is_valid_B_1, P_B_1 = self.get_loss_density(f, B_ac_peak_1, B_dc, T)
        is_valid_B_2, P_B_2 = self.get_loss_density(f, B_ac_peak_2, B_dc, T)

        is_valid = is_valid & is_valid_f_1 & is_valid_f_2 & is_valid_B_1 & is_valid_B_2
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            alpha = np.log(P_f_1 / P_f_2) / np.log(f_1 / f_2)
            beta = np.log(P_B_1 / P_B_2) / np.log(B_ac_peak_1 / B_ac_peak_2)
            k = P_ref / ((f ** alpha) * (B_ac_peak ** beta))
        return is_valid, k, alpha, beta

    def get_losses_triangular(
        self, f: Any, duty_cycle: Any, B_ac_peak: Any, B_dc: Any, T: Any
    ) -> tuple[np.ndarray, np.ndarray]:
        """Losses (W) for a triangular (PWM) flux with the local iGSE."""
        f, B_ac_peak, B_dc, T = self._operating_point(f=f, B_ac_peak=B_ac_peak, B_dc=B_dc, T=T)
        duty_cycle = self._vector("duty_cycle", duty_cycle)
        is_valid, k, alpha, beta = self.get_steinmetz_parameters(f, B_ac_peak, B_dc, T)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            P = igse_triangular_loss_density(k, alpha, beta, f, duty_cycle, B_ac_peak)
        is_valid = is_valid & (duty_cycle > 0.0) & (duty_cycle < 1.0)
        is_valid = self._check_losses(is_valid, P, B_ac_peak + B_dc)
        return is_valid, self.volume * P

    def _operating_point(self, **vectors: Any) -> list[np.ndarray]:
        return [self._vector(name, values) for name, values in vectors.items()]

    def _check_losses(self, is_valid: np.ndarray, P: np.ndarray, B_peak_tot: np.ndarray) -> np.ndarray:
        is_valid = is_valid & (P <= self.params["loss_density_max"])
        is_valid = is_valid & (B_peak_tot <= self.params["flux_density_max"])
        return is_valid
