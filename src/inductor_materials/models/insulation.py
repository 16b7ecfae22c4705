"""Insulation material: constant properties only, assumed lossless."""
from __future__ import annotations

from .base import MaterialModel


class InsulationModel(MaterialModel):
    """Mass, cost and temperature limit of the insulation of each sample."""

    material_class = "iso"
