from .base import MaterialModel
from .core import CoreLossModel, igse_coefficient, igse_triangular_loss_density
from .insulation import InsulationModel
from .winding import WindingLossModel, reduce_harmonics, skin_depth

__all__ = [
    "CoreLossModel",
    "InsulationModel",
    "MaterialModel",
    "WindingLossModel",
    "igse_coefficient",
    "igse_triangular_loss_density",
    "reduce_harmonics",
    "skin_depth",
]
