"""Vectorized loss and property models for inductor core, winding and insulation materials."""
from .catalog import MaterialCatalog
from .errors import MaterialClassError, MaterialError, SampleShapeError, UnknownMaterialError
from .materials import MaterialTable, load_builtin_table, load_table
from .models import CoreLossModel, InsulationModel, WindingLossModel

__all__ = [
    "CoreLossModel",
    "InsulationModel",
    "MaterialCatalog",
    "MaterialClassError",
    "MaterialError",
    "MaterialTable",
    "SampleShapeError",
    "UnknownMaterialError",
    "WindingLossModel",
    "load_builtin_table",
    "load_table",
]
