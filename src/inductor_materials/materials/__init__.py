from .indexer import SampleIndexer
from .library import BUILTIN_TABLES, load_builtin_table, load_table, resolve_table, table_metadata
from .schema import (
    ConductivityCurve,
    CoreLossMap,
    CoreParams,
    CoreRecord,
    IsoParams,
    IsoRecord,
    MaterialTable,
    WindingParams,
    WindingRecord,
    material_key,
)

__all__ = [
    "BUILTIN_TABLES",
    "ConductivityCurve",
    "CoreLossMap",
    "CoreParams",
    "CoreRecord",
    "IsoParams",
    "IsoRecord",
    "MaterialTable",
    "SampleIndexer",
    "WindingParams",
    "WindingRecord",
    "load_builtin_table",
    "load_table",
    "material_key",
    "resolve_table",
    "table_metadata",
]
