"""Material catalog: the three material tables and the per-chunk model factories."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from .materials import MaterialTable, resolve_table, table_metadata
from .models import CoreLossModel, InsulationModel, WindingLossModel


class MaterialCatalog:
    """Holds the core, winding and insulation tables and builds models from them."""

    def __init__(
        self,
        core: Optional[MaterialTable] = None,
        winding: Optional[MaterialTable] = None,
        iso: Optional[MaterialTable] = None,
    ):
        self.tables: dict[str, MaterialTable] = {}
        for name, table in (("core", core), ("winding", winding), ("iso", iso)):
            if table is not None:
                self.tables[name] = table

    @classmethod
    def from_files(
        cls,
        core: str | Path | None = None,
        winding: str | Path | None = "winding",
        iso: str | Path | None = "iso",
    ) -> "MaterialCatalog":
        """Load the tables from files; ``winding`` and ``iso`` default to the bundled tables."""
        return cls(
            core=resolve_table(core) if core is not None else None,
            winding=resolve_table(winding) if winding is not None else None,
            iso=resolve_table(iso) if iso is not None else None,
        )

    def _table(self, name: str) -> MaterialTable:
        table = self.tables.get(name)
        if table is None:
            raise ValueError(f"Catalog has no '{name}' material table")
        return table

    def core_model(self, ids: Any, volume: Any) -> CoreLossModel:
        return CoreLossModel(self._table("core"), ids, volume)

    def winding_model(self, ids: Any, volume: Any, fill_pack: Any) -> WindingLossModel:
        return WindingLossModel(self._table("winding"), ids, volume, fill_pack)

    def insulation_model(self, ids: Any, volume: Any) -> InsulationModel:
        return InsulationModel(self._table("iso"), ids, volume)

    @property
    def metadata(self) -> dict[str, Any]:
        return {name: table_metadata(table) for name, table in self.tables.items()}
