"""Material table loading (files and bundled defaults)."""
from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from .schema import MaterialTable

BUILTIN_TABLES = ("winding", "iso")

logger = logging.getLogger(__name__)


def load_table(path: Path) -> MaterialTable:
    table = MaterialTable.from_file(Path(path))
    logger.debug("Loaded %d %s material(s) from %s", len(table.data), table.type, path)
    return table


def load_builtin_table(name: str) -> MaterialTable:
    """Load one of the tables shipped with the package (``winding`` or ``iso``)."""
    if name not in BUILTIN_TABLES:
        raise ValueError(f"Unknown built-in table '{name}', choose from {BUILTIN_TABLES}")
    text = resources.files(__package__).joinpath("data").joinpath(f"{name}.yaml").read_text()
    return MaterialTable.model_validate(yaml.safe_load(text))


def resolve_table(source: str | Path) -> MaterialTable:
    """Load ``source`` as a file path, falling back to a built-in table name."""
    path = Path(source)
    if path.is_file():
        return load_table(path)
    if str(source) in BUILTIN_TABLES:
        return load_builtin_table(str(source))
    raise FileNotFoundError(f"No material table at '{source}'")


def table_metadata(table: MaterialTable) -> dict[str, Any]:
    return {k: v for k, v in table.model_dump().items() if k != "data"}
