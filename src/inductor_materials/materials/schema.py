"""Pydantic models describing material table files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

MaterialClass = Literal["core", "winding", "iso"]


def material_key(value: Any) -> str:
    """Normalize a material id (string or integer) to its lookup key."""
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Invalid material id {value!r}")
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    return str(value).strip()


def _check_axis(name: str, values: list[float], positive: bool = False) -> None:
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1 or arr.size < 2:
        raise ValueError(f"Axis '{name}' needs at least two sample points")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"Axis '{name}' contains non-finite values")
    if np.any(np.diff(arr) <= 0.0):
        raise ValueError(f"Axis '{name}' must be strictly ascending")
    if positive and np.any(arr <= 0.0):
        raise ValueError(f"Axis '{name}' is interpolated in log space and must be positive")


class _Params(BaseModel):
    """Constant scalar properties; unknown numeric keys are kept and broadcast too."""

    model_config = ConfigDict(frozen=True, extra="allow")

    @model_validator(mode="after")
    def _numeric_extras(self) -> "_Params":
        for key, value in (self.model_extra or {}).items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Parameter '{key}' must be a number, got {value!r}")
        return self

    def scalars(self) -> dict[str, float]:
        return {key: float(value) for key, value in self.model_dump().items()}


class CoreParams(_Params):
    density: float = Field(gt=0.0)
    cost_per_mass: float = Field(ge=0.0)
    cost_offset: float = 0.0
    temperature_max: float
    flux_density_max: float = Field(gt=0.0)
    loss_density_max: float = Field(gt=0.0)
    loss_scale: float = Field(1.0, gt=0.0)
    igse_factor: float = Field(0.01, gt=0.0)


class WindingParams(_Params):
    fill_litz: float = Field(gt=0.0, le=1.0)
    strand_diameter: float = Field(gt=0.0)
    density_conductor: float = Field(gt=0.0)
    density_filler: float = Field(ge=0.0)
    cost_per_mass_conductor: float = Field(ge=0.0)
    cost_per_mass_filler: float = Field(ge=0.0)
    cost_offset: float = 0.0
    temperature_max: float
    loss_density_max: float = Field(gt=0.0)
    current_density_max: float = Field(gt=0.0)
    frequency_max: float = Field(gt=0.0)
    loss_scale_lf: float = Field(1.0, gt=0.0)
    loss_scale_hf: float = Field(1.0, gt=0.0)


class IsoParams(_Params):
    density: float = Field(gt=0.0)
    cost_per_mass: float = Field(ge=0.0)
    cost_offset: float = 0.0
    temperature_max: float


class CoreLossMap(BaseModel):
    """Loss density tabulated over (frequency, AC flux peak, DC bias, temperature)."""

    model_config = ConfigDict(frozen=True)

    frequency: list[float]
    ac_flux_peak: list[float]
    dc_bias: list[float]
    temperature: list[float]
    loss_density: list[Any]

    @model_validator(mode="after")
    def _check_grid(self) -> "CoreLossMap":
        _check_axis("frequency", self.frequency, positive=True)
        _check_axis("ac_flux_peak", self.ac_flux_peak, positive=True)
        _check_axis("dc_bias", self.dc_bias)
        _check_axis("temperature", self.temperature)
        shape = (len(self.frequency), len(self.ac_flux_peak), len(self.dc_bias), len(self.temperature))
        try:
            values = np.asarray(self.loss_density, dtype=float)
        except ValueError as exc:
            raise ValueError("loss_density must be a rectangular nested list") from exc
        if values.shape != shape:
            raise ValueError(f"loss_density has shape {values.shape}, expected {shape}")
        if not np.all(np.isfinite(values)) or np.any(values <= 0.0):
            raise ValueError("loss_density is interpolated in log space and must be positive")
        return self


class ConductivityCurve(BaseModel):
    """Electrical conductivity tabulated over temperature."""

    model_config = ConfigDict(frozen=True)

    temperature: list[float]
    conductivity: list[float]

    @model_validator(mode="after")
    def _check_curve(self) -> "ConductivityCurve":
        _check_axis("temperature", self.temperature)
        if len(self.conductivity) != len(self.temperature):
            raise ValueError("conductivity and temperature must have the same length")
        if any(value <= 0.0 for value in self.conductivity):
            raise ValueError("conductivity must be positive")
        return self


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> str:
        return material_key(value)


class CoreRecord(_Record):
    param: CoreParams
    interp: CoreLossMap


class WindingRecord(_Record):
    param: WindingParams
    interp: ConductivityCurve


class IsoRecord(_Record):
    param: IsoParams


RECORD_TYPES: dict[str, type[_Record]] = {
    "core": CoreRecord,
    "winding": WindingRecord,
    "iso": IsoRecord,
}


class MaterialTable(BaseModel):
    """One material class (core, winding or iso) and its records."""

    model_config = ConfigDict(frozen=True)

    type: MaterialClass
    description: Optional[str] = None
    data: list[Any] = Field(min_length=1)

    @field_validator("data", mode="after")
    @classmethod
    def _parse_records(cls, value: list[Any], info: ValidationInfo) -> list[Any]:
        material_class = info.data.get("type")
        if material_class is None:
            return value
        record_type = RECORD_TYPES[material_class]
        records = [
            entry if isinstance(entry, record_type) else record_type.model_validate(entry)
            for entry in value
        ]
        seen: set[str] = set()
        for record in records:
            if record.id in seen:
                raise ValueError(f"Duplicate material id '{record.id}'")
            seen.add(record.id)
        return records

    @property
    def ids(self) -> list[str]:
        return [record.id for record in self.data]

    def record(self, material_id: Any) -> Any:
        key = material_key(material_id)
        for record in self.data:
            if record.id == key:
                return record
        raise KeyError(key)

    @classmethod
    def from_file(cls, path: Path) -> "MaterialTable":
        import yaml

        return cls.model_validate(yaml.safe_load(Path(path).read_text()))
