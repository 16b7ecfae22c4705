"""Exceptions raised while building material models."""
from __future__ import annotations


class MaterialError(ValueError):
    """Base class for fatal material-model construction errors."""


class MaterialClassError(MaterialError):
    """The material table does not carry the expected class tag."""

    def __init__(self, expected: str, found: str):
        super().__init__(f"Expected a '{expected}' material table, got '{found}'")
        self.expected = expected
        self.found = found


class UnknownMaterialError(MaterialError):
    """One or more samples reference a material id absent from the table."""

    def __init__(self, missing: list[str], available: list[str]):
        super().__init__(
            f"Unknown material id(s) {missing}; table provides {available}"
        )
        self.missing = missing
        self.available = available


class SampleShapeError(MaterialError):
    """A per-sample vector does not match the model's sample count."""
