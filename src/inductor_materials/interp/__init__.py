from .grid import Axis, GridInterpolator

__all__ = ["Axis", "GridInterpolator"]
