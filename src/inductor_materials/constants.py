"""Physical constants."""
from __future__ import annotations

import math

MU_0 = 4.0 * math.pi * 1e-7  # H/m
