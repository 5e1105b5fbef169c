from __future__ import annotations
from typing import Any

import gsw
import numpy as np

from seawater_utils.errors import ArgumentCountError
from seawater_utils.utils.sanitize import normalize_inputs


def infunnel(*args: Any) -> np.ndarray:
    """
    1.0 where (SA, CT, p) lies inside the "oceanographic funnel" in which the
    fitted equation of state is accurate, 0.0 outside, NaN where any input
    is NaN. Inputs are checked and broadcast like internal_energy_CT.
    """
    if len(args) != 3:
        raise ArgumentCountError(f"infunnel: requires three inputs (got {len(args)})")
    SA, CT, p, transposed = normalize_inputs(*args, func="infunnel")

    shallow = p < 500
    mid = (p >= 500) & (p < 6500)
    deep = p >= 6500

    # NaNs compare False everywhere below and are masked afterwards
    with np.errstate(invalid="ignore"):
        ct_freeze = np.asarray(gsw.CT_freezing(SA, p, 0), dtype=np.float64)
        outside = (
            (p > 8000) | (SA < 0) | (SA > 42)
            | (shallow & (CT < ct_freeze))
            | (mid & (SA < p * 5e-3 - 2.5))
            | (mid & (CT > 31.66666666666667 - p * 3.333333333333334e-3))
            | (deep & (SA < 30))
            | (deep & (CT > 10))
        )

    out = np.where(outside, 0.0, 1.0)
    out[np.isnan(SA) | np.isnan(CT) | np.isnan(p)] = np.nan

    return out.T if transposed else out


__all__ = ["infunnel"]
