"""Specific internal energy of seawater from (SA, CT, p).

The equation of state itself lives in the TEOS-10 ``gsw`` package; this
module only checks and resizes the inputs the way the GSW toolbox
wrappers do, then hands them to ``gsw.internal_energy``.
"""

from __future__ import annotations
from typing import Any, Callable, Optional

import gsw
import numpy as np

from seawater_utils.errors import ArgumentCountError, DimensionMismatchError
from seawater_utils.utils.sanitize import normalize_inputs

EOSFunc = Callable[[np.ndarray, np.ndarray, np.ndarray], Any]


def internal_energy_CT(*args: Any, eos: Optional[EOSFunc] = None) -> np.ndarray:
    """
    Specific internal energy of seawater [J/kg].

    Parameters
    ----------
    SA : Absolute Salinity [g/kg], (M, N)
    CT : Conservative Temperature [deg C], (M, N)
    p  : sea pressure [dbar], 1x1, 1xN, Mx1, 1xM, Nx1 or MxN
    eos : optional callable eos(SA, CT, p) used in place of
          gsw.internal_energy; it receives three same-shaped arrays.

    Returns
    -------
    (M, N) float64 array. Row-vector input (M == 1) is evaluated as a
    column and returned as a row.
    """
    if len(args) != 3:
        raise ArgumentCountError(
            f"internal_energy_CT: requires three inputs (got {len(args)})"
        )
    SA, CT, p, transposed = normalize_inputs(*args, func="internal_energy_CT")

    fn = eos if eos is not None else gsw.internal_energy
    out = np.asarray(fn(SA, CT, p), dtype=np.float64)
    if out.shape != SA.shape:
        raise DimensionMismatchError(
            f"internal_energy_CT: equation of state returned shape {out.shape}, "
            f"expected {SA.shape}"
        )

    return out.T if transposed else out


# gsw_internal_energy(SA,CT,p) is the same function; "_CT" only stresses the
# temperature variable.
internal_energy = internal_energy_CT

__all__ = ["internal_energy_CT", "internal_energy"]
