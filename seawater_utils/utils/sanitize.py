# seawater_utils/utils/sanitize.py
from __future__ import annotations
from typing import Any, Tuple
import numpy as np

from seawater_utils.errors import DimensionMismatchError


def as_matrix(x: Any, name: str = "x", func: str = "gsw") -> np.ndarray:
    """
    Coerce a scalar, 1-D or 2-D array-like to a 2-D float64 matrix.
      - scalar / 0-d  -> (1, 1)
      - 1-D (N,)      -> (1, N) row vector
      - 2-D (M, N)    -> unchanged
    Anything with more than two dimensions, or with no elements, is rejected.
    """
    a = np.asarray(x, dtype=np.float64)
    if a.ndim > 2:
        raise DimensionMismatchError(
            f"{func}: {name} must be a scalar, vector or 2-D matrix, got shape {a.shape}"
        )
    if a.size == 0:
        raise DimensionMismatchError(f"{func}: {name} is empty (shape {a.shape})")
    if a.ndim < 2:
        a = a.reshape(1, -1)
    return a


def broadcast_pressure(p: np.ndarray, shape: Tuple[int, int], func: str = "gsw") -> np.ndarray:
    """
    Fill p onto the (M, N) grid of SA. The first matching rule wins:

      1) p is 1x1                  -> fill (M, N)
      2) p is 1xN                  -> copy down each column
      3) p is Mx1                  -> copy across each row
      4) p is 1xM                  -> transpose, copy across each row
      4b) p is Nx1                 -> transpose, copy down each column
      5) p is MxN                  -> as-is

    When M == N the order above settles which rule applies.
    """
    ms, ns = shape
    mp, np_ = p.shape

    if mp == 1 and np_ == 1:
        return np.full((ms, ns), p[0, 0], dtype=np.float64)
    if mp == 1 and np_ == ns:
        return np.repeat(p, ms, axis=0)
    if np_ == 1 and mp == ms:
        return np.repeat(p, ns, axis=1)
    if mp == 1 and np_ == ms:
        return np.repeat(p.T, ns, axis=1)
    if np_ == 1 and mp == ns:
        return np.repeat(p.T, ms, axis=0)
    if mp == ms and np_ == ns:
        return p.copy()
    raise DimensionMismatchError(
        f"{func}: Inputs array dimensions arguments do not agree\n"
        f"  SA : {shape}\n"
        f"  p  : {p.shape}"
    )


def normalize_inputs(SA: Any, CT: Any, p: Any, func: str = "gsw"
                     ) -> Tuple[np.ndarray, np.ndarray, np.ndarray, bool]:
    """
    Check and resize (SA, CT, p) the way the GSW toolbox wrappers do.

    Returns (SA, CT, p, transposed), all three arrays sharing one shape.
    Row-vector inputs (M == 1) come back as (N, 1) columns with
    transposed=True; the caller transposes its result back.
    """
    SA = as_matrix(SA, "SA", func)
    CT = as_matrix(CT, "CT", func)
    p = as_matrix(p, "p", func)

    if CT.shape != SA.shape:
        raise DimensionMismatchError(
            f"{func}: SA and CT must have same dimensions\n"
            f"  SA : {SA.shape}\n"
            f"  CT : {CT.shape}"
        )

    p = broadcast_pressure(p, SA.shape, func)

    if SA.shape[0] == 1:
        return SA.T, CT.T, p.T, True
    return SA, CT, p, False


__all__ = ["as_matrix", "broadcast_pressure", "normalize_inputs"]
