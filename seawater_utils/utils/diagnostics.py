# field stats, JSON export

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

import numpy as np
import numpy.typing as npt


def summarize_field(u: npt.ArrayLike) -> Dict[str, float]:
    """
    NaN-aware min / max / mean of a field, plus the count of finite points.
    An all-NaN field reports NaN stats and n_finite = 0.
    """
    a = np.asarray(u, dtype=np.float64)
    finite = np.isfinite(a)
    n = int(finite.sum())
    if n == 0:
        return {"min": float("nan"), "max": float("nan"), "mean": float("nan"), "n_finite": 0}
    vals = a[finite]
    return {
        "min": float(vals.min()),
        "max": float(vals.max()),
        "mean": float(vals.mean()),
        "n_finite": n,
    }


def funnel_fraction(in_funnel: Optional[npt.ArrayLike]) -> Optional[float]:
    """Fraction of non-NaN points flagged inside the funnel (None if unchecked or empty)."""
    if in_funnel is None:
        return None
    f = np.asarray(in_funnel, dtype=np.float64)
    valid = ~np.isnan(f)
    if not valid.any():
        return None
    return float(np.mean(f[valid]))


def _jsonable(v: Any) -> Any:
    if isinstance(v, dict):
        return {k: _jsonable(x) for k, x in v.items()}
    if isinstance(v, (list, tuple)):
        return [_jsonable(x) for x in v]
    if isinstance(v, (np.floating, float)):
        v = float(v)
        return v if np.isfinite(v) else None
    if isinstance(v, np.integer):
        return int(v)
    return v


def write_metrics_json(
    out_dir: Path | str,
    shape: Sequence[int],
    stats: Dict[str, float],
    funnel: Optional[float] = None,
    extras: Optional[Dict[str, Union[float, str]]] = None,
) -> Path:
    """
    Persist a compact metrics.json into the run output directory.
    Non-finite numbers are written as null.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    payload = {
        "quantity": "internal_energy",
        "units": "J/kg",
        "shape": [int(n) for n in shape],
        "stats": _jsonable(stats),
        "funnel_fraction": _jsonable(funnel),
    }
    if extras:
        payload["extras"] = _jsonable(extras)

    metrics_path = out_dir / "metrics.json"
    with metrics_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    return metrics_path
