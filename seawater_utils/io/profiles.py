from __future__ import annotations
from pathlib import Path
from typing import Optional, Tuple, Union
import numpy as np

from seawater_utils.config import InputCfg


def _read_csv_columns(path: Path) -> dict[str, np.ndarray]:
    """Read a headed, comma-delimited table into {column: (K, 1) array}."""
    table = np.genfromtxt(path, delimiter=",", names=True, dtype=np.float64,
                          encoding="utf-8")
    if table.dtype.names is None:
        raise ValueError(f"{path.name}: expected a header row with column names")
    table = np.atleast_1d(table)
    # one column per variable, laid out as a single profile
    return {name: np.asarray(table[name], dtype=np.float64).reshape(-1, 1)
            for name in table.dtype.names}


def _pick(arrays, key: str, path: Path) -> np.ndarray:
    if key not in arrays:
        raise KeyError(f"'{key}' not found in {path.name}; available: {sorted(arrays)}")
    return np.asarray(arrays[key], dtype=np.float64)


def load_inputs(cfg: InputCfg) -> Tuple[np.ndarray, np.ndarray, Union[np.ndarray, float]]:
    """
    Load (SA, CT, p) from an .npz archive or a .csv table.
    A numeric cfg.p is returned as-is (uniform pressure).
    """
    path = Path(cfg.path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    if path.suffix.lower() == ".npz":
        with np.load(path) as z:
            arrays = {k: z[k] for k in z.files}
    elif path.suffix.lower() == ".csv":
        arrays = _read_csv_columns(path)
    else:
        raise ValueError(f"Unsupported input format: {path.suffix}")

    SA = _pick(arrays, cfg.SA, path)
    CT = _pick(arrays, cfg.CT, path)
    p = cfg.p if isinstance(cfg.p, float) else _pick(arrays, cfg.p, path)
    return SA, CT, p


def save_outputs(out_dir: Union[str, Path], internal_energy: np.ndarray,
                 in_funnel: Optional[np.ndarray] = None) -> Path:
    """
    Write internal_energy.csv and internal_energy.npz (with in_funnel when
    given) into out_dir. Returns the NPZ path.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    np.savetxt(out_dir / "internal_energy.csv", internal_energy, delimiter=",")

    npz_path = out_dir / "internal_energy.npz"
    payload = {"internal_energy": internal_energy}
    if in_funnel is not None:
        payload["in_funnel"] = in_funnel
    np.savez(npz_path, **payload)
    return npz_path
