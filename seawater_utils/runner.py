from dataclasses import dataclass
from typing import Any, Dict, Optional
from pathlib import Path
import numpy as np

from seawater_utils.config import RunCfg
from seawater_utils.io.profiles import load_inputs, save_outputs
from seawater_utils.thermo.funnel import infunnel
from seawater_utils.thermo.internal_energy import internal_energy_CT
from seawater_utils.utils.diagnostic_manager import DiagnosticManager
from seawater_utils.utils.diagnostics import (
    funnel_fraction,
    summarize_field,
    write_metrics_json,
)
from seawater_utils.visualization.plotting import plot_internal_energy


@dataclass
class Solution:
    internal_energy: np.ndarray           # (M, N) [J/kg]
    in_funnel: Optional[np.ndarray]       # (M, N) of 1/0/NaN, None if unchecked
    meta: Dict[str, Any]                  # shape, stats, funnel_fraction, elapsed, paths


def run_internal_energy(cfg: RunCfg, diagnostics: Optional[DiagnosticManager] = None) -> Solution:
    """
    Load (SA, CT, p), evaluate internal energy (and the funnel check),
    then write internal_energy.{csv,npz}, metrics.json and an optional plot
    into cfg.output.dir.
    """
    dm = diagnostics or DiagnosticManager()
    dm.reset()
    dm.start()

    SA, CT, p = load_inputs(cfg.input)
    p_shape = np.shape(p) if not isinstance(p, float) else ()
    print(f"[input] SA={np.shape(SA)} CT={np.shape(CT)} p={p_shape or 'scalar'}", flush=True)
    dm.stage("load")

    ie = internal_energy_CT(SA, CT, p)
    dm.stage("internal_energy")

    in_f = None
    if cfg.check.funnel:
        in_f = infunnel(SA, CT, p)
        dm.stage("funnel")

    frac = funnel_fraction(in_f)
    if frac is not None and frac < 1.0:
        n_out = int(np.nansum(in_f == 0.0))
        print(f"WARN: {n_out} point(s) lie outside the oceanographic funnel; "
              f"internal energy there is less accurate.")

    out_dir = Path(cfg.output.dir)
    npz_path = save_outputs(out_dir, ie, in_f)
    dm.stage("save")

    plot_path = None
    if cfg.output.plot:
        plot_path = plot_internal_energy(ie, p, outdir=str(out_dir))
        dm.stage("plot")

    dm.stop()
    stats = summarize_field(ie)
    dm.record("shape", list(ie.shape))
    dm.record("stats", stats)
    dm.record("funnel_fraction", frac)

    metrics_path = write_metrics_json(
        out_dir=out_dir,
        shape=ie.shape,
        stats=stats,
        funnel=frac,
        extras={"elapsed_s": float(dm.elapsed)},
    )

    meta = {
        **dm.summary(),
        "out_dir": str(out_dir),
        "npz": str(npz_path),
        "metrics": str(metrics_path),
        "plot": None if plot_path is None else str(plot_path),
    }
    return Solution(internal_energy=ie, in_funnel=in_f, meta=meta)
