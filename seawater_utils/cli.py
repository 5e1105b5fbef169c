from __future__ import annotations
import argparse
from dataclasses import asdict
from .config import load_config, RunCfg
from .io.profiles import load_inputs
from .runner import run_internal_energy
from .utils.sanitize import normalize_inputs

def cmd_run(cfg: RunCfg):
    sol = run_internal_energy(cfg)
    stats = sol.meta["stats"]
    print({
        "shape": sol.meta["shape"],
        "ie_min": stats["min"],
        "ie_max": stats["max"],
        "ie_mean": stats["mean"],
        "funnel_fraction": sol.meta["funnel_fraction"],
        "out_dir": sol.meta["out_dir"],
        "plot": sol.meta["plot"],
        "elapsed_s": sol.meta["elapsed_s"],
    })
    return sol

def cmd_validate(cfg: RunCfg):
    # lightweight check: inputs load and shapes agree; no equation of state call
    SA, CT, p = load_inputs(cfg.input)
    SA_n, _, _, transposed = normalize_inputs(SA, CT, p, func="validate")
    shape = SA_n.T.shape if transposed else SA_n.shape
    print(f"[input] {cfg.input.path} -> grid {shape[0]}x{shape[1]}")
    print("Config looks sane.")

def main(argv=None):
    ap = argparse.ArgumentParser("seawater-utils CLI")
    ap.add_argument("--config","-c", required=True, help="YAML config path")
    ap.add_argument("command", choices=["run","validate","show-config"])
    args = ap.parse_args(argv)
    cfg = load_config(args.config)
    if args.command=="run": cmd_run(cfg)
    elif args.command=="validate": cmd_validate(cfg)
    else: print(asdict(cfg))

if __name__=="__main__":
    main()
