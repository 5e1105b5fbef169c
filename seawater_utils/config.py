from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import yaml
from typing import Union

INPUT_SUFFIXES = (".npz", ".csv")

@dataclass
class InputCfg:
    path: str
    SA: str = "SA"
    CT: str = "CT"
    # array name, or a number for a uniform sea pressure [dbar]
    p: Union[str, float] = "p"

@dataclass
class CheckCfg:
    funnel: bool = True

@dataclass
class OutCfg:
    dir: str = "outputs/ie_run"; plot: bool = True

@dataclass
class RunCfg:
    input: InputCfg
    check: CheckCfg = field(default_factory=CheckCfg)
    output: OutCfg = field(default_factory=OutCfg)

def _coerce_pressure(p):
    if isinstance(p, bool):
        raise ValueError(f"Unsupported pressure value: {p!r}")
    if isinstance(p, (int, float)):
        return float(p)
    s = str(p).strip()
    try:
        return float(s)
    except ValueError:
        return s

def load_config(path: str | Path) -> RunCfg:
    with open(path, "r", encoding="utf-8") as f:
        d = yaml.safe_load(f) or {}

    # --- input block + shims ---
    in_d = dict(d.get("input", {}) or {})

    # allow 'pressure' as a longer spelling of 'p'
    pressure = in_d.pop("pressure", None)
    if pressure is not None:
        in_d.setdefault("p", pressure)
    if "p" in in_d:
        in_d["p"] = _coerce_pressure(in_d["p"])

    if not in_d.get("path"):
        raise ValueError("input.path is required (an .npz or .csv file).")
    in_path = Path(in_d["path"]).expanduser()
    if in_path.suffix.lower() not in INPUT_SUFFIXES:
        raise ValueError(f"input.path must end in one of {INPUT_SUFFIXES}, got {in_path.name}")
    # relative inputs are taken relative to the config file
    if not in_path.is_absolute():
        in_path = Path(path).expanduser().resolve().parent / in_path
    in_d["path"] = str(in_path.resolve())

    # --- output block + migration of a top-level outdir ---
    out_d = dict(d.get("output", {}) or {})
    if "outdir" in d and "dir" not in out_d:
        out_d["dir"] = d["outdir"]
    out_d["dir"] = str(Path(out_d.get("dir", "outputs/ie_run")).expanduser().resolve())
    if "plot" in out_d:
        out_d["plot"] = bool(out_d["plot"])

    check_d = dict(d.get("check", {}) or {})
    if "funnel" in check_d:
        check_d["funnel"] = bool(check_d["funnel"])

    # --- build dataclasses ---
    return RunCfg(
        input=InputCfg(**in_d),
        check=CheckCfg(**check_d),
        output=OutCfg(**out_d),
    )
