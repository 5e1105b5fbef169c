from pathlib import Path
import numpy as np
import pytest

from seawater_utils.cli import main
from seawater_utils.config import load_config


def _write_npz(path: Path):
    np.savez(path,
             SA=np.array([[34.9, 35.0], [34.8, 34.9]]),
             CT=np.array([[10.0, 9.0], [3.0, 2.5]]),
             p=np.array([[10.0], [1200.0]]))


def test_config_loads_defaults(tmp_path: Path):
    _write_npz(tmp_path / "cast.npz")
    yml = tmp_path / "t.yaml"
    yml.write_text("""input: {path: cast.npz}
""")
    cfg = load_config(yml)
    assert cfg.input.path == str((tmp_path / "cast.npz").resolve())
    assert (cfg.input.SA, cfg.input.CT, cfg.input.p) == ("SA", "CT", "p")
    assert cfg.check.funnel is True and cfg.output.plot is True


def test_config_shims(tmp_path: Path):
    yml = tmp_path / "t.yaml"
    yml.write_text(f"""outdir: {tmp_path / 'out'}
input: {{path: cast.csv, pressure: 250}}
check: {{funnel: false}}
""")
    cfg = load_config(yml)
    assert cfg.input.p == 250.0
    assert cfg.output.dir == str((tmp_path / "out").resolve())
    assert cfg.check.funnel is False


def test_config_numeric_string_pressure(tmp_path: Path):
    yml = tmp_path / "t.yaml"
    yml.write_text("input: {path: cast.npz, p: '1e3'}\n")
    assert load_config(yml).input.p == 1000.0


def test_config_requires_known_input(tmp_path: Path):
    yml = tmp_path / "t.yaml"
    yml.write_text("output: {dir: out}\n")
    with pytest.raises(ValueError, match="input.path"):
        load_config(yml)
    yml.write_text("input: {path: cast.nc}\n")
    with pytest.raises(ValueError, match="must end in"):
        load_config(yml)


def test_cli_validate(tmp_path: Path, capsys):
    _write_npz(tmp_path / "cast.npz")
    yml = tmp_path / "t.yaml"
    yml.write_text("input: {path: cast.npz}\n")
    main(["--config", str(yml), "validate"])
    out = capsys.readouterr().out
    assert "grid 2x2" in out
    assert "Config looks sane." in out


def test_cli_validate_reports_bad_shapes(tmp_path: Path):
    np.savez(tmp_path / "bad.npz", SA=np.ones((2, 3)), CT=np.ones((3, 2)), p=np.zeros((1, 1)))
    yml = tmp_path / "t.yaml"
    yml.write_text("input: {path: bad.npz}\n")
    from seawater_utils.errors import DimensionMismatchError
    with pytest.raises(DimensionMismatchError):
        main(["--config", str(yml), "validate"])
