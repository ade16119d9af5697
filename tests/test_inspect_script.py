import importlib.util
from pathlib import Path

import numpy as np
import pytest
import yaml

from tokeq.io.logging_utils import reset_logger


SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "inspect_equilibrium.py"


@pytest.fixture
def inspect_main():
    spec = importlib.util.spec_from_file_location("inspect_equilibrium", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    reset_logger()
    yield module.main
    reset_logger()


def test_prints_summary(inspect_main, eq_path, capsys):
    assert inspect_main(["--file", str(eq_path)]) == 0
    out = capsys.readouterr().out
    assert "Scalars:" in out and "Bfield:" in out


def test_missing_file_exits_nonzero(inspect_main, tmp_path):
    assert inspect_main(["--file", str(tmp_path / "nope.nc")]) == 1


def test_check_reports_problems(inspect_main, make_eq, DROP, tmp_path):
    path = make_eq(Baxis=DROP, raxis=DROP)
    log_file = tmp_path / "inspect.log"
    assert inspect_main(["--file", str(path), "--check", "--log-file", str(log_file)]) == 1
    text = log_file.read_text()
    assert "'Baxis'" in text and "'raxis'" in text


def test_config_and_plots(inspect_main, make_eq, DROP, tmp_path):
    path = make_eq(Baxis=DROP, B0=np.float64(3.0))
    cfg = tmp_path / "loader.yaml"
    cfg.write_text(yaml.safe_dump({"variables": {"baxis": "B0"}}), encoding="utf-8")
    plot_dir = tmp_path / "figures"

    rc = inspect_main(["--file", str(path), "--config", str(cfg), "--plot-dir", str(plot_dir)])
    assert rc == 0
    assert (plot_dir / "bfield_map.png").exists()
    assert (plot_dir / "currents.png").exists()
