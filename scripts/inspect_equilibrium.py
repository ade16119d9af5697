#!/usr/bin/env python3
"""
inspect_equilibrium.py
======================

Load a reconstructed equilibrium file and print what was read.

What it does
------------
• Optionally runs the structure check first and reports *every* problem
• Loads the file with tokeq.Equilibrium (stops at the first problem)
• Prints the scalar / coordinate / current / field summary
• Optionally saves quicklook figures

Usage
-----
python scripts/inspect_equilibrium.py --file data/eq.nc
python scripts/inspect_equilibrium.py --file data/eq.nc --check --config configs/loader.yaml
python scripts/inspect_equilibrium.py --file data/eq.nc --plot-dir figures --formats png pdf
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tokeq.equilibrium import Equilibrium
from tokeq.io.config import load_loader_config
from tokeq.io.errors import EquilibriumError
from tokeq.io.logging_utils import LEVELS, setup_logger
from tokeq.io.schema import validate_equilibrium_file


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Inspect a reconstructed tokamak equilibrium file")
    p.add_argument("--file", type=str, required=True, help="Equilibrium file (NetCDF-4 / HDF5)")
    p.add_argument(
        "--config",
        type=str,
        default="",
        help="Loader YAML (variable names, checks, logging). Defaults if empty.",
    )
    p.add_argument(
        "--check",
        action="store_true",
        help="Run the structure check first and list every problem found",
    )
    p.add_argument(
        "--plot-dir",
        type=str,
        default="",
        help="If set, save quicklook figures into this directory",
    )
    p.add_argument("--formats", nargs="+", default=["png"], help="Figure formats (png pdf svg)")
    p.add_argument(
        "--log-level",
        type=str.upper,
        default="",
        choices=("",) + LEVELS,
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Overrides the config.",
    )
    p.add_argument("--log-file", type=str, default="", help="Optional log file")
    return p.parse_args(argv)


def save_quicklook(eq: Equilibrium, out_dir: Path, formats, logger) -> None:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from tokeq.viz.plot_equilibrium import plot_bfield_map, plot_currents
    from tokeq.viz.style import apply_mpl_defaults, save_figure

    apply_mpl_defaults()
    source = eq.path.name

    fig, _ = plot_bfield_map(
        source=source,
        psi=eq.coords.psi,
        theta=eq.coords.theta,
        b=eq.bfield.b,
    )
    for p in save_figure(fig, out_dir / "bfield_map", formats):
        logger.info("Saved figure: %s", p)
    plt.close(fig)

    fig, _ = plot_currents(source=source, psi=eq.coords.psi, i=eq.currents.i, g=eq.currents.g)
    for p in save_figure(fig, out_dir / "currents", formats):
        logger.info("Saved figure: %s", p)
    plt.close(fig)


def main(argv=None) -> int:
    args = parse_args(argv)

    config = load_loader_config(Path(args.config) if args.config.strip() else None)
    level = args.log_level.strip() or config.log_level
    log_path = Path(args.log_file) if args.log_file.strip() else None
    logger = setup_logger(log_path, level=level)

    path = Path(args.file).expanduser()
    logger.info("Equilibrium file: %s", path)

    try:
        if args.check:
            validate_equilibrium_file(path, config.names)
            logger.info("Structure check passed")
        eq = Equilibrium.open(path, config)
    except EquilibriumError as e:
        logger.error("%s", e)
        return 1
    except RuntimeError as e:
        # structure check report
        logger.error("%s", e)
        return 1

    print(eq.summary())

    if args.plot_dir.strip():
        save_quicklook(eq, Path(args.plot_dir).expanduser(), args.formats, logger)

    return 0


if __name__ == "__main__":
    sys.exit(main())
