"""
style.py
========

Central plotting style helpers.

Keep this small and non-opinionated, but provide:
• consistent rcParams
• file header titles
• figure saving in several formats
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt


def apply_mpl_defaults() -> None:
    """
    Apply lightweight defaults.
    Call once per plotting session (e.g. at start of a quicklook).
    """
    plt.rcParams["figure.dpi"] = 120
    plt.rcParams["savefig.dpi"] = 160
    plt.rcParams["axes.grid"] = True
    plt.rcParams["grid.alpha"] = 0.25
    plt.rcParams["axes.titlesize"] = 11
    plt.rcParams["axes.labelsize"] = 11
    plt.rcParams["legend.fontsize"] = 9


def file_header(ax: plt.Axes, *, source: str, subtitle: Optional[str] = None) -> None:
    """Standard title header naming the equilibrium file."""
    title = f"Equilibrium: {source}"
    if subtitle:
        title = f"{title}\n{subtitle}"
    ax.set_title(title)


def save_figure(fig: plt.Figure, out_base: Path, formats: Sequence[str] = ("png",), dpi: int = 160) -> list:
    """Save `fig` as out_base.<fmt> for every format. Returns the written paths."""
    out_base = Path(out_base)
    out_base.parent.mkdir(parents=True, exist_ok=True)
    written = []
    for fmt in formats:
        fmt = fmt.lower().lstrip(".")
        path = out_base.with_suffix(f".{fmt}")
        fig.savefig(path, dpi=dpi, bbox_inches="tight")
        written.append(path)
    return written
