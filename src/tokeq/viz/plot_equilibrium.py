"""
plot_equilibrium.py
===================

Equilibrium quicklook plots (pure plotting; no file reads).

- Field strength B(ψ, θ): heatmap on the (θ, ψ) grid
- Currents I(ψ), g(ψ), axis value marked

Conventions
-----------
- psi:   (n_psi,)  axis-extended, psi[0] = 0
- theta: (n_theta,)
- b:     (n_psi - 1, n_theta) on the file's own ψ samples, i.e. psi[1:]
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
import matplotlib.pyplot as plt

from .style import file_header


def plot_bfield_map(
    *,
    source: str,
    psi: np.ndarray,
    theta: np.ndarray,
    b: np.ndarray,
    n_contours: int = 20,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Heatmap + contours of B over (θ, ψ).

    psi may be axis-extended (one sample longer than b's first axis); the
    axis sample is dropped in that case.
    """
    psi = np.asarray(psi, float)
    theta = np.asarray(theta, float)
    b = np.asarray(b, float)

    if psi.size == b.shape[0] + 1:
        psi = psi[1:]
    if b.shape != (psi.size, theta.size):
        raise ValueError(f"b must have shape (n_psi, n_theta)=({psi.size},{theta.size}), got {b.shape}")

    fig, ax = plt.subplots(figsize=(8, 6))
    file_header(ax, source=source, subtitle="Field strength B(ψ, θ) [normalized]")

    mesh = ax.pcolormesh(theta, psi, b, shading="auto")
    cb = fig.colorbar(mesh, ax=ax, fraction=0.046, pad=0.04)
    cb.set_label("B [norm]")

    if psi.size >= 2 and theta.size >= 2:
        cs = ax.contour(theta, psi, b, levels=n_contours, colors="k", linewidths=0.5)
        ax.clabel(cs, inline=True, fontsize=7, fmt="%.3g")

    ax.set_xlabel("θ (Boozer)")
    ax.set_ylabel("ψ")
    return fig, ax


def plot_currents(
    *,
    source: str,
    psi: np.ndarray,
    i: np.ndarray,
    g: np.ndarray,
) -> Tuple[plt.Figure, List[plt.Axes]]:
    """
    I(ψ) and g(ψ) on the axis-extended ψ grid.
    The axis sample (index 0) is marked to show the extrapolated value.
    """
    psi = np.asarray(psi, float).ravel()
    items = [
        ("I", np.asarray(i, float).ravel(), "I [norm]"),
        ("g", np.asarray(g, float).ravel(), "g [norm]"),
    ]

    fig, axes = plt.subplots(2, 1, figsize=(9, 5), sharex=True)
    file_header(axes[0], source=source, subtitle="Plasma currents vs ψ")

    for ax, (name, y, ylabel) in zip(axes, items):
        if y.shape != psi.shape:
            raise ValueError(f"{name} must have the shape of psi {psi.shape}, got {y.shape}")
        ax.plot(psi, y, lw=2.0, label=name)
        ax.plot(psi[:1], y[:1], "o", ms=5, label="axis")
        ax.set_ylabel(ylabel)
        ax.legend(loc="best")
        ax.grid(True, alpha=0.25)

    axes[-1].set_xlabel("ψ")
    return fig, list(axes)
