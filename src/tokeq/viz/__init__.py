"""
tokeq.viz
=========

Plotting utilities for loaded equilibria.

Design
------
• Plot modules are pure: they take arrays + metadata and return matplotlib figs/axes.
• Scripts (e.g. scripts/inspect_equilibrium.py) handle file I/O and saving.
"""
