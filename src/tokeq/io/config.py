# src/tokeq/io/config.py
"""
tokeq.io.config
===============

YAML loading helpers and the loader configuration.

What belongs here
-----------------
- Load YAML safely and normalize structures
- Map logical variable roles (baxis, psi, ...) to names in the file
- Loader switches (shape consistency check) and the default log level

What does NOT belong here
-------------------------
- Reading equilibrium files (that's tokeq.io.store / tokeq.io.extract)
- Logger construction (that's tokeq.io.logging_utils)

Example config
--------------
variables:
  baxis: Baxis
  psi: psi
  theta: boozer_theta
checks:
  shape_consistency: true
logging:
  level: INFO
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from tokeq.io.logging_utils import parse_level


# -----------------------------------------------------------------------------
# YAML loading + normalization
# -----------------------------------------------------------------------------

def load_yaml(path: Path) -> Dict[str, Any]:
    """
    Load YAML from path using safe loader.

    Normalization:
      - empty YAML -> {}
      - top-level must be a dict (mapping); otherwise error
    """
    path = Path(path).expanduser().resolve()
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise TypeError(f"Top-level YAML must be a mapping/dict: {path}")

    return data


# -----------------------------------------------------------------------------
# Variable names
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class VariableNames:
    """
    Names of the variables read from an equilibrium file.

    Defaults match the files produced by the reconstruction workflow:
      Baxis, raxis      scalars
      psi, boozer_theta 1D coordinates
      I_norm, g_norm    1D currents, tabulated outside the axis
      b_field_norm      2D field, dims (psi, boozer_theta)
    """
    baxis: str = "Baxis"
    raxis: str = "raxis"
    psi: str = "psi"
    theta: str = "boozer_theta"
    i: str = "I_norm"
    g: str = "g_norm"
    b: str = "b_field_norm"

    @classmethod
    def from_mapping(cls, m: Optional[Mapping[str, Any]]) -> "VariableNames":
        if not m:
            return cls()
        if not isinstance(m, Mapping):
            raise TypeError(f"'variables' must be a mapping, got {type(m).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(m) - known)
        if unknown:
            raise ValueError(
                f"Unknown variable roles: {', '.join(map(str, unknown))}. "
                f"Known: {', '.join(sorted(known))}"
            )
        return replace(cls(), **{str(k): str(v).strip() for k, v in m.items()})


# -----------------------------------------------------------------------------
# Loader config
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LoaderConfig:
    """Everything Equilibrium.open() can be told besides the path."""
    names: VariableNames = field(default_factory=VariableNames)
    shape_consistency: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_mapping(cls, cfg: Optional[Mapping[str, Any]]) -> "LoaderConfig":
        cfg = cfg or {}
        checks = cfg.get("checks") or {}
        log_cfg = cfg.get("logging") or {}
        level = str(log_cfg.get("level", "INFO")).strip().upper()
        parse_level(level)

        return cls(
            names=VariableNames.from_mapping(cfg.get("variables")),
            shape_consistency=bool(checks.get("shape_consistency", True)),
            log_level=level,
        )


def load_loader_config(path: Optional[Path]) -> LoaderConfig:
    """Load a LoaderConfig from YAML. None -> defaults."""
    if path is None:
        return LoaderConfig()
    return LoaderConfig.from_mapping(load_yaml(path))
