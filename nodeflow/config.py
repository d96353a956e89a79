"""
Engine configuration and logging setup.

EngineConfig is a structured OmegaConf schema: a YAML/JSON file and keyword overrides are
merged on top of the defaults and type-checked against the dataclass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from omegaconf import DictConfig, OmegaConf

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class EngineConfig:
    # Reject edges that would close a cycle (self-loops are rejected regardless)
    detect_cycles: bool = False
    # remove_node reports everything downstream, not only direct consumers
    transitive_remove_dirty: bool = True
    reject_duplicate_edges: bool = False
    # Honour SocketDef.max_connections on add_edge
    enforce_max_connections: bool = False
    # Level of the "nodeflow" logger, applied when a script is built
    log_level: str = "WARNING"


def load_config(
    path: Optional[Union[str, Path]] = None,
    config: Optional[Union[dict, DictConfig]] = None,
    **overrides: Any,
) -> EngineConfig:
    """
    Defaults <- file at path <- config mapping <- keyword overrides (last wins).
    Unknown keys or wrongly typed values raise omegaconf errors.
    """
    cfg = OmegaConf.structured(EngineConfig)
    if path is not None:
        cfg = OmegaConf.merge(cfg, OmegaConf.load(path))
    if config is not None:
        cfg = OmegaConf.merge(cfg, config)
    if overrides:
        cfg = OmegaConf.merge(cfg, overrides)
    return OmegaConf.to_object(cfg)


def set_log_level(level: Union[str, int]) -> None:
    """Set the "nodeflow" package logger level; handlers are left alone."""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger("nodeflow").setLevel(level)


def configure_logging(level: Union[str, int] = "WARNING") -> None:
    """Root logging setup for command-line use; library code only creates loggers."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    set_log_level(level)
