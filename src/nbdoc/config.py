"""Settings loaded from a YAML file (``.nbdoc.yaml`` by default).

Example::

    indent: 1
    validate: true
    default_nbformat_minor: 5
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".nbdoc.yaml"


@dataclass
class NbdocConfig:
    indent: int = 1
    validate: bool = False
    # fmt target minor version when none is given on the command line
    default_nbformat_minor: Optional[int] = None


def load_config(path: Optional[str] = None) -> NbdocConfig:
    """Load settings from ``path``, or ./.nbdoc.yaml, falling back to defaults.

    A file that cannot be read or parsed is logged and ignored.
    """
    cfg_path = Path(path) if path else Path.cwd() / CONFIG_FILENAME
    if not cfg_path.exists():
        if path:
            logger.error(f"Config file not found: {cfg_path}")
        return NbdocConfig()
    try:
        yaml = YAML(typ="safe")
        data = yaml.load(cfg_path.read_text(encoding="utf-8"))
    except (OSError, YAMLError) as e:
        logger.error(f"Failed to load {cfg_path}: {e}")
        return NbdocConfig()
    if data is None:
        return NbdocConfig()
    if not isinstance(data, dict):
        logger.error(f"Config {cfg_path} must be a mapping, got {type(data).__name__}")
        return NbdocConfig()

    known = {f.name for f in fields(NbdocConfig)}
    for key in data:
        if key not in known:
            logger.warning(f"Ignoring unknown config key {key!r} in {cfg_path}")
    cfg = NbdocConfig(**{k: v for k, v in data.items() if k in known})
    logger.debug(f"Loaded config from {cfg_path}: {cfg}")
    return cfg
