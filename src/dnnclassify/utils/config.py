# src/dnnclassify/utils/config.py
from __future__ import annotations
import os
from typing import Any, Dict, Optional
import yaml

from ..errors import ConfigError

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "runtime": {
        "proto": "bvlc_googlenet.prototxt",
        "model": "bvlc_googlenet.caffemodel",
        "image": "space_shuttle.jpg",
        "labels": "synset_words.txt",
        "opencl": False,
        "repeats": 10,  # extra passes after the first one
    },
    "preprocess": {
        "size": [224, 224],
        "mean": [104.0, 117.0, 123.0],  # BGR
        "scale": 1.0,
        "swap_rb": False,
        "crop": True,
    },
    "network": {
        "input": "data",
        "output": "prob",
    },
}


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """Read a YAML config. ``None`` means no file and yields an empty dict."""
    if not path:
        return {}
    if not os.path.exists(path):
        raise ConfigError(f"Config file not found: {path}")
    try:
        with open(path, "r") as f:
            cfg = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    return cfg


def merge_config(cfg: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Overlay ``cfg`` on DEFAULTS section by section."""
    out = {}
    for section, values in DEFAULTS.items():
        merged = dict(values)
        merged.update(cfg.get(section) or {})
        out[section] = merged
    return out
