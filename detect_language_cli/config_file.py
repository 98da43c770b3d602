"""Config file loading and parser defaults application for the CLI."""

import argparse
import json
from argparse import Namespace
from pathlib import Path
from typing import Any, Dict

import yaml

SECTION_KEYS = {
    "detector": {
        "minimum_relative_distance": "minimum_relative_distance",
        "low_accuracy_mode": "low_accuracy_mode",
        "preload": "preload",
        "spoken_language_only": "spoken_language_only",
    },
    "input": {
        "max_sample_bytes": "max_input_sample_bytes",
    },
    "output": {
        "max_languages": "max_output_languages",
    },
}
FLAT_KEYS = {dest for section in SECTION_KEYS.values() for dest in section.values()}


def load_config_file(path: str) -> Dict[str, Any]:
    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix in (".yml", ".yaml"):
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    elif suffix == ".json":
        with config_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    else:
        raise ValueError(f"Unsupported config file format: {suffix}")

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping at the top level")
    return data


def _flatten_section(name: str, section: Dict[str, Any]) -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    keys = SECTION_KEYS[name]
    for key, val in section.items():
        dest = keys.get(key)
        if dest is None:
            raise ValueError(f"Unknown option '{key}' in config section '{name}'")
        flat[dest] = val
    return flat


def flatten_config(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """Map a (possibly sectioned) config file to argparse destinations."""
    flat: Dict[str, Any] = {}
    for key, val in config_data.items():
        if key in SECTION_KEYS:
            if not isinstance(val, dict):
                raise ValueError(f"Config section '{key}' must be a mapping")
            flat.update(_flatten_section(key, val))
            continue
        dest = key.replace("-", "_")
        if dest not in FLAT_KEYS:
            raise ValueError(f"Unknown config option '{key}'")
        flat[dest] = val
    return flat


def merge_args(base_defaults: Namespace, config_overrides: Dict[str, Any], explicit_args: Namespace) -> Namespace:
    """Parser defaults, then config file values, then options given on the command line."""
    merged = vars(base_defaults).copy()
    merged.update(config_overrides)
    merged.update(vars(explicit_args))
    return argparse.Namespace(**merged)
