"""Load LoaderConfig from prowl.yaml or prowl.toml if present.

Merges file config with keyword overrides.  Overrides win.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from prowl._errors import ConfigError
from prowl.config import LoaderConfig

_CONFIG_KEYS = frozenset({
    "routes_folder",
    "prefix",
    "exclusions",
    "router_attr",
    "strict_imports",
})


def load_config(root: Path, **overrides: object) -> LoaderConfig:
    """Build a LoaderConfig for the project at *root*.

    Looks for prowl.yaml, prowl.yml or prowl.toml in *root*.  A relative
    ``routes_folder`` from the file is resolved against *root*.

    Raises:
        ConfigError: If the config file cannot be parsed.

    """
    root = Path(root)
    merged = {**read_config_file(root), **{k: v for k, v in overrides.items() if v is not None}}

    folder = merged.get("routes_folder")
    if folder is not None and not Path(str(folder)).is_absolute():
        merged["routes_folder"] = root / str(folder)
    elif folder is None:
        merged["routes_folder"] = root / "routes"

    if "exclusions" in merged:
        exclusions = merged["exclusions"]
        if isinstance(exclusions, str):
            exclusions = [exclusions]
        merged["exclusions"] = tuple(str(e) for e in exclusions)  # type: ignore[union-attr]

    return LoaderConfig(**merged)  # type: ignore[arg-type]


def read_config_file(root: Path) -> dict[str, object]:
    """Read prowl settings from yaml/toml in *root*.  Returns an empty dict if none."""
    for name in ("prowl.yaml", "prowl.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "prowl.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        msg = f"Invalid config file {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"Invalid config file {path}: expected a mapping"
        raise ConfigError(msg)
    return _flatten_prowl_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid config file {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_prowl_section(data)


def _flatten_prowl_section(data: dict[str, object]) -> dict[str, object]:
    """Extract prowl.* keys and known top-level keys into one mapping."""
    result: dict[str, object] = {}
    for k, v in data.items():
        if k in _CONFIG_KEYS:
            result[k] = v
    section = data.get("prowl")
    if isinstance(section, dict):
        for k, v in section.items():
            if k in _CONFIG_KEYS:
                result[k] = v
    return result
