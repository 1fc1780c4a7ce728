"""Configuration: spanmaze.yml discovery, section-wise validation, CLI overrides.

Precedence, lowest first: built-in defaults, the YAML file, command-line
flags. A bad `render` entry only resets that entry; the rest of the file
still applies.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from spanmaze.logger import logger
from spanmaze.model import MazeConfig, RenderConfig

DEFAULT_CONFIG_NAME = "spanmaze.yml"


def find_config(path: Path | None = None, cwd: Path | None = None) -> Path | None:
    """Explicit *path* if given, else ``spanmaze.yml`` in the working directory when present."""
    if path is not None:
        return path
    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
    if candidate.is_file():
        logger.debug("Using config file %s from working directory", candidate)
        return candidate
    return None


def load_config(path: Path | None = None) -> MazeConfig:
    """Load *path* into a MazeConfig, keeping every entry that validates."""
    if path is None:
        logger.debug("No config file provided, using defaults")
        return MazeConfig()

    raw = _read_mapping(Path(str(path)))
    if raw is None:
        return MazeConfig()

    for key in sorted(set(raw) - set(MazeConfig.model_fields)):
        logger.warning("Unknown config key %r in %s, ignored", key, path)

    seed = _validated_seed(raw.get("seed"), path)
    render = _validated_render(raw.get("render"), path)
    return MazeConfig(seed=seed, render=render)


def resolve_config(
    path: Path | None = None,
    *,
    seed: int | None = None,
    animate: bool | None = None,
    cwd: Path | None = None,
) -> MazeConfig:
    """Defaults, then the discovered config file, then command-line overrides."""
    cfg = load_config(find_config(path, cwd))
    if seed is not None:
        cfg = cfg.model_copy(update={"seed": seed})
    if animate is not None:
        cfg = cfg.model_copy(update={"render": cfg.render.model_copy(update={"animate": animate})})
    return cfg


def _read_mapping(path: Path) -> dict[str, Any] | None:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Config file not found: %s, using defaults", path)
        return None
    except OSError as e:
        logger.warning("Cannot read config file %s: %s, using defaults", path, e)
        return None

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning("Malformed YAML in %s: %s, using defaults", path, e)
        return None

    if raw is None:
        return None
    if not isinstance(raw, dict):
        logger.warning("Config file %s is not a YAML mapping, using defaults", path)
        return None
    return raw


def _validated_seed(value: object, path: Path) -> int | None:
    if value is None:
        return None
    try:
        return MazeConfig.model_validate({"seed": value}).seed
    except ValidationError:
        logger.warning("Invalid seed %r in %s, layout will be unseeded", value, path)
        return None


def _validated_render(section: object, path: Path) -> RenderConfig:
    if section is None:
        return RenderConfig()
    if not isinstance(section, dict):
        logger.warning("'render' in %s is not a mapping, using render defaults", path)
        return RenderConfig()

    accepted: dict[str, object] = {}
    for key, value in section.items():
        if key not in RenderConfig.model_fields:
            logger.warning("Unknown render key %r in %s, ignored", key, path)
            continue
        try:
            RenderConfig.model_validate({key: value})
        except ValidationError:
            logger.warning("Invalid render.%s %r in %s, using default", key, value, path)
            continue
        accepted[key] = value
    return RenderConfig.model_validate(accepted)
