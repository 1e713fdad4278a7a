"""Configuration loading and precedence resolution.

A project may pin its inlining settings in a ``resinline.json`` file at the
project root::

    {
      "include": ["**/*.ts"],
      "exclude": ["**/*.spec.ts"],
      "remove_module_id": true
    }

:func:`resolve_config` merges that file with environment variables and CLI
flags into the effective :class:`~resinline.models.InlineConfig`.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from resinline.exceptions import ConfigError
from resinline.models import InlineConfig

PROJECT_CONFIG_FILENAME = "resinline.json"

_ENV_INCLUDE = "RESINLINE_INCLUDE"
_ENV_EXCLUDE = "RESINLINE_EXCLUDE"
_ENV_ENCODING = "RESINLINE_ENCODING"


# --- Project-local config ---


def load_project_config(project_path: str | Path) -> Optional[dict[str, Any]]:
    """Load ``resinline.json`` from *project_path*.

    Returns:
        The parsed JSON object, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not a JSON object.
    """
    path = Path(project_path) / PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


def _split_env_list(value: str) -> list[str]:
    """Split a comma-separated environment value, dropping empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


# --- Precedence resolution ---


def resolve_config(
    project_path: str | Path,
    cli_include: Optional[list[str]] = None,
    cli_exclude: Optional[list[str]] = None,
    cli_encoding: Optional[str] = None,
    cli_inline_templates: Optional[bool] = None,
    cli_remove_module_id: Optional[bool] = None,
) -> InlineConfig:
    """Resolve config with full precedence chain.

    Precedence (high to low):
        1. CLI flags (non-``None`` / non-empty arguments)
        2. Environment variables (``RESINLINE_INCLUDE``,
           ``RESINLINE_EXCLUDE``, ``RESINLINE_ENCODING``)
        3. Project config (``<project>/resinline.json``)
        4. Defaults

    Raises:
        ConfigError: If the merged values fail validation.
    """
    # 4 + 3. Defaults overlaid with the project file
    merged: dict[str, Any] = dict(load_project_config(project_path) or {})

    # 2. Environment variables
    env_include = os.environ.get(_ENV_INCLUDE)
    if env_include:
        merged["include"] = _split_env_list(env_include)
    env_exclude = os.environ.get(_ENV_EXCLUDE)
    if env_exclude:
        merged["exclude"] = _split_env_list(env_exclude)
    env_encoding = os.environ.get(_ENV_ENCODING)
    if env_encoding:
        merged["encoding"] = env_encoding

    # 1. CLI flags
    if cli_include:
        merged["include"] = list(cli_include)
    if cli_exclude:
        merged["exclude"] = list(cli_exclude)
    if cli_encoding is not None:
        merged["encoding"] = cli_encoding
    if cli_inline_templates is not None:
        merged["inline_templates"] = cli_inline_templates
    if cli_remove_module_id is not None:
        merged["remove_module_id"] = cli_remove_module_id

    try:
        return InlineConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration for {project_path}: {exc}") from exc
