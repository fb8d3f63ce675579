"""SDK configuration loader."""
from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from fireconfig.core import config as core_config
from fireconfig.core.errors import ConfigError

PROJECT_ID_ENV_VARS = ("FIRECONFIG_PROJECT_ID", "GOOGLE_CLOUD_PROJECT", "GCLOUD_PROJECT")


@dataclass(frozen=True)
class SdkConfig:
    project_id: Optional[str] = None
    timeout: int = core_config.DEFAULT_TIMEOUT
    default_output_format: str = core_config.DEFAULT_OUTPUT_FORMAT
    default_output_dir: Optional[Path] = None


DEFAULT_CONFIG_PATH = Path.home() / ".fireconfig" / "config.toml"


def _load_toml(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc


def _parse_timeout(value: object) -> int:
    try:
        timeout = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid timeout: {value!r}") from exc
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive: {timeout}")
    return timeout


def _env_project_id() -> str | None:
    for name in PROJECT_ID_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


def load_config(path: Path | None = None) -> SdkConfig:
    cfg_path = path or DEFAULT_CONFIG_PATH
    file_data = _load_toml(cfg_path)
    section = file_data.get("fireconfig", file_data) if isinstance(file_data, dict) else {}

    project_id = _env_project_id() or section.get("project_id") or None

    timeout_val = os.environ.get("FIRECONFIG_TIMEOUT") or section.get("timeout")
    timeout = _parse_timeout(timeout_val) if timeout_val is not None else core_config.DEFAULT_TIMEOUT

    output_format = section.get("default_output_format", core_config.DEFAULT_OUTPUT_FORMAT)
    if output_format not in core_config.OUTPUT_FORMATS:
        raise ConfigError(f"Invalid default_output_format: {output_format}")

    out_dir_val = section.get("default_output_dir")
    out_dir = Path(out_dir_val).expanduser() if out_dir_val else None

    return SdkConfig(
        project_id=project_id,
        timeout=timeout,
        default_output_format=output_format,
        default_output_dir=out_dir,
    )


def merge_cli_overrides(
    config: SdkConfig,
    project_id: str | None = None,
    timeout: int | None = None,
    output_format: str | None = None,
) -> SdkConfig:
    updated = config
    if project_id:
        updated = replace(updated, project_id=project_id)
    if timeout is not None:
        updated = replace(updated, timeout=_parse_timeout(timeout))
    if output_format:
        if output_format not in core_config.OUTPUT_FORMATS:
            raise ConfigError(f"Invalid output format: {output_format}")
        updated = replace(updated, default_output_format=output_format)
    return updated
