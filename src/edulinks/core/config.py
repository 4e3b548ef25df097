from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from edulinks.core.errors import ConfigurationError


@dataclass(frozen=True)
class AppConfig:
    project_root: Path
    records_dir: Path
    strict_description: bool = False
    fetch_descriptions: bool = True
    fetch_timeout: float = 10.0


DEFAULT_RECORDS_DIRNAME = "toml"
DEFAULT_FETCH_TIMEOUT = 10.0


def load_config(project_root: Path | None = None) -> AppConfig:
    root = (project_root or Path.cwd()).expanduser().resolve()

    home_raw = os.getenv("EDULINKS_HOME")
    if home_raw:
        records_dir = Path(home_raw).expanduser().resolve()
    else:
        records_dir = root / DEFAULT_RECORDS_DIRNAME

    return AppConfig(
        project_root=root,
        records_dir=records_dir,
        strict_description=_read_bool_env("EDULINKS_STRICT_DESCRIPTION", False),
        fetch_descriptions=_read_bool_env("EDULINKS_FETCH_DESCRIPTIONS", True),
        fetch_timeout=_read_float_env("EDULINKS_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT),
    )


def with_overrides(
    config: AppConfig,
    *,
    records_dir: Path | None = None,
    strict_description: bool | None = None,
    fetch_descriptions: bool | None = None,
) -> AppConfig:
    changes: dict[str, object] = {}
    if records_dir is not None:
        changes["records_dir"] = records_dir.expanduser().resolve()
    if strict_description is not None:
        changes["strict_description"] = strict_description
    if fetch_descriptions is not None:
        changes["fetch_descriptions"] = fetch_descriptions
    return replace(config, **changes)


def _read_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off", ""}:
        return False
    raise ConfigurationError(f"{name} must be a boolean (1/0, true/false, yes/no, on/off), got {raw!r}")


def _read_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value
