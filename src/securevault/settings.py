"""Application settings and filesystem layout helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    """Centralised runtime configuration for the SecureVault app."""

    package_root: Path
    project_root: Path
    var_dir: Path
    log_dir: Path
    templates_dir: Path
    log_path: Path
    secret_key: str


def _resolve_path(environment_key: str, default: Path) -> Path:
    """Return a path from environment or fall back to default."""
    raw_value = os.environ.get(environment_key)
    if not raw_value:
        return default
    return Path(raw_value).expanduser().resolve()


@lru_cache
def get_settings() -> Settings:
    """Compute and cache locations and values used by the app."""
    package_root = Path(__file__).resolve().parent
    project_root = package_root.parent.parent

    var_dir = _resolve_path('SECUREVAULT_VAR_DIR', project_root / 'var')
    log_dir = _resolve_path('SECUREVAULT_LOG_DIR', var_dir / 'logs')
    templates_dir = _resolve_path('SECUREVAULT_TEMPLATE_DIR', package_root / 'templates')
    log_path = _resolve_path('SECUREVAULT_LOG_PATH', log_dir / 'securevault.log')

    # Ensure the log location exists so file handlers can open it.
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    return Settings(
        package_root=package_root,
        project_root=project_root,
        var_dir=var_dir,
        log_dir=log_dir,
        templates_dir=templates_dir,
        log_path=log_path,
        secret_key=os.environ.get('SECUREVAULT_SECRET_KEY', 'dev_secret_key'),
    )
