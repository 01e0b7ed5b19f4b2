"""Application settings loading helpers.

Defaults live on the ``Settings`` dataclass; ``configs/settings.yaml`` and
``DRONEPATH_*`` environment variables override them, in that order.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[2] / "configs" / "settings.yaml"
ALLOWED_THEMES = {"light", "dark"}
ALLOWED_LANGS = {"zh", "en"}
ENV_PREFIX = "DRONEPATH_"


@dataclass(frozen=True)
class Settings:
    map_center_lat: float = 20.6
    map_center_lon: float = 78.9
    map_zoom: int = 5
    tile_layer: str = "OpenStreetMap"
    path_color: str = "#00f2ff"
    path_weight: int = 4
    animation_step_s: float = 0.9
    default_theme: str = "dark"
    default_lang: str = "en"
    preferences_path: str = "~/.dronepath/preferences.yaml"
    reports_dir: str = "reports"

    def resolved_preferences_path(self) -> Path:
        return Path(self.preferences_path).expanduser()

    def resolved_reports_dir(self) -> Path:
        return Path(self.reports_dir).expanduser()


def _coerce(name: str, raw: Any) -> Any:
    """Cast a raw YAML/env value to the type of the matching Settings field."""
    default = getattr(Settings, name)
    try:
        if isinstance(default, int):
            if isinstance(raw, float) and not raw.is_integer():
                raise ValueError("expected a whole number")
            return int(raw)
        if isinstance(default, float):
            return float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Setting '{name}' has invalid value {raw!r}: {e}") from e
    return str(raw)


def _validate(settings: Settings) -> Settings:
    theme = settings.default_theme.lower()
    if theme not in ALLOWED_THEMES:
        raise ValueError(
            f"default_theme '{settings.default_theme}' is invalid, expected one of {sorted(ALLOWED_THEMES)}"
        )
    lang = settings.default_lang.lower()
    if lang not in ALLOWED_LANGS:
        raise ValueError(
            f"default_lang '{settings.default_lang}' is invalid, expected one of {sorted(ALLOWED_LANGS)}"
        )
    if settings.animation_step_s <= 0:
        raise ValueError(f"animation_step_s must be positive, got {settings.animation_step_s}")
    if not 1 <= settings.map_zoom <= 18:
        raise ValueError(f"map_zoom must be within [1, 18], got {settings.map_zoom}")
    if settings.path_weight <= 0:
        raise ValueError(f"path_weight must be positive, got {settings.path_weight}")
    return replace(settings, default_theme=theme, default_lang=lang)


def _read_yaml_overrides(path: Path) -> Dict[str, Any]:
    payload = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"Settings file must be a mapping at top level: {path}")

    app = payload.get("app") or {}
    if not isinstance(app, dict):
        raise ValueError(f"'app' must be a mapping of setting -> value in {path}")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(app) - known)
    if unknown:
        raise ValueError(f"Unknown settings in {path}: {unknown}")
    return {k: _coerce(k, v) for k, v in app.items()}


def _read_env_overrides(environ: Dict[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for f in fields(Settings):
        key = ENV_PREFIX + f.name.upper()
        if key in environ and environ[key] != "":
            overrides[f.name] = _coerce(f.name, environ[key])
    return overrides


def load_settings(
    config_path: str | Path | None = None,
    environ: Dict[str, str] | None = None,
) -> Settings:
    """
    Build the effective settings.

    A missing default file is fine (defaults apply); an explicitly given
    ``config_path`` that does not exist raises ``FileNotFoundError``.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")
    else:
        env_path = (environ if environ is not None else os.environ).get(ENV_PREFIX + "SETTINGS")
        path = Path(env_path) if env_path else DEFAULT_SETTINGS_PATH

    overrides: Dict[str, Any] = {}
    if path.exists():
        overrides.update(_read_yaml_overrides(path))
    overrides.update(_read_env_overrides(dict(environ if environ is not None else os.environ)))

    return _validate(replace(Settings(), **overrides))
