from __future__ import annotations

import os
import yaml
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "barnacle" / "client.yml"
DEFAULT_PROJECTS_DIR = Path.home() / ".config" / "barnacle" / "projects"
TOKEN_ENV_VARS = ("BARNACLE_GITHUB_TOKEN", "GITHUB_TOKEN")
STORE_KINDS = ("gist", "local")


@dataclass
class ClientConfig:
    gist_id: str = ""
    token: str = ""
    store: str = ""
    projects_dir: str = ""
    current_project: Optional[str] = None
    show_finished: bool = True
    show_today: bool = False
    auto_save: bool = True
    theme: str = "dark"
    log_level: str = "INFO"

    def resolved_token(self) -> str:
        if self.token:
            return self.token
        for name in TOKEN_ENV_VARS:
            value = os.environ.get(name, "").strip()
            if value:
                return value
        return ""

    def store_kind(self) -> str:
        """`gist` when credentials are present and not overridden, else `local`."""
        if self.store == "local":
            return "local"
        if self.gist_id and self.resolved_token():
            return "gist"
        return "local"

    def projects_path(self) -> Path:
        return Path(self.projects_dir).expanduser() if self.projects_dir else DEFAULT_PROJECTS_DIR


def config_path() -> Path:
    override = os.environ.get("BARNACLE_CONFIG", "").strip()
    return Path(override).expanduser() if override else DEFAULT_CONFIG_PATH


def _load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    target = path or config_path()
    if not target.exists():
        return {}
    try:
        data = yaml.safe_load(target.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    target = path or config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(yaml.safe_dump(data, allow_unicode=True, sort_keys=True), encoding="utf-8")


def _coerce(name: str, value: Any, default: Any) -> Any:
    if isinstance(default, bool):
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)
    if name == "current_project":
        return str(value) if value else None
    return "" if value is None else str(value)


def load_client_config(path: Optional[Path] = None) -> ClientConfig:
    raw = _load_config(path)
    defaults = ClientConfig()
    values = {}
    for f in fields(ClientConfig):
        if f.name in raw:
            values[f.name] = _coerce(f.name, raw[f.name], getattr(defaults, f.name))
    return ClientConfig(**values)


def save_client_config(config: ClientConfig, path: Optional[Path] = None) -> None:
    data = {key: value for key, value in asdict(config).items() if value not in (None, "")}
    _save_config(data, path)


def update_client_config(values: Dict[str, Any], path: Optional[Path] = None) -> None:
    """Merge `values` into the stored file; None removes a key."""
    data = _load_config(path)
    for key, value in values.items():
        if value is None or value == "":
            data.pop(key, None)
        else:
            data[key] = value
    _save_config(data, path)


def set_current_project(name: Optional[str], path: Optional[Path] = None) -> None:
    update_client_config({"current_project": name}, path)


def set_display_preference(key: str, value: bool, path: Optional[Path] = None) -> None:
    if key not in {"show_finished", "show_today"}:
        raise KeyError(key)
    update_client_config({key: bool(value)}, path)


def persist_view_state(config: ClientConfig, path: Optional[Path] = None) -> None:
    update_client_config(
        {
            "current_project": config.current_project,
            "show_finished": config.show_finished,
            "show_today": config.show_today,
        },
        path,
    )


def set_credentials(token: str, gist_id: str, path: Optional[Path] = None) -> None:
    update_client_config({"token": (token or "").strip(), "gist_id": (gist_id or "").strip()}, path)
