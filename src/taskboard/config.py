"""Configuration loader for Taskboard (global + project TOML with built-in defaults)."""

from __future__ import annotations

import copy
import os
import platform
from pathlib import Path
from typing import Any, Dict, List, Optional

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for Python <3.11
    import tomli as tomllib  # type: ignore

from .errors import ConfigError
from .state.tasks import IdPolicy, Task


DEFAULT_CONFIG: Dict[str, Any] = {
    "board": {
        "title": "Task List",
        "team_members": ["Usuario 1", "Usuario 2", "Usuario 3"],
    },
    "tasks": {
        "id_policy": IdPolicy.COUNTER.value,
        "seed": [
            {
                "id": 1,
                "title": "Tarea 1",
                "description": "Descripción de la tarea 1",
                "responsible": ["Usuario 1"],
            },
            {
                "id": 2,
                "title": "Tarea 2",
                "description": "Descripción de la tarea 2",
                "responsible": ["Usuario 2", "Usuario 3"],
            },
        ],
    },
    "logging": {
        "dir": "",
    },
}

# Environment variable -> dotted config key. List values are comma-separated.
ENV_OVERRIDES = {
    "TASKBOARD_TEAM_MEMBERS": "board.team_members",
    "TASKBOARD_TITLE": "board.title",
    "TASKBOARD_ID_POLICY": "tasks.id_policy",
    "TASKBOARD_LOG_DIR": "logging.dir",
}
LIST_KEYS = {"board.team_members"}


class ConfigLoader:
    """
    Resolves configuration from several sources.

    Priority (highest → lowest):
    1. Command-line arguments (not handled here)
    2. Environment variables (TASKBOARD_*)
    3. Project config (.taskboard/config.toml)
    4. Global config (~/.config/taskboard/config.toml)
    5. Built-in defaults

    Files are only ever read.
    """

    def __init__(
        self,
        global_dir: Optional[Path] = None,
        project_dir: Optional[Path] = None,
        environ: Optional[Dict[str, str]] = None,
    ) -> None:
        self.global_dir = global_dir or self.get_global_config_dir()
        self.project_dir = project_dir or self.get_project_config_dir()
        self.environ = os.environ if environ is None else environ

        self.config: Dict[str, Any] = {}
        self._load_all()

    # ------------------------------------------------------------------ #
    # Public getters
    # ------------------------------------------------------------------ #
    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-separated key."""
        keys = key.split(".")
        value: Any = self.config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    def set(self, key: str, value: Any) -> None:
        """Override a value for this process only."""
        self._set_nested(self.config, key, value)

    def team_members(self) -> List[str]:
        members = self.get("board.team_members", [])
        if not isinstance(members, list) or not all(isinstance(m, str) for m in members):
            raise ConfigError("board.team_members must be a list of names")
        cleaned = [m.strip() for m in members if m.strip()]
        if len(set(cleaned)) != len(cleaned):
            raise ConfigError("board.team_members lists a member twice")
        return cleaned

    def seed_tasks(self) -> List[Task]:
        entries = self.get("tasks.seed", [])
        if not isinstance(entries, list):
            raise ConfigError("tasks.seed must be a list of tables")
        tasks: List[Task] = []
        for entry in entries:
            if not isinstance(entry, dict) or "id" not in entry:
                raise ConfigError(f"Invalid seed task entry: {entry!r}")
            for key in ("title", "description"):
                if not isinstance(entry.get(key, ""), str):
                    raise ConfigError(f"Seed task {entry['id']!r}: {key} must be a string")
            responsible = entry.get("responsible", [])
            if not isinstance(responsible, list) or not all(isinstance(m, str) for m in responsible):
                raise ConfigError(f"Seed task {entry['id']!r}: responsible must be a list of names")
            try:
                tasks.append(Task.from_dict(entry))
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid seed task entry: {entry!r}") from exc
        return tasks

    def id_policy(self) -> IdPolicy:
        raw = self.get("tasks.id_policy", IdPolicy.COUNTER.value)
        try:
            return IdPolicy(raw)
        except ValueError:
            choices = ", ".join(p.value for p in IdPolicy)
            raise ConfigError(f"Unknown tasks.id_policy '{raw}' (expected one of: {choices})") from None

    def log_dir(self) -> Optional[Path]:
        raw = self.get("logging.dir", "")
        return Path(raw).expanduser() if raw else None

    # ------------------------------------------------------------------ #
    # Load/merge helpers
    # ------------------------------------------------------------------ #
    def _load_all(self) -> None:
        """Load all configuration sources with proper priority."""
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        self._merge_file(self.global_dir / "config.toml")
        if self.project_dir:
            self._merge_file(self.project_dir / "config.toml")
        self._apply_env_overrides()

    def _merge_file(self, config_file: Path) -> None:
        if not config_file.exists():
            return
        try:
            with open(config_file, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Cannot parse {config_file}: {exc}") from exc
        self._deep_merge(self.config, data)

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides (TASKBOARD_*)."""
        for env_key, config_key in ENV_OVERRIDES.items():
            value = self.environ.get(env_key)
            if value is None:
                continue
            if config_key in LIST_KEYS:
                self._set_nested(self.config, config_key, [v.strip() for v in value.split(",") if v.strip()])
            else:
                self._set_nested(self.config, config_key, value)

    # ------------------------------------------------------------------ #
    # Static paths/helpers
    # ------------------------------------------------------------------ #
    @staticmethod
    def get_global_config_dir() -> Path:
        """Get platform-specific global config directory following XDG spec."""
        system = platform.system()
        if system == "Windows":
            base = Path(os.environ.get("APPDATA", "~\\AppData\\Roaming")).expanduser()
        elif system == "Darwin":
            xdg = os.environ.get("XDG_CONFIG_HOME")
            base = Path(xdg) if xdg else Path.home() / ".config"
        else:
            base = Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()
        return base / "taskboard"

    @staticmethod
    def get_project_config_dir() -> Path | None:
        """Find .taskboard directory in current or parent directories."""
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_dir = parent / ".taskboard"
            if config_dir.is_dir():
                return config_dir
        return None

    # ------------------------------------------------------------------ #
    # Utility helpers
    # ------------------------------------------------------------------ #
    def _deep_merge(self, base: dict, override: dict) -> None:
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, d: dict, path: str, value: Any) -> None:
        keys = path.split(".")
        for key in keys[:-1]:
            d = d.setdefault(key, {})
        d[keys[-1]] = value


Config = ConfigLoader

__all__ = ["ConfigLoader", "Config", "DEFAULT_CONFIG"]
