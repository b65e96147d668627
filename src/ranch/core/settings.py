from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from platformdirs import PlatformDirs

from ..errors import SettingsError
from ..models.creature import Category, Creature, Sex

logger = logging.getLogger(__name__)

APP_NAME = "ranch"
ENV_CONFIG_DIR = "RANCH_CONFIG_DIR"
USER_SETTINGS_FILE = "settings.yaml"


def user_config_dir() -> Path:
    """Platform config directory, overridable through RANCH_CONFIG_DIR."""
    override = os.getenv(ENV_CONFIG_DIR)
    if override:
        return Path(override).expanduser().resolve()
    dirs = PlatformDirs(appname=APP_NAME, appauthor=False)
    return Path(dirs.user_config_dir).expanduser().resolve()


def _lookup(enum_cls, raw: Any, what: str):
    text = str(raw).strip().lower()
    for member in enum_cls:
        if member.value.lower() == text or member.name.lower() == text:
            return member
    raise SettingsError(f"Unknown {what} in roster: {raw!r}")


@dataclass(frozen=True)
class RosterEntry:
    name: str
    category: Category
    sex: Sex

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RosterEntry":
        if not isinstance(data, dict) or "name" not in data:
            raise SettingsError(f"Roster entry must be a mapping with a name: {data!r}")
        return cls(
            name=str(data["name"]),
            category=_lookup(Category, data.get("type", Category.FIRE.value), "type"),
            sex=_lookup(Sex, data.get("sex", Sex.MALE.value), "sex"),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "type": self.category.value, "sex": self.sex.value}

    def build(self) -> Creature:
        return Creature(name=self.name, category=self.category, sex=self.sex)


@dataclass
class Settings:
    seed: Optional[int] = None
    roster: List[RosterEntry] = field(default_factory=list)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise SettingsError(f"Invalid YAML in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        seed = data.get("seed")
        if seed is not None:
            try:
                seed = int(seed)
            except (TypeError, ValueError) as exc:
                raise SettingsError(f"seed must be an integer or null, got {seed!r}") from exc
        roster_raw = data.get("roster") or []
        if not isinstance(roster_raw, list):
            raise SettingsError("roster must be a list")
        roster = [RosterEntry.from_dict(entry) for entry in roster_raw]
        return cls(seed=seed, roster=roster)

    @classmethod
    def load(cls, user_path: Optional[Path] = None, config_dir: Optional[Path] = None) -> "Settings":
        """Load packaged defaults, then overlay the user config file and ``user_path``.

        A missing ``user_path`` is reported and ignored.
        """
        try:
            with resources.files("ranch.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = {}

        merged = default_data
        platform_file = (config_dir or user_config_dir()) / USER_SETTINGS_FILE
        if platform_file.exists():
            merged = cls._deep_merge(merged, cls._load_yaml(platform_file))
            logger.info("Loaded user settings from %s", platform_file)

        if user_path is not None:
            if user_path.exists():
                merged = cls._deep_merge(merged, cls._load_yaml(user_path))
                logger.info("Loaded settings from %s", user_path)
            else:
                logger.warning("Settings file not found: %s", user_path)

        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def build_roster(self) -> List[Creature]:
        return [entry.build() for entry in self.roster]
