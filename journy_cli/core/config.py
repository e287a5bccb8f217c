"""CLI Configuration management."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.journy.io"
CONFIG_FILENAME = "config.json"


class Settings(BaseSettings):
    """Process settings, overridable with JOURNY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JOURNY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    config_dir: Path = Path.home() / ".journy"

    # Takes precedence over the stored key when set
    api_key: Optional[str] = None


class ConfigStore:
    """Persisted key-value record backed by a JSON file. Last write wins."""

    def __init__(self, path: Path):
        self.path = path

    def all(self) -> dict[str, Any]:
        """Read the whole record. A missing or corrupt file reads as empty."""
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self.all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self.all()
        data[key] = value
        self._write(data)

    def unset(self, key: str) -> bool:
        """Remove a key. Returns False when it was not stored."""
        data = self.all()
        if key not in data:
            return False
        del data[key]
        self._write(data)
        return True

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


@dataclass
class CLIConfig:
    """Configuration for the Journy CLI, built once per process."""

    settings: Settings = field(default_factory=Settings)
    store: ConfigStore = field(init=False)

    def __post_init__(self):
        self.store = ConfigStore(Path(self.settings.config_dir).expanduser() / CONFIG_FILENAME)

    @classmethod
    def load(cls, **overrides: Any) -> "CLIConfig":
        """Create config from the environment, applying explicit overrides."""
        settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
        return cls(settings=settings)

    @property
    def base_url(self) -> str:
        return self.settings.base_url.rstrip("/")

    @property
    def timeout(self) -> float:
        return self.settings.timeout

    @property
    def history_file(self) -> Path:
        return Path(self.settings.config_dir).expanduser() / "history"

    @property
    def api_key(self) -> Optional[str]:
        """The credential: environment override first, then the stored key."""
        env_key = (self.settings.api_key or "").strip()
        if env_key:
            return env_key
        stored = self.store.get("apiKey")
        if isinstance(stored, str) and stored.strip():
            return stored.strip()
        return None

    def is_configured(self) -> bool:
        return self.api_key is not None
