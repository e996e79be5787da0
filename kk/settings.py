from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.color import Color, ColorParseError


def default_data_dir() -> Path:
    return Path.home() / ".local" / "share" / "kk"


class Settings(BaseSettings):
    """Configuration for the kanban board.

    Values are loaded from environment variables and `.env`.

    Notes:
    - KK_DB_PATH may be ":memory:" for throwaway sessions.
    - EDITOR is the same variable shells already export for git and friends.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    KK_DB_PATH: Path | None = Field(default=None)
    KK_BUSY_TIMEOUT_SEC: float = Field(default=5.0)

    # Display
    KK_HIGHLIGHT_COLOR: str = Field(default="#FF96A7")
    # Seconds an error stays in the modeline before it is cleared.
    KK_ERROR_DISPLAY_SEC: float = Field(default=10.0)
    # Upper bound on how long the loop blocks waiting for a key.
    KK_INPUT_POLL_SEC: float = Field(default=1.0)

    # Logging (file only; the board owns the terminal)
    KK_LOG_DIR: Path | None = Field(default=None)
    KK_LOG_LEVEL: str = Field(default="INFO")
    KK_LOG_BACKUP_COUNT: int = Field(default=7)

    # External editor for cards and boards
    EDITOR: str | None = Field(default=None)

    @field_validator("KK_HIGHLIGHT_COLOR")
    @classmethod
    def _check_color(cls, value: str) -> str:
        try:
            Color.parse(value)
        except ColorParseError as e:
            raise ValueError(f"not a colour: {value!r}") from e
        return value

    @property
    def in_memory(self) -> bool:
        return str(self.KK_DB_PATH) == ":memory:"


def load_settings(**overrides) -> Settings:
    """Build settings, apply command-line overrides and fill in default paths.

    Overrides whose value is None are ignored so optional CLI flags can be
    passed straight through.
    """
    s = Settings(**{k: v for k, v in overrides.items() if v is not None})
    if s.KK_DB_PATH is None:
        s.KK_DB_PATH = default_data_dir() / "kk.db"
    if s.KK_LOG_DIR is None:
        s.KK_LOG_DIR = default_data_dir() / "logs"
    # Ensure parent dir exists
    if not s.in_memory:
        s.KK_DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    return s
