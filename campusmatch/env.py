import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

TRUTHY = {"1", "true", "yes", "on"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    case_sensitive: bool = False
    log_dir: Optional[Path] = Path("logs")


def load_env() -> None:
    """Load .env from the working directory if present.
    Values already set in the process environment win.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


def get_settings() -> Settings:
    log_dir = os.getenv("CAMPUSMATCH_LOG_DIR", "logs").strip()
    log_level = os.getenv("CAMPUSMATCH_LOG_LEVEL", "INFO").strip().upper()
    # Unknown level names fall back to INFO, like garbled flags fall back to false
    if log_level not in LOG_LEVELS:
        log_level = "INFO"
    return Settings(
        log_level=log_level,
        case_sensitive=_env_flag("CAMPUSMATCH_CASE_SENSITIVE"),
        log_dir=Path(log_dir) if log_dir else None,
    )
