"""Settings from the environment (and .env), plus logging setup for entry points."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/contactbook/config.py go up three levels
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"


def _load_env_file() -> None:
    # First existing .env wins; real environment variables are not overridden.
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def load_settings() -> Settings:
    """Read CONTACTBOOK_* variables. Empty values count as unset."""
    _load_env_file()
    log_level = os.environ.get("CONTACTBOOK_LOG_LEVEL", "").strip().upper() or "INFO"
    return Settings(log_level=log_level)


def configure_logging(level: str | int = logging.INFO) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=level)
