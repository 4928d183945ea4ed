"""Environment-driven settings."""
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_FILE = BASE_DIR / "data" / "characters.json"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def env_bool(name, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    logger.warning("⚠️ Ignoring invalid boolean %s=%r, using %s", name, raw, default)
    return default


def env_int(name, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("⚠️ Ignoring invalid integer %s=%r, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    secret_key: str = "replace-with-a-secret"
    data_file: Path = DEFAULT_DATA_FILE
    letter_hint_enabled: bool = True
    include_deceased: bool = True
    strict_guesses: bool = True
    host: str = "0.0.0.0"
    port: int = 5000


def load_settings():
    """Read settings from the environment, after loading a .env file if present."""
    if not load_dotenv():
        logger.debug("No .env file found, using environment only")
    return Settings(
        secret_key=os.environ.get("SECRET_KEY", Settings.secret_key),
        data_file=Path(os.environ.get("GUESS_DATA_FILE") or DEFAULT_DATA_FILE),
        letter_hint_enabled=env_bool("LETTER_HINT_ENABLED", True),
        include_deceased=env_bool("INCLUDE_DECEASED", True),
        strict_guesses=env_bool("STRICT_GUESSES", True),
        host=os.environ.get("HOST", Settings.host),
        port=env_int("PORT", Settings.port),
    )
