"""Runtime configuration.

Module constants hold the defaults; ``load_settings`` overlays environment
variables (optionally from a ``.env`` file).
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv
import structlog

LEADERBOARD_URL = "https://lmarena.ai/leaderboard"
TARGET_COLUMN = "Coding"

FETCH_TIMEOUT_SECONDS = 30.0
MAX_FETCH_ATTEMPTS = 3
RETRY_BACKOFF_SECONDS = 1.0
USER_AGENT = "AI-CoderRank/1.0 (Educational Project)"

TOP_N = 10
DATA_VERSION = "1.0.0"
DEFAULT_DATA_PATH = Path("data/models.json")
MAX_DATA_AGE_HOURS = 24.0

_TRUTHY = {"1", "true", "yes", "on"}

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Settings:
    """Environment-derived settings.

    Attributes:
        data_path: Location of the stored model bundle (DATA_PATH).
        use_mock_data: Refresh from the static mock ranking (USE_MOCK_DATA).
        top_n: Number of models kept per refresh (CODERANK_TOP_N).
        leaderboard_url: Page to scrape (LEADERBOARD_URL).
        theme: Dashboard theme reported by the config endpoint (THEME).
    """

    data_path: Path = DEFAULT_DATA_PATH
    use_mock_data: bool = False
    top_n: int = TOP_N
    leaderboard_url: str = LEADERBOARD_URL
    theme: str = "dark"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        logger.warning("invalid_env_value", name=name, value=raw, fallback=default)
        return default
    return value


def load_settings(env_file: str | None = None) -> Settings:
    load_dotenv(env_file)
    return Settings(
        data_path=Path(os.getenv("DATA_PATH", str(DEFAULT_DATA_PATH))),
        use_mock_data=os.getenv("USE_MOCK_DATA", "").strip().lower() in _TRUTHY,
        top_n=_env_int("CODERANK_TOP_N", TOP_N),
        leaderboard_url=os.getenv("LEADERBOARD_URL", LEADERBOARD_URL),
        theme=os.getenv("THEME", "dark"),
    )
