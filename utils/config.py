"""
UTIL: Configuration
PURPOSE: Loads .env once and builds an immutable Config value — single source of truth
         for API keys, the webhook URL, model name and local file locations.
         Nothing downstream reads the environment directly; main.py passes Config in.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv


def _require(key: str) -> str:
    """Get required env var or raise."""
    val = os.getenv(key)
    if not val:
        raise EnvironmentError(f"Missing required env var: {key}")
    return val


# ── Defaults ────────────────────────────────────────────────
DEFAULT_MODEL = "google/gemini-2.5-flash"
DEFAULT_TIMEZONE = "America/Los_Angeles"
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1/chat/completions"

SAVE_FILE = "current_horoscope.txt"
HISTORY_FILE = "horoscope_history.json"
ID_FILE = "message_id.txt"
HISTORY_LIMIT = 30

# Discord embed accent (purple)
EMBED_COLOR = 10180886


@dataclass(frozen=True)
class Config:
    openrouter_api_key: str
    discord_webhook_url: str
    alert_webhook_url: str = ""
    model: str = DEFAULT_MODEL
    timezone: str = DEFAULT_TIMEZONE
    output_dir: str = "."
    message_id_file: str = ID_FILE
    history_file: str = HISTORY_FILE

    @property
    def message_id_path(self) -> str:
        return os.path.join(self.output_dir, self.message_id_file)

    @property
    def history_path(self) -> str:
        return os.path.join(self.output_dir, self.history_file)


def load_config() -> Config:
    """Read .env + process environment into a Config. Call once at startup."""
    load_dotenv()

    return Config(
        # ── OpenRouter ──────────────────────────────────────
        openrouter_api_key=_require("OPENROUTER_API_KEY"),
        model=os.getenv("HOROSCOPE_MODEL") or DEFAULT_MODEL,
        # ── Discord ─────────────────────────────────────────
        discord_webhook_url=_require("DISCORD_WEBHOOK_URL"),
        alert_webhook_url=os.getenv("ALERT_WEBHOOK_URL") or "",
        # ── Local state ─────────────────────────────────────
        timezone=os.getenv("HOROSCOPE_TIMEZONE") or DEFAULT_TIMEZONE,
        output_dir=os.getenv("OUTPUT_DIR") or ".",
        message_id_file=os.getenv("MESSAGE_ID_FILE") or ID_FILE,
        history_file=os.getenv("HISTORY_FILE") or HISTORY_FILE,
    )
