# app/config.py
import os
from datetime import timezone, tzinfo
from typing import List, Optional
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

# .env im Projekt-Root bevorzugen, sonst Standardsuche von python-dotenv
dotenv_path = os.path.join(os.path.dirname(__file__), "..", ".env")
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path)
else:
    load_dotenv()


APP_TITLE = os.getenv("APP_TITLE", "Survey Management Backend")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Host und Port für den direkten Start über `python -m app.main`
APP_HOST = os.getenv("APP_HOST", "127.0.0.1")
APP_PORT = int(os.getenv("APP_PORT", "8000"))
RELOAD_APP = os.getenv("RELOAD_APP", "True").lower() == "true"

FALLBACK_ORIGINS = [
    "http://127.0.0.1:5173",
    "http://localhost:5173",
    "http://localhost:8080",
]


def allowed_origins() -> List[str]:
    env_origins = os.getenv("BACKEND_ALLOWED_ORIGINS")
    if env_origins:
        origins = [origin.strip() for origin in env_origins.split(",") if origin.strip()]
        if origins:
            return origins
    return FALLBACK_ORIGINS


def _timeline_timezone() -> tzinfo:
    name = os.getenv("TIMELINE_TIMEZONE", "UTC")
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


# Tagesgrenzen der Timeline werden in dieser Zone bestimmt
TIMELINE_TIMEZONE = _timeline_timezone()

SAMPLE_RESPONSES_MIN = int(os.getenv("SAMPLE_RESPONSES_MIN", 5))
SAMPLE_RESPONSES_MAX = int(os.getenv("SAMPLE_RESPONSES_MAX", 24))
SAMPLE_BACKDATE_DAYS = int(os.getenv("SAMPLE_BACKDATE_DAYS", 30))


def random_seed() -> Optional[int]:
    seed = os.getenv("RANDOM_SEED")
    if seed is None or seed == "":
        return None
    return int(seed)
