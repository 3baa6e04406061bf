# tokensafety/config.py
# Env-driven settings. Entry points call load_dotenv() before reading these.
import logging
import os

_FALSY = {"0", "false", "no", "off", ""}

MAX_CONCURRENCY = 8


def get_log_level() -> int:
    name = os.getenv("TOKENSAFETY_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_cors_origins() -> list[str]:
    raw = os.getenv("TOKENSAFETY_CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def clamp_concurrency(n) -> int:
    try:
        n = int(n)
    except (TypeError, ValueError):
        n = 1
    return max(1, min(MAX_CONCURRENCY, n))


def get_default_concurrency() -> int:
    return clamp_concurrency(os.getenv("TOKENSAFETY_BATCH_CONCURRENCY", "2"))


def checksum_addresses() -> bool:
    return os.getenv("TOKENSAFETY_CHECKSUM_ADDRESSES", "1").strip().lower() not in _FALSY


def setup_logging() -> None:
    logging.basicConfig(level=get_log_level(), format="[%(name)s] %(message)s")
