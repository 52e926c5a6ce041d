import logging
import os

from dotenv import load_dotenv

from apps.event_contracts.flags import enabled, csv_list

load_dotenv()

DEFAULT_MASKED_HEADERS = ("authorization", "cookie", "x-api-key")


def _log_level(name: str, default: str = "INFO") -> str:
    level = (os.getenv(name, default) or default).upper()
    # getLevelName maps known names to their numeric level
    if isinstance(logging.getLevelName(level), int):
        return level
    return default


class Settings:
    """
    Process settings, read from the environment (and a local .env if present).

    Contracts are compiled in; nothing here changes validation behaviour.
    """

    def __init__(self) -> None:
        self.EVENT_CONTRACTS_VERSION = os.getenv("EVENT_CONTRACTS_VERSION", "0.1.0")
        self.LOG_LEVEL = _log_level("LOG_LEVEL")
        self.CORS_ALLOW_ORIGINS = csv_list("CORS_ALLOW_ORIGINS")
        self.ACCESS_LOG_ENABLED = enabled("ACCESS_LOG_ENABLED", "true")
        self.ACCESS_LOG_MASKED_HEADERS = frozenset(
            h.lower() for h in (csv_list("ACCESS_LOG_MASKED_HEADERS") or DEFAULT_MASKED_HEADERS)
        )

    def as_dict(self):
        return {
            "version": self.EVENT_CONTRACTS_VERSION,
            "log_level": self.LOG_LEVEL,
            "cors_allow_origins": self.CORS_ALLOW_ORIGINS,
            "access_log_enabled": self.ACCESS_LOG_ENABLED,
            "access_log_masked_headers": sorted(self.ACCESS_LOG_MASKED_HEADERS),
        }


settings = Settings()
