"""Runtime settings read from the environment (and an optional .env file)."""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

NWS_API_BASE = "https://api.weather.gov"
USER_AGENT = "weather-app/1.0"
HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    firebase_api_key: Optional[str] = None
    firebase_auth_domain: Optional[str] = None
    firebase_project_id: Optional[str] = None
    nws_api_base: str = NWS_API_BASE
    user_agent: str = USER_AGENT
    http_timeout: float = HTTP_TIMEOUT
    log_dir: str = "logs"
    log_level: str = "INFO"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Build settings from environment variables.

    Values already present in the environment win over the .env file.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))
    return Settings(
        firebase_api_key=os.environ.get("FIREBASE_API_KEY") or None,
        firebase_auth_domain=os.environ.get("FIREBASE_AUTH_DOMAIN") or None,
        firebase_project_id=os.environ.get("FIREBASE_PROJECT_ID") or None,
        nws_api_base=os.environ.get("NWS_API_BASE", NWS_API_BASE).rstrip("/"),
        user_agent=os.environ.get("NWS_USER_AGENT", USER_AGENT),
        http_timeout=float(os.environ.get("HTTP_TIMEOUT", HTTP_TIMEOUT)),
        log_dir=os.environ.get("LOG_DIR", "logs"),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )
