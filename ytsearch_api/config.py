import os
from dataclasses import dataclass
from dotenv import load_dotenv


load_dotenv()


SERVICE_NAME = "youtube-search-api"
SERVICE_TITLE = "YouTube Search API"
VERSION = "1.0.0"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT


def get_settings() -> Settings:
    raw_port = os.getenv("PORT", "").strip()
    if not raw_port:
        return Settings()
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"Invalid PORT in environment or .env: {raw_port!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")
    return Settings(port=port)
