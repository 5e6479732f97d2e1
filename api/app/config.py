import logging
import os
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

if not load_dotenv():
    logger.info("no .env file found, using process environment variables")


def _env_float(name: str) -> Optional[float]:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return None
    return float(raw)


DATABASE_URL = os.environ.get("DATABASE_URL")
HOST = os.environ.get("HOST") or "0.0.0.0"
PORT = int(os.environ.get("PORT") or "8080")
LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").upper()

AGIFY_URL = os.environ.get("AGIFY_URL", "https://api.agify.io/")
GENDERIZE_URL = os.environ.get("GENDERIZE_URL", "https://api.genderize.io/")
NATIONALIZE_URL = os.environ.get("NATIONALIZE_URL", "https://api.nationalize.io/")
# None keeps the transport default
ENRICHMENT_TIMEOUT_SECONDS = _env_float("ENRICHMENT_TIMEOUT_SECONDS")
DB_CONNECT_TIMEOUT_SECONDS = int(os.environ.get("DB_CONNECT_TIMEOUT_SECONDS") or "3")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
