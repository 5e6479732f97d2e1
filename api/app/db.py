from typing import Optional

import psycopg
from psycopg.rows import dict_row

from . import config

# keep idle connections to a hosted PostgreSQL from being dropped
KEEPALIVE_OPTIONS = {
    "keepalives": 1,
    "keepalives_idle": 30,
    "keepalives_interval": 10,
    "keepalives_count": 3,
}


def get_connection(database_url: Optional[str] = None) -> psycopg.Connection:
    """Open a connection to the persons database; rows come back as dicts."""
    url = database_url or config.DATABASE_URL
    if not url:
        raise RuntimeError("DATABASE_URL is not set; cannot reach the persons database")
    return psycopg.connect(
        url,
        row_factory=dict_row,
        connect_timeout=config.DB_CONNECT_TIMEOUT_SECONDS,
        **KEEPALIVE_OPTIONS,
    )
