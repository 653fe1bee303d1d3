import os
import logging

from dotenv import load_dotenv

load_dotenv()

# Default to a local SQLite file; any SQLAlchemy URL (e.g. Postgres) may override it
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./finance_tracker.db")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
