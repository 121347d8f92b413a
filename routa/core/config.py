import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_CATALOG_DIR = Path(__file__).resolve().parent.parent / "data"


def _int_or_none(value: str | None) -> int | None:
    if value is None or value.strip() == "":
        return None
    return int(value)


class Settings:
    SUPABASE_URL: str | None = os.getenv("SUPABASE_URL")
    SUPABASE_KEY: str | None = os.getenv("SUPABASE_KEY")

    # "csv" reads the bundled files under CATALOG_DIR, "supabase" queries the database
    CATALOG_BACKEND: str = os.getenv("CATALOG_BACKEND", "csv").lower()
    CATALOG_DIR: Path = Path(os.getenv("CATALOG_DIR") or DEFAULT_CATALOG_DIR)
    ROUTE_STORE_BACKEND: str = os.getenv("ROUTE_STORE_BACKEND", "memory").lower()

    PLACES_PER_DAY: int = int(os.getenv("PLACES_PER_DAY", "2"))
    RANDOM_SEED: int | None = _int_or_none(os.getenv("RANDOM_SEED"))

    # Choices offered by the route generator screen
    DURATION_OPTIONS: tuple[int, ...] = (1, 2, 3, 4, 5, 7, 10, 14)
    DEFAULT_DURATION: int = 3
    POPULAR_LIMIT: int = 5

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
