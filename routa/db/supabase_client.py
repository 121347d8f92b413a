from functools import lru_cache

from supabase import create_client, Client

from routa.core.config import settings


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """
    Initializes and returns the shared Supabase client.
    Created on first use so the CSV backend never needs credentials.
    """
    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        raise ValueError("Supabase URL and Key must be set in .env file")

    supabase: Client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return supabase
