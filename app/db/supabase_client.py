from functools import lru_cache

from supabase import create_client, Client
from app.core.config import settings
from app.core.errors import ConfigurationError


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """
    Initializes and returns the shared Supabase client on first use.
    """
    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        raise ConfigurationError("Database configuration error. Please contact support.")

    supabase: Client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return supabase
