"""
Database client factory for Supabase.

Provides the service-role client used by the Supabase-backed repositories.
"""

from supabase import create_client, Client

from .config import Settings
from .exceptions import ConfigurationError


def create_supabase_client(settings: Settings) -> Client:
    """
    Create a Supabase client with the service role key (bypasses RLS).

    Args:
        settings: Application settings holding the Supabase URL and key

    Returns:
        Supabase client configured with service role key

    Raises:
        ConfigurationError: If the URL or key is missing
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise ConfigurationError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
    )
