# circussync/core/supabase_client.py
from supabase import AsyncClient, acreate_client

from circussync.core.config import get_settings


async def supabase_public() -> AsyncClient:
    """
    Create an async Supabase client with the anon/public key.

    Use cases:
      - email/password auth on behalf of an end user (session manager)
      - reads that must respect RLS

    Raises:
        RuntimeError: if SUPABASE_URL / SUPABASE_KEY are not set.
    """
    settings = get_settings()
    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        raise RuntimeError("Missing SUPABASE_URL / SUPABASE_KEY in .env")
    return await acreate_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


async def supabase_admin() -> AsyncClient:
    """
    Create an async Supabase client with the service role key.

    Use cases:
      - backend table access that needs to bypass RLS

    WARNING:
      - Never expose service role key to frontend.
      - Only backend should call this.

    Falls back to the anon key when no service role key is configured,
    in which case table policies apply.
    """
    settings = get_settings()
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        return await supabase_public()
    if not settings.SUPABASE_URL:
        raise RuntimeError("Missing SUPABASE_URL in .env")
    return await acreate_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
