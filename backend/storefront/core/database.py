"""
Supabase client access

The storefront owns no database. Every table read/write and every auth call
goes through the Supabase client created here.

Author: FastDeal
Date: 2026-10-19
"""
import logging
from typing import Optional

from supabase import create_client, Client

from .config import settings


logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Return the process-wide Supabase client, creating it on first use

    Raises:
        RuntimeError if SUPABASE_URL or a Supabase key is not configured
    """
    global _client

    if _client is None:
        if not settings.SUPABASE_URL or not settings.supabase_key:
            raise RuntimeError("SUPABASE_URL / SUPABASE key not configured")

        logger.info(f"Creating Supabase client for {settings.SUPABASE_URL}")
        _client = create_client(settings.SUPABASE_URL, settings.supabase_key)

    return _client


def get_supabase() -> Client:
    """
    FastAPI dependency for the Supabase client

    Usage:
        @router.get("/data")
        def get_data(sb: Client = Depends(get_supabase)):
            ...
    """
    return get_supabase_client()


def check_supabase_connection() -> dict:
    """Run a one-row select to confirm the backend answers"""
    client = get_supabase_client()
    result = client.table("categories").select("id").limit(1).execute()
    return {"rows": len(result.data or [])}


def create_auth_client() -> Client:
    """
    Fresh anon-key client for sign in / sign up

    A client that signs a user in keeps that user's session, so these calls
    never go through the shared service client.
    """
    if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
        raise RuntimeError("SUPABASE_URL / SUPABASE_ANON_KEY not configured")

    return create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
