"""Supabase client service"""
import logging
import os
from typing import Optional

from supabase import Client, create_client

logger = logging.getLogger(__name__)


class SupabaseService:
    """
    Holds the Supabase clients for one application instance

    Constructed explicitly by the app factory (or a script) and handed to the
    services that need it; there is no shared module-level instance.

    Usage:
        service = SupabaseService()
        repository = EventRepository(service)
    """

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
        service_role_key: Optional[str] = None,
    ):
        self.url = url if url is not None else os.getenv('SUPABASE_URL', '')
        self.key = key if key is not None else os.getenv('SUPABASE_ANON_KEY', '')
        self.service_role_key = (
            service_role_key if service_role_key is not None else os.getenv('SUPABASE_SERVICE_ROLE_KEY', '')
        )
        self.client: Optional[Client] = None
        self.admin_client: Optional[Client] = None

        if self.url and self.key:
            try:
                self.client = create_client(self.url, self.key)
            except Exception as e:
                logger.error(f"Failed to create Supabase client: {e}")
                self.client = None
        else:
            logger.warning("Supabase credentials not configured - URL: %s, Key: %s", bool(self.url), bool(self.key))

        # Admin client bypasses RLS; only the import script needs it
        if self.url and self.service_role_key:
            try:
                self.admin_client = create_client(self.url, self.service_role_key)
                logger.info("Admin client initialized with service role key")
            except Exception as e:
                logger.error(f"Failed to create admin client: {e}")
                self.admin_client = None

    @property
    def enabled(self) -> bool:
        return self.client is not None or self.admin_client is not None

    def get_client(self, admin: bool = False) -> Optional[Client]:
        """Admin client when requested and available, else the anon client."""
        if admin:
            return self.admin_client
        return self.client or self.admin_client
