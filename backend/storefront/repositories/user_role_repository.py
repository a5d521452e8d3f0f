"""
User Role Repository - reads the `user_roles` table
"""
from typing import Optional

from supabase import Client

from storefront.core.database import get_supabase_client


class UserRoleRepository:

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase_client()

    def has_role(self, user_id: str, role: str) -> bool:
        result = (
            self.client.table("user_roles")
            .select("role")
            .eq("user_id", user_id)
            .eq("role", role)
            .limit(1)
            .execute()
        )
        return bool(result.data)
