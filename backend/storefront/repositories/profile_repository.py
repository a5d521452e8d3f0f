"""
Profile Repository - Data Access Layer for user profiles
"""
from typing import Optional

from supabase import Client

from storefront.core.database import get_supabase_client
from storefront.domain.profile import Profile


class ProfileRepository:

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase_client()

    def find_by_id(self, user_id: str) -> Optional[Profile]:
        result = self.client.table("profiles").select("*").eq("id", user_id).limit(1).execute()
        if not result.data:
            return None
        return Profile.model_validate(result.data[0])

    def update(self, user_id: str, data: dict) -> Optional[Profile]:
        result = self.client.table("profiles").update(data).eq("id", user_id).execute()
        if not result.data:
            return None
        return Profile.model_validate(result.data[0])
