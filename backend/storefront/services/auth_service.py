"""
Auth Service

Sign in, sign up, sign out and session lookup, all delegated to the hosted
backend's auth API. Sign-up form rules are checked before calling it.

Author: FastDeal
Date: 2026-10-19
"""
import logging
from typing import Callable, Dict, Optional

from supabase import Client

from storefront.core.database import create_auth_client, get_supabase_client
from storefront.domain.exceptions import AuthenticationError, SignUpError

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def _error_message(error: Exception) -> str:
    return getattr(error, "message", None) or str(error)


def validate_sign_up(password: str, confirm_password: str) -> None:
    if password != confirm_password:
        raise SignUpError("Passwords do not match")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise SignUpError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


def _session_payload(response) -> Dict:
    user = response.user
    session = response.session
    return {
        "user": {"id": user.id, "email": user.email} if user else None,
        "access_token": session.access_token if session else None,
        "refresh_token": session.refresh_token if session else None,
        "expires_at": session.expires_at if session else None,
    }


class AuthService:

    def __init__(
        self,
        auth_client_factory: Callable[[], Client] = create_auth_client,
        admin_client: Optional[Client] = None,
    ):
        self.auth_client_factory = auth_client_factory
        self._admin_client = admin_client

    @property
    def admin_client(self) -> Client:
        if self._admin_client is None:
            self._admin_client = get_supabase_client()
        return self._admin_client

    def sign_in(self, email: str, password: str) -> Dict:
        client = self.auth_client_factory()
        try:
            response = client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as e:
            logger.info(f"Sign in failed for {email}: {_error_message(e)}")
            raise AuthenticationError(_error_message(e) or "Failed to sign in")

        return _session_payload(response)

    def sign_up(self, email: str, password: str, confirm_password: str) -> Dict:
        validate_sign_up(password, confirm_password)

        client = self.auth_client_factory()
        try:
            response = client.auth.sign_up({"email": email, "password": password})
        except Exception as e:
            message = _error_message(e)
            if "already registered" in message:
                raise SignUpError("This email is already registered. Please sign in instead.")
            logger.error(f"Sign up failed for {email}: {message}")
            raise SignUpError(message or "Failed to create account")

        logger.info(f"Account created for {email}")
        return _session_payload(response)

    def sign_out(self, access_token: str) -> None:
        self.admin_client.auth.admin.sign_out(access_token)

    def get_session_user(self, access_token: str) -> Optional[Dict]:
        response = self.admin_client.auth.get_user(access_token)
        if not response or not response.user:
            return None
        return {"id": response.user.id, "email": response.user.email}
