"""
Authentication dependencies for the storefront API
Validates Supabase access tokens (JWT) and provides user context
"""
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from pydantic import BaseModel
from supabase import Client

from storefront.core.config import settings
from storefront.core.database import get_supabase
from storefront.repositories.user_role_repository import UserRoleRepository


# Security scheme for bearer tokens
security = HTTPBearer(auto_error=False)

# Supabase signs user sessions with HS256 and audience "authenticated"
JWT_ALGORITHM = "HS256"
JWT_AUDIENCE = "authenticated"


class TokenUser(BaseModel):
    """User data extracted from a Supabase access token"""
    id: str
    email: Optional[str] = None
    role: str = "authenticated"
    access_token: Optional[str] = None


def get_jwt_secret() -> str:
    """Get the Supabase JWT secret from settings"""
    if not settings.SUPABASE_JWT_SECRET:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="SUPABASE_JWT_SECRET is not configured"
        )
    return settings.SUPABASE_JWT_SECRET


def decode_access_token(token: str) -> dict:
    """
    Decode and validate a Supabase access token.

    Supabase JWT payload:
    {
        "sub": "<user uuid>",
        "email": "someone@example.com",
        "role": "authenticated",
        "aud": "authenticated",
        "exp": 1234567890
    }
    """
    try:
        return jwt.decode(
            token,
            get_jwt_secret(),
            algorithms=[JWT_ALGORITHM],
            audience=JWT_AUDIENCE,
        )
    except JWTError as e:
        if "expired" in str(e).lower():
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token has expired",
                headers={"WWW-Authenticate": "Bearer"}
            )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
            headers={"WWW-Authenticate": "Bearer"}
        )


def _user_from_token(token: str) -> TokenUser:
    payload = decode_access_token(token)

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload: missing user id",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return TokenUser(
        id=user_id,
        email=payload.get("email"),
        role=payload.get("role", "authenticated"),
        access_token=token,
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> TokenUser:
    """
    Dependency that extracts and validates the current user from the bearer token.

    Usage:
        @router.get("/protected")
        async def protected_route(user: TokenUser = Depends(get_current_user)):
            return {"message": f"Hello {user.email}"}
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return _user_from_token(credentials.credentials)


async def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[TokenUser]:
    """
    Optional authentication - returns None for guests or rejected tokens.
    Server-side failures (e.g. missing JWT secret) still propagate.
    """
    if not credentials:
        return None

    try:
        return _user_from_token(credentials.credentials)
    except HTTPException as e:
        if e.status_code != status.HTTP_401_UNAUTHORIZED:
            raise
        return None


async def require_admin(
    user: TokenUser = Depends(get_current_user),
    sb: Client = Depends(get_supabase),
) -> TokenUser:
    """
    Dependency for back-office routes: the user needs an 'admin' row in user_roles.
    """
    if not UserRoleRepository(sb).has_role(user.id, "admin"):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Admin role required"
        )

    return user
