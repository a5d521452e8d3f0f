"""
Authentication API endpoints
- Sign in / sign up / sign out / session (delegated to Supabase auth)
- The signed-in user's profile
"""
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from supabase import Client

from storefront.api.deps import raise_http_error
from storefront.core.auth import TokenUser, get_current_user
from storefront.core.database import get_supabase
from storefront.core.rate_limit import auth_rate_limit
from storefront.domain.profile import ProfileUpdate
from storefront.repositories.profile_repository import ProfileRepository
from storefront.services.auth_service import AuthService


router = APIRouter(prefix="/api/v1/auth", tags=["Authentication"])


# =============================================================================
# Pydantic Models
# =============================================================================

class SignInRequest(BaseModel):
    email: str
    password: str


class SignUpRequest(BaseModel):
    email: str
    password: str
    confirm_password: str


def get_auth_service() -> AuthService:
    return AuthService()


# =============================================================================
# Session Endpoints
# =============================================================================

@router.post("/sign-in", dependencies=[Depends(auth_rate_limit)])
async def sign_in(body: SignInRequest, service: AuthService = Depends(get_auth_service)):
    try:
        session = service.sign_in(body.email, body.password)
        return {"status": "success", "message": "Welcome back!", "data": session}
    except Exception as e:
        raise_http_error(e, "signing in")


@router.post("/sign-up", status_code=status.HTTP_201_CREATED, dependencies=[Depends(auth_rate_limit)])
async def sign_up(body: SignUpRequest, service: AuthService = Depends(get_auth_service)):
    try:
        session = service.sign_up(body.email, body.password, body.confirm_password)
        return {
            "status": "success",
            "message": "Account created successfully! Welcome to FastDeal.",
            "data": session
        }
    except Exception as e:
        raise_http_error(e, "creating account")


@router.post("/sign-out")
async def sign_out(
    user: TokenUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    try:
        service.sign_out(user.access_token)
        return {"status": "success", "message": "Signed out"}
    except Exception as e:
        raise_http_error(e, "signing out")


@router.get("/session")
async def get_session(
    user: TokenUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    """The user behind the bearer token, as the backend currently sees it"""
    try:
        session_user = service.get_session_user(user.access_token)
        if not session_user:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Session not found")
        return {"status": "success", "data": session_user}
    except Exception as e:
        raise_http_error(e, "fetching session")


# =============================================================================
# Profile
# =============================================================================

@router.get("/profile")
async def get_profile(user: TokenUser = Depends(get_current_user), sb: Client = Depends(get_supabase)):
    try:
        profile = ProfileRepository(sb).find_by_id(user.id)
        if not profile:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
        return {"status": "success", "data": profile.to_dict()}
    except Exception as e:
        raise_http_error(e, "fetching profile")


@router.patch("/profile")
async def update_profile(
    body: ProfileUpdate,
    user: TokenUser = Depends(get_current_user),
    sb: Client = Depends(get_supabase),
):
    try:
        profile = ProfileRepository(sb).update(user.id, body.model_dump(exclude_unset=True))
        if not profile:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
        return {"status": "success", "message": "Profile updated", "data": profile.to_dict()}
    except Exception as e:
        raise_http_error(e, "updating profile")
