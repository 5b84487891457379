from fastapi import APIRouter, Depends, Request
from saafi.database.supabase_client import get_supabase
from saafi.modules.auth.schemas import OAuthLoginResponse
from saafi.modules.auth.service import AuthService
from saafi.core.dependencies import get_current_user
from supabase import Client
from typing import Dict, Any

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(request: Request, supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(request.app.state.settings, supabase)


@router.get("/login", response_model=OAuthLoginResponse)
async def login(service: AuthService = Depends(get_auth_service)):
    """Get the GitHub OAuth redirect URL"""
    return service.sign_in_with_github()


@router.get("/me")
async def me(current_user: Dict[str, Any] = Depends(get_current_user)):
    """Decoded claims of the current bearer token"""
    return current_user
