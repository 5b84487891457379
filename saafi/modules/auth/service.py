import logging
import jwt
from supabase import Client
from saafi.config.settings import Settings
from saafi.core.exceptions import AuthenticationError, ServiceError, describe
from saafi.modules.auth.schemas import OAuthLoginResponse
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, settings: Settings, supabase: Optional[Client] = None):
        self.settings = settings
        self.supabase = supabase

    def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry of a bearer token and return its claims"""
        secret = self.settings.jwt_secret
        if not secret:
            logger.error("JWT_SECRET is not configured; rejecting bearer token")
            raise AuthenticationError("Invalid or expired token")
        try:
            if self.settings.jwt_audience:
                return jwt.decode(
                    token,
                    secret,
                    algorithms=[self.settings.jwt_algorithm],
                    audience=self.settings.jwt_audience,
                )
            return jwt.decode(
                token,
                secret,
                algorithms=[self.settings.jwt_algorithm],
                options={"verify_aud": False},
            )
        except jwt.PyJWTError as e:
            # Expired and tampered tokens get the same answer
            logger.info(f"Rejected bearer token: {e}")
            raise AuthenticationError("Invalid or expired token")

    def sign_in_with_github(self) -> OAuthLoginResponse:
        """Start the OAuth flow and return the provider redirect URL"""
        if self.supabase is None:
            raise ServiceError("Supabase client not configured")
        options = {"scopes": self.settings.oauth_scopes}
        if self.settings.oauth_redirect_url:
            options["redirect_to"] = self.settings.oauth_redirect_url
        try:
            response = self.supabase.auth.sign_in_with_oauth({
                "provider": self.settings.oauth_provider,
                "options": options
            })
        except Exception as e:
            raise ServiceError(f"Login failed: {describe(e)}")
        if not response or not response.url:
            raise ServiceError("Login failed: no redirect URL returned")
        return OAuthLoginResponse(provider=self.settings.oauth_provider, url=response.url)
