from supabase import Client
from saafi.config.settings import Settings
from saafi.modules.auth.service import AuthService
from saafi.modules.auth.schemas import OAuthLoginResponse


class LoginPage:
    title = "Sign in to Saafi"

    def __init__(self, supabase: Client, settings: Settings):
        self.auth_service = AuthService(settings, supabase)

    def sign_in(self) -> OAuthLoginResponse:
        """Start GitHub sign-in; the caller redirects the browser to the returned URL"""
        return self.auth_service.sign_in_with_github()
