"""
Core dependencies for route protection
"""

from fastapi import Depends, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from saafi.core.exceptions import AuthenticationError
from saafi.modules.auth.service import AuthService
from typing import Dict, Any, Optional

# auto_error=False so a missing header answers 401 in our shape instead of FastAPI's own
security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> Dict[str, Any]:
    """Validate the bearer token and attach its claims to request.state.user"""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Missing or invalid Authorization header")
    auth_service = AuthService(request.app.state.settings)
    claims = auth_service.verify_token(credentials.credentials)
    request.state.user = claims
    return claims


def get_current_user_id(user_data: Dict[str, Any] = Depends(get_current_user)) -> str:
    """Caller identity (the token's sub claim)"""
    user_id = user_data.get("sub")
    if not user_id:
        raise AuthenticationError("Invalid or expired token")
    return str(user_id)
