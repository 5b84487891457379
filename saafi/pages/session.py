import logging
from supabase import AuthApiError, AuthSessionMissingError, Client
from typing import Optional

logger = logging.getLogger(__name__)


def resolve_user_id(supabase: Client) -> Optional[str]:
    """Id of the user signed in on this Supabase session, or None.

    A missing or rejected session means signed out; any other failure
    (network, server) propagates to the caller.
    """
    try:
        response = supabase.auth.get_user()
    except (AuthSessionMissingError, AuthApiError) as e:
        logger.info(f"No signed-in user: {e}")
        return None
    if not response or not response.user:
        return None
    return response.user.id
