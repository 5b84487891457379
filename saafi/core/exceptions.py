"""
HTTP error taxonomy shared by the access layers and routes.

Each class pins a status code so services can raise by meaning and FastAPI
renders the usual {"detail": message} body.
"""

from fastapi import HTTPException, status
from postgrest.exceptions import APIError


class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "Invalid or expired token"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ValidationError(HTTPException):
    def __init__(self, detail: str = "Invalid request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ServiceError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def describe(exc: Exception) -> str:
    """Underlying message of a Supabase/PostgREST failure"""
    if isinstance(exc, APIError) and exc.message:
        return exc.message
    return str(exc) or exc.__class__.__name__
