from pydantic import BaseModel


class OAuthLoginResponse(BaseModel):
    provider: str
    url: str
