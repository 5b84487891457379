from pydantic import BaseModel, Field
from typing import Optional, Literal
from datetime import datetime
from saafi.modules.blueprints.schemas import CloudProvider

EnvironmentStatus = Literal["pending", "provisioning", "active", "failed", "terminated"]


class EnvironmentCreate(BaseModel):
    # owner_id is never accepted from the caller
    name: str = Field(min_length=1)
    status: EnvironmentStatus = "pending"
    cloud_provider: CloudProvider = "aws"
    github_repo: Optional[str] = None


class EnvironmentResponse(BaseModel):
    id: str
    name: str
    status: EnvironmentStatus
    cloud_provider: CloudProvider
    github_repo: Optional[str] = None
    created_at: datetime
    owner_id: str

    class Config:
        from_attributes = True
