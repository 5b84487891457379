from pydantic import BaseModel, field_validator
from typing import Optional, List, Literal

CloudProvider = Literal["aws", "gcp"]


class BlueprintCreate(BaseModel):
    name: str
    description: Optional[str] = None
    cloud_provider: Optional[CloudProvider] = None
    category: Optional[str] = None
    cost_estimate: Optional[float] = None
    compliance_tags: Optional[List[str]] = None
    version: Optional[str] = None


class BlueprintUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    cloud_provider: Optional[CloudProvider] = None
    category: Optional[str] = None
    cost_estimate: Optional[float] = None
    compliance_tags: Optional[List[str]] = None
    version: Optional[str] = None


class BlueprintResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    cloud_provider: Optional[CloudProvider] = None
    category: Optional[str] = None
    cost_estimate: Optional[float] = None
    compliance_tags: Optional[List[str]] = []
    version: Optional[str] = None

    @field_validator("compliance_tags", mode="before")
    @classmethod
    def tags_default_to_empty(cls, value):
        return [] if value is None else value

    class Config:
        from_attributes = True
