from fastapi import APIRouter, Depends
from saafi.database.supabase_client import get_supabase
from saafi.modules.environments.schemas import EnvironmentCreate, EnvironmentResponse
from saafi.modules.environments.service import EnvironmentService
from saafi.core.dependencies import get_current_user, get_current_user_id
from supabase import Client
from typing import List

router = APIRouter(
    prefix="/environments",
    tags=["environments"],
    dependencies=[Depends(get_current_user)],
)


def get_environment_service(supabase: Client = Depends(get_supabase)) -> EnvironmentService:
    return EnvironmentService(supabase)


@router.get("", response_model=List[EnvironmentResponse])
async def list_environments(
    user_id: str = Depends(get_current_user_id),
    service: EnvironmentService = Depends(get_environment_service)
):
    """List the caller's environments, newest first"""
    return service.list_environments(user_id)


@router.post("", response_model=EnvironmentResponse, status_code=201)
async def create_environment(
    environment_data: EnvironmentCreate,
    user_id: str = Depends(get_current_user_id),
    service: EnvironmentService = Depends(get_environment_service)
):
    """Create an environment owned by the caller"""
    return service.create_environment(environment_data, user_id)


@router.get("/{environment_id}", response_model=EnvironmentResponse)
async def get_environment(
    environment_id: str,
    user_id: str = Depends(get_current_user_id),
    service: EnvironmentService = Depends(get_environment_service)
):
    """Get one of the caller's environments"""
    return service.get_environment(environment_id, user_id)


@router.delete("/{environment_id}", status_code=204)
async def delete_environment(
    environment_id: str,
    user_id: str = Depends(get_current_user_id),
    service: EnvironmentService = Depends(get_environment_service)
):
    """Delete one of the caller's environments"""
    service.delete_environment(environment_id, user_id)
    return None
