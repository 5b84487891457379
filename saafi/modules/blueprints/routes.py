from fastapi import APIRouter, Depends
from saafi.database.supabase_client import get_supabase
from saafi.modules.blueprints.schemas import BlueprintCreate, BlueprintUpdate, BlueprintResponse
from saafi.modules.blueprints.service import BlueprintService
from saafi.core.dependencies import get_current_user
from supabase import Client
from typing import List

# Every route is guarded; the guard runs before the Supabase client is resolved
router = APIRouter(
    prefix="/blueprints",
    tags=["blueprints"],
    dependencies=[Depends(get_current_user)],
)


def get_blueprint_service(supabase: Client = Depends(get_supabase)) -> BlueprintService:
    return BlueprintService(supabase)


@router.get("", response_model=List[BlueprintResponse])
async def list_blueprints(service: BlueprintService = Depends(get_blueprint_service)):
    """List all blueprints ordered by name"""
    return service.list_blueprints()


@router.get("/{blueprint_id}", response_model=BlueprintResponse)
async def get_blueprint(
    blueprint_id: str,
    service: BlueprintService = Depends(get_blueprint_service)
):
    """Get blueprint by ID"""
    return service.get_blueprint(blueprint_id)


@router.post("", response_model=BlueprintResponse, status_code=201)
async def create_blueprint(
    blueprint_data: BlueprintCreate,
    service: BlueprintService = Depends(get_blueprint_service)
):
    """Create a new blueprint (any authenticated caller)"""
    return service.create_blueprint(blueprint_data)


@router.put("/{blueprint_id}", response_model=BlueprintResponse)
async def update_blueprint(
    blueprint_id: str,
    blueprint_data: BlueprintUpdate,
    service: BlueprintService = Depends(get_blueprint_service)
):
    """Update blueprint fields (no ownership check)"""
    return service.update_blueprint(blueprint_id, blueprint_data)
