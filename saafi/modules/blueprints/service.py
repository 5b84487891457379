import logging
from supabase import Client
from saafi.modules.blueprints.schemas import BlueprintCreate, BlueprintUpdate, BlueprintResponse
from saafi.core.exceptions import NotFoundError, ValidationError, ServiceError, describe
from typing import List
from fastapi import HTTPException

logger = logging.getLogger(__name__)


class BlueprintService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_blueprints(self) -> List[BlueprintResponse]:
        """List all blueprints ordered by name"""
        try:
            result = self.supabase.table("blueprints")\
                .select("*")\
                .order("name")\
                .execute()

            return [BlueprintResponse(**row) for row in (result.data or [])]
        except Exception as e:
            logger.error(f"Error listing blueprints: {describe(e)}")
            raise ServiceError(describe(e))

    def get_blueprint(self, blueprint_id: str) -> BlueprintResponse:
        """Get blueprint by ID"""
        try:
            result = self.supabase.table("blueprints")\
                .select("*")\
                .eq("id", blueprint_id)\
                .single()\
                .execute()

            if not result.data:
                raise NotFoundError("Blueprint not found")

            return BlueprintResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            # .single() fails on zero rows; PostgREST's message is passed through
            raise NotFoundError(describe(e))

    def create_blueprint(self, blueprint_data: BlueprintCreate) -> BlueprintResponse:
        """Create a new blueprint"""
        try:
            result = self.supabase.table("blueprints")\
                .insert(blueprint_data.model_dump(exclude_unset=True))\
                .execute()
        except Exception as e:
            raise ValidationError(describe(e))

        if not result.data:
            raise ValidationError("Failed to create blueprint")

        logger.info(f"Created blueprint {result.data[0].get('id')} ({blueprint_data.name})")
        return BlueprintResponse(**result.data[0])

    def update_blueprint(self, blueprint_id: str, blueprint_data: BlueprintUpdate) -> BlueprintResponse:
        """Update the supplied fields of a blueprint"""
        update_data = blueprint_data.model_dump(exclude_unset=True)
        if not update_data:
            # No changes, return existing
            return self.get_blueprint(blueprint_id)

        try:
            result = self.supabase.table("blueprints")\
                .update(update_data)\
                .eq("id", blueprint_id)\
                .execute()
        except Exception as e:
            raise ValidationError(describe(e))

        if not result.data:
            raise ValidationError("Blueprint not found")

        return BlueprintResponse(**result.data[0])
