import logging
from supabase import Client
from saafi.modules.environments.schemas import EnvironmentCreate, EnvironmentResponse
from saafi.core.exceptions import NotFoundError, ValidationError, ServiceError, describe
from typing import List, Optional
from fastapi import HTTPException

logger = logging.getLogger(__name__)


class EnvironmentService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_environments(self, owner_id: str) -> List[EnvironmentResponse]:
        """List environments owned by a user, newest first"""
        try:
            result = self.supabase.table("environments")\
                .select("*")\
                .eq("owner_id", owner_id)\
                .order("created_at", desc=True)\
                .execute()

            return [EnvironmentResponse(**env) for env in (result.data or [])]
        except Exception as e:
            logger.error(f"Error listing environments for {owner_id}: {describe(e)}")
            raise ServiceError(describe(e))

    def get_environment(self, environment_id: str, owner_id: str) -> EnvironmentResponse:
        """Get one of the owner's environments by ID"""
        try:
            result = self.supabase.table("environments")\
                .select("*")\
                .eq("id", environment_id)\
                .eq("owner_id", owner_id)\
                .single()\
                .execute()

            if not result.data:
                raise NotFoundError("Environment not found")

            return EnvironmentResponse(**result.data)
        except HTTPException:
            raise
        except Exception as e:
            raise NotFoundError(describe(e))

    def create_environment(self, environment_data: EnvironmentCreate, owner_id: str) -> EnvironmentResponse:
        """Create an environment owned by owner_id"""
        row = {
            "name": environment_data.name,
            "status": environment_data.status,
            "cloud_provider": environment_data.cloud_provider,
            "owner_id": owner_id
        }
        if environment_data.github_repo:
            row["github_repo"] = environment_data.github_repo

        try:
            result = self.supabase.table("environments").insert(row).execute()

            if not result.data:
                raise ValidationError("Failed to create environment")

            logger.info(f"Created environment {result.data[0].get('id')} for {owner_id}")
            return EnvironmentResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise ValidationError(describe(e))

    def delete_environment(self, environment_id: str, owner_id: Optional[str] = None) -> bool:
        """Delete environment. Without owner_id the session's row-level policy decides."""
        try:
            query = self.supabase.table("environments")\
                .delete()\
                .eq("id", environment_id)
            if owner_id:
                query = query.eq("owner_id", owner_id)
            result = query.execute()

            deleted = len(result.data or []) > 0
            if not deleted:
                logger.info(f"Delete of environment {environment_id} matched no rows")
            return deleted
        except Exception as e:
            logger.error(f"Error deleting environment {environment_id}: {describe(e)}")
            raise ServiceError(describe(e))
