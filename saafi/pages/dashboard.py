"""
Dashboard page: the signed-in user's environments and the create form.

The page talks to Supabase with the user's own session, so row-level
security is what scopes reads and deletes. Each action issues one call and
flags itself busy (loading, creating, deleting_id) until it returns.
"""

import logging
from fastapi import HTTPException
from pydantic import BaseModel, ConfigDict
from supabase import Client
from saafi.components.cards import EnvironmentCard
from saafi.modules.blueprints.schemas import BlueprintResponse, CloudProvider
from saafi.modules.blueprints.service import BlueprintService
from saafi.modules.environments.schemas import EnvironmentCreate, EnvironmentResponse, EnvironmentStatus
from saafi.modules.environments.service import EnvironmentService
from saafi.pages.base import Page
from saafi.pages.session import resolve_user_id
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class EnvironmentForm(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    status: EnvironmentStatus = "pending"
    cloud_provider: CloudProvider = "aws"


class DashboardPage(Page):
    title = "Your Environments"

    def __init__(self, supabase: Client, alert: Optional[Callable[[str], None]] = None):
        super().__init__(alert)
        self.supabase = supabase
        self.environment_service = EnvironmentService(supabase)
        self.blueprint_service = BlueprintService(supabase)
        self.environments: List[EnvironmentResponse] = []
        self.loading = True
        self.form = EnvironmentForm()
        self.creating = False
        self.error = ""
        self.deleting_id: Optional[str] = None
        self.user_id: Optional[str] = None
        self.selected_blueprint: Optional[BlueprintResponse] = None

    def load(self):
        """Resolve the session user and fetch their environments"""
        self.loading = True
        try:
            self.user_id = resolve_user_id(self.supabase)
            if not self.user_id:
                self.environments = []
                return
            self.environments = self.environment_service.list_environments(self.user_id)
        except HTTPException as e:
            logger.error(f"Error fetching environments: {e.detail}")
            self.environments = []
        finally:
            self.loading = False

    def apply_blueprint(self, blueprint_id: str) -> Optional[BlueprintResponse]:
        """Preselect a blueprint; prefills the name only while the field is empty"""
        try:
            blueprint = self.blueprint_service.get_blueprint(blueprint_id)
        except HTTPException as e:
            logger.info(f"Blueprint {blueprint_id} unavailable: {e.detail}")
            return None
        self.selected_blueprint = blueprint
        if not self.form.name:
            self.form.name = f"{blueprint.name} Environment"
        return blueprint

    def change(self, field: str, value: str):
        """Set one form field. Raises ValueError for an unknown field and
        pydantic.ValidationError for a status or provider outside its enum."""
        if field not in EnvironmentForm.model_fields:
            raise ValueError(f"Unknown form field: {field}")
        setattr(self.form, field, value)

    def submit(self) -> Optional[EnvironmentResponse]:
        self.creating = True
        self.error = ""
        try:
            if not self.form.name:
                self.error = "Name is required"
                return None
            if not self.user_id:
                self.error = "You must be logged in to create an environment."
                return None
            try:
                created = self.environment_service.create_environment(
                    EnvironmentCreate(
                        name=self.form.name,
                        status=self.form.status,
                        cloud_provider=self.form.cloud_provider,
                    ),
                    self.user_id,
                )
            except HTTPException as e:
                # Form fields stay as typed so the user can correct and resubmit
                self.error = e.detail
                return None
            self.environments.insert(0, created)
            self.form = EnvironmentForm()
            return created
        finally:
            self.creating = False

    def delete(self, environment_id: str):
        self.deleting_id = environment_id
        try:
            # No owner filter: the session's row-level policy scopes the delete, and
            # zero matched rows (already gone or not visible) still clears the card
            self.environment_service.delete_environment(environment_id)
        except HTTPException as e:
            self.alert(f"Failed to delete environment: {e.detail}")
        else:
            self.environments = [env for env in self.environments if env.id != environment_id]
        finally:
            self.deleting_id = None

    def view_details(self, environment_id: str):
        # TODO: navigate to an environment detail page once one exists
        self.alert(f"View details for environment: {environment_id}")

    @property
    def message(self) -> Optional[str]:
        if not self.user_id:
            return "You must be logged in to view or create environments."
        if self.loading:
            return "Loading..."
        if not self.environments:
            return "No environments found."
        return None

    def cards(self) -> List[EnvironmentCard]:
        return [
            EnvironmentCard(env, on_delete=self.delete, on_view_details=self.view_details)
            for env in self.environments
        ]
