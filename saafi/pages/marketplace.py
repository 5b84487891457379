import logging
from fastapi import HTTPException
from supabase import Client
from saafi.components.cards import BlueprintCard
from saafi.modules.blueprints.schemas import BlueprintResponse
from saafi.modules.blueprints.service import BlueprintService
from saafi.pages.base import Page
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class MarketplacePage(Page):
    title = "Blueprint Marketplace"

    def __init__(self, supabase: Client, alert: Optional[Callable[[str], None]] = None):
        super().__init__(alert)
        self.blueprint_service = BlueprintService(supabase)
        self.blueprints: List[BlueprintResponse] = []
        self.loading = True

    def load(self):
        self.loading = True
        try:
            self.blueprints = self.blueprint_service.list_blueprints()
        except HTTPException as e:
            logger.error(f"Error fetching blueprints: {e.detail}")
            self.blueprints = []
        finally:
            self.loading = False

    def select(self, blueprint_id: str):
        blueprint = next((bp for bp in self.blueprints if bp.id == blueprint_id), None)
        if blueprint:
            self.alert(f"Selected blueprint: {blueprint.name}")

    @property
    def message(self) -> Optional[str]:
        if self.loading:
            return "Loading..."
        if not self.blueprints:
            return "No blueprints found."
        return None

    def cards(self) -> List[BlueprintCard]:
        return [BlueprintCard(bp, on_select=self.select) for bp in self.blueprints]
