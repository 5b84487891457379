"""
Card components for the dashboard and marketplace pages.

Cards hold no logic of their own: render() turns a record into display
fields and the action methods hand the record's id to the page callbacks.
"""

from typing import Any, Callable, Dict, List
from saafi.modules.blueprints.schemas import BlueprintResponse
from saafi.modules.environments.schemas import EnvironmentResponse

STATUS_COLORS = {
    "pending": "bg-yellow-100 text-yellow-800",
    "provisioning": "bg-blue-100 text-blue-800",
    "active": "bg-green-100 text-green-800",
    "failed": "bg-red-100 text-red-800",
    "terminated": "bg-gray-100 text-gray-800",
}


class EnvironmentCard:
    def __init__(
        self,
        environment: EnvironmentResponse,
        on_delete: Callable[[str], Any],
        on_view_details: Callable[[str], Any],
    ):
        self.environment = environment
        self.on_delete = on_delete
        self.on_view_details = on_view_details

    def render(self) -> Dict[str, Any]:
        env = self.environment
        view = {
            "id": env.id,
            "name": env.name,
            "status": env.status,
            "status_class": STATUS_COLORS.get(env.status, ""),
            "provider": f"Provider: {env.cloud_provider.upper()}",
            "created": f"Created: {env.created_at.strftime('%Y-%m-%d %H:%M:%S')}",
        }
        if env.github_repo:
            view["repo"] = f"Repo: {env.github_repo}"
        return view

    def delete(self):
        return self.on_delete(self.environment.id)

    def view_details(self):
        return self.on_view_details(self.environment.id)


class BlueprintCard:
    def __init__(self, blueprint: BlueprintResponse, on_select: Callable[[str], Any]):
        self.blueprint = blueprint
        self.on_select = on_select

    def render(self) -> Dict[str, Any]:
        bp = self.blueprint
        badges: List[str] = []
        if bp.cloud_provider:
            badges.append(f"Provider: {bp.cloud_provider.upper()}")
        if bp.category:
            badges.append(f"Category: {bp.category}")
        if bp.version:
            badges.append(f"Version: {bp.version}")
        if bp.cost_estimate is not None:
            badges.append(f"Cost: ${bp.cost_estimate:g}")
        return {
            "id": bp.id,
            "name": bp.name,
            "description": bp.description or "",
            "badges": badges,
            "tags": list(bp.compliance_tags),
        }

    def select(self):
        return self.on_select(self.blueprint.id)
