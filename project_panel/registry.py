from project_panel.core.config import Settings
from project_panel.services.panel_registry import PanelRegistry

settings = Settings()
registry = PanelRegistry(settings.budget_reveal_seconds, max_panels=settings.max_open_panels)

def get_registry():
    return registry
