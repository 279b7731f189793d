import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from project_panel.schemas.project import ProjectSnapshot
from project_panel.schemas.requirement import RequirementSnapshot
from project_panel.services.budget_visibility import BudgetVisibilityController, Scheduler

logger = logging.getLogger(__name__)


@dataclass
class Panel:
    panel_id: str
    project: ProjectSnapshot
    requirements: List[RequirementSnapshot]
    budget: BudgetVisibilityController = field(repr=False)


class PanelRegistry:
    """Paneles abiertos en memoria; cerrar un panel libera su temporizador."""

    def __init__(self, delay_seconds: float, scheduler: Optional[Scheduler] = None, max_panels: int = 200):
        self.delay_seconds = delay_seconds
        self.scheduler = scheduler
        self.max_panels = max_panels
        self._panels: Dict[str, Panel] = {}
        self._lock = threading.Lock()

    def open(self, project: ProjectSnapshot, requirements: List[RequirementSnapshot]) -> Panel:
        panel = Panel(
            panel_id=uuid.uuid4().hex,
            project=project,
            requirements=list(requirements),
            budget=BudgetVisibilityController(self.delay_seconds, self.scheduler),
        )
        evicted = []
        with self._lock:
            self._panels[panel.panel_id] = panel
            # Los paneles que nadie cerró se descartan del más antiguo al más nuevo
            while len(self._panels) > self.max_panels:
                oldest = next(iter(self._panels))
                evicted.append(self._panels.pop(oldest))
        for old in evicted:
            old.budget.close()
            logger.warning("Evicted panel %s (limit %d)", old.panel_id, self.max_panels)
        logger.info("Opened panel %s for project %s", panel.panel_id, project.id)
        return panel

    def get(self, panel_id: str) -> Optional[Panel]:
        with self._lock:
            return self._panels.get(panel_id)

    def close(self, panel_id: str) -> bool:
        with self._lock:
            panel = self._panels.pop(panel_id, None)
        if panel is None:
            return False
        panel.budget.close()
        logger.info("Closed panel %s", panel_id)
        return True

    def close_all(self) -> None:
        with self._lock:
            panels = list(self._panels.values())
            self._panels.clear()
        for panel in panels:
            panel.budget.close()
        if panels:
            logger.info("Closed %d open panels", len(panels))

    def __len__(self) -> int:
        with self._lock:
            return len(self._panels)
