# api/endpoints/panels.py

from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, status
from typing import Optional

from project_panel.core.config import Settings
from project_panel.registry import get_registry
from project_panel.schemas.summary import ProjectViewRequest, PanelRead
from project_panel.services.panel_registry import Panel, PanelRegistry
from project_panel.services.project_summary import build_project_summary

router = APIRouter()
settings = Settings()

def panel_read(panel: Panel, now: Optional[datetime] = None) -> PanelRead:
    summary = build_project_summary(
        panel.project,
        panel.requirements,
        revealed=panel.budget.revealed,
        now=now,
        settings=settings,
    )
    return PanelRead(panel_id=panel.panel_id, summary=summary)

def get_panel_or_404(panel_id: str, registry: PanelRegistry) -> Panel:
    panel = registry.get(panel_id)
    if not panel:
        raise HTTPException(status_code=404, detail="Panel not found")
    return panel

@router.post("/", response_model=PanelRead, status_code=status.HTTP_201_CREATED)
def open_panel(
    view_in: ProjectViewRequest,
    registry: PanelRegistry = Depends(get_registry),
):
    panel = registry.open(view_in.project, view_in.requirements)
    return panel_read(panel, view_in.now)

@router.get("/{panel_id}", response_model=PanelRead)
def get_panel(
    panel_id: str,
    now: Optional[datetime] = None,
    registry: PanelRegistry = Depends(get_registry),
):
    panel = get_panel_or_404(panel_id, registry)
    return panel_read(panel, now)

@router.post("/{panel_id}/budget/toggle", response_model=PanelRead)
def toggle_budget(
    panel_id: str,
    now: Optional[datetime] = None,
    registry: PanelRegistry = Depends(get_registry),
):
    panel = get_panel_or_404(panel_id, registry)
    panel.budget.toggle()
    return panel_read(panel, now)

@router.delete("/{panel_id}", status_code=status.HTTP_204_NO_CONTENT)
def close_panel(
    panel_id: str,
    registry: PanelRegistry = Depends(get_registry),
):
    # Cierra el panel y cancela el auto-ocultado pendiente
    if not registry.close(panel_id):
        raise HTTPException(status_code=404, detail="Panel not found")
