from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional, Sequence

from project_panel.core.config import Settings
from project_panel.schemas.project import ProjectSnapshot
from project_panel.schemas.requirement import RequirementSnapshot, RequirementSummary
from project_panel.schemas.summary import ProjectSummary
from project_panel.services.dates import format_date, format_short_date, days_left
from project_panel.services.requirement_aggregator import (
    filter_by_project,
    completed,
    progress_percentage,
    RequirementStats,
    round_percentage,
    completion_label,
)
from project_panel.services.budget_visibility import mask_budget

PROJECT_STATUS_CATEGORIES = {
    "In Progress": "active",
    "Completed": "done",
    "Planning": "planning",
    "On Hold": "blocked",
}
REQUIREMENT_STATUS_CATEGORIES = {
    "Done": "done",
    "In Review": "review",
}
PRIORITY_SEVERITIES = {
    "High": "high",
    "Medium": "medium",
    "Low": "low",
}


def resolve_field(record: Any, primary: str, fallback: str) -> Any:
    """Prefiere el campo principal, luego el alias antiguo; None si faltan ambos."""
    for name in (primary, fallback):
        if isinstance(record, Mapping):
            value = record.get(name)
        else:
            value = getattr(record, name, None)
        if value is not None and value != "":
            return value
    return None


def status_category(status: Any) -> str:
    return PROJECT_STATUS_CATEGORIES.get(status, "unknown") if isinstance(status, str) else "unknown"


def requirement_status_category(status: Any) -> str:
    return REQUIREMENT_STATUS_CATEGORIES.get(status, "pending") if isinstance(status, str) else "pending"


def priority_severity(priority: Any) -> str:
    # Las prioridades desconocidas se pintan como "Low".
    return PRIORITY_SEVERITIES.get(priority, "low") if isinstance(priority, str) else "low"


def summarize_requirement(requirement: RequirementSnapshot) -> RequirementSummary:
    return RequirementSummary(
        id=requirement.id,
        title=requirement.title,
        description=requirement.description,
        status=requirement.status,
        status_category=requirement_status_category(requirement.status),
        priority=requirement.priority,
        severity=priority_severity(requirement.priority),
        completed_on=format_short_date(requirement.created_at),
    )


def build_project_summary(
    project: ProjectSnapshot,
    requirements: Sequence[RequirementSnapshot],
    revealed: bool = False,
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> ProjectSummary:
    """Compone todos los valores que necesita la vista de un proyecto.

    - Fechas: ``start_date`` / ``startDate`` y ``deadline`` / ``endDate``
    - Requisitos del proyecto, hitos (Done) y porcentaje de avance
    - Estado de visibilidad del presupuesto (lo decide el controlador)
    """
    if settings is None:
        settings = Settings()

    start = resolve_field(project, "start_date", "legacy_start_date")
    deadline = resolve_field(project, "deadline", "legacy_end_date")

    project_requirements = filter_by_project(requirements, project.id)
    milestones = completed(project_requirements)
    stats = RequirementStats(
        total=len(project_requirements),
        completed=len(milestones),
        percentage=progress_percentage(project_requirements),
    )

    return ProjectSummary(
        project_id=project.id,
        name=project.name,
        client=project.client,
        client_email=project.client_email,
        client_phone=project.client_phone,
        description=project.description,
        status=project.status,
        status_category=status_category(project.status),
        start_date=format_date(start),
        deadline=format_date(deadline),
        days_left=days_left(deadline, now=now),
        budget=project.budget,
        budget_revealed=revealed,
        budget_display=mask_budget(
            project.budget, revealed, settings.currency_symbol, settings.budget_mask
        ),
        progress_percentage=stats.percentage,
        progress_rounded=round_percentage(stats.percentage),
        completed_count=stats.completed,
        total_count=stats.total,
        completion_label=completion_label(stats),
        milestones=[summarize_requirement(r) for r in milestones],
        requirements=[summarize_requirement(r) for r in project_requirements],
    )
