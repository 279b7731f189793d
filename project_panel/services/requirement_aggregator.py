import math
from dataclasses import dataclass
from typing import Any, List, Sequence

from project_panel.schemas.requirement import RequirementSnapshot

DONE = "Done"


@dataclass(frozen=True)
class RequirementStats:
    total: int
    completed: int
    percentage: float


def filter_by_project(requirements: Sequence[RequirementSnapshot], project_id: Any) -> List[RequirementSnapshot]:
    """Requisitos del proyecto, en el mismo orden de entrada."""
    return [r for r in requirements if r.project_id == project_id]


def completed(requirements: Sequence[RequirementSnapshot]) -> List[RequirementSnapshot]:
    # Solo "Done" cuenta como completado.
    return [r for r in requirements if r.status == DONE]


def progress_percentage(project_requirements: Sequence[RequirementSnapshot]) -> float:
    total = len(project_requirements)
    if total == 0:
        return 0
    return 100 * len(completed(project_requirements)) / total


def requirement_stats(requirements: Sequence[RequirementSnapshot], project_id: Any) -> RequirementStats:
    items = filter_by_project(requirements, project_id)
    return RequirementStats(
        total=len(items),
        completed=len(completed(items)),
        percentage=progress_percentage(items),
    )


def round_percentage(value: float) -> int:
    """Redondeo a porcentaje entero, mitades hacia arriba."""
    return int(math.floor(value + 0.5))


def completion_label(stats: RequirementStats) -> str:
    return f"{stats.completed} of {stats.total} requirements completed"
