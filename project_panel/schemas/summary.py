from datetime import datetime
from pydantic import BaseModel
from typing import List, Optional, Union

from project_panel.schemas.project import ProjectSnapshot
from project_panel.schemas.requirement import RequirementSnapshot, RequirementSummary


class ProjectViewRequest(BaseModel):
    project: ProjectSnapshot
    requirements: List[RequirementSnapshot] = []
    now: Optional[datetime] = None


class ProjectSummary(BaseModel):
    project_id: Union[int, str]
    name: str
    client: str
    client_email: Optional[str] = None
    client_phone: Optional[str] = None
    description: str
    status: str
    status_category: str
    start_date: str
    deadline: str
    days_left: str
    budget: float
    budget_revealed: bool
    budget_display: str
    progress_percentage: float
    progress_rounded: int
    completed_count: int
    total_count: int
    completion_label: str
    milestones: List[RequirementSummary]
    requirements: List[RequirementSummary]


class PanelRead(BaseModel):
    panel_id: str
    summary: ProjectSummary
