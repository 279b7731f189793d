from fastapi import APIRouter

from project_panel.core.config import Settings
from project_panel.schemas.summary import ProjectViewRequest, ProjectSummary
from project_panel.services.project_summary import build_project_summary

router = APIRouter()
settings = Settings()

@router.post("/summary", response_model=ProjectSummary)
def summarize_project(view_in: ProjectViewRequest):
    return build_project_summary(
        view_in.project,
        view_in.requirements,
        revealed=False,
        now=view_in.now,
        settings=settings,
    )
