# schemas/requirement.py

from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional, Union


class RequirementSnapshot(BaseModel):
    id: Union[int, str]
    project_id: Union[int, str] = Field(alias="projectId")
    title: Optional[str] = ""
    description: Optional[str] = ""
    status: Optional[str] = ""
    priority: Optional[str] = ""
    created_at: Any = Field(default=None, alias="createdAt")

    # null llega como cadena vacía; el mapeo de categorías hace el resto
    @field_validator("title", "description", "status", "priority", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value

    class Config:
        populate_by_name = True
        extra = "allow"


class RequirementSummary(BaseModel):
    id: Union[int, str]
    title: str
    description: str
    status: str
    status_category: str
    priority: str
    severity: str
    completed_on: str
