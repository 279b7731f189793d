from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional, Union


class ProjectSnapshot(BaseModel):
    id: Union[int, str]
    name: str
    client: Optional[str] = ""
    description: Optional[str] = ""
    client_email: Optional[str] = Field(default=None, alias="clientEmail")
    client_phone: Optional[str] = Field(default=None, alias="clientPhone")
    status: Optional[str] = ""
    budget: float = Field(default=0, ge=0)
    # Dates stay raw; parsing happens in services.dates.
    start_date: Any = None
    legacy_start_date: Any = Field(default=None, alias="startDate")
    deadline: Any = None
    legacy_end_date: Any = Field(default=None, alias="endDate")

    @field_validator("client", "description", "status", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value

    class Config:
        populate_by_name = True
        extra = "allow"
