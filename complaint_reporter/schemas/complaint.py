from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator
from complaint_reporter.models.complaint import ComplaintCategory


# Request schema for submitting a complaint
class ComplaintForm(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str  # no format validation, any non-empty text is accepted
    category: ComplaintCategory
    description: str
    location: str
    photo: Optional[str] = None

    @field_validator("name", "email", "description", "location")
    @classmethod
    def _required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("field is required")
        return value


# Admin login form
class AdminCredentials(BaseModel):
    username: str = ""
    password: str = ""
