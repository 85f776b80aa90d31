import datetime as dt
import enum
from typing import List, Optional
from pydantic import ConfigDict
from sqlmodel import Field, SQLModel


class ComplaintStatus(str, enum.Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"


class ComplaintCategory(str, enum.Enum):
    ROADS_AND_INFRASTRUCTURE = "Roads and Infrastructure"
    SANITATION = "Sanitation"
    PUBLIC_SAFETY = "Public Safety"
    UTILITIES = "Utilities"
    PARKS_AND_RECREATION = "Parks and Recreation"
    OTHER = "Other"


# Selector value that disables category filtering
ALL_CATEGORIES = "all"


class Complaint(SQLModel):
    model_config = ConfigDict(frozen=True)  # status changes go through change_status

    id: str = Field(min_length=1)
    name: str
    email: str
    category: str  # persisted text, membership is checked by the form layer
    description: str
    location: str
    status: ComplaintStatus = Field(default=ComplaintStatus.PENDING)
    date: dt.date
    photo: Optional[str] = None  # data URL or image path


def seed_complaints() -> List[Complaint]:
    """Example records written to storage the first time nothing is persisted"""
    return [
        Complaint(
            id="1",
            name="John Doe",
            email="john@example.com",
            category=ComplaintCategory.ROADS_AND_INFRASTRUCTURE.value,
            description="Large pothole causing traffic issues on Main Street",
            location="Main St & 1st Ave",
            status=ComplaintStatus.PENDING,
            date=dt.date(2023, 5, 15),
            photo="/placeholder-pothole.jpg",
        ),
        Complaint(
            id="2",
            name="Jane Smith",
            email="jane@example.com",
            category=ComplaintCategory.SANITATION.value,
            description="Garbage bins overflowed in the park",
            location="Central Park",
            status=ComplaintStatus.IN_PROGRESS,
            date=dt.date(2023, 5, 18),
        ),
        Complaint(
            id="3",
            name="Robert Johnson",
            email="robert@example.com",
            category=ComplaintCategory.PUBLIC_SAFETY.value,
            description="Street light out near the school",
            location="Oak St & School Rd",
            status=ComplaintStatus.RESOLVED,
            date=dt.date(2023, 5, 10),
        ),
    ]
