"""
Submission handler turning submitted form fields into new complaint records
"""
from datetime import datetime, timezone
from typing import Iterable, Mapping, Optional, Union
from complaint_reporter.models import Complaint, ComplaintStatus
from complaint_reporter.schemas import ComplaintForm
from complaint_reporter.logging_config import logger


def generate_complaint_id(existing_ids: Iterable[str], now: Optional[datetime] = None) -> str:
    """
    Build a millisecond timestamp id that does not collide with existing ids

    Args:
        existing_ids: Ids already present in the store
        now: Creation time, defaults to the current UTC time

    Returns:
        Decimal string id
    """
    now = now or datetime.now(timezone.utc)
    taken = set(existing_ids)
    candidate = int(now.timestamp() * 1000)

    while str(candidate) in taken:
        candidate += 1

    return str(candidate)


def submit_complaint(
    form: Union[ComplaintForm, Mapping],
    existing: Iterable[Complaint] = (),
    photo: Optional[str] = None,
    now: Optional[datetime] = None
) -> Complaint:
    """
    Create a new pending complaint from submitted form fields

    Fields are trusted as given: required-field and category checks belong
    to the form layer (ComplaintForm), not to this handler.

    Args:
        form: Form fields, a ComplaintForm or a mapping of the same fields
        existing: Complaints already in the store, used to keep the id unique
        photo: Optional embedded image, overrides the form's photo when given
        now: Submission time, defaults to the current UTC time

    Returns:
        The new complaint; appending and persisting it is up to the caller
    """
    fields = form.model_dump(mode="json") if isinstance(form, ComplaintForm) else dict(form)
    category = fields["category"]

    now = now or datetime.now(timezone.utc)
    complaint_id = generate_complaint_id((record.id for record in existing), now)

    complaint = Complaint(
        id=complaint_id,
        name=fields["name"],
        email=fields["email"],
        category=getattr(category, "value", category),
        description=fields["description"],
        location=fields["location"],
        status=ComplaintStatus.PENDING,
        date=now.astimezone(timezone.utc).date() if now.tzinfo else now.date(),
        photo=photo or fields.get("photo"),
    )

    logger.info(f"Complaint submitted in category '{complaint.category}'", extra={'complaint_id': complaint.id})
    return complaint
