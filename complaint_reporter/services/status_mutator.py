"""
Admin status changes on complaint sequences
"""
from typing import List, Sequence, Union
from complaint_reporter.exceptions import InvalidStatusError
from complaint_reporter.models import Complaint, ComplaintStatus
from complaint_reporter.logging_config import logger


def coerce_status(status: Union[ComplaintStatus, str]) -> ComplaintStatus:
    try:
        return ComplaintStatus(status)
    except ValueError as e:
        raise InvalidStatusError(status) from e


def change_status(
    records: Sequence[Complaint],
    complaint_id: str,
    new_status: Union[ComplaintStatus, str]
) -> List[Complaint]:
    """
    Return a copy of records with one complaint's status replaced

    Any status may be set from any status. An unknown id leaves the
    sequence unchanged. Persisting the result is up to the caller.

    Args:
        records: Complaints in store order
        complaint_id: Id of the complaint to update
        new_status: Pending, In Progress or Resolved

    Raises:
        InvalidStatusError: If new_status is not a known status
    """
    status = coerce_status(new_status)
    updated = []
    found = False

    for complaint in records:
        if complaint.id == complaint_id:
            complaint = Complaint.model_validate({**complaint.model_dump(), "status": status})
            found = True
        updated.append(complaint)

    if found:
        logger.info(f"Complaint status set to '{status.value}'", extra={'complaint_id': complaint_id})
    else:
        logger.debug(f"Status change ignored, no complaint with id {complaint_id}")

    return updated
