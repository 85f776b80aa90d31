# Complaint lifecycle services package
from .admin_auth import AdminSession, check_admin_credentials
from .complaint_filter import ComplaintFilter, filter_complaints
from .complaint_store import ComplaintStore, load_complaints, persist_complaints
from .reporter import ComplaintReporter
from .status_mutator import change_status
from .submission import submit_complaint

__all__ = [
    "AdminSession",
    "ComplaintFilter",
    "ComplaintReporter",
    "ComplaintStore",
    "change_status",
    "check_admin_credentials",
    "filter_complaints",
    "load_complaints",
    "persist_complaints",
    "submit_complaint",
]
