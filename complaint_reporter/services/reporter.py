"""
Reporter facade composing the record store, filtering, status changes and the admin flag
"""
from typing import List, Mapping, Optional, Union
from complaint_reporter.exceptions import AdminRequiredError
from complaint_reporter.models import ALL_CATEGORIES, Complaint, ComplaintStatus
from complaint_reporter.schemas import AdminCredentials, ComplaintForm
from complaint_reporter.services.admin_auth import AdminSession
from complaint_reporter.services.complaint_filter import ComplaintFilter
from complaint_reporter.services.complaint_store import ComplaintStore
from complaint_reporter.services.status_mutator import change_status
from complaint_reporter.services.submission import submit_complaint
from complaint_reporter.logging_config import logger

VIEWS = ("form", "dashboard", "admin")


class ComplaintReporter:
    """State a presentation layer binds to: store, search inputs, active view and admin flag"""

    def __init__(self, store: ComplaintStore, admin_session: Optional[AdminSession] = None):
        """
        Initialize the reporter and load the store

        Args:
            store: Record store, loaded here once
            admin_session: Admin flag holder, a fresh logged-out one by default
        """
        self.store = store
        self.admin_session = admin_session or AdminSession()
        self.active_view = "form"
        self.search_term = ""
        self.filter_category = ALL_CATEGORIES
        self._filter = ComplaintFilter()
        self.store.load()
        logger.info(f"Complaint reporter ready with {len(self.store)} complaints")

    @property
    def is_admin(self) -> bool:
        return self.admin_session.is_admin

    @property
    def complaints(self) -> List[Complaint]:
        return list(self.store.records)

    @property
    def filtered_complaints(self) -> List[Complaint]:
        return self._filter(self.store.records, self.search_term, self.filter_category)

    def show(self, view: str):
        if view not in VIEWS:
            raise ValueError(f"Unknown view: {view}")
        self.active_view = view

    def search(self, search_term: str = "", category: Optional[str] = None) -> List[Complaint]:
        """Update the search inputs and return the filtered complaints"""
        self.search_term = search_term
        if category is not None:
            self.filter_category = category
        return self.filtered_complaints

    def submit(self, form: Union[ComplaintForm, Mapping], photo: Optional[str] = None) -> Complaint:
        """
        Append a new complaint, persist the store and switch to the dashboard

        Raises:
            ValidationError: If a required field is blank or the category is unknown
        """
        if not isinstance(form, ComplaintForm):
            form = ComplaintForm.model_validate(form)

        complaint = submit_complaint(form, self.store.records, photo=photo)
        self.store.append(complaint)
        self.show("dashboard")
        return complaint

    def set_status(self, complaint_id: str, status: Union[ComplaintStatus, str]) -> List[Complaint]:
        """
        Change a complaint's status and persist the store

        Raises:
            AdminRequiredError: If no admin is logged in
            InvalidStatusError: If status is not a known status
        """
        if not self.is_admin:
            raise AdminRequiredError("Status changes require an admin session")

        records = change_status(self.store.records, complaint_id, status)
        self.store.replace(records)
        return records

    def login(self, credentials: Union[AdminCredentials, Mapping]) -> bool:
        if not isinstance(credentials, AdminCredentials):
            credentials = AdminCredentials.model_validate(credentials)

        if self.admin_session.login(credentials.username, credentials.password):
            self.show("admin")
            return True
        return False

    def logout(self):
        self.admin_session.logout()
        self.show("form")
