"""
Unit tests for the submission handler
"""
import pytest
from datetime import date, datetime, timezone
from complaint_reporter.models import ComplaintStatus, seed_complaints
from complaint_reporter.schemas import ComplaintForm
from complaint_reporter.services.submission import generate_complaint_id, submit_complaint


NOW = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)
NOW_ID = str(int(NOW.timestamp() * 1000))
FIELDS = {
    "name": "A",
    "email": "a@x.com",
    "category": "Other",
    "description": "d",
    "location": "l"
}


class TestSubmitComplaint:
    """Test complaint creation from form fields"""

    @pytest.fixture
    def form(self):
        """Create a validated complaint form"""
        return ComplaintForm(**FIELDS)

    def test_new_complaint_is_pending_and_dated(self, form):
        """Test that a new complaint is Pending, dated today and timestamp-keyed"""
        complaint = submit_complaint(form, now=NOW)

        assert complaint.status == ComplaintStatus.PENDING
        assert complaint.date == date(2024, 3, 1)
        assert complaint.id == NOW_ID
        assert complaint.category == "Other"
        assert complaint.photo is None

    def test_fields_copied(self, form):
        """Test that reporter and issue fields are copied verbatim"""
        complaint = submit_complaint(form, now=NOW)

        assert (complaint.name, complaint.email, complaint.description, complaint.location) == ("A", "a@x.com", "d", "l")

    def test_mapping_form(self):
        """Test submitting plain mapping fields"""
        complaint = submit_complaint({**FIELDS, "category": "Sanitation"}, now=NOW)

        assert complaint.category == "Sanitation"

    def test_unlisted_category_trusted(self):
        """Test that the handler does not re-check category membership"""
        complaint = submit_complaint({**FIELDS, "category": "Potholes"}, now=NOW)

        assert complaint.category == "Potholes"
        assert complaint.status == ComplaintStatus.PENDING

    def test_blank_field_trusted(self):
        """Test that the handler does not re-check field emptiness"""
        complaint = submit_complaint({**FIELDS, "name": " "}, now=NOW)

        assert complaint.name == " "
        assert complaint.status == ComplaintStatus.PENDING

    def test_photo_attached(self, form):
        """Test attaching an embedded photo at submission time"""
        complaint = submit_complaint(form, photo="data:image/png;base64,iVBORw0KGgo=", now=NOW)

        assert complaint.photo == "data:image/png;base64,iVBORw0KGgo="

    def test_photo_from_form(self):
        """Test that a photo carried by the form is kept"""
        form = ComplaintForm(**FIELDS, photo="data:image/jpeg;base64,/9j/")

        assert submit_complaint(form, now=NOW).photo == "data:image/jpeg;base64,/9j/"

    def test_photo_from_mapping(self):
        """Test that a photo carried by mapping fields is kept"""
        complaint = submit_complaint({**FIELDS, "photo": "data:image/gif;base64,R0lG"}, now=NOW)

        assert complaint.photo == "data:image/gif;base64,R0lG"

    def test_id_distinct_from_existing(self, form):
        """Test that generated ids never collide with stored ids"""
        existing = seed_complaints()
        first = submit_complaint(form, existing, now=NOW)
        second = submit_complaint(form, existing + [first], now=NOW)

        existing_ids = {c.id for c in existing}
        assert first.id not in existing_ids
        assert second.id not in existing_ids | {first.id}

    def test_default_clock_uses_today(self, form):
        """Test that the current UTC date is used when no clock is given"""
        before = datetime.now(timezone.utc).date()
        complaint = submit_complaint(form)
        after = datetime.now(timezone.utc).date()

        assert before <= complaint.date <= after
        assert complaint.id.isdigit()


class TestGenerateComplaintId:
    """Test id synthesis"""

    def test_timestamp_id(self):
        """Test that the id is the millisecond timestamp"""
        assert generate_complaint_id([], NOW) == NOW_ID

    def test_collision_increments(self):
        """Test that taken ids are skipped"""
        taken = [NOW_ID, str(int(NOW_ID) + 1)]

        assert generate_complaint_id(taken, NOW) == str(int(NOW_ID) + 2)
