"""
Unit tests for complaint search and category filtering
"""
import pytest
from unittest.mock import patch
from complaint_reporter.models import seed_complaints
from complaint_reporter.services.complaint_filter import ComplaintFilter, filter_complaints


class TestFilterComplaints:
    """Test the pure filter function"""

    @pytest.fixture
    def store(self):
        """Create the seed complaint list"""
        return seed_complaints()

    def test_empty_term_and_all_is_identity(self, store):
        """Test that an empty term with all categories returns the input"""
        assert filter_complaints(store, "", "all") == store

    def test_defaults_match_everything(self, store):
        """Test that default arguments keep every record"""
        assert filter_complaints(store) == store

    def test_search_matches_location_case_insensitive(self, store):
        """Test case-insensitive matching on the location"""
        result = filter_complaints(store, "park", "all")

        assert [c.id for c in result] == ["2"]
        assert result[0].description == "Garbage bins overflowed in the park"

    def test_search_matches_category(self, store):
        """Test matching on the category text"""
        assert [c.id for c in filter_complaints(store, "SAFETY", "all")] == ["3"]

    def test_search_matches_description(self, store):
        """Test matching on the description"""
        assert [c.id for c in filter_complaints(store, "pothole", "all")] == ["1"]

    def test_search_does_not_match_name_or_email(self, store):
        """Test that reporter name and email are not searched"""
        assert filter_complaints(store, "John Doe", "all") == []
        assert filter_complaints(store, "example.com", "all") == []

    def test_category_filter(self, store):
        """Test filtering by a single category"""
        result = filter_complaints(store, "", "Public Safety")

        assert len(result) == 1
        assert result[0].name == "Robert Johnson"

    def test_category_match_is_case_sensitive(self, store):
        """Test exact, case-sensitive category comparison"""
        assert filter_complaints(store, "", "public safety") == []

    def test_both_predicates_required(self, store):
        """Test that search and category must both match"""
        assert filter_complaints(store, "park", "Public Safety") == []

    def test_order_preserved(self, store):
        """Test that matches keep their store order"""
        assert [c.id for c in filter_complaints(store, "s", "all")] == ["1", "2", "3"]

    @pytest.mark.parametrize("term,category", [("", "all"), ("park", "all"), ("st", "Public Safety"), ("zzz", "Other")])
    def test_idempotent(self, store, term, category):
        """Test that filtering a filtered result changes nothing"""
        once = filter_complaints(store, term, category)

        assert filter_complaints(once, term, category) == once

    def test_input_not_modified(self, store):
        """Test that filtering leaves the input sequence alone"""
        original = list(store)
        filter_complaints(store, "park", "Sanitation")

        assert store == original


class TestComplaintFilter:
    """Test the memoizing filter"""

    def test_same_inputs_reuse_result(self):
        """Test that unchanged inputs reuse the cached result"""
        records = tuple(seed_complaints())
        complaint_filter = ComplaintFilter()

        with patch('complaint_reporter.services.complaint_filter.filter_complaints', wraps=filter_complaints) as mock_filter:
            first = complaint_filter(records, "park", "all")
            second = complaint_filter(records, "park", "all")

        assert first == second == filter_complaints(records, "park", "all")
        mock_filter.assert_called_once()

    def test_changed_inputs_recompute(self):
        """Test that changed records, term or category recompute the result"""
        records = tuple(seed_complaints())
        complaint_filter = ComplaintFilter()

        assert len(complaint_filter(records, "", "all")) == 3
        assert len(complaint_filter(records, "", "Sanitation")) == 1
        assert len(complaint_filter(records[:1], "", "all")) == 1

    def test_invalidate(self):
        """Test that invalidate forces a recompute"""
        records = tuple(seed_complaints())
        complaint_filter = ComplaintFilter()
        complaint_filter(records)
        complaint_filter.invalidate()

        with patch('complaint_reporter.services.complaint_filter.filter_complaints', wraps=filter_complaints) as mock_filter:
            complaint_filter(records)

        mock_filter.assert_called_once()
