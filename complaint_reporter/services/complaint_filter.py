"""
Search and category filtering over complaint sequences
"""
from typing import List, Optional, Sequence, Tuple
from complaint_reporter.models import ALL_CATEGORIES, Complaint


def matches_search(complaint: Complaint, search_term: str) -> bool:
    """Case-insensitive substring match on description, location or category"""
    term = search_term.lower()
    return (
        term in complaint.description.lower()
        or term in complaint.location.lower()
        or term in complaint.category.lower()
    )


def matches_category(complaint: Complaint, category: str) -> bool:
    return category == ALL_CATEGORIES or complaint.category == category


def filter_complaints(
    records: Sequence[Complaint],
    search_term: str = "",
    category: str = ALL_CATEGORIES
) -> List[Complaint]:
    """
    Keep the complaints matching both the search term and the category selector

    Args:
        records: Complaints in store order
        search_term: Free text, empty matches everything
        category: Exact category name, or "all"

    Returns:
        Matching complaints in their original relative order
    """
    return [
        complaint for complaint in records
        if matches_search(complaint, search_term) and matches_category(complaint, category)
    ]


class ComplaintFilter:
    """Memoizes the last filter result for an unchanged (records, term, category)"""

    def __init__(self):
        self._key: Optional[Tuple[int, str, str]] = None
        self._records: Optional[Sequence[Complaint]] = None
        self._result: List[Complaint] = []

    def __call__(
        self,
        records: Sequence[Complaint],
        search_term: str = "",
        category: str = ALL_CATEGORIES
    ) -> List[Complaint]:
        key = (id(records), search_term, category)
        # Holding a reference to records keeps its id from being reused
        if key != self._key or self._records is not records:
            self._result = filter_complaints(records, search_term, category)
            self._key = key
            self._records = records
        return list(self._result)

    def invalidate(self):
        self._key = None
        self._records = None
        self._result = []
