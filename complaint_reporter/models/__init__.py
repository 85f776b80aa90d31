# Data models package
from .complaint import (
    ALL_CATEGORIES,
    Complaint,
    ComplaintCategory,
    ComplaintStatus,
    seed_complaints,
)
from .storage_slot import StorageSlot

__all__ = [
    "ALL_CATEGORIES",
    "Complaint",
    "ComplaintCategory",
    "ComplaintStatus",
    "StorageSlot",
    "seed_complaints",
]
