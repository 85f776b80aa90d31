"""
Exception types raised by the complaint reporter core
"""


class ComplaintReporterError(Exception):
    """Base class for complaint reporter errors"""


class InvalidStatusError(ComplaintReporterError, ValueError):
    """Raised when a status outside Pending / In Progress / Resolved is requested"""

    def __init__(self, status):
        self.status = status
        super().__init__(f"Invalid complaint status: {status!r}")


class AdminRequiredError(ComplaintReporterError):
    """Raised when an admin-only action is attempted without an admin session"""


class StorageError(ComplaintReporterError):
    """Raised when the local storage backend cannot be read or written"""
