# Form schemas package
from .complaint import AdminCredentials, ComplaintForm

__all__ = ["AdminCredentials", "ComplaintForm"]
