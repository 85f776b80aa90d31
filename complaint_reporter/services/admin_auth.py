"""
Placeholder admin check

The credential comparison below is a hardcoded literal pair with no hashing,
salting or session expiry. It is NOT a security boundary and must be
replaced by real authentication anywhere it is reused.
"""
from typing import Optional
from complaint_reporter.config import get_settings
from complaint_reporter.logging_config import logger

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


def check_admin_credentials(username: str, password: str) -> bool:
    """True only for the one configured username/password pair (placeholder, not secure)"""
    settings = get_settings()
    return username == settings.ADMIN_USERNAME and password == settings.ADMIN_PASSWORD


class AdminSession:
    """Single shared admin flag"""

    def __init__(self):
        self.is_admin = False
        self.message: Optional[str] = None

    def login(self, username: str, password: str) -> bool:
        """
        Set the admin flag when the placeholder credentials match

        Returns:
            True on success, False with self.message set otherwise
        """
        if check_admin_credentials(username, password):
            self.is_admin = True
            self.message = None
            logger.info("Admin logged in")
            return True

        self.message = INVALID_CREDENTIALS_MESSAGE
        logger.warning("Admin login rejected")
        return False

    def logout(self):
        self.is_admin = False
        self.message = None
        logger.info("Admin logged out")
