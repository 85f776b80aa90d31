"""
Entry point wiring storage, the record store and the reporter facade
"""
from typing import Optional

from complaint_reporter.config import get_settings
from complaint_reporter.logging_config import logger, setup_logging
from complaint_reporter.services import ComplaintReporter, ComplaintStore
from complaint_reporter.storage import LocalStorage


def create_reporter(
    database_url: Optional[str] = None,
    storage_key: Optional[str] = None,
    configure_logging: bool = True
) -> ComplaintReporter:
    """
    Build a ready-to-use reporter, loading complaints from local storage once

    Args:
        database_url: Local storage URL, defaults to settings.DATABASE_URL
        storage_key: Storage slot name, defaults to settings.STORAGE_KEY
        configure_logging: Apply the logging configuration first
    """
    if configure_logging:
        setup_logging()

    settings = get_settings()
    storage = LocalStorage(database_url=database_url)
    store = ComplaintStore(storage, storage_key=storage_key)

    logger.info(f"Community complaint reporter starting up ({settings.ENVIRONMENT})")
    return ComplaintReporter(store)
