"""
JSON structured logging configuration using python-json-logger
"""
import logging
import logging.config
import sys
from typing import Dict, Any

from pythonjsonlogger.json import JsonFormatter

from complaint_reporter.config import get_settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with additional fields"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        # Add service name
        log_record['service'] = 'complaint-reporter'

        # Add complaint ID if available
        if hasattr(record, 'complaint_id'):
            log_record['complaint_id'] = record.complaint_id


def setup_logging() -> None:
    """Setup JSON structured logging"""
    settings = get_settings()

    # Logging configuration
    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'json': {
                '()': CustomJsonFormatter,
                'format': '%(asctime)s %(name)s %(levelname)s %(message)s'
            },
            'standard': {
                'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
            }
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': settings.LOG_LEVEL,
                'formatter': 'json' if settings.ENVIRONMENT == 'production' else 'standard',
                'stream': sys.stdout
            }
        },
        'loggers': {
            'complaint_reporter': {
                'level': settings.LOG_LEVEL,
                'handlers': ['console'],
                'propagate': False
            },
            'sqlalchemy.engine': {
                'level': 'WARNING',
                'handlers': ['console'],
                'propagate': False
            }
        },
        'root': {
            'level': settings.LOG_LEVEL,
            'handlers': ['console']
        }
    }

    logging.config.dictConfig(config)

    # Log startup message
    logger.info(
        "Logging configured",
        extra={
            'log_level': settings.LOG_LEVEL,
            'environment': settings.ENVIRONMENT
        }
    )


logger = logging.getLogger("complaint_reporter")
