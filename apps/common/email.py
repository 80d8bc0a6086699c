"""
Outgoing email helpers.
"""
import logging

from django.core.mail import get_connection

logger = logging.getLogger(__name__)


def verify_email_connection():
    """
    Open and close a connection on the configured email backend.

    Returns True when the backend accepted the connection.
    """
    connection = get_connection(fail_silently=False)
    try:
        connection.open()
    except (OSError, ValueError) as e:
        logger.error(f"Email service error: {e}")
        return False
    else:
        logger.info("Email service ready")
        return True
    finally:
        connection.close()
