"""
Utils Package - Centralized utility modules initialization
"""

from .notifications import (
    get_owner_telegram_credentials,
    send_telegram_notification,
    notify_new_submission
)
from .security import (
    get_client_ip,
    add_security_headers
)

__all__ = [
    # Notifications
    'get_owner_telegram_credentials',
    'send_telegram_notification',
    'notify_new_submission',

    # Security
    'get_client_ip',
    'add_security_headers'
]
