"""
Utils Package - Centralized utility modules initialization
"""

from .notifications import get_telegram_credentials, send_telegram_notification
from .security import get_client_ip, check_rate_limit

__all__ = [
    # Notifications
    'get_telegram_credentials',
    'send_telegram_notification',

    # Security
    'get_client_ip',
    'check_rate_limit',
]
