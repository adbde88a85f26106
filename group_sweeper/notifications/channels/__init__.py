from .base import NotificationChannel
from .email import EmailChannel

__all__ = ["NotificationChannel", "EmailChannel"]
