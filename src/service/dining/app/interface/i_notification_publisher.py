"""
Notification Publisher Interface

Best-effort fan-out to realtime clients. Use cases call publish() and move on:
it only schedules delivery and never raises for delivery problems.
"""

from typing import Any, Dict, Protocol


class NotificationEvent:
    CONNECT = 'connect'
    DISCONNECT = 'disconnect'
    BOOKING_CREATED = 'booking_created'


class INotificationPublisher(Protocol):
    def publish(self, event_name: str, payload: Dict[str, Any]) -> None: ...
