"""
Realtime Notification Channel

Best-effort fan-out of connect / disconnect / booking events to WebSocket clients.

Lifecycle:
- Created once per process by the DI container
- open(task_group=...) at server start attaches the lifespan task group
- close() at shutdown detaches it and clears the roster

The roster is written only by on_connect / on_disconnect. Delivery failures
are logged and skipped; the client's own disconnect callback removes it.
"""

from typing import Any, Dict, List, Optional, Tuple

from anyio.abc import TaskGroup
from fastapi import WebSocket
import orjson
import uuid_utils

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.dining.app.interface.i_notification_publisher import NotificationEvent


class ConnectionRoster:
    """connection_id -> WebSocket for every currently connected client"""

    def __init__(self) -> None:
        self._connections: Dict[str, WebSocket] = {}

    def add(self, connection_id: str, websocket: WebSocket) -> None:
        self._connections[connection_id] = websocket

    def remove(self, connection_id: str) -> bool:
        return self._connections.pop(connection_id, None) is not None

    def snapshot(self) -> List[Tuple[str, WebSocket]]:
        # Copy so fan-out is not affected by connects/disconnects mid-iteration
        return list(self._connections.items())

    def connection_ids(self) -> List[str]:
        return list(self._connections)

    def clear(self) -> None:
        self._connections.clear()

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._connections


class NotificationChannelImpl:
    def __init__(self, *, roster: Optional[ConnectionRoster] = None) -> None:
        self.roster = roster or ConnectionRoster()
        self._task_group: Optional[TaskGroup] = None

    @property
    def is_open(self) -> bool:
        return self._task_group is not None

    def open(self, *, task_group: TaskGroup) -> None:
        self._task_group = task_group
        Logger.base.info('📡 [REALTIME] Notification channel open')

    async def close(self) -> None:
        self._task_group = None
        dropped = len(self.roster)
        self.roster.clear()
        metrics.set_realtime_connections(0)
        Logger.base.info(
            f'📡 [REALTIME] Notification channel closed (dropped {dropped} connections)'
        )

    # ============================ Lifecycle callbacks ============================

    def on_connect(self, websocket: WebSocket) -> str:
        connection_id = str(uuid_utils.uuid7())
        self.roster.add(connection_id, websocket)
        active = len(self.roster)
        metrics.set_realtime_connections(active)
        Logger.base.info(f'🔌 [REALTIME] A user connected: {connection_id} (active={active})')

        self.publish(
            NotificationEvent.CONNECT,
            {'connectionId': connection_id, 'activeConnections': active},
        )
        return connection_id

    def on_disconnect(self, connection_id: str) -> None:
        if not self.roster.remove(connection_id):
            return
        active = len(self.roster)
        metrics.set_realtime_connections(active)
        Logger.base.info(f'🔌 [REALTIME] A user disconnected: {connection_id} (active={active})')

        self.publish(
            NotificationEvent.DISCONNECT,
            {'connectionId': connection_id, 'activeConnections': active},
        )

    # ============================ Publish ============================

    def publish(self, event_name: str, payload: Dict[str, Any]) -> None:
        """Schedule delivery to all connected clients and return immediately."""
        if self._task_group is None:
            Logger.base.debug(f'📡 [REALTIME] Channel not open, dropping event "{event_name}"')
            return

        try:
            message = orjson.dumps({'event': event_name, 'data': payload}).decode()
        except TypeError as e:
            Logger.base.error(f'📡 [REALTIME] Cannot encode event "{event_name}": {e}')
            return

        metrics.record_realtime_event(event=event_name)
        # Recipients are the clients connected at publish time
        recipients = self.roster.snapshot()
        self._task_group.start_soon(self._fan_out, event_name, message, recipients)

    async def _fan_out(
        self, event_name: str, message: str, recipients: List[Tuple[str, WebSocket]]
    ) -> None:
        delivered = 0
        failed = 0
        for connection_id, websocket in recipients:
            try:
                await websocket.send_text(message)
                delivered += 1
            except Exception as e:
                failed += 1
                Logger.base.warning(
                    f'⚠️ [REALTIME] Send failed for {connection_id} '
                    f'(event={event_name}): {type(e).__name__}: {e}'
                )

        Logger.base.debug(
            f'📡 [REALTIME] Fan-out "{event_name}": delivered={delivered}, failed={failed}'
        )
