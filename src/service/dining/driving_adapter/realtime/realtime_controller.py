"""
Realtime notification stream

ws://localhost:5000/ws

Server -> client only: JSON text frames {"event": ..., "data": {...}}.
Anything a client sends is read and discarded so disconnects are noticed.
"""

from fastapi import APIRouter, WebSocket, status

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.constant.route_constant import REALTIME_WS
from src.platform.logging.loguru_io import Logger


router = APIRouter()


def is_allowed_origin(origin: str | None) -> bool:
    # Non-browser clients send no Origin header
    return origin is None or origin in settings.BACKEND_CORS_ORIGINS


@router.websocket(REALTIME_WS)
async def realtime_notifications(websocket: WebSocket) -> None:
    origin = websocket.headers.get('origin')
    if not is_allowed_origin(origin):
        Logger.base.warning(f'🚫 [REALTIME] Rejected handshake from origin {origin}')
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    channel = container.notification_channel()
    connection_id = channel.on_connect(websocket)

    try:
        while True:
            message = await websocket.receive()
            if message['type'] == 'websocket.disconnect':
                break
    finally:
        channel.on_disconnect(connection_id)
