from fastapi import WebSocket
from typing import List
import json
import logging

logger = logging.getLogger(__name__)

class ConnectionManager:
    """Pushes editor events to every open builder tab."""

    def __init__(self):
        self.active_connections: List[WebSocket] = []

    async def connect(self, websocket: WebSocket):
        await websocket.accept()
        self.active_connections.append(websocket)
        logger.info(f"Builder tab subscribed to editor events ({len(self.active_connections)} open)")

    def disconnect(self, websocket: WebSocket):
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)
            logger.info(f"Builder tab unsubscribed from editor events ({len(self.active_connections)} open)")
        else:
            logger.warning("Builder tab was not subscribed to editor events")

    async def broadcast(self, message: str):
        dead_connections = []

        for connection in self.active_connections:
            try:
                await connection.send_text(message)
            except Exception as e:
                logger.error(f"Dropping builder tab, editor event not delivered: {e}")
                dead_connections.append(connection)

        for dead_conn in dead_connections:
            self.disconnect(dead_conn)

    async def send_event(self, event: str, payload):
        """Sends one editor event as {"type", "payload"} JSON."""
        await self.broadcast(json.dumps({"type": event, "payload": payload}))
        logger.debug(f"Editor event '{event}' sent to {len(self.active_connections)} tabs")

manager = ConnectionManager()
