from typing import Dict
from fastapi import WebSocket
from snapshots.services.state_publisher import StateView
import asyncio
import logging

logger = logging.getLogger(__name__)

class WebSocketManager:
    def __init__(self):
        # store active connections: connection id -> forwarding task
        self.active_connections: Dict[int, asyncio.Task] = {}

    async def connect(self, websocket: WebSocket, ui_state: StateView):
        # Accept the connection and start forwarding states to it
        await websocket.accept()
        connection_id = id(websocket)
        self.active_connections[connection_id] = asyncio.create_task(
            self._forward_states(websocket, ui_state)
        )
        logger.info(f"Websocket connected: {connection_id}")

    async def disconnect(self, websocket: WebSocket):
        # Stop forwarding and forget the connection
        task = self.active_connections.pop(id(websocket), None)
        if task:
            task.cancel()
            logger.info(f"Websocket disconnected: {id(websocket)}")

    async def _forward_states(self, websocket: WebSocket, ui_state: StateView):
        # The stream starts with the current state, so new clients render immediately
        try:
            async for state in ui_state.stream():
                await websocket.send_json(state.model_dump(mode="json"))
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Failed to send state to websocket {id(websocket)}: {str(e)}")
            self.active_connections.pop(id(websocket), None)

websocket_manager = WebSocketManager()
