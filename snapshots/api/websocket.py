from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from snapshots.services.snapshot_service import SnapshotService, get_snapshot_service
from snapshots.websocket.manager import websocket_manager
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/ws", tags=["websocket"])

@router.websocket("/snapshots")
async def websocket_snapshots(
    websocket: WebSocket,
    service: SnapshotService = Depends(get_snapshot_service),
):
    # websocket endpoint streaming every published UI state
    await websocket_manager.connect(websocket, service.ui_state)

    try:
        while True:
            data = await websocket.receive_text()

            if data == 'ping':
                await websocket.send_text('pong')
    except WebSocketDisconnect:
        await websocket_manager.disconnect(websocket)
    except Exception as e:
        logger.error(f"websocket error: {str(e)}")
        await websocket_manager.disconnect(websocket)
