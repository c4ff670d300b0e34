from fastapi import APIRouter, Depends, status
from snapshots.schemas.content import UiState
from snapshots.schemas.snapshot import GenerateRequest
from snapshots.services.snapshot_service import SnapshotService, get_snapshot_service
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/snapshots", tags=["snapshots"])

@router.post("/generate", response_model=UiState, status_code=status.HTTP_202_ACCEPTED)
async def generate_content(
    request: GenerateRequest,
    service: SnapshotService = Depends(get_snapshot_service)
):
    """Start generating snapshot cards for a topic; the outcome arrives via /state or the websocket"""
    logger.info(f"Generation requested for topic: {request.topic}")
    service.generate_content(request.topic)
    return service.ui_state.value

@router.get("/state", response_model=UiState)
async def get_state(service: SnapshotService = Depends(get_snapshot_service)):
    """Current UI state"""
    return service.ui_state.value
