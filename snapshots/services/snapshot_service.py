from typing import List, Optional, Set, Union
from snapshots.config import settings
from snapshots.exceptions import EmptyResponseError
from snapshots.langgraph.workflow import OutlineWorkflow
from snapshots.schemas.content import ContentItem, OutlineItem, Loading, Success, Error
from snapshots.services.response_parser import parse_content_items
from snapshots.services.state_publisher import StatePublisher, StateView
from snapshots.utils.azure_openai import azure_client
import asyncio
import logging

logger = logging.getLogger(__name__)

class SnapshotService:
    """
    Drives the Initial -> Loading -> Success | Error state machine.

    ``generate_content`` is the only mutator. Results are observed through
    ``ui_state``; the returned task exists so callers can await or shut down,
    never to read results from. Overlapping calls are not cancelled: each run
    publishes when it finishes and the last publish wins.
    """

    def __init__(self, client=None, strategy: Optional[str] = None, area_count: Optional[int] = None):
        self.client = client or azure_client
        self.strategy = strategy or settings.generation_strategy
        self.area_count = settings.content_area_count if area_count is None else area_count

        if self.strategy not in ("snapshot", "outline"):
            raise ValueError(f"Unknown generation strategy: {self.strategy}")

        self._publisher = StatePublisher()
        self.ui_state: StateView = self._publisher.view()
        self._outline_workflow = OutlineWorkflow(self.client) if self.strategy == "outline" else None
        self._tasks: Set[asyncio.Task] = set()

    def generate_content(self, topic: str) -> Optional[asyncio.Task]:
        """
        Publish Loading and start generating content for ``topic`` in the background.
        Without a running event loop nothing can be scheduled, so Error is published
        right away and None is returned.
        """
        self._publisher.publish(Loading())

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            logger.error(f"[PUBLISH] Cannot schedule generation for topic: {topic}", exc_info=True)
            self._publisher.publish(Error(message=str(e) or "An error occurred"))
            return None

        task = loop.create_task(self._run(topic))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, topic: str) -> None:
        try:
            content_list = await self.generate_content_list(topic)
            self._publisher.publish(Success(content_list=content_list))
            logger.info(f"[PUBLISH] Success with {len(content_list)} items for topic: {topic}")
        except Exception as e:
            logger.error(f"[PUBLISH] Error generating content for topic: {topic}", exc_info=True)
            self._publisher.publish(Error(message=str(e) or "An error occurred"))

    async def generate_content_list(self, topic: str) -> List[Union[ContentItem, OutlineItem]]:
        if self.strategy == "outline":
            return await self._outline_workflow.run(topic, self.area_count)
        return await self.get_topic_overview(topic)

    async def get_topic_overview(self, topic: str) -> List[ContentItem]:
        """Single call: the model returns every snapshot card as one JSON array."""
        logger.info(f"[SNAPSHOT] Requesting snapshot cards for topic: {topic}")
        text = await self.client.generate_snapshot_cards(topic)
        if not text:
            raise EmptyResponseError("Failed to generate topic overview")

        logger.debug(f"[SNAPSHOT] Received response: {text}")
        return parse_content_items(text)

    async def wait_idle(self) -> None:
        """Wait for every in-flight generation to publish its terminal state."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


snapshot_service: Optional[SnapshotService] = None

def get_snapshot_service() -> SnapshotService:
    """FastAPI dependency returning the process-wide service."""
    global snapshot_service
    if snapshot_service is None:
        snapshot_service = SnapshotService()
    return snapshot_service
