from snapshots.langgraph.state import OutlineState
from snapshots.exceptions import EmptyResponseError
from snapshots.schemas.content import OutlineItem
from snapshots.services.response_parser import parse_content_areas, parse_subtopics
import logging

logger = logging.getLogger(__name__)

class OutlineNodes:
    """
    Graph nodes for the outline strategy. Each node takes the model client
    and returns a partial state update; failures are raised, not stored.
    """

    def __init__(self, client):
        self.client = client

    async def overview_node(self, state: OutlineState) -> dict:
        logger.info(f"[OVERVIEW] Generating overview for topic: {state.topic}")
        overview = await self.client.generate_topic_overview(state.topic)
        if not overview:
            raise EmptyResponseError("Failed to generate topic overview")
        return {"overview": overview}

    async def areas_node(self, state: OutlineState) -> dict:
        text = await self.client.generate_main_content_areas(
            state.topic, state.overview, state.area_count
        )
        if not text:
            raise EmptyResponseError("Failed to generate main content areas")

        areas = parse_content_areas(text, expected=state.area_count)
        logger.info(f"[AREAS] {len(areas)} content areas for topic: {state.topic}")
        return {"areas": areas}

    async def details_node(self, state: OutlineState) -> dict:
        """Request each area's explanation one at a time, in area order."""
        items = []
        for index, area in enumerate(state.areas, start=1):
            text = await self.client.generate_detailed_content(state.topic, area)
            if text:
                subtopics = parse_subtopics(text)
            else:
                # A missing area degrades to an empty card instead of failing the batch
                logger.warning(f"[DETAILS] No content for area {index}/{len(state.areas)}: {area}")
                subtopics = []
            items.append(OutlineItem(title=area, subtopics=subtopics))

        logger.info(f"[DETAILS] Generated {len(items)} items for topic: {state.topic}")
        return {"items": items}

    @staticmethod
    async def validate_node(state: OutlineState) -> dict:
        """
        Validate-and-enhance pass. Currently a pass-through: the items leave
        unchanged. Checks or enrichment of the generated items go here.
        """
        return {"items": state.items}
