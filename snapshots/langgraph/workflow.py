from typing import List
from langgraph.graph import StateGraph, END
from snapshots.langgraph.state import OutlineState
from snapshots.langgraph.nodes import OutlineNodes
from snapshots.schemas.content import OutlineItem
import logging

logger = logging.getLogger(__name__)

class OutlineWorkflow:
    """overview -> areas -> details -> validate, compiled once per client."""

    def __init__(self, client):
        self.nodes = OutlineNodes(client)
        self._compiled_workflow = self._build_workflow().compile()

    def _build_workflow(self) -> StateGraph:
        workflow = StateGraph(OutlineState)

        workflow.add_node("generate_overview", self.nodes.overview_node)
        workflow.add_node("generate_areas", self.nodes.areas_node)
        workflow.add_node("generate_details", self.nodes.details_node)
        workflow.add_node("validate_items", self.nodes.validate_node)

        workflow.set_entry_point("generate_overview")
        workflow.add_edge("generate_overview", "generate_areas")
        workflow.add_edge("generate_areas", "generate_details")
        workflow.add_edge("generate_details", "validate_items")
        workflow.add_edge("validate_items", END)

        return workflow

    async def run(self, topic: str, area_count: int = 3) -> List[OutlineItem]:
        """Run the whole chain for one topic. Node errors propagate to the caller."""
        initial_state = OutlineState(topic=topic, area_count=area_count)
        result = await self._compiled_workflow.ainvoke(initial_state.model_dump())
        return OutlineState(**result).items
