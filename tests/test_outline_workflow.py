"""Tests for the outline graph run on its own, outside the service."""

import pytest

from snapshots.exceptions import EmptyResponseError
from snapshots.langgraph.nodes import OutlineNodes
from snapshots.langgraph.state import OutlineState
from snapshots.langgraph.workflow import OutlineWorkflow
from snapshots.schemas.content import OutlineItem
from tests.fixtures.fakes import FakeModelClient


class TestOutlineWorkflow:
    """Test the compiled overview -> areas -> details -> validate graph."""

    async def test_run_returns_items_in_area_order(self) -> None:
        """Test that the graph yields one item per parsed area."""
        workflow = OutlineWorkflow(FakeModelClient(areas="Openings\n\nEndgames"))

        items = await workflow.run("chess", area_count=2)

        assert [item.title for item in items] == ["Openings", "Endgames"]

    async def test_node_errors_propagate(self) -> None:
        """Test that a failing node surfaces its exception to the caller."""
        workflow = OutlineWorkflow(FakeModelClient(overview=None))

        with pytest.raises(EmptyResponseError, match="Failed to generate topic overview"):
            await workflow.run("chess")


class TestValidateNode:
    """Test the validate-and-enhance pass."""

    async def test_passes_items_through_unchanged(self) -> None:
        """Test that the pass currently returns the items it was given."""
        items = [OutlineItem(title="A", subtopics=["x"])]
        state = OutlineState(topic="t", items=items)

        assert await OutlineNodes.validate_node(state) == {"items": items}
