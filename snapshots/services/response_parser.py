"""
Converts raw model-service text into structured content records.

Two wire contracts are supported:

* snapshot: the model answers with a bare JSON array of ``{"title", "summary"}``
  objects. Code fences are NOT stripped here; the prompt instructs the model
  to omit them, and a fenced answer is reported as a ``ParseError``.
* outline: the model answers with newline separated area names, then with
  newline separated subtopic lines for each area.
"""
from typing import List
from pydantic import TypeAdapter, ValidationError
from snapshots.exceptions import ParseError
from snapshots.schemas.content import ContentItem
import logging

logger = logging.getLogger(__name__)

_content_items = TypeAdapter(List[ContentItem])


def parse_content_items(raw: str) -> List[ContentItem]:
    """Decode a JSON array of snapshot cards, ignoring unknown fields."""
    try:
        return _content_items.validate_json(raw)
    except ValidationError as e:
        errors = e.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
        reason = f"{first.get('msg', 'invalid content')} at {location}"
        logger.warning(f"[PARSE] Rejected snapshot response ({e.error_count()} errors): {reason}")
        raise ParseError(raw, reason) from e


def parse_content_areas(raw: str, expected: int = 3) -> List[str]:
    """Split the main-content-areas answer into area names, dropping blank lines."""
    areas = [line for line in raw.splitlines() if line.strip()]

    if not areas:
        raise ParseError(raw, "no content areas in response")

    if len(areas) < expected:
        logger.warning(f"[PARSE] Expected {expected} content areas, got {len(areas)}")
    elif len(areas) > expected:
        logger.warning(f"[PARSE] Expected {expected} content areas, got {len(areas)}; keeping the first {expected}")
        areas = areas[:expected]

    return areas


def parse_subtopics(raw: str) -> List[str]:
    # Blank lines are kept as-is, unlike the area list
    return raw.splitlines()
