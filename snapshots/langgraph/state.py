from typing import List, Optional
from pydantic import BaseModel
from snapshots.schemas.content import OutlineItem

class OutlineState(BaseModel):
    """
    Working state of one outline generation run.
    Lives only for the duration of a single generate call.
    """
    topic: str
    area_count: int = 3

    overview: Optional[str] = None
    areas: List[str] = []
    items: List[OutlineItem] = []
