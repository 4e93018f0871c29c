from datetime import datetime
from typing import Optional

from pydantic import Field

from talentviz.schemas.base_schema import CamelModel


class StageCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    order: int = Field(..., ge=0)
    is_default: bool = False


class StageResponse(CamelModel):
    id: int
    name: str
    order: int
    is_default: bool


class StageMove(CamelModel):
    stage_id: int
    comments: Optional[str] = None


class StageHistoryResponse(CamelModel):
    id: int
    candidate_id: int
    from_stage_id: Optional[int] = None
    to_stage_id: int
    moved_by: int
    moved_at: datetime
    comments: Optional[str] = None
