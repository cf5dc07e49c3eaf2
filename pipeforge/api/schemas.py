"""Request and response schemas for API endpoints."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from pipeforge.core.models import Edge, Pipeline
from pipeforge.core.stages import StageKind
from pipeforge.core.validation import Invalid, Valid

# =============================================================================
# Request Schemas
# =============================================================================


class ConnectionRequest(BaseModel):
    """Request schema for drawing an edge in a workspace."""

    source: str
    target: str
    label: Optional[str] = None


class NodeUpdate(BaseModel):
    """Request schema for editing a node's inspector fields."""

    title: Optional[str] = None
    description: Optional[str] = None
    config: Optional[Dict[str, Any]] = None


class LayoutRequest(BaseModel):
    """Request schema for auto layout."""

    spacing_x: float = Field(default=320, gt=0)
    base_y: float = 120
    origin_x: float = 80


# =============================================================================
# Response Schemas
# =============================================================================


class StageResponse(BaseModel):
    """Catalog entry."""

    kind: StageKind
    label: str
    index: int
    successors: List[StageKind]


class StageCatalogResponse(BaseModel):
    stages: List[StageResponse]
    hint: str


class ConnectionCheckResponse(BaseModel):
    source: StageKind
    target: StageKind
    allowed: bool


class VerdictResponse(BaseModel):
    """Validator verdict as shown in the banner."""

    valid: bool
    message: str
    detail: Optional[str] = None
    reason: Optional[str] = None
    context: Optional[str] = None
    node_id: Optional[str] = None
    ordered_ids: List[str] = Field(default_factory=list)

    @classmethod
    def from_verdict(cls, verdict: Valid | Invalid) -> "VerdictResponse":
        if isinstance(verdict, Valid):
            return cls(
                valid=True,
                message=verdict.message,
                detail=verdict.detail,
                ordered_ids=list(verdict.ordered_ids),
            )
        return cls(
            valid=False,
            message=verdict.message,
            detail=verdict.detail,
            reason=verdict.reason.value,
            context=verdict.context,
            node_id=verdict.node_id,
        )


class WorkspaceResponse(BaseModel):
    id: str
    pipeline: Pipeline


class ConnectionResponse(BaseModel):
    created: bool
    edge: Optional[Edge] = None
