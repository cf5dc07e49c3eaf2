"""JSON export of a pipeline snapshot.

The export is one-way: nothing in this package reads it back.
"""

from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from pipeforge.core.models import Edge, Pipeline, PipelineNode

EXPORT_VERSION = 1


def utc_now() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


class ExportDocument(BaseModel):
    """Downloadable snapshot of the canvas."""

    version: Literal[1] = EXPORT_VERSION
    generated_at: datetime = Field(
        default_factory=utc_now, alias="generatedAt", description="ISO-8601, UTC"
    )
    nodes: List[PipelineNode] = Field(default_factory=list)
    edges: List[Edge] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        """JSON-ready dict. Unset optional fields are left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def export_pipeline(
    pipeline: Pipeline,
    generated_at: Optional[datetime] = None,
) -> ExportDocument:
    """Snapshot ``pipeline`` into an export document."""
    snapshot = pipeline.model_copy(deep=True)
    return ExportDocument(
        generated_at=generated_at or utc_now(),
        nodes=snapshot.nodes,
        edges=snapshot.edges,
    )


def export_pipeline_json(
    pipeline: Pipeline,
    generated_at: Optional[datetime] = None,
    indent: int = 2,
) -> str:
    document = export_pipeline(pipeline, generated_at)
    return document.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def export_filename(now: Optional[datetime] = None) -> str:
    """Download name, e.g. ``workplace-flow-1760835600000.json``."""
    now = now or utc_now()
    return f"workplace-flow-{int(now.timestamp() * 1000)}.json"
