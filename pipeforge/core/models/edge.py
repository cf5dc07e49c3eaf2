"""Edge model for pipeline graph connections."""

from typing import Optional

from pydantic import BaseModel, Field


class Edge(BaseModel):
    """Directed "feeds into" connection between two nodes."""

    id: str = Field(..., description="Unique edge ID")
    source: str = Field(..., description="Source node ID")
    target: str = Field(..., description="Target node ID")
    label: Optional[str] = Field(None, description="Optional caption on the edge")
