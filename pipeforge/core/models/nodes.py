"""Node models for the pipeline graph."""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from pipeforge.core.models.config import AnyStageConfig, coerce_config
from pipeforge.core.stages import KindLike, StageKind, stage_label

NodeRenderType = Literal["start", "agent", "end"]


def render_type_for(kind: KindLike) -> NodeRenderType:
    """Which node component the canvas uses for ``kind``."""
    kind = StageKind(kind)
    if kind == StageKind.START:
        return "start"
    if kind == StageKind.END:
        return "end"
    return "agent"


class Position(BaseModel):
    """UI position for React Flow."""

    x: float = 0.0
    y: float = 0.0


class NodeData(BaseModel):
    """Everything the editor knows about a node apart from its placement."""

    kind: StageKind
    title: str
    description: Optional[str] = None
    inputs: List[str] = Field(default_factory=list, description="Input slot labels")
    outputs: List[str] = Field(default_factory=list, description="Output slot labels")
    config: AnyStageConfig = Field(
        ..., description="Stage-specific settings; shape depends on kind"
    )

    @model_validator(mode="before")
    @classmethod
    def _config_matches_kind(cls, data: Any) -> Any:
        # The config union has no tag of its own; the node's kind selects it.
        if isinstance(data, dict) and "kind" in data:
            data = dict(data)
            data["config"] = coerce_config(data["kind"], data.get("config"))
        return data

    @property
    def label(self) -> str:
        return stage_label(self.kind)


class PipelineNode(BaseModel):
    """A stage placed on the canvas."""

    id: str = Field(..., description="Unique node ID")
    type: NodeRenderType = Field("agent", description="Canvas component hint")
    position: Position = Field(default_factory=Position)
    data: NodeData

    @model_validator(mode="before")
    @classmethod
    def _default_render_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("type") is None:
            node_data = data.get("data")
            kind = (
                node_data.kind
                if isinstance(node_data, NodeData)
                else (node_data or {}).get("kind")
            )
            if kind is not None:
                data = {**data, "type": render_type_for(kind)}
        return data

    @property
    def kind(self) -> StageKind:
        return self.data.kind

    @property
    def label(self) -> str:
        return self.data.label

    @classmethod
    def for_stage(
        cls,
        node_id: str,
        kind: KindLike,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        inputs: Optional[List[str]] = None,
        outputs: Optional[List[str]] = None,
        config: Any = None,
        x: float = 0.0,
        y: float = 0.0,
    ) -> "PipelineNode":
        """Build a node of ``kind``; the title defaults to the stage label."""
        kind = StageKind(kind)
        return cls(
            id=node_id,
            type=render_type_for(kind),
            position=Position(x=x, y=y),
            data=NodeData(
                kind=kind,
                title=title or stage_label(kind),
                description=description,
                inputs=list(inputs or []),
                outputs=list(outputs or []),
                config=coerce_config(kind, config),
            ),
        )
