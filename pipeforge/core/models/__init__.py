"""Pipeline graph models.

This module exports the graph models:
- Pipeline: a nodes/edges snapshot
- PipelineNode, NodeData, Position: nodes on the canvas
- Edge: connections between nodes
- Stage configs: one model per stage kind
"""

from pipeforge.core.models.config import (
    AgentConfig,
    AnyStageConfig,
    ArchConfig,
    CodingConfig,
    DevOpsConfig,
    EmptyConfig,
    JiraAuth,
    QAConfig,
    ScrumConfig,
    SecurityConfig,
    StageConfig,
    UseCaseConfig,
    coerce_config,
    config_for,
    config_model_for,
    default_config,
)
from pipeforge.core.models.edge import Edge
from pipeforge.core.models.nodes import (
    NodeData,
    PipelineNode,
    Position,
    render_type_for,
)
from pipeforge.core.models.pipeline import Pipeline

__all__ = [
    "Pipeline",
    "PipelineNode",
    "NodeData",
    "Position",
    "render_type_for",
    "Edge",
    "StageConfig",
    "AnyStageConfig",
    "AgentConfig",
    "EmptyConfig",
    "JiraAuth",
    "ScrumConfig",
    "UseCaseConfig",
    "ArchConfig",
    "CodingConfig",
    "QAConfig",
    "DevOpsConfig",
    "SecurityConfig",
    "coerce_config",
    "config_for",
    "config_model_for",
    "default_config",
]
