"""Pipeline core - stage catalog, graph models, connection gate, validator.

The core is pure: nothing here performs I/O or keeps state between calls.
"""

from pipeforge.core.connections import can_connect, can_connect_nodes, edge_id_for
from pipeforge.core.models import Edge, NodeData, Pipeline, PipelineNode, Position
from pipeforge.core.stages import (
    ADJACENCY,
    STAGE_CATALOG,
    STAGE_SEQUENCE,
    StageKind,
    StageSpec,
    build_adjacency,
    get_stage,
    stage_label,
    successors,
)
from pipeforge.core.validation import (
    Invalid,
    Valid,
    ValidationReason,
    Verdict,
    validate,
    validate_pipeline,
)

__all__ = [
    # Stages
    "StageKind",
    "StageSpec",
    "STAGE_CATALOG",
    "STAGE_SEQUENCE",
    "ADJACENCY",
    "build_adjacency",
    "get_stage",
    "stage_label",
    "successors",
    # Models
    "Pipeline",
    "PipelineNode",
    "NodeData",
    "Position",
    "Edge",
    # Connection gate
    "can_connect",
    "can_connect_nodes",
    "edge_id_for",
    # Validation
    "validate",
    "validate_pipeline",
    "Verdict",
    "Valid",
    "Invalid",
    "ValidationReason",
]
