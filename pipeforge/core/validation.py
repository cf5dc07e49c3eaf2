"""Pipeline validation - does the graph reduce to one legal walk?

The validator starts at the first ``start`` node and follows, at every step,
the first outgoing edge whose target is a legal successor stage. It stops
successfully at the ``end`` stage and otherwise reports why it could not get
there. Failures are returned as ``Invalid`` verdicts, never raised.

Nodes that the walk never reaches are ignored, and only the first ``start``
node counts when several exist. When two nodes share an ID, edges resolve to
the later one.
"""

import logging
from enum import Enum
from typing import Annotated, Iterable, List, Literal, Optional, Set, Tuple, Union

from pydantic import BaseModel, Field

from pipeforge.core.models.edge import Edge
from pipeforge.core.models.nodes import PipelineNode
from pipeforge.core.models.pipeline import Pipeline
from pipeforge.core.stages import ADJACENCY, AdjacencyTable, StageKind, stage_label

logger = logging.getLogger(__name__)


class ValidationReason(str, Enum):
    """Why a pipeline is not runnable."""

    EMPTY_PIPELINE = "empty_pipeline"
    MISSING_START = "missing_start"
    DEAD_END = "dead_end"
    OUT_OF_ORDER_CONNECTION = "out_of_order_connection"
    CYCLE_DETECTED = "cycle_detected"


class Valid(BaseModel):
    """The graph walks from start to end in stage order."""

    status: Literal["valid"] = "valid"
    ordered_ids: Tuple[str, ...] = Field(
        ..., description="Node IDs along the walk, start and end inclusive"
    )
    ordered_labels: Tuple[str, ...] = Field(
        (), description="Stage labels along the walk"
    )

    model_config = {"frozen": True}

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return "Valid pipeline"

    @property
    def detail(self) -> str:
        return " → ".join(self.ordered_labels)


class Invalid(BaseModel):
    """The walk stopped before reaching the end stage."""

    status: Literal["invalid"] = "invalid"
    reason: ValidationReason
    context: Optional[str] = Field(
        None, description="Label of the stage where the walk stopped"
    )
    node_id: Optional[str] = Field(
        None, description="Diagnostic only; not meant for the primary message"
    )

    model_config = {"frozen": True}

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def message(self) -> str:
        if self.reason == ValidationReason.EMPTY_PIPELINE:
            return "Pipeline is empty."
        if self.reason == ValidationReason.MISSING_START:
            return "Missing START node."
        if self.reason == ValidationReason.DEAD_END:
            return f"No outgoing edge from {self.context}."
        if self.reason == ValidationReason.OUT_OF_ORDER_CONNECTION:
            return f"Connection from {self.context} violates the pipeline order."
        return "Detected a cycle in the pipeline."

    @property
    def detail(self) -> Optional[str]:
        return self.context


Verdict = Annotated[Union[Valid, Invalid], Field(discriminator="status")]


def validate(
    nodes: Iterable[PipelineNode],
    edges: Iterable[Edge],
    adjacency: Optional[AdjacencyTable] = None,
) -> Union[Valid, Invalid]:
    """Validate a nodes/edges snapshot.

    Args:
        nodes: Nodes on the canvas. Read only.
        edges: Edges on the canvas, in creation order. Read only.
        adjacency: Successor table to validate against. Defaults to the
            stage catalog's.

    Returns:
        ``Valid`` with the ordered walk, or ``Invalid`` with the reason.
    """
    nodes = list(nodes)
    edges = list(edges)
    table = ADJACENCY if adjacency is None else adjacency

    if not nodes:
        return Invalid(reason=ValidationReason.EMPTY_PIPELINE)

    # A later node shadows an earlier one with the same ID
    by_id = {node.id: node for node in nodes}

    current = next((n for n in nodes if n.kind == StageKind.START), None)
    if current is None:
        return Invalid(reason=ValidationReason.MISSING_START)

    ordered: List[str] = [current.id]
    labels: List[str] = [stage_label(current.kind)]
    visited: Set[str] = {current.id}

    while current.kind != StageKind.END:
        label = stage_label(current.kind)
        outgoing = [e for e in edges if e.source == current.id]
        if not outgoing:
            logger.debug(f"Dead end at node '{current.id}' ({label})")
            return Invalid(
                reason=ValidationReason.DEAD_END, context=label, node_id=current.id
            )

        expected = table.get(current.kind, frozenset())
        next_node: Optional[PipelineNode] = None
        for edge in outgoing:
            candidate = by_id.get(edge.target)
            # Dangling targets count as "no match"
            if candidate is not None and candidate.kind in expected:
                next_node = candidate
                break

        if next_node is None:
            logger.debug(f"No legal successor from node '{current.id}' ({label})")
            return Invalid(
                reason=ValidationReason.OUT_OF_ORDER_CONNECTION,
                context=label,
                node_id=current.id,
            )

        if next_node.id in visited:
            logger.debug(f"Walk revisits node '{next_node.id}'")
            return Invalid(
                reason=ValidationReason.CYCLE_DETECTED, node_id=next_node.id
            )

        visited.add(next_node.id)
        ordered.append(next_node.id)
        labels.append(stage_label(next_node.kind))
        current = next_node

    return Valid(ordered_ids=tuple(ordered), ordered_labels=tuple(labels))


def validate_pipeline(
    pipeline: Pipeline,
    adjacency: Optional[AdjacencyTable] = None,
) -> Union[Valid, Invalid]:
    """Validate a ``Pipeline`` snapshot. See ``validate``."""
    return validate(pipeline.nodes, pipeline.edges, adjacency)
