"""Pipeline workspace - the editable graph behind one editing session.

The workspace owns the nodes and edges while the user edits them. New edges
go through the connection gate first; a connection the gate refuses is
dropped without an error, the same way the canvas ignores an illegal drag.
"""

import logging
from typing import Any, Dict, List, Optional

from pipeforge.core.connections import can_connect_nodes, edge_id_for
from pipeforge.core.models import Edge, Pipeline, PipelineNode, Position
from pipeforge.core.models.config import coerce_config
from pipeforge.core.stages import AdjacencyTable, stage_index
from pipeforge.core.validation import Invalid, Valid, validate
from pipeforge.workspace.exceptions import (
    DuplicateNodeError,
    EdgeNotFoundError,
    NodeNotFoundError,
)

logger = logging.getLogger(__name__)

# Auto-layout spacing, in canvas units
LAYOUT_SPACING_X = 320
LAYOUT_BASE_Y = 120
LAYOUT_ORIGIN_X = 80


class PipelineWorkspace:
    """Mutable nodes/edges for one editing session.

    Args:
        pipeline: Initial graph. Copied, never shared. Node IDs must be unique.
        adjacency: Successor table for the gate and the validator.
            Defaults to the stage catalog's.

    Raises:
        DuplicateNodeError: If two initial nodes share an ID.
    """

    def __init__(
        self,
        pipeline: Optional[Pipeline] = None,
        adjacency: Optional[AdjacencyTable] = None,
    ) -> None:
        pipeline = pipeline.model_copy(deep=True) if pipeline else Pipeline()
        seen = set()
        for node in pipeline.nodes:
            if node.id in seen:
                raise DuplicateNodeError(node.id)
            seen.add(node.id)
        self.nodes: List[PipelineNode] = pipeline.nodes
        self.edges: List[Edge] = pipeline.edges
        self.adjacency = adjacency

    # =========================================================================
    # Queries
    # =========================================================================

    def snapshot(self) -> Pipeline:
        """Deep copy of the current graph."""
        return Pipeline(nodes=self.nodes, edges=self.edges).model_copy(deep=True)

    def get_node(self, node_id: str) -> PipelineNode:
        for node in self.nodes:
            if node.id == node_id:
                return node
        raise NodeNotFoundError(node_id)

    def get_edge(self, edge_id: str) -> Edge:
        for edge in self.edges:
            if edge.id == edge_id:
                return edge
        raise EdgeNotFoundError(edge_id)

    def validate(self) -> Valid | Invalid:
        """Run the validator over the current graph."""
        verdict = validate(self.nodes, self.edges, self.adjacency)
        if verdict.is_valid:
            logger.info(f"Pipeline valid: {verdict.detail}")
        else:
            logger.info(f"Pipeline invalid ({verdict.reason.value}): {verdict.message}")
        return verdict

    # =========================================================================
    # Nodes
    # =========================================================================

    def add_node(self, node: PipelineNode) -> PipelineNode:
        if any(n.id == node.id for n in self.nodes):
            raise DuplicateNodeError(node.id)
        self.nodes.append(node)
        logger.debug(f"Added node '{node.id}' ({node.kind.value})")
        return node

    def update_node(
        self,
        node_id: str,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        config: Optional[Dict[str, Any]] = None,
    ) -> PipelineNode:
        """Edit a node's inspector fields in place.

        ``config`` is merged into the existing record and re-validated
        against the node's kind. Arguments left as ``None`` are unchanged.

        Raises:
            NodeNotFoundError: If ``node_id`` is not on the canvas.
            pydantic.ValidationError: If the merged config is not valid for
                the node's kind.
        """
        node = self.get_node(node_id)
        data = node.data

        new_config = data.config
        if config is not None:
            model = type(data.config)
            changes = model.model_validate(config).model_dump(exclude_unset=True)
            merged = {**data.config.model_dump(exclude_unset=True), **changes}
            new_config = coerce_config(data.kind, merged)

        node.data = data.model_copy(
            update={
                "title": data.title if title is None else title,
                "description": data.description if description is None else description,
                "config": new_config,
            }
        )
        logger.debug(f"Updated node '{node_id}'")
        return node

    def remove_node(self, node_id: str) -> PipelineNode:
        """Remove a node and every edge attached to it."""
        node = self.get_node(node_id)
        self.nodes = [n for n in self.nodes if n.id != node_id]
        before = len(self.edges)
        self.edges = [
            e for e in self.edges if e.source != node_id and e.target != node_id
        ]
        logger.debug(
            f"Removed node '{node_id}' and {before - len(self.edges)} attached edges"
        )
        return node

    # =========================================================================
    # Edges
    # =========================================================================

    def connect(
        self,
        source_id: str,
        target_id: str,
        label: Optional[str] = None,
    ) -> Optional[Edge]:
        """Add an edge if the connection gate admits it.

        Returns:
            The new edge, the existing edge if the same connection is already
            present, or ``None`` if the gate refused the connection.
        """
        pipeline = Pipeline(nodes=self.nodes, edges=self.edges)
        if not can_connect_nodes(pipeline, source_id, target_id, self.adjacency):
            logger.warning(f"Blocked connection {source_id!r} -> {target_id!r}")
            return None

        for edge in self.edges:
            if edge.source == source_id and edge.target == target_id:
                return edge

        base_id = edge_id_for(source_id, target_id)
        taken = {e.id for e in self.edges}
        edge_id = base_id
        suffix = 1
        while edge_id in taken:
            edge_id = f"{base_id}#{suffix}"
            suffix += 1
        edge = Edge(id=edge_id, source=source_id, target=target_id, label=label)
        self.edges.append(edge)
        logger.debug(f"Connected '{source_id}' -> '{target_id}'")
        return edge

    def disconnect(self, edge_id: str) -> Edge:
        edge = self.get_edge(edge_id)
        self.edges = [e for e in self.edges if e.id != edge_id]
        return edge

    # =========================================================================
    # Layout
    # =========================================================================

    def auto_layout(
        self,
        spacing_x: float = LAYOUT_SPACING_X,
        base_y: float = LAYOUT_BASE_Y,
        origin_x: float = LAYOUT_ORIGIN_X,
    ) -> None:
        """Line nodes up left to right in canonical stage order."""
        for node in self.nodes:
            node.position = Position(
                x=origin_x + stage_index(node.kind) * spacing_x, y=base_y
            )
