"""Pipeline model - a snapshot of the nodes and edges on the canvas."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from pipeforge.core.models.edge import Edge
from pipeforge.core.models.nodes import PipelineNode
from pipeforge.core.stages import KindLike, StageKind


class Pipeline(BaseModel):
    """Nodes and edges as the editor currently holds them.

    Nothing here enforces the stage order; a snapshot may be incomplete,
    out of order or contain dangling edges. Judging it is the validator's job.
    """

    nodes: List[PipelineNode] = Field(default_factory=list)
    edges: List[Edge] = Field(default_factory=list)

    def node_index(self) -> Dict[str, PipelineNode]:
        """Map node ID to node. The last node with a given ID wins."""
        return {node.id: node for node in self.nodes}

    def get_node(self, node_id: str) -> Optional[PipelineNode]:
        return self.node_index().get(node_id)

    def outgoing_edges(self, node_id: str) -> List[Edge]:
        """Edges leaving ``node_id``, in edge-list order."""
        return [e for e in self.edges if e.source == node_id]

    def incoming_edges(self, node_id: str) -> List[Edge]:
        """Edges entering ``node_id``, in edge-list order."""
        return [e for e in self.edges if e.target == node_id]

    def find_first(self, kind: KindLike) -> Optional[PipelineNode]:
        """First node of ``kind`` in node order."""
        kind = StageKind(kind)
        return next((n for n in self.nodes if n.kind == kind), None)

    def dangling_edges(self) -> List[Edge]:
        """Edges whose source or target does not resolve to a node."""
        ids = set(self.node_index())
        return [e for e in self.edges if e.source not in ids or e.target not in ids]
