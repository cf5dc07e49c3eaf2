"""Connection gate - decides whether one stage may feed another.

Used while the user drags a new edge. It answers yes or no and nothing
else; a full audit of the graph belongs to ``pipeforge.core.validation``.
"""

from typing import Optional

from pipeforge.core.models.pipeline import Pipeline
from pipeforge.core.stages import ADJACENCY, AdjacencyTable, KindLike, StageKind


def can_connect(
    source_kind: KindLike,
    target_kind: KindLike,
    adjacency: Optional[AdjacencyTable] = None,
) -> bool:
    """True iff ``target_kind`` is a legal direct successor of ``source_kind``.

    Args:
        source_kind: Kind of the node the edge leaves.
        target_kind: Kind of the node the edge enters.
        adjacency: Successor table to judge against. Defaults to the
            stage catalog's.
    """
    table = ADJACENCY if adjacency is None else adjacency
    return StageKind(target_kind) in table.get(StageKind(source_kind), frozenset())


def can_connect_nodes(
    pipeline: Pipeline,
    source_id: Optional[str],
    target_id: Optional[str],
    adjacency: Optional[AdjacencyTable] = None,
) -> bool:
    """Gate a connection between two node IDs.

    An ID that is missing or does not resolve to a node in ``pipeline`` is a
    rejection.
    """
    if not source_id or not target_id:
        return False
    index = pipeline.node_index()
    source = index.get(source_id)
    target = index.get(target_id)
    if source is None or target is None:
        return False
    return can_connect(source.kind, target.kind, adjacency)


def edge_id_for(source_id: str, target_id: str) -> str:
    """Edge ID convention, e.g. ``"start->scrum"``."""
    return f"{source_id}->{target_id}"
