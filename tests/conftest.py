"""Pytest configuration for Pipeforge tests."""

from typing import List

import pytest

from pipeforge.core.models import Edge, Pipeline, PipelineNode
from pipeforge.core.stages import STAGE_SEQUENCE
from pipeforge.workspace.templates import default_pipeline


def linear_nodes() -> List[PipelineNode]:
    """One bare node per stage; node IDs equal stage kinds."""
    return [
        PipelineNode.for_stage(kind.value, kind, x=i * 100)
        for i, kind in enumerate(STAGE_SEQUENCE)
    ]


def linear_edges() -> List[Edge]:
    ids = [kind.value for kind in STAGE_SEQUENCE]
    return [
        Edge(id=f"{s}->{t}", source=s, target=t) for s, t in zip(ids, ids[1:])
    ]


@pytest.fixture
def nodes() -> List[PipelineNode]:
    return linear_nodes()


@pytest.fixture
def edges() -> List[Edge]:
    return linear_edges()


@pytest.fixture
def linear_pipeline() -> Pipeline:
    """The nine stages connected in order."""
    return Pipeline(nodes=linear_nodes(), edges=linear_edges())


@pytest.fixture
def template_pipeline() -> Pipeline:
    return default_pipeline()
