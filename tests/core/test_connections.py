"""Tests for the connection gate."""

import itertools

import pytest

from pipeforge.core.connections import can_connect, can_connect_nodes, edge_id_for
from pipeforge.core.models import Pipeline, PipelineNode
from pipeforge.core.stages import ADJACENCY, StageKind, build_adjacency


class TestCanConnect:
    """Test can_connect on stage kinds."""

    def test_reference_examples(self):
        assert can_connect("start", "scrum") is True
        assert can_connect("start", "ba") is False
        assert can_connect(StageKind.SECURITY, StageKind.END) is True

    @pytest.mark.parametrize("target", list(StageKind))
    def test_end_connects_to_nothing(self, target):
        assert can_connect(StageKind.END, target) is False

    def test_matches_adjacency_for_every_pair(self):
        for source, target in itertools.product(StageKind, StageKind):
            assert can_connect(source, target) == (target in ADJACENCY[source])

    def test_no_self_loops(self):
        for kind in StageKind:
            assert can_connect(kind, kind) is False

    def test_backwards_rejected(self):
        assert can_connect("qa", "scrum") is False

    def test_custom_adjacency_with_branching(self):
        table = build_adjacency({"arch": ["coding", "qa"]})
        assert can_connect("arch", "coding", table) is True
        assert can_connect("arch", "qa", table) is True
        assert can_connect("arch", "qa") is False

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError):
            can_connect("start", "nowhere")


class TestCanConnectNodes:
    """Test gating by node ID."""

    @pytest.fixture
    def pipeline(self):
        return Pipeline(
            nodes=[
                PipelineNode.for_stage("t1", "start"),
                PipelineNode.for_stage("sm", "scrum"),
                PipelineNode.for_stage("an", "ba"),
            ]
        )

    def test_legal_pair(self, pipeline):
        assert can_connect_nodes(pipeline, "t1", "sm") is True

    def test_illegal_pair(self, pipeline):
        assert can_connect_nodes(pipeline, "t1", "an") is False

    def test_dangling_ids_rejected(self, pipeline):
        assert can_connect_nodes(pipeline, "t1", "ghost") is False
        assert can_connect_nodes(pipeline, "ghost", "sm") is False

    def test_missing_endpoint_rejected(self, pipeline):
        assert can_connect_nodes(pipeline, None, "sm") is False
        assert can_connect_nodes(pipeline, "t1", "") is False


def test_edge_id_for():
    assert edge_id_for("start", "scrum") == "start->scrum"
