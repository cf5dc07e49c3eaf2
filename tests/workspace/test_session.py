"""Tests for PipelineWorkspace."""

import logging

import pytest
from pydantic import ValidationError

from pipeforge.core.models import Edge, Pipeline, PipelineNode
from pipeforge.core.stages import StageKind, build_adjacency
from pipeforge.core.validation import ValidationReason
from pipeforge.workspace import (
    DuplicateNodeError,
    EdgeNotFoundError,
    NodeNotFoundError,
    PipelineWorkspace,
)


@pytest.fixture
def workspace(template_pipeline):
    return PipelineWorkspace(template_pipeline)


@pytest.fixture
def bare_workspace(nodes):
    """All nine stages, no edges."""
    return PipelineWorkspace(Pipeline(nodes=nodes))


class TestConstruction:
    """Test workspace setup."""

    def test_empty_by_default(self):
        workspace = PipelineWorkspace()
        assert workspace.nodes == []
        assert workspace.edges == []

    def test_initial_pipeline_is_copied(self, template_pipeline):
        workspace = PipelineWorkspace(template_pipeline)
        workspace.remove_node("qa")
        assert template_pipeline.get_node("qa") is not None

    def test_snapshot_is_detached(self, workspace):
        snapshot = workspace.snapshot()
        snapshot.nodes[0].data.title = "changed"
        assert workspace.get_node("start").data.title == "START - Trigger"

    def test_duplicate_initial_node_ids_rejected(self):
        pipeline = Pipeline(
            nodes=[
                PipelineNode.for_stage("x", StageKind.START),
                PipelineNode.for_stage("x", StageKind.SCRUM),
            ]
        )
        with pytest.raises(DuplicateNodeError) as exc_info:
            PipelineWorkspace(pipeline)
        assert exc_info.value.node_id == "x"


class TestConnect:
    """Test gated edge creation."""

    def test_generated_edge_id_avoids_taken_ids(self, nodes):
        taken = [
            Edge(id="start->scrum", source="start", target="ghost"),
            Edge(id="start->scrum#2", source="ghost", target="start"),
        ]
        workspace = PipelineWorkspace(Pipeline(nodes=nodes, edges=taken))
        edge = workspace.connect("start", "scrum")
        assert edge.id == "start->scrum#1"
        ids = [e.id for e in workspace.edges]
        assert len(ids) == len(set(ids))

    def test_legal_connection_creates_edge(self, bare_workspace):
        edge = bare_workspace.connect("start", "scrum")
        assert edge is not None
        assert edge.id == "start->scrum"
        assert bare_workspace.edges == [edge]

    def test_illegal_connection_is_silently_dropped(self, bare_workspace, caplog):
        with caplog.at_level(logging.WARNING, logger="pipeforge.workspace.session"):
            edge = bare_workspace.connect("start", "ba")
        assert edge is None
        assert bare_workspace.edges == []
        assert "Blocked connection" in caplog.text

    def test_dangling_connection_is_dropped(self, bare_workspace):
        assert bare_workspace.connect("start", "ghost") is None
        assert bare_workspace.connect("ghost", "scrum") is None
        assert bare_workspace.edges == []

    def test_duplicate_connection_not_added(self, bare_workspace):
        first = bare_workspace.connect("start", "scrum")
        second = bare_workspace.connect("start", "scrum")
        assert first is second
        assert len(bare_workspace.edges) == 1

    def test_label_kept(self, bare_workspace):
        edge = bare_workspace.connect("qa", "devops", label="qaReport")
        assert edge.label == "qaReport"

    def test_custom_adjacency(self, nodes):
        table = build_adjacency({"start": ["scrum", "ba"]})
        workspace = PipelineWorkspace(Pipeline(nodes=nodes), adjacency=table)
        assert workspace.connect("start", "ba") is not None

    def test_connecting_every_stage_makes_it_valid(self, bare_workspace):
        ids = [n.id for n in bare_workspace.nodes]
        for source, target in zip(ids, ids[1:]):
            assert bare_workspace.connect(source, target) is not None
        assert bare_workspace.validate().is_valid

    def test_disconnect(self, workspace):
        removed = workspace.disconnect("ba->arch")
        assert removed.source == "ba"
        verdict = workspace.validate()
        assert verdict.reason == ValidationReason.DEAD_END
        assert verdict.context == "Business Analyst"

    def test_disconnect_unknown(self, workspace):
        with pytest.raises(EdgeNotFoundError):
            workspace.disconnect("nope")


class TestNodes:
    """Test node editing."""

    def test_add_node(self, workspace):
        node = PipelineNode.for_stage("qa-2", StageKind.QA)
        workspace.add_node(node)
        assert workspace.get_node("qa-2") is node

    def test_add_duplicate_node(self, workspace):
        with pytest.raises(DuplicateNodeError):
            workspace.add_node(PipelineNode.for_stage("qa", StageKind.QA))

    def test_get_unknown_node(self, workspace):
        with pytest.raises(NodeNotFoundError) as exc_info:
            workspace.get_node("ghost")
        assert exc_info.value.node_id == "ghost"

    def test_remove_node_drops_attached_edges(self, workspace):
        workspace.remove_node("arch")
        assert all("arch" not in (e.source, e.target) for e in workspace.edges)
        assert len(workspace.edges) == 6
        verdict = workspace.validate()
        assert verdict.reason == ValidationReason.DEAD_END
        assert verdict.context == "Business Analyst"

    def test_remove_start_node(self, workspace):
        workspace.remove_node("start")
        assert workspace.validate().reason == ValidationReason.MISSING_START

    def test_update_title_and_description(self, workspace):
        node = workspace.update_node("qa", title="Release QA", description="")
        assert node.data.title == "Release QA"
        assert node.data.description == ""
        assert node.data.outputs == ["qaReport"]

    def test_update_merges_config(self, workspace):
        node = workspace.update_node("qa", config={"coverageTarget": 0.9})
        assert node.data.config.coverage_target == 0.9
        assert node.data.config.test_framework == "Playwright"

    def test_update_rejects_invalid_config(self, workspace):
        with pytest.raises(ValidationError):
            workspace.update_node("scrum", config={"temperature": 3})
        assert workspace.get_node("scrum").data.config.temperature == 0.2

    def test_update_rejects_config_on_start(self, workspace):
        with pytest.raises(ValidationError):
            workspace.update_node("start", config={"llmModel": "gpt-4o"})

    def test_update_unknown_node(self, workspace):
        with pytest.raises(NodeNotFoundError):
            workspace.update_node("ghost", title="x")


class TestLayout:
    """Test auto layout."""

    def test_nodes_lined_up_in_stage_order(self, workspace):
        workspace.auto_layout()
        positions = {n.id: n.position for n in workspace.nodes}
        assert positions["start"].x == 80
        assert positions["scrum"].x == 400
        assert positions["end"].x == 80 + 8 * 320
        assert {p.y for p in positions.values()} == {120}

    def test_custom_spacing(self, workspace):
        workspace.auto_layout(spacing_x=100, base_y=0, origin_x=0)
        assert workspace.get_node("qa").position.x == 500

    def test_layout_does_not_change_verdict(self, workspace):
        before = workspace.validate()
        workspace.auto_layout()
        assert workspace.validate() == before
