"""Workspace layer - the editable graph, its starter template and export.

The workspace sits on top of ``pipeforge.core`` and is the only place the
graph is mutated.
"""

from pipeforge.workspace.exceptions import (
    DuplicateNodeError,
    EdgeNotFoundError,
    NodeNotFoundError,
    WorkspaceError,
)
from pipeforge.workspace.export import (
    ExportDocument,
    export_filename,
    export_pipeline,
    export_pipeline_json,
)
from pipeforge.workspace.session import PipelineWorkspace
from pipeforge.workspace.templates import default_pipeline

__all__ = [
    "PipelineWorkspace",
    "default_pipeline",
    "ExportDocument",
    "export_pipeline",
    "export_pipeline_json",
    "export_filename",
    "WorkspaceError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "DuplicateNodeError",
]
