"""Workspaces router - server-held editing sessions."""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from pipeforge.api.dependencies import create_workspace, get_workspace
from pipeforge.api.schemas import (
    ConnectionRequest,
    ConnectionResponse,
    LayoutRequest,
    NodeUpdate,
    VerdictResponse,
    WorkspaceResponse,
)
from pipeforge.core.models import Edge, Pipeline, PipelineNode
from pipeforge.workspace import PipelineWorkspace, export_filename, export_pipeline

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=WorkspaceResponse, status_code=status.HTTP_201_CREATED)
async def open_workspace(
    pipeline: Optional[Pipeline] = Body(default=None),
) -> WorkspaceResponse:
    """Open a workspace from a posted graph, or from the starter template."""
    workspace_id, workspace = create_workspace(pipeline)
    logger.info(f"Opened workspace {workspace_id}")
    return WorkspaceResponse(id=workspace_id, pipeline=workspace.snapshot())


@router.get("/{id}", response_model=WorkspaceResponse)
async def get_workspace_state(
    id: str,
    workspace: PipelineWorkspace = Depends(get_workspace),
) -> WorkspaceResponse:
    return WorkspaceResponse(id=id, pipeline=workspace.snapshot())


@router.post("/{id}/nodes", response_model=PipelineNode, status_code=201)
async def add_node(
    node: PipelineNode,
    workspace: PipelineWorkspace = Depends(get_workspace),
) -> PipelineNode:
    return workspace.add_node(node)


@router.patch("/{id}/nodes/{node_id}", response_model=PipelineNode)
async def update_node(
    node_id: str,
    request: NodeUpdate,
    workspace: PipelineWorkspace = Depends(get_workspace),
) -> PipelineNode:
    """Edit a node's title, description or config."""
    return workspace.update_node(
        node_id,
        title=request.title,
        description=request.description,
        config=request.config,
    )


@router.delete("/{id}/nodes/{node_id}", response_model=PipelineNode)
async def remove_node(
    node_id: str,
    workspace: PipelineWorkspace = Depends(get_workspace),
) -> PipelineNode:
    """Remove a node together with its edges."""
    return workspace.remove_node(node_id)


@router.post("/{id}/connections", response_model=ConnectionResponse)
async def connect(
    request: ConnectionRequest,
    workspace: PipelineWorkspace = Depends(get_workspace),
) -> ConnectionResponse:
    """Draw an edge. Connections the gate refuses come back with created=false."""
    before = len(workspace.edges)
    edge = workspace.connect(request.source, request.target, request.label)
    return ConnectionResponse(created=len(workspace.edges) > before, edge=edge)


@router.delete("/{id}/edges/{edge_id}", response_model=Edge)
async def disconnect(
    edge_id: str,
    workspace: PipelineWorkspace = Depends(get_workspace),
) -> Edge:
    return workspace.disconnect(edge_id)


@router.post("/{id}/layout", response_model=Pipeline)
async def auto_layout(
    request: Optional[LayoutRequest] = Body(default=None),
    workspace: PipelineWorkspace = Depends(get_workspace),
) -> Pipeline:
    """Line the nodes up in stage order."""
    request = request or LayoutRequest()
    workspace.auto_layout(
        spacing_x=request.spacing_x,
        base_y=request.base_y,
        origin_x=request.origin_x,
    )
    return workspace.snapshot()


@router.get("/{id}/validation", response_model=VerdictResponse)
async def validate_workspace(
    workspace: PipelineWorkspace = Depends(get_workspace),
) -> VerdictResponse:
    return VerdictResponse.from_verdict(workspace.validate())


@router.get("/{id}/export")
async def export_workspace(
    workspace: PipelineWorkspace = Depends(get_workspace),
) -> JSONResponse:
    document = export_pipeline(workspace.snapshot())
    return JSONResponse(
        content=document.to_payload(),
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename()}"'
        },
    )
