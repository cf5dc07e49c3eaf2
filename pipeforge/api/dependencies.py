"""FastAPI dependencies for dependency injection."""

import logging
import threading
import uuid
from typing import Optional

from cachetools import TTLCache
from fastapi import HTTPException

from pipeforge.config import get_settings
from pipeforge.core.models import Pipeline
from pipeforge.workspace import PipelineWorkspace, default_pipeline

logger = logging.getLogger(__name__)

# TTLCache prevents unbounded memory growth
_workspaces: Optional[TTLCache] = None
# TTLCache is not thread-safe; sync dependencies run in the worker threadpool
_workspaces_lock = threading.Lock()


def get_workspace_store() -> TTLCache:
    """Get the workspace cache singleton."""
    global _workspaces
    with _workspaces_lock:
        if _workspaces is None:
            settings = get_settings()
            _workspaces = TTLCache(
                maxsize=settings.workspace_cache_size,
                ttl=settings.workspace_ttl_seconds,
            )
            logger.info(
                f"Workspace store initialized: size={settings.workspace_cache_size} "
                f"ttl={settings.workspace_ttl_seconds}s"
            )
        return _workspaces


def create_workspace(
    pipeline: Optional[Pipeline] = None,
) -> tuple[str, PipelineWorkspace]:
    """Open a new workspace, seeded with the starter template by default."""
    store = get_workspace_store()
    workspace_id = str(uuid.uuid4())
    workspace = PipelineWorkspace(pipeline or default_pipeline())
    with _workspaces_lock:
        store[workspace_id] = workspace
    logger.debug(f"Created workspace: {workspace_id}")
    return workspace_id, workspace


def get_workspace(id: str) -> PipelineWorkspace:
    """Look up a workspace by ID.

    Raises:
        HTTPException: 404 if the workspace does not exist or has expired.
    """
    store = get_workspace_store()
    with _workspaces_lock:
        workspace = store.get(id)
        if workspace is not None:
            # Touch the entry so an active session does not expire
            store[id] = workspace
    if workspace is None:
        raise HTTPException(
            status_code=404, detail=f"Workspace '{id}' not found"
        )
    return workspace


def cleanup() -> None:
    """Drop every open workspace."""
    global _workspaces
    with _workspaces_lock:
        if _workspaces is not None:
            _workspaces.clear()
        _workspaces = None
