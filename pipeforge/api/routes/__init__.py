"""API routers."""

from pipeforge.api.routes.pipelines import router as pipelines_router
from pipeforge.api.routes.stages import router as stages_router
from pipeforge.api.routes.workspaces import router as workspaces_router

__all__ = [
    "pipelines_router",
    "stages_router",
    "workspaces_router",
]
