"""Pipelines router - stateless validation and export of a posted graph."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from pipeforge.api.schemas import VerdictResponse
from pipeforge.core.models import Pipeline
from pipeforge.core.validation import validate_pipeline
from pipeforge.workspace import default_pipeline, export_filename, export_pipeline

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/template", response_model=Pipeline)
async def get_template() -> Pipeline:
    """The starter nine-stage pipeline."""
    return default_pipeline()


@router.post("/validate", response_model=VerdictResponse)
async def validate(pipeline: Pipeline) -> VerdictResponse:
    """Validate a nodes/edges snapshot.

    Invalid pipelines are a normal answer, so this returns 200 either way.
    """
    verdict = validate_pipeline(pipeline)
    logger.debug(
        f"Validated {len(pipeline.nodes)} nodes / {len(pipeline.edges)} edges: "
        f"{verdict.status}"
    )
    return VerdictResponse.from_verdict(verdict)


@router.post("/export")
async def export(pipeline: Pipeline) -> JSONResponse:
    """Export a snapshot as a downloadable JSON document."""
    document = export_pipeline(pipeline)
    return JSONResponse(
        content=document.to_payload(),
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename()}"'
        },
    )
