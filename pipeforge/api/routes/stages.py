"""Stages router - the stage catalog and the connection gate."""

from fastapi import APIRouter

from pipeforge.api.schemas import (
    ConnectionCheckResponse,
    StageCatalogResponse,
    StageResponse,
)
from pipeforge.core.connections import can_connect
from pipeforge.core.stages import (
    STAGE_SEQUENCE,
    StageKind,
    describe_sequence,
    get_stage,
    stage_index,
)

router = APIRouter()


@router.get("", response_model=StageCatalogResponse)
async def list_stages() -> StageCatalogResponse:
    """List every stage in canonical order with its legal successors."""
    stages = []
    for kind in STAGE_SEQUENCE:
        spec = get_stage(kind)
        stages.append(
            StageResponse(
                kind=kind,
                label=spec.label,
                index=stage_index(kind),
                successors=sorted(spec.successors, key=stage_index),
            )
        )
    return StageCatalogResponse(stages=stages, hint=describe_sequence())


@router.get("/connections", response_model=ConnectionCheckResponse)
async def check_connection(
    source: StageKind,
    target: StageKind,
) -> ConnectionCheckResponse:
    """Ask the connection gate whether ``source`` may feed ``target``."""
    return ConnectionCheckResponse(
        source=source, target=target, allowed=can_connect(source, target)
    )
