"""Stage catalog - the fixed set of pipeline stages and their legal successors.

The adjacency table defined here is the only place that knows the pipeline
order. Everything else (connection gate, validator, layout) asks the catalog.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple, Union

from pydantic import BaseModel, Field


class StageKind(str, Enum):
    """Pipeline role of a node."""

    START = "start"
    SCRUM = "scrum"
    BA = "ba"
    ARCH = "arch"
    CODING = "coding"
    QA = "qa"
    DEVOPS = "devops"
    SECURITY = "security"
    END = "end"


KindLike = Union[StageKind, str]

AdjacencyTable = Mapping[StageKind, FrozenSet[StageKind]]


class StageSpec(BaseModel):
    """Catalog entry for one stage kind."""

    kind: StageKind
    label: str = Field(..., description="Role badge shown to the user")
    successors: FrozenSet[StageKind] = Field(
        default_factory=frozenset,
        description="Kinds that may directly follow this one",
    )

    model_config = {"frozen": True}


# (kind, label, successors) - one row per StageKind, in pipeline order
_STAGE_ROWS: Tuple[Tuple[StageKind, str, Tuple[StageKind, ...]], ...] = (
    (StageKind.START, "Trigger", (StageKind.SCRUM,)),
    (StageKind.SCRUM, "Scrum Master", (StageKind.BA,)),
    (StageKind.BA, "Business Analyst", (StageKind.ARCH,)),
    (StageKind.ARCH, "Architect", (StageKind.CODING,)),
    (StageKind.CODING, "Coding Assistant", (StageKind.QA,)),
    (StageKind.QA, "QA", (StageKind.DEVOPS,)),
    (StageKind.DEVOPS, "DevOps", (StageKind.SECURITY,)),
    (StageKind.SECURITY, "Security", (StageKind.END,)),
    (StageKind.END, "Launch", ()),
)


def _build_catalog() -> Mapping[StageKind, StageSpec]:
    catalog: Dict[StageKind, StageSpec] = {}
    for kind, label, successors in _STAGE_ROWS:
        if kind in catalog:
            raise RuntimeError(f"Stage '{kind.value}' is defined twice")
        catalog[kind] = StageSpec(
            kind=kind, label=label, successors=frozenset(successors)
        )

    missing = [kind.value for kind in StageKind if kind not in catalog]
    if missing:
        raise RuntimeError(f"Stage catalog has no entry for: {', '.join(missing)}")

    return MappingProxyType(catalog)


STAGE_CATALOG: Mapping[StageKind, StageSpec] = _build_catalog()

# Canonical order, used for layout and display only
STAGE_SEQUENCE: Tuple[StageKind, ...] = tuple(row[0] for row in _STAGE_ROWS)

ADJACENCY: AdjacencyTable = MappingProxyType(
    {kind: spec.successors for kind, spec in STAGE_CATALOG.items()}
)


def build_adjacency(
    overrides: Mapping[KindLike, Iterable[KindLike]],
) -> AdjacencyTable:
    """Reference adjacency with some kinds' successor sets replaced.

    Lets callers experiment with branching topologies without touching
    the catalog itself.
    """
    table: Dict[StageKind, FrozenSet[StageKind]] = dict(ADJACENCY)
    for kind, targets in overrides.items():
        table[StageKind(kind)] = frozenset(StageKind(t) for t in targets)
    return MappingProxyType(table)


def get_stage(kind: KindLike) -> StageSpec:
    """Return the catalog entry for a kind.

    Plain strings are coerced through ``StageKind``, so a value outside the
    closed set fails with ``ValueError`` before any lookup happens.
    """
    return STAGE_CATALOG[StageKind(kind)]


def stage_label(kind: KindLike) -> str:
    """Human label for a kind, e.g. ``"Scrum Master"``."""
    return get_stage(kind).label


def successors(kind: KindLike) -> FrozenSet[StageKind]:
    """Kinds that may directly follow ``kind``."""
    return get_stage(kind).successors


def predecessors(kind: KindLike) -> FrozenSet[StageKind]:
    """Kinds that may directly precede ``kind``."""
    target = StageKind(kind)
    return frozenset(
        spec.kind for spec in STAGE_CATALOG.values() if target in spec.successors
    )


def stage_index(kind: KindLike) -> int:
    """Position of ``kind`` in the canonical order."""
    return STAGE_SEQUENCE.index(StageKind(kind))


def sequence_labels() -> List[str]:
    """Stage labels in canonical order, Trigger first."""
    return [stage_label(kind) for kind in STAGE_SEQUENCE]


def describe_sequence() -> str:
    """Hint shown under the canvas: the strict connection order."""
    return "Connect strictly: " + " → ".join(sequence_labels())
