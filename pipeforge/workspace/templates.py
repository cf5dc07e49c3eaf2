"""Starter pipeline shown when a new workspace opens."""

from typing import List

from pipeforge.core.connections import edge_id_for
from pipeforge.core.models import Edge, Pipeline, PipelineNode
from pipeforge.core.stages import STAGE_SEQUENCE, StageKind


def default_nodes() -> List[PipelineNode]:
    """One node per stage, laid out roughly left to right."""
    return [
        PipelineNode.for_stage(
            "start",
            StageKind.START,
            title="START - Trigger",
            description="Webhook, cron, or manual trigger kicks things off.",
            outputs=["rawRequirement", "meetingNotes", "repoRef"],
            x=0,
            y=0,
        ),
        PipelineNode.for_stage(
            "scrum",
            StageKind.SCRUM,
            title="AI Scrum Master",
            description="Converts context into Jira epics and stories with "
            "acceptance criteria.",
            inputs=["meetingNotes", "rawRequirement"],
            outputs=["jiraTickets"],
            config={
                "jiraBaseUrl": "https://jira.example.com",
                "projectKey": "PX",
                "auth": {"type": "token"},
                "llmModel": "gpt-4o-mini",
                "temperature": 0.2,
            },
            x=320,
            y=-60,
        ),
        PipelineNode.for_stage(
            "ba",
            StageKind.BA,
            title="AI Business Analyst",
            description="Expands requirements into detailed use cases.",
            inputs=["jiraTickets", "rawRequirement"],
            outputs=["useCaseDoc", "acceptanceCriteria"],
            config={
                "template": "full",
                "includeAcceptanceCriteria": True,
                "llmModel": "gpt-4o",
                "temperature": 0.2,
            },
            x=640,
            y=-60,
        ),
        PipelineNode.for_stage(
            "arch",
            StageKind.ARCH,
            title="AI Architect",
            description="Produces diagrams, ADRs, and C4 components.",
            inputs=["useCaseDoc"],
            outputs=["architecturePack"],
            config={
                "diagrammer": "mermaid",
                "includeC4": True,
                "llmModel": "gpt-4o",
                "temperature": 0.25,
            },
            x=960,
            y=-60,
        ),
        PipelineNode.for_stage(
            "coding",
            StageKind.CODING,
            title="AI Coding Assistant",
            description="Creates feature branches, pull requests, and code "
            "walkthroughs.",
            inputs=["architecturePack", "repoRef"],
            outputs=["pullRequest", "tests"],
            config={
                "repoUrl": "https://github.com/pioneerxity/platform",
                "language": "TypeScript",
                "framework": "Next.js",
                "styleGuide": "Airbnb",
                "llmModel": "o3-mini",
            },
            x=1280,
            y=0,
        ),
        PipelineNode.for_stage(
            "qa",
            StageKind.QA,
            title="AI QA Lead",
            description="Runs regression packs and reports coverage.",
            inputs=["tests", "pullRequest"],
            outputs=["qaReport"],
            config={
                "testFramework": "Playwright",
                "coverageTarget": 0.85,
                "llmModel": "gpt-4o-mini",
            },
            x=1600,
            y=60,
        ),
        PipelineNode.for_stage(
            "devops",
            StageKind.DEVOPS,
            title="AI DevOps Engineer",
            description="Packages and deploys the build artefacts.",
            inputs=["qaReport", "pullRequest"],
            outputs=["releaseCandidate"],
            config={
                "cloud": ["AWS", "GCP"],
                "enableCD": True,
                "registry": "ghcr",
                "useKubernetes": True,
            },
            x=1920,
            y=0,
        ),
        PipelineNode.for_stage(
            "security",
            StageKind.SECURITY,
            title="AI Security Analyst",
            description="Performs SAST/SCA scans and policy gating.",
            inputs=["releaseCandidate"],
            outputs=["securityReport"],
            config={"scanners": ["semgrep", "trivy"], "blockOnHigh": True},
            x=2240,
            y=0,
        ),
        PipelineNode.for_stage(
            "end",
            StageKind.END,
            title="END - Launch",
            description="Final go / no-go release decision.",
            inputs=["securityReport"],
            x=2560,
            y=0,
        ),
    ]


def default_edges() -> List[Edge]:
    """``start->scrum`` through ``security->end``."""
    ids = [kind.value for kind in STAGE_SEQUENCE]
    return [
        Edge(id=edge_id_for(source, target), source=source, target=target)
        for source, target in zip(ids, ids[1:])
    ]


def default_pipeline() -> Pipeline:
    """The reference nine-stage pipeline. Validates as ``Valid``."""
    return Pipeline(nodes=default_nodes(), edges=default_edges())
