"""Per-stage configuration models.

Each stage kind owns exactly one configuration model. Field names are
snake_case in Python and camelCase on the wire (``llmModel``,
``coverageTarget``), matching the editor's export format.
"""

from typing import Any, Dict, List, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pipeforge.core.stages import KindLike, StageKind


class StageConfig(BaseModel):
    """Base for all stage configuration records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        validate_assignment=True,
    )


class EmptyConfig(StageConfig):
    """Trigger and Launch stages carry no configuration."""


class AgentConfig(StageConfig):
    """LLM settings shared by every agent stage."""

    llm_model: Optional[str] = Field(None, description="Model name, e.g. gpt-4o")
    temperature: Optional[float] = Field(None, ge=0.0, le=1.0)
    system_prompt: Optional[str] = None


class JiraAuth(StageConfig):
    """Reference to Jira credentials. Never dereferenced by the core."""

    type: Literal["token", "basic"] = "token"
    token: Optional[str] = None
    username: Optional[str] = None


class ScrumConfig(AgentConfig):
    jira_base_url: Optional[str] = None
    project_key: Optional[str] = None
    auth: Optional[JiraAuth] = None


class UseCaseConfig(AgentConfig):
    template: Optional[Literal["simple", "full"]] = None
    include_acceptance_criteria: Optional[bool] = None


class ArchConfig(AgentConfig):
    diagrammer: Optional[Literal["mermaid", "plantuml", "drawio"]] = None
    include_c4: Optional[bool] = Field(None, alias="includeC4")


class CodingConfig(AgentConfig):
    repo_url: Optional[str] = None
    language: Optional[str] = None
    framework: Optional[str] = None
    style_guide: Optional[str] = None


class QAConfig(AgentConfig):
    test_framework: Optional[str] = None
    coverage_target: Optional[float] = Field(
        None, ge=0.0, le=1.0, description="Fraction of code to cover"
    )


class DevOpsConfig(AgentConfig):
    cloud: Optional[List[Literal["DigitalOcean", "AWS", "GCP"]]] = None
    enable_cd: Optional[bool] = Field(None, alias="enableCD")
    registry: Optional[Literal["ghcr", "dockerhub", "do-cr"]] = None
    use_kubernetes: Optional[bool] = None


class SecurityConfig(AgentConfig):
    scanners: Optional[List[Literal["semgrep", "trivy", "bandit", "snyk"]]] = None
    block_on_high: Optional[bool] = None


AnyStageConfig = Union[
    EmptyConfig,
    ScrumConfig,
    UseCaseConfig,
    ArchConfig,
    CodingConfig,
    QAConfig,
    DevOpsConfig,
    SecurityConfig,
]


CONFIG_MODELS: Dict[StageKind, Type[StageConfig]] = {
    StageKind.START: EmptyConfig,
    StageKind.SCRUM: ScrumConfig,
    StageKind.BA: UseCaseConfig,
    StageKind.ARCH: ArchConfig,
    StageKind.CODING: CodingConfig,
    StageKind.QA: QAConfig,
    StageKind.DEVOPS: DevOpsConfig,
    StageKind.SECURITY: SecurityConfig,
    StageKind.END: EmptyConfig,
}

_unmapped = [kind.value for kind in StageKind if kind not in CONFIG_MODELS]
if _unmapped:
    raise RuntimeError(f"No config model for stage kinds: {', '.join(_unmapped)}")


def config_model_for(kind: KindLike) -> Type[StageConfig]:
    """Config model class owned by ``kind``."""
    return CONFIG_MODELS[StageKind(kind)]


def config_for(kind: KindLike, **values: Any) -> StageConfig:
    """Build and validate the config record for ``kind``.

    Accepts both snake_case names and camelCase aliases.
    """
    return config_model_for(kind).model_validate(values)


def default_config(kind: KindLike) -> StageConfig:
    return config_model_for(kind)()


def coerce_config(kind: KindLike, config: Any) -> StageConfig:
    """Turn a raw mapping or model into the config record for ``kind``.

    Raises:
        ValueError: If ``config`` is a model of another stage's type.
    """
    model = config_model_for(kind)
    if config is None:
        return model()
    if isinstance(config, StageConfig):
        if type(config) is not model:
            raise ValueError(
                f"Stage '{StageKind(kind).value}' expects {model.__name__}, "
                f"got {type(config).__name__}"
            )
        return config
    return model.model_validate(config)
