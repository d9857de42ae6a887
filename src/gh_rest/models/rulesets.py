"""Repository ruleset payloads.

A rule's ``parameters`` shape depends on its ``type``; rules are decoded in two
passes through ``decode_variant``.
"""

from typing import Any

from pydantic import Field, model_validator

from gh_rest.core.variants import decode_variant
from gh_rest.models.base import GitHubModel


class BypassActor(GitHubModel):
    actor_id: int | None = None
    # Team, Integration, OrganizationAdmin, RepositoryRole
    actor_type: str | None = None
    bypass_mode: str | None = None


class RulesetLink(GitHubModel):
    href: str | None = None


class RulesetLinks(GitHubModel):
    self_link: RulesetLink | None = Field(default=None, alias="self")


class RulesetRefConditionParameters(GitHubModel):
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)


class RulesetRepositoryConditionParameters(GitHubModel):
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    protected: bool | None = None


class RulesetConditions(GitHubModel):
    ref_name: RulesetRefConditionParameters | None = None
    repository_name: RulesetRepositoryConditionParameters | None = None


class UpdateAllowsFetchAndMergeRuleParameters(GitHubModel):
    update_allows_fetch_and_merge: bool = False


class RequiredDeploymentEnvironmentsRuleParameters(GitHubModel):
    required_deployment_environments: list[str] = Field(default_factory=list)


class RulePatternParameters(GitHubModel):
    name: str | None = None
    # When true the rule fails if the pattern matches
    negate: bool | None = None
    # starts_with, ends_with, contains, regex
    operator: str
    pattern: str


class PullRequestRuleParameters(GitHubModel):
    dismiss_stale_reviews_on_push: bool = False
    require_code_owner_review: bool = False
    require_last_push_approval: bool = False
    required_approving_review_count: int = 0
    required_review_thread_resolution: bool = False


class RuleRequiredStatusCheck(GitHubModel):
    context: str
    integration_id: int | None = None


class RequiredStatusChecksRuleParameters(GitHubModel):
    required_status_checks: list[RuleRequiredStatusCheck] = Field(default_factory=list)
    strict_required_status_checks_policy: bool = False


RuleParameters = (
    UpdateAllowsFetchAndMergeRuleParameters
    | RequiredDeploymentEnvironmentsRuleParameters
    | RulePatternParameters
    | PullRequestRuleParameters
    | RequiredStatusChecksRuleParameters
)

RULE_PARAMETERS: dict[str, type[GitHubModel] | None] = {
    "creation": None,
    "deletion": None,
    "required_linear_history": None,
    "required_signatures": None,
    "non_fast_forward": None,
    "update": UpdateAllowsFetchAndMergeRuleParameters,
    "required_deployments": RequiredDeploymentEnvironmentsRuleParameters,
    "commit_message_pattern": RulePatternParameters,
    "commit_author_email_pattern": RulePatternParameters,
    "committer_email_pattern": RulePatternParameters,
    "branch_name_pattern": RulePatternParameters,
    "tag_name_pattern": RulePatternParameters,
    "pull_request": PullRequestRuleParameters,
    "required_status_checks": RequiredStatusChecksRuleParameters,
}


class RulesetRule(GitHubModel):
    """One rule of a ruleset."""

    type: str
    parameters: RuleParameters | None = None

    @model_validator(mode="before")
    @classmethod
    def decode_parameters(cls, data: Any) -> Any:
        """Pick the parameters model from the rule type."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        data["parameters"] = decode_variant(
            data.get("type"), data.get("parameters"), RULE_PARAMETERS, what="rule"
        )
        return data

    @classmethod
    def creation(cls) -> "RulesetRule":
        """Only users with bypass permission may create matching refs."""
        return cls(type="creation")

    @classmethod
    def deletion(cls) -> "RulesetRule":
        return cls(type="deletion")

    @classmethod
    def update(cls, params: UpdateAllowsFetchAndMergeRuleParameters) -> "RulesetRule":
        return cls(type="update", parameters=params)

    @classmethod
    def required_linear_history(cls) -> "RulesetRule":
        return cls(type="required_linear_history")

    @classmethod
    def required_signatures(cls) -> "RulesetRule":
        return cls(type="required_signatures")

    @classmethod
    def non_fast_forward(cls) -> "RulesetRule":
        return cls(type="non_fast_forward")

    @classmethod
    def required_deployments(
        cls, params: RequiredDeploymentEnvironmentsRuleParameters
    ) -> "RulesetRule":
        return cls(type="required_deployments", parameters=params)

    @classmethod
    def pull_request(cls, params: PullRequestRuleParameters) -> "RulesetRule":
        return cls(type="pull_request", parameters=params)

    @classmethod
    def required_status_checks(cls, params: RequiredStatusChecksRuleParameters) -> "RulesetRule":
        return cls(type="required_status_checks", parameters=params)

    @classmethod
    def pattern(cls, rule_type: str, params: RulePatternParameters) -> "RulesetRule":
        """Pattern rule: commit message, author/committer email, branch or tag name."""
        if RULE_PARAMETERS.get(rule_type) is not RulePatternParameters:
            msg = f"{rule_type} is not a pattern rule"
            raise ValueError(msg)
        return cls(type=rule_type, parameters=params)


class Ruleset(GitHubModel):
    """A repository or organization ruleset."""

    id: int | None = Field(default=None, exclude=True)
    name: str
    # branch or tag
    target: str | None = None
    # Repository or Organization
    source_type: str | None = None
    source: str | None = None
    # disabled, active or evaluate
    enforcement: str
    bypass_actors: list[BypassActor] | None = None
    node_id: str | None = Field(default=None, exclude=True)
    links: RulesetLinks | None = Field(default=None, alias="_links", exclude=True)
    conditions: RulesetConditions | None = None
    rules: list[RulesetRule] | None = None
