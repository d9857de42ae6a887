"""Request and response payloads."""

from gh_rest.models.actions import Variable, Variables
from gh_rest.models.activity import (
    ActivityListStarredOptions,
    CommitAuthor,
    Event,
    PushEvent,
    PushEventCommit,
    StarredRepository,
)
from gh_rest.models.base import GitHubModel
from gh_rest.models.common import Issue, Label, Organization, Repository, Team, User
from gh_rest.models.copilot import (
    CopilotOrganizationDetails,
    CopilotSeatBreakdown,
    CopilotSeatDetails,
    CopilotSeats,
    SeatAssignments,
    SeatCancellations,
)
from gh_rest.models.pulls import (
    NewPullRequest,
    PullRequest,
    PullRequestBranch,
    PullRequestListOptions,
    PullRequestUpdate,
)
from gh_rest.models.repos import (
    ContributorStats,
    RepositoryListByOrgOptions,
    RepositoryListOptions,
    RepositoryParticipation,
    WeeklyCommitActivity,
    WeeklyStats,
)
from gh_rest.models.rulesets import (
    BypassActor,
    PullRequestRuleParameters,
    RequiredDeploymentEnvironmentsRuleParameters,
    RequiredStatusChecksRuleParameters,
    RulePatternParameters,
    RuleRequiredStatusCheck,
    Ruleset,
    RulesetConditions,
    RulesetRefConditionParameters,
    RulesetRepositoryConditionParameters,
    RulesetRule,
    UpdateAllowsFetchAndMergeRuleParameters,
)
from gh_rest.models.search import (
    CodeResult,
    CodeSearchResult,
    IssuesSearchResult,
    RepositoriesSearchResult,
    SearchOptions,
    TextMatch,
    UsersSearchResult,
)
from gh_rest.models.users import UserListOptions

__all__ = [
    "ActivityListStarredOptions",
    "BypassActor",
    "CodeResult",
    "CodeSearchResult",
    "CommitAuthor",
    "ContributorStats",
    "CopilotOrganizationDetails",
    "CopilotSeatBreakdown",
    "CopilotSeatDetails",
    "CopilotSeats",
    "Event",
    "GitHubModel",
    "Issue",
    "IssuesSearchResult",
    "Label",
    "NewPullRequest",
    "Organization",
    "PullRequest",
    "PullRequestBranch",
    "PullRequestListOptions",
    "PullRequestRuleParameters",
    "PullRequestUpdate",
    "PushEvent",
    "PushEventCommit",
    "RepositoriesSearchResult",
    "Repository",
    "RepositoryListByOrgOptions",
    "RepositoryListOptions",
    "RepositoryParticipation",
    "RequiredDeploymentEnvironmentsRuleParameters",
    "RequiredStatusChecksRuleParameters",
    "RulePatternParameters",
    "RuleRequiredStatusCheck",
    "Ruleset",
    "RulesetConditions",
    "RulesetRefConditionParameters",
    "RulesetRepositoryConditionParameters",
    "RulesetRule",
    "SearchOptions",
    "SeatAssignments",
    "SeatCancellations",
    "StarredRepository",
    "Team",
    "TextMatch",
    "UpdateAllowsFetchAndMergeRuleParameters",
    "User",
    "UserListOptions",
    "Variable",
    "Variables",
    "WeeklyCommitActivity",
    "WeeklyStats",
]
