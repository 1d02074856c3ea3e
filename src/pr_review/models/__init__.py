from .config import ReviewConfig
from .github import GitHubPullRequestEvent, PullRequest, PullRequestFile
from .review import Finding, FindingKind, LineComment, ReviewEvent, SpellingSuggestion

__all__ = [
    "ReviewConfig",
    "GitHubPullRequestEvent",
    "PullRequest",
    "PullRequestFile",
    "Finding",
    "FindingKind",
    "LineComment",
    "ReviewEvent",
    "SpellingSuggestion",
]
