from pydantic import BaseModel


class GitRef(BaseModel):
    ref: str
    sha: str


class PullRequest(BaseModel):
    number: int
    title: str = ""
    body: str | None = None
    additions: int = 0
    deletions: int = 0
    head: GitRef

    @property
    def total_changes(self) -> int:
        return self.additions + self.deletions


class PullRequestFile(BaseModel):
    filename: str
    status: str
    additions: int = 0
    deletions: int = 0
    changes: int = 0


class GitHubRepository(BaseModel):
    full_name: str


class GitHubPullRequestEvent(BaseModel):
    action: str
    number: int
    repository: GitHubRepository
