from abc import ABC, abstractmethod
from typing import Any

from pr_review.models.github import PullRequest, PullRequestFile
from pr_review.models.review import LineComment, ReviewEvent


class GitPlatform(ABC):
    @abstractmethod
    async def get_pull_request(self, repository: str, pr_number: int) -> PullRequest:
        pass

    @abstractmethod
    async def list_pull_request_files(self, repository: str, pr_number: int) -> list[PullRequestFile]:
        pass

    @abstractmethod
    async def get_pull_request_diff(self, repository: str, pr_number: int) -> str:
        pass

    @abstractmethod
    async def get_file_content(self, repository: str, file_path: str, ref: str) -> str | None:
        pass

    @abstractmethod
    async def get_repo_config(self, repository: str, path: str, ref: str) -> str | None:
        pass

    @abstractmethod
    async def create_review(
        self,
        repository: str,
        pr_number: int,
        event: ReviewEvent,
        body: str,
        comments: list[LineComment] | None = None,
    ) -> dict[str, Any]:
        pass
