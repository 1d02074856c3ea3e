import base64
from typing import Any
from urllib.parse import quote

import httpx

from pr_review.models.github import PullRequest, PullRequestFile
from pr_review.models.review import LineComment, ReviewEvent
from .base import GitPlatform


API_VERSION = "2022-11-28"


class GitHubClient(GitPlatform):
    def __init__(self, token: str, api_url: str = "https://api.github.com"):
        self.token = token
        self.api_url = api_url.rstrip("/")

    def _headers(self, accept: str = "application/vnd.github+json") -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": accept,
            "X-GitHub-Api-Version": API_VERSION,
        }

    def _pull_url(self, repository: str, pr_number: int) -> str:
        return f"{self.api_url}/repos/{repository}/pulls/{pr_number}"

    async def get_pull_request(self, repository: str, pr_number: int) -> PullRequest:
        async with httpx.AsyncClient() as client:
            response = await client.get(
                self._pull_url(repository, pr_number),
                headers=self._headers(),
                timeout=30.0,
            )
            response.raise_for_status()
            return PullRequest(**response.json())

    async def list_pull_request_files(self, repository: str, pr_number: int) -> list[PullRequestFile]:
        async with httpx.AsyncClient() as client:
            response = await client.get(
                f"{self._pull_url(repository, pr_number)}/files",
                headers=self._headers(),
                params={"per_page": 100},
                timeout=30.0,
            )
            response.raise_for_status()
            return [PullRequestFile(**item) for item in response.json()]

    async def get_pull_request_diff(self, repository: str, pr_number: int) -> str:
        async with httpx.AsyncClient() as client:
            response = await client.get(
                self._pull_url(repository, pr_number),
                headers=self._headers(accept="application/vnd.github.diff"),
                timeout=30.0,
            )
            response.raise_for_status()
            return response.text

    async def get_file_content(self, repository: str, file_path: str, ref: str) -> str | None:
        """Decoded text of a file at ``ref``; None when the path is not a regular file."""
        encoded_path = quote(file_path, safe="/")
        async with httpx.AsyncClient() as client:
            response = await client.get(
                f"{self.api_url}/repos/{repository}/contents/{encoded_path}",
                params={"ref": ref},
                headers=self._headers(),
                timeout=30.0,
            )
            response.raise_for_status()
            data = response.json()

        if not isinstance(data, dict) or data.get("type") != "file" or not data.get("content"):
            return None
        return base64.b64decode(data["content"]).decode("utf-8", errors="replace")

    async def get_repo_config(self, repository: str, path: str, ref: str) -> str | None:
        """Get the review config file content, returns None if not found."""
        try:
            return await self.get_file_content(repository, path, ref)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise

    async def create_review(
        self,
        repository: str,
        pr_number: int,
        event: ReviewEvent,
        body: str,
        comments: list[LineComment] | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"body": body, "event": event.value}
        if comments:
            payload["comments"] = [comment.model_dump() for comment in comments]

        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{self._pull_url(repository, pr_number)}/reviews",
                headers=self._headers(),
                json=payload,
                timeout=30.0,
            )
            response.raise_for_status()
            return response.json()
