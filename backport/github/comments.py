"""
PR comment listing for the backport helper.

GitHub treats every pull request as an issue, so PR conversation comments
are read through the issue comments endpoint.
"""

from typing import Optional

from github import Github

from backport.errors import EventError
from backport.github.client import get_github_client


class GitHubCommentStore:
    """
    Read-only view of issue and PR comments.

    The client is created on first use so that events which never need
    a fetch also never need a token.
    """

    def __init__(self, client: Optional[Github] = None):
        self._client = client

    @property
    def client(self) -> Github:
        if self._client is None:
            self._client = get_github_client()
        return self._client

    def list_comments(
        self,
        owner: Optional[str],
        repo: Optional[str],
        issue_number: int,
    ) -> list[str]:
        """
        List the bodies of all comments on an issue or PR.

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: Issue or PR number

        Returns:
            Comment bodies in the order GitHub returns them (oldest first).
            A comment without a body yields an empty string.

        Raises:
            EventError: If the repository is unknown
            GithubException: If the API call fails
        """
        if not owner or not repo:
            raise EventError(
                f"Cannot list comments for #{issue_number}: repository is unknown"
            )

        issue = self.client.get_repo(f"{owner}/{repo}", lazy=True).get_issue(issue_number)
        return [comment.body or "" for comment in issue.get_comments()]
