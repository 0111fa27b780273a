"""
Trigger Event loading for the backport helper.

Turns a GitHub webhook payload (pull_request, issue_comment, ...) into the
few fields the extractor needs.
"""

import json
import os
from dataclasses import dataclass
from typing import Any, Optional

from backport.errors import EventError
from backport.github.client import get_repo_from_remote


@dataclass
class EventContext:
    """Fields of the triggering event used to find backport requests."""

    owner: Optional[str] = None
    repo: Optional[str] = None
    pr_number: Optional[int] = None
    pr_body: Optional[str] = None

    @property
    def full_name(self) -> Optional[str]:
        if not self.owner or not self.repo:
            return None
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_payload(
        cls,
        payload: dict[str, Any],
        repository: Optional[str] = None,
    ) -> "EventContext":
        """
        Build a context from a webhook payload.

        The PR number comes from pull_request.number, falling back to
        issue.number (issue_comment events). Only a pull_request payload
        carries the PR description.

        Args:
            payload: Decoded event payload
            repository: "owner/repo"; defaults to repository.full_name

        Returns:
            EventContext with absent fields left as None

        Raises:
            EventError: If the repository identifier is malformed
        """
        pull_request = payload.get("pull_request") or {}
        issue = payload.get("issue") or {}

        pr_number = pull_request.get("number") or issue.get("number") or None

        if not repository:
            repository = (payload.get("repository") or {}).get("full_name")

        owner, repo = split_repository(repository)

        return cls(
            owner=owner,
            repo=repo,
            pr_number=pr_number,
            pr_body=pull_request.get("body"),
        )


def split_repository(repository: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """
    Split "owner/repo" into its parts.

    Raises:
        EventError: If the identifier is not of the form owner/repo
    """
    if not repository:
        return None, None

    owner, sep, repo = repository.strip().partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise EventError(f"Invalid repository identifier: {repository!r} (expected owner/repo)")

    return owner, repo


def read_payload(event_path: str) -> dict[str, Any]:
    """
    Read a webhook payload from disk.

    Raises:
        EventError: If the file cannot be read or is not a JSON object
    """
    try:
        with open(event_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except OSError as e:
        raise EventError(f"Cannot read event file {event_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise EventError(f"Event file {event_path} is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise EventError(f"Event file {event_path} does not contain a JSON object")

    return payload


def load_event(
    event_path: Optional[str] = None,
    repository: Optional[str] = None,
    repo_path: str = ".",
) -> EventContext:
    """
    Load the triggering event the way a workflow step sees it.

    Args:
        event_path: Payload file, defaults to $GITHUB_EVENT_PATH. With
            neither set the payload is empty.
        repository: "owner/repo", defaults to $GITHUB_REPOSITORY, then the
            payload, then the origin remote of repo_path
        repo_path: Working tree used for the git remote fallback

    Returns:
        The resolved EventContext
    """
    event_path = event_path or os.getenv("GITHUB_EVENT_PATH")
    payload = read_payload(event_path) if event_path else {}

    repository = repository or os.getenv("GITHUB_REPOSITORY")
    context = EventContext.from_payload(payload, repository)

    if context.full_name is None:
        context.owner, context.repo = split_repository(get_repo_from_remote(repo_path))

    return context
