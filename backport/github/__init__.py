"""
GitHub Integration for the backport helper.

Handles:
- Authenticated API access
- Listing PR comments
- Workflow commands and step outputs
"""

from backport.github.actions import format_command, in_github_actions, write_output
from backport.github.client import get_github_client, get_repo_from_remote
from backport.github.comments import GitHubCommentStore

__all__ = [
    "format_command",
    "in_github_actions",
    "write_output",
    "get_github_client",
    "get_repo_from_remote",
    "GitHubCommentStore",
]
