"""
GitHub API Client for the backport helper.

Provides authenticated access to GitHub for reading PR comments.
"""

import os
import re
import subprocess
from typing import Optional
from urllib.parse import urlparse

from github import Auth, Github
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_SERVER_URL = "https://github.com"


def get_github_client() -> Github:
    """
    Get authenticated GitHub client.

    The token is read from GITHUB_TOKEN, falling back to GH_TOKEN.
    GITHUB_API_URL points the client at a GitHub Enterprise server.
    The client is lazy: objects reached through it are only fetched
    when one of their attributes is read, so listing comments costs
    a single request.

    Returns:
        Authenticated Github instance

    Raises:
        RuntimeError: If neither token variable is set
    """
    token = os.getenv("GITHUB_TOKEN") or os.getenv("GH_TOKEN")

    if not token:
        raise RuntimeError(
            "GITHUB_TOKEN environment variable is not set. "
            "Please set it to a token that can read issues and pull requests."
        )

    base_url = os.getenv("GITHUB_API_URL") or DEFAULT_API_URL
    return Github(auth=Auth.Token(token), base_url=base_url, lazy=True)


def get_server_host() -> str:
    """Host name of the GitHub server, from GITHUB_SERVER_URL."""
    server_url = os.getenv("GITHUB_SERVER_URL") or DEFAULT_SERVER_URL
    return urlparse(server_url).hostname or urlparse(DEFAULT_SERVER_URL).hostname


def parse_remote_url(remote_url: str, host: Optional[str] = None) -> Optional[str]:
    """
    Extract "owner/repo" from a git remote URL.

    Args:
        remote_url: URL as printed by `git remote get-url`
        host: GitHub host to accept (default: from GITHUB_SERVER_URL)

    Returns:
        Repository identifier, or None for other hosts and formats
    """
    host = re.escape(host or get_server_host())
    name = r"(?P<name>[^/:]+/[^/]+?)(?:\.git)?/?"

    patterns = (
        # SCP-like SSH: git@github.com:owner/repo.git
        rf"[\w.-]+@{host}:{name}",
        # ssh://git@github.com:22/owner/repo.git
        rf"ssh://(?:[\w.-]+@)?{host}(?::\d+)?/{name}",
        # https://github.com/owner/repo.git, optionally with credentials
        rf"https?://(?:[^@/]+@)?{host}(?::\d+)?/{name}",
    )

    for pattern in patterns:
        match = re.fullmatch(pattern, remote_url.strip(), flags=re.IGNORECASE)
        if match:
            return match.group("name")

    return None


def get_repo_from_remote(repo_path: str) -> Optional[str]:
    """
    Extract GitHub repository identifier from git remote.

    Args:
        repo_path: Path to the git repository

    Returns:
        Repository identifier (e.g., "owner/repo") or None
    """
    try:
        result = subprocess.run(
            ["git", "remote", "get-url", "origin"],
            cwd=repo_path,
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, OSError):
        return None

    return parse_remote_url(result.stdout)
