"""Shared fixtures for the backport helper tests."""

import pytest


GITHUB_ENV_VARS = (
    "GITHUB_ACTIONS",
    "GITHUB_API_URL",
    "GITHUB_EVENT_PATH",
    "GITHUB_OUTPUT",
    "GITHUB_REPOSITORY",
    "GITHUB_SERVER_URL",
    "GITHUB_TOKEN",
    "GH_TOKEN",
    "BACKPORT_COMMAND",
    "BACKPORT_BRANCH_PREFIX",
)


class RecordingDiagnostics:
    """Diagnostics sink that keeps every message."""

    def __init__(self):
        self.warnings = []
        self.infos = []

    def warning(self, message):
        self.warnings.append(message)

    def info(self, message):
        self.infos.append(message)


class FakeCommentStore:
    """Comment store serving canned comment bodies."""

    def __init__(self, comments=None, error=None):
        self.comments = comments or []
        self.error = error
        self.calls = []

    def list_comments(self, owner, repo, issue_number):
        self.calls.append((owner, repo, issue_number))
        if self.error is not None:
            raise self.error
        return list(self.comments)


@pytest.fixture(autouse=True)
def clean_github_env(monkeypatch):
    """Keep the runner's own GitHub variables out of the tests."""
    for name in GITHUB_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def diagnostics():
    return RecordingDiagnostics()
