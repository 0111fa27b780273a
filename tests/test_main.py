"""
Tests for the backport-branches CLI.

GitHub access is replaced by a fake comment store.
"""

import json

import pytest
from github import GithubException
from requests.exceptions import ConnectionError as RequestsConnectionError

import backport.main as main_module
from backport.main import main

from conftest import FakeCommentStore


@pytest.fixture
def store(monkeypatch):
    fake = FakeCommentStore()
    monkeypatch.setattr(main_module, "GitHubCommentStore", lambda: fake)
    return fake


def write_event(tmp_path, payload):
    path = tmp_path / "event.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


class TestMain:
    """End-to-end CLI runs."""

    def test_prints_branches_from_event(self, tmp_path, store, capsys):
        """Body and comment branches are printed as a JSON list."""
        store.comments = ["/cherry-pick release-1.2 release-2.0"]
        event = write_event(
            tmp_path,
            {
                "pull_request": {"number": 5, "body": "/cherry-pick release-1.2"},
                "repository": {"full_name": "octo/widgets"},
            },
        )

        main(["--event", event])

        captured = capsys.readouterr()
        assert json.loads(captured.out) == ["release-1.2", "release-2.0"]
        assert "Target branches: release-1.2, release-2.0" in captured.err
        assert store.calls == [("octo", "widgets", 5)]

    def test_writes_step_output(self, tmp_path, store, monkeypatch, capsys):
        """The result is written to GITHUB_OUTPUT under the chosen name."""
        output = tmp_path / "github_output"
        monkeypatch.setenv("GITHUB_OUTPUT", str(output))
        store.comments = ["/cherry-pick release-3.1"]

        main(["--repo", "octo/widgets", "--pr", "9", "--output-name", "targets"])

        assert output.read_text(encoding="utf-8") == 'targets=["release-3.1"]\n'
        assert json.loads(capsys.readouterr().out) == ["release-3.1"]

    def test_body_override(self, store, capsys):
        """--body replaces the event description."""
        main(["--repo", "octo/widgets", "--pr", "9", "--body", "/cherry-pick release-1.0"])

        assert json.loads(capsys.readouterr().out) == ["release-1.0"]

    def test_no_pr_number(self, store, capsys):
        """Without a PR number nothing is fetched and a warning is shown."""
        main(["--repo", "octo/widgets"])

        captured = capsys.readouterr()
        assert json.loads(captured.out) == []
        assert "Could not determine PR number" in captured.err
        assert store.calls == []

    def test_no_requests(self, store, capsys):
        """A PR without directives prints an empty list."""
        store.comments = ["looks good"]

        main(["--repo", "octo/widgets", "--pr", "9"])

        captured = capsys.readouterr()
        assert json.loads(captured.out) == []
        assert "No cherry-pick requests found" in captured.err

    def test_quiet_hides_info(self, store, capsys):
        """--quiet keeps the result but drops info lines."""
        store.comments = ["/cherry-pick release-1.2"]

        main(["--repo", "octo/widgets", "--pr", "9", "--quiet"])

        captured = capsys.readouterr()
        assert json.loads(captured.out) == ["release-1.2"]
        assert "Target branches" not in captured.err


class TestDirectiveOptions:
    """Directive vocabulary from flags and environment."""

    def test_command_and_prefix_flags(self, store, capsys):
        """--command and --branch-prefix replace the default vocabulary."""
        store.comments = ["/backport stable-4.1 release-1.2", "/cherry-pick stable-9.9"]

        main(["--repo", "octo/widgets", "--pr", "9", "--command", "backport", "--branch-prefix", "stable-"])

        assert json.loads(capsys.readouterr().out) == ["stable-4.1"]

    def test_vocabulary_from_environment(self, store, monkeypatch, capsys):
        """BACKPORT_COMMAND and BACKPORT_BRANCH_PREFIX act as defaults."""
        monkeypatch.setenv("BACKPORT_COMMAND", "backport")
        monkeypatch.setenv("BACKPORT_BRANCH_PREFIX", "stable-")
        store.comments = ["/backport stable-4.1", "/cherry-pick release-1.2"]

        main(["--repo", "octo/widgets", "--pr", "9"])

        assert json.loads(capsys.readouterr().out) == ["stable-4.1"]

    def test_flags_override_environment(self, store, monkeypatch, capsys):
        """Flags win over the environment."""
        monkeypatch.setenv("BACKPORT_COMMAND", "backport")
        store.comments = ["/backport release-1.2", "/cherry-pick release-2.0"]

        main(["--repo", "octo/widgets", "--pr", "9", "--command", "cherry-pick"])

        assert json.loads(capsys.readouterr().out) == ["release-2.0"]


class TestErrors:
    """Failures exit with status 1 and a readable message."""

    def test_api_error_exits(self, store, capsys):
        """GitHub API errors are reported, not raised."""
        store.error = GithubException(500, {"message": "Server Error"}, None)

        with pytest.raises(SystemExit) as exc_info:
            main(["--repo", "octo/widgets", "--pr", "9"])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "GitHub API error" in captured.err

    def test_connection_error_exits(self, store, capsys):
        """Transport failures are reported like API errors."""
        store.error = RequestsConnectionError("connection refused")

        with pytest.raises(SystemExit) as exc_info:
            main(["--repo", "octo/widgets", "--pr", "9"])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "GitHub API error" in captured.err
        assert "connection refused" in captured.err

    def test_bad_event_file_exits(self, tmp_path, store, capsys):
        """An unreadable event file is a configuration error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--event", str(tmp_path / "missing.json"), "--repo", "octo/widgets"])

        assert exc_info.value.code == 1
        assert "Cannot read event file" in capsys.readouterr().err

    def test_bad_repository_exits(self, store, capsys):
        """A malformed --repo is rejected."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--repo", "widgets", "--pr", "9"])

        assert exc_info.value.code == 1
        assert "Invalid repository identifier" in capsys.readouterr().err


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
