"""Tests for RealGit command construction and output handling."""

from pathlib import Path
from unittest.mock import patch

from skillkit.integrations.git.real import RealGit
from skillkit.subprocess_utils import CommandResult

REPO = Path("/repo")


def _ok(stdout: str = "") -> CommandResult:
    return CommandResult(success=True, stdout=stdout, stderr="")


def _fail(stderr: str = "") -> CommandResult:
    return CommandResult(success=False, stdout="", stderr=stderr)


@patch("skillkit.integrations.git.real.run_command")
def test_is_inside_repository(mock_run) -> None:
    mock_run.return_value = _ok(".git\n")

    assert RealGit().is_inside_repository(REPO) is True
    mock_run.assert_called_once_with(["git", "rev-parse", "--git-dir"], cwd=REPO)


@patch("skillkit.integrations.git.real.run_command")
def test_outside_repository(mock_run) -> None:
    mock_run.return_value = _fail("fatal: not a git repository")

    assert RealGit().is_inside_repository(REPO) is False


@patch("skillkit.integrations.git.real.run_command")
def test_uncommitted_changes_detected_by_diff_index(mock_run) -> None:
    mock_run.return_value = _fail()

    assert RealGit().has_uncommitted_changes(REPO) is True
    mock_run.assert_called_once_with(["git", "diff-index", "--quiet", "HEAD", "--"], cwd=REPO)


@patch("skillkit.integrations.git.real.run_command")
def test_clean_working_tree(mock_run) -> None:
    mock_run.return_value = _ok()

    assert RealGit().has_uncommitted_changes(REPO) is False


@patch("skillkit.integrations.git.real.run_command")
def test_current_branch(mock_run) -> None:
    mock_run.return_value = _ok("feature-x\n")

    assert RealGit().get_current_branch(REPO) == "feature-x"


@patch("skillkit.integrations.git.real.run_command")
def test_detached_head_has_no_current_branch(mock_run) -> None:
    mock_run.return_value = _ok("HEAD\n")

    assert RealGit().get_current_branch(REPO) is None


@patch("skillkit.integrations.git.real.run_command")
def test_branch_existence_checks_use_full_refs(mock_run) -> None:
    mock_run.return_value = _ok()
    git = RealGit()

    assert git.local_branch_exists(REPO, "main") is True
    assert git.remote_branch_exists(REPO, "origin", "main") is True

    assert [call.args[0] for call in mock_run.call_args_list] == [
        ["git", "show-ref", "--verify", "--quiet", "refs/heads/main"],
        ["git", "show-ref", "--verify", "--quiet", "refs/remotes/origin/main"],
    ]


@patch("skillkit.integrations.git.real.run_command")
def test_remote_default_branch(mock_run) -> None:
    mock_run.return_value = _ok("refs/remotes/origin/master\n")

    assert RealGit().get_remote_default_branch(REPO, "origin") == "master"
    mock_run.assert_called_once_with(
        ["git", "symbolic-ref", "refs/remotes/origin/HEAD"], cwd=REPO
    )


@patch("skillkit.integrations.git.real.run_command")
def test_remote_default_branch_unset(mock_run) -> None:
    mock_run.return_value = _fail("fatal: ref refs/remotes/origin/HEAD is not a symbolic ref")

    assert RealGit().get_remote_default_branch(REPO, "origin") is None


@patch("skillkit.integrations.git.real.run_command")
def test_list_local_branches(mock_run) -> None:
    mock_run.return_value = _ok("develop\nmain\n\n")

    assert RealGit().list_local_branches(REPO) == ["develop", "main"]


@patch("skillkit.integrations.git.real.run_command")
def test_pull_returns_command_result(mock_run) -> None:
    failure = CommandResult(success=False, stdout="", stderr="CONFLICT (content)")
    mock_run.return_value = failure

    assert RealGit().pull_branch(REPO, "origin", "main") == failure
    mock_run.assert_called_once_with(["git", "pull", "origin", "main"], cwd=REPO)


@patch("skillkit.integrations.git.real.run_command")
def test_checkout_and_create(mock_run) -> None:
    mock_run.return_value = _ok()
    git = RealGit()

    assert git.checkout_branch(REPO, "main") is True
    assert git.create_and_checkout_branch(REPO, "alice-issue-1-fix") is True

    assert [call.args[0] for call in mock_run.call_args_list] == [
        ["git", "checkout", "main"],
        ["git", "checkout", "-b", "alice-issue-1-fix"],
    ]
