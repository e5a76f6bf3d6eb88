"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

from pathlib import Path

from skillkit.integrations.git.abc import Git
from skillkit.subprocess_utils import CommandResult, run_command


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def is_inside_repository(self, cwd: Path) -> bool:
        return run_command(["git", "rev-parse", "--git-dir"], cwd=cwd).success

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        # diff-index exits 1 on differences and 128 when HEAD is missing
        result = run_command(["git", "diff-index", "--quiet", "HEAD", "--"], cwd=cwd)
        return not result.success

    def get_current_branch(self, cwd: Path) -> str | None:
        result = run_command(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd)
        if not result.success:
            return None

        branch = result.stdout.strip()
        if not branch or branch == "HEAD":
            return None

        return branch

    def local_branch_exists(self, cwd: Path, branch: str) -> bool:
        return self._ref_exists(cwd, f"refs/heads/{branch}")

    def remote_branch_exists(self, cwd: Path, remote: str, branch: str) -> bool:
        return self._ref_exists(cwd, f"refs/remotes/{remote}/{branch}")

    def get_remote_default_branch(self, cwd: Path, remote: str) -> str | None:
        result = run_command(["git", "symbolic-ref", f"refs/remotes/{remote}/HEAD"], cwd=cwd)
        if not result.success:
            return None

        # Parse "refs/remotes/origin/master" -> "master"
        ref = result.stdout.strip()
        remote_prefix = f"refs/remotes/{remote}/"
        if not ref.startswith(remote_prefix):
            return None

        branch = ref[len(remote_prefix) :]
        return branch or None

    def list_local_branches(self, cwd: Path) -> list[str]:
        result = run_command(["git", "branch", "--format=%(refname:short)"], cwd=cwd)
        if not result.success:
            return []
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def checkout_branch(self, cwd: Path, branch: str) -> bool:
        return run_command(["git", "checkout", branch], cwd=cwd).success

    def pull_branch(self, cwd: Path, remote: str, branch: str) -> CommandResult:
        return run_command(["git", "pull", remote, branch], cwd=cwd)

    def create_and_checkout_branch(self, cwd: Path, branch: str) -> bool:
        return run_command(["git", "checkout", "-b", branch], cwd=cwd).success

    def _ref_exists(self, cwd: Path, ref: str) -> bool:
        return run_command(["git", "show-ref", "--verify", "--quiet", ref], cwd=cwd).success
