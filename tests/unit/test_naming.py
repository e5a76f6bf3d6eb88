"""Tests for branch naming utilities."""

import re

import pytest

from skillkit.naming import (
    MAX_BRANCH_LENGTH,
    format_component,
    generate_branch_name,
    validate_branch_name,
)


class TestFormatComponent:
    """Tests for kebab-case normalization of name components."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("fix user login", "fix-user-login"),
            ("Fix: Login!", "fix-login"),
            ("add_dark  mode", "add-dark-mode"),
            ("  --Hello__World--  ", "hello-world"),
            ("ISSUE-123", "issue-123"),
            ("Ünïcödé", "ncd"),
            ("!!!", ""),
            ("", ""),
        ],
    )
    def test_formats_component(self, text: str, expected: str) -> None:
        assert format_component(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["fix user login", "Fix: Login!", "a__b--c", " -x- ", "MiXeD_Case 42", "---"],
    )
    def test_formatting_is_idempotent(self, text: str) -> None:
        once = format_component(text)
        assert format_component(once) == once

    @pytest.mark.parametrize("text", ["Hello World", "a - b _ c", "--lead", "trail--", "x!!y"])
    def test_output_uses_only_allowed_characters(self, text: str) -> None:
        result = format_component(text)

        assert re.fullmatch(r"[a-z0-9-]*", result)
        assert "--" not in result
        assert not result.startswith("-")
        assert not result.endswith("-")


class TestGenerateBranchName:
    """Tests for branch name assembly and truncation."""

    def test_simple_name(self) -> None:
        assert (
            generate_branch_name("issue-123", "fix user login", "alice")
            == "alice-issue-123-fix-user-login"
        )

    def test_descriptive_slug_as_ticket(self) -> None:
        assert (
            generate_branch_name("add-dark-mode", "dark mode support", "alice")
            == "alice-add-dark-mode-dark-mode-support"
        )

    def test_components_are_formatted_independently(self) -> None:
        assert generate_branch_name("PROJ_42", "Fix: the Bug!", "bob") == "bob-proj-42-fix-the-bug"

    def test_long_summary_is_truncated_to_fit(self) -> None:
        warnings: list[str] = []

        result = generate_branch_name(
            "issue-123",
            "implement the new user authentication flow with oauth",
            "alice",
            on_warning=warnings.append,
        )

        assert result == "alice-issue-123-implement-the-new-user-authenticat"
        assert len(result) == MAX_BRANCH_LENGTH
        assert warnings == []

    def test_trailing_hyphen_removed_after_summary_truncation(self) -> None:
        summary = "a" * 41 + " more"

        result = generate_branch_name("t-1", summary, "bob")

        assert result == "bob-t-1-" + "a" * 41
        assert not result.endswith("-")

    def test_summary_budget_of_exactly_five_keeps_ticket_intact(self) -> None:
        warnings: list[str] = []
        ticket = "x" * 38

        result = generate_branch_name(ticket, "summary text", "alice", on_warning=warnings.append)

        assert result == f"alice-{ticket}-summa"
        assert warnings == []

    def test_summary_budget_below_five_truncates_whole_name(self) -> None:
        warnings: list[str] = []
        ticket = "x" * 39

        result = generate_branch_name(ticket, "summary text", "alice", on_warning=warnings.append)

        assert result == f"alice-{ticket}-summ"
        assert len(result) == MAX_BRANCH_LENGTH
        assert warnings == ["Ticket ID is very long, truncating entire branch name"]

    def test_very_long_ticket_is_cut(self) -> None:
        warnings: list[str] = []

        result = generate_branch_name("a" * 45, "fix", "alice", on_warning=warnings.append)

        assert result == "alice-" + "a" * 44
        assert len(result) == MAX_BRANCH_LENGTH
        assert len(warnings) == 1

    def test_trailing_hyphen_removed_after_hard_truncation(self) -> None:
        result = generate_branch_name("a" * 43, "fix", "alice")

        assert result == "alice-" + "a" * 43
        assert len(result) == MAX_BRANCH_LENGTH - 1

    def test_hard_truncation_without_warning_callback(self) -> None:
        result = generate_branch_name("b" * 60, "fix", "alice")

        assert len(result) == MAX_BRANCH_LENGTH

    @pytest.mark.parametrize(
        ("ticket", "summary"),
        [
            ("issue-1", "fix"),
            ("ENG-4821", "Refactor the payment reconciliation job to stream records"),
            ("x" * 30, "a summary that pushes the name over the limit"),
            ("y" * 80, "z" * 80),
            ("feature_request", "Support   many    spaces"),
        ],
    )
    def test_generated_names_satisfy_convention(self, ticket: str, summary: str) -> None:
        result = generate_branch_name(ticket, summary, "alice")

        assert len(result) <= MAX_BRANCH_LENGTH
        assert result.startswith("alice-")
        assert re.fullmatch(r"[a-z0-9-]+", result)
        assert not result.endswith("-")
        assert validate_branch_name(result, "alice") is None


class TestValidateBranchName:
    """Tests for the branch name convention check."""

    def test_valid_name(self) -> None:
        assert validate_branch_name("alice-issue-123-fix-user-login", "alice") is None

    def test_empty_name(self) -> None:
        assert validate_branch_name("", "alice") == "Generated branch name is empty"

    def test_wrong_prefix(self) -> None:
        assert (
            validate_branch_name("bob-issue-1-fix", "alice")
            == "Branch name does not start with required prefix: alice"
        )

    def test_prefix_must_be_followed_by_hyphen(self) -> None:
        reason = validate_branch_name("alicex-issue-1-fix", "alice")

        assert reason == "Branch name does not start with required prefix: alice"

    def test_invalid_characters(self) -> None:
        reason = validate_branch_name("alice-Issue-1", "alice")

        assert reason is not None
        assert "invalid characters" in reason

    def test_too_long(self) -> None:
        reason = validate_branch_name("alice-" + "a" * 45, "alice")

        assert reason == "Branch name exceeds maximum length of 50 characters"

    def test_empty_ticket_component_passes(self) -> None:
        branch_name = generate_branch_name("!!!", "fix", "alice")

        assert branch_name == "alice--fix"
        assert validate_branch_name(branch_name, "alice") is None

    def test_uppercase_username_is_rejected(self) -> None:
        branch_name = generate_branch_name("issue-1", "fix", "Alice")

        reason = validate_branch_name(branch_name, "Alice")

        assert reason is not None
        assert "invalid characters" in reason
