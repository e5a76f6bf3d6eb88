"""Output utilities for CLI commands with clear intent.

Two channels:
- user_output: human-readable diagnostics, routed to stderr
- machine_output: data for programmatic consumers, routed to stdout

Keeping the channels separate lets callers capture stdout (a branch name or a
JSON document) without filtering progress text out of it.
"""

import json
from typing import Any

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write machine-readable data to stdout."""
    click.echo(message, nl=nl)


def emit_json(data: dict[str, Any]) -> None:
    """Output a JSON document on stdout for machine consumption.

    For Pydantic models, call model.model_dump(mode="json") before
    passing to this function.
    """
    machine_output(json.dumps(data, indent=2))
