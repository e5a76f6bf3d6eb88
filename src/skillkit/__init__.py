"""Automation helpers for agent-driven development workflows."""

__version__ = "0.1.0"
