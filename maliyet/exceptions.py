"""Custom exception hierarchy for Maliyet."""

from __future__ import annotations


class MaliyetError(Exception):
    """Base exception for all Maliyet errors."""


class InvalidInputError(MaliyetError, ValueError):
    """Raised when an input is outside its defined set or range."""


class ScenarioError(MaliyetError):
    """Raised when a scenario set or comparison is used incorrectly."""
