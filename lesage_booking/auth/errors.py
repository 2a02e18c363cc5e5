"""Errors raised by the login and password flows."""

from __future__ import annotations


class FlowError(Exception):
    """A user-facing flow failed; ``str(exc)`` is the message to display."""


class ValidationError(FlowError):
    """Form input was rejected before contacting the backend."""
