"""Exceptions raised by the viewer service layer."""
from __future__ import annotations


class ViewerError(RuntimeError):
    """Base class for rejected viewer commands."""


class NotFound(ViewerError, LookupError):
    """Raised when an author, item or session id is not part of the viewer."""


class SessionNotFound(NotFound):
    """Raised when a viewer session id is unknown to the registry."""


class InvalidDuration(ViewerError, ValueError):
    """Raised when a collection holds an item whose duration is not positive."""


class SessionLimitReached(ViewerError):
    """Raised when the registry already holds the configured number of sessions."""


__all__ = [
    "ViewerError",
    "NotFound",
    "SessionNotFound",
    "InvalidDuration",
    "SessionLimitReached",
]
