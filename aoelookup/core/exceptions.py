"""Exception hierarchy for the lookup service."""

from __future__ import annotations


class AoeLookupError(Exception):
    """Base class for all service errors."""


class FetchFailed(AoeLookupError):
    """The upstream player lookup could not be completed."""


class PlayerNotFound(FetchFailed):
    """No player exists for the requested profile id."""


class InvalidTransition(AoeLookupError):
    """The event is not valid in the current search state."""


class SessionClosed(InvalidTransition):
    """The search session was torn down."""


__all__ = [
    "AoeLookupError",
    "FetchFailed",
    "InvalidTransition",
    "PlayerNotFound",
    "SessionClosed",
]
