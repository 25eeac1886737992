"""
promohub.services.errors — Service-Layer Exceptions
====================================================

Raised by the service modules and translated to HTTP status codes in
:mod:`promohub.api.routes`.  Data-access failures are not wrapped; they
propagate as SQLAlchemy exceptions.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base class for expected service-layer failures."""


class InvalidBoosterKey(ServiceError, ValueError):
    """The booster key does not exist in the catalog."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Invalid boosterKey: {key!r}")
        self.key = key


class BoosterNotCompleted(ServiceError):
    """Meta can only be edited on a completed booster."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Booster {key!r} is not completed")
        self.key = key


class NotFound(ServiceError, LookupError):
    """A referenced row could not be resolved."""


class UserNotFound(NotFound):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class CampaignNotFound(NotFound):
    def __init__(self, campaign_id: str) -> None:
        super().__init__(f"Campaign not found: {campaign_id}")
        self.campaign_id = campaign_id
