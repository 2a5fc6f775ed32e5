"""Errors raised by the contacts gateway."""

from dialer.domain import Capability


class GatewayError(Exception):
    """Base class for gateway errors."""


class PermissionDenied(GatewayError):
    """A required capability or role is not granted."""

    def __init__(self, capability: Capability) -> None:
        super().__init__(f"Missing capability: {capability.value}")
        self.capability = capability


class InvalidPhoneNumber(GatewayError, ValueError):
    """A phone number has no dialable digits."""

    def __init__(self, number: str | None) -> None:
        super().__init__(f"Not a dialable phone number: {number!r}")
        self.number = number
