"""Domain layer: entities and value objects. No dependencies on outer layers."""

from dialer.domain.entities import (
    Capability,
    Contact,
    NavigationRequest,
    PhoneAccount,
    ViewKind,
)

__all__ = ["Capability", "Contact", "NavigationRequest", "PhoneAccount", "ViewKind"]
