"""Application layer: use cases, ports, errors and DTOs. Depends only on domain."""

from dialer.application.contacts_gateway import ContactsGateway
from dialer.application.dto import BatchResult
from dialer.application.errors import GatewayError, InvalidPhoneNumber, PermissionDenied
from dialer.application.ports import (
    CapabilityChecker,
    ContactDirectory,
    Navigator,
    NumberBlockList,
    PhoneAccountResolver,
)

__all__ = [
    "BatchResult",
    "CapabilityChecker",
    "ContactDirectory",
    "ContactsGateway",
    "GatewayError",
    "InvalidPhoneNumber",
    "Navigator",
    "NumberBlockList",
    "PermissionDenied",
    "PhoneAccountResolver",
]
