"""
Dialer contacts gateway: clean-architecture layout.

- domain: entities (Contact, PhoneAccount, NavigationRequest). No outer dependencies.
- application: the ContactsGateway use case, ports, errors and DTOs.
- infrastructure: adapters (in-memory and Neo4j directory, block list, resolver).
"""

from dialer.application import (
    BatchResult,
    ContactsGateway,
    GatewayError,
    InvalidPhoneNumber,
    PermissionDenied,
)
from dialer.domain import Capability, Contact, NavigationRequest, PhoneAccount, ViewKind
from dialer.infrastructure import (
    InMemoryContactDirectory,
    InMemoryNumberBlockList,
    InMemoryPhoneAccountResolver,
    Neo4jContactDirectory,
    Neo4jNumberBlockList,
    Neo4jPhoneAccountResolver,
    RecordingNavigator,
    StaticCapabilities,
)

__all__ = [
    "BatchResult",
    "Capability",
    "Contact",
    "ContactsGateway",
    "GatewayError",
    "InMemoryContactDirectory",
    "InMemoryNumberBlockList",
    "InMemoryPhoneAccountResolver",
    "InvalidPhoneNumber",
    "NavigationRequest",
    "Neo4jContactDirectory",
    "Neo4jNumberBlockList",
    "Neo4jPhoneAccountResolver",
    "PermissionDenied",
    "PhoneAccount",
    "RecordingNavigator",
    "StaticCapabilities",
    "ViewKind",
]
