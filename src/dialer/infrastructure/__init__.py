"""Infrastructure layer: concrete implementations of application ports."""

from dialer.infrastructure.host import RecordingNavigator, StaticCapabilities
from dialer.infrastructure.memory_directory import (
    InMemoryContactDirectory,
    InMemoryNumberBlockList,
    InMemoryPhoneAccountResolver,
)
from dialer.infrastructure.persistence.neo4j_directory import (
    Neo4jContactDirectory,
    Neo4jNumberBlockList,
    Neo4jPhoneAccountResolver,
    ensure_directory_constraints,
)
from dialer.infrastructure.phone import normalize_dialable, normalize_phone, number_key

__all__ = [
    "InMemoryContactDirectory",
    "InMemoryNumberBlockList",
    "InMemoryPhoneAccountResolver",
    "Neo4jContactDirectory",
    "Neo4jNumberBlockList",
    "Neo4jPhoneAccountResolver",
    "RecordingNavigator",
    "StaticCapabilities",
    "ensure_directory_constraints",
    "normalize_dialable",
    "normalize_phone",
    "number_key",
]
