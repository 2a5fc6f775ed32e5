"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Mapping
from typing import Protocol

from dialer.domain import Capability, Contact, NavigationRequest, PhoneAccount


class ContactDirectory(Protocol):
    """Read/write store of contact records."""

    async def query(self, contact_id: int) -> list[Contact]:
        """Return the contacts matching the id (zero or one in practice)."""
        ...

    def delete(self, contact_id: int) -> None:
        """Delete the contact with the given id. Missing ids are a no-op."""
        ...

    def update(self, contact_id: int, changes: Mapping[str, object]) -> None:
        """Apply field changes (e.g. {"starred": True}) to the contact."""
        ...

    async def list_all(self) -> list[Contact]:
        """Return all contacts ordered by id."""
        ...

    async def find_by_number(self, number: str) -> list[Contact]:
        """Return contacts owning the given (normalized) number."""
        ...


class PhoneAccountResolver(Protocol):
    async def get_contact_accounts(self, contact_id: int) -> list[PhoneAccount] | None:
        """Return the phone accounts of a contact, or None when it cannot be resolved."""
        ...


class NumberBlockList(Protocol):
    """Block/unblock state per phone number."""

    def block(self, number: str) -> None: ...

    def unblock(self, number: str) -> None: ...

    def is_blocked(self, number: str) -> bool: ...


class Navigator(Protocol):
    def start_view(self, request: NavigationRequest) -> None:
        """Ask the host environment to open the requested view."""
        ...


class CapabilityChecker(Protocol):
    def has(self, capability: Capability) -> bool: ...
