"""In-memory implementations of the directory, resolver and block-list ports (no DB)."""

from collections.abc import Iterable, Mapping
from dataclasses import replace

from dialer.domain import Contact, PhoneAccount
from dialer.infrastructure.phone import number_key, numbers_match

_UPDATABLE_FIELDS = frozenset({"name", "starred"})


class InMemoryContactDirectory:
    """Stores contacts in a dict keyed by id. Returns snapshots, never live objects."""

    def __init__(
        self,
        contacts: Iterable[Contact] = (),
        *,
        default_region: str | None = None,
    ) -> None:
        self._by_id: dict[int, Contact] = {}
        self._default_region = default_region
        for contact in contacts:
            self.add(contact)

    def add(self, contact: Contact) -> None:
        self._by_id[contact.id] = contact

    async def query(self, contact_id: int) -> list[Contact]:
        contact = self._by_id.get(contact_id)
        return [contact] if contact is not None else []

    def delete(self, contact_id: int) -> None:
        self._by_id.pop(contact_id, None)

    def update(self, contact_id: int, changes: Mapping[str, object]) -> None:
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update contact fields: {sorted(unknown)}")
        contact = self._by_id.get(contact_id)
        if contact is None:
            return
        self._by_id[contact_id] = replace(contact, **changes)

    async def list_all(self) -> list[Contact]:
        return [self._by_id[cid] for cid in sorted(self._by_id)]

    async def find_by_number(self, number: str) -> list[Contact]:
        key = number_key(number, self._default_region)
        if key is None:
            return []
        return [
            contact
            for contact in await self.list_all()
            if any(numbers_match(number, n, self._default_region) for n in contact.phone_numbers)
        ]

    def accounts_for(self, contact_id: int) -> list[PhoneAccount] | None:
        """Phone accounts of a stored contact, or None if the id is unknown."""
        contact = self._by_id.get(contact_id)
        if contact is None:
            return None
        return [PhoneAccount(contact_id=contact.id, number=n) for n in contact.phone_numbers]


class InMemoryPhoneAccountResolver:
    """Resolves accounts from the numbers stored on InMemoryContactDirectory contacts."""

    def __init__(self, directory: InMemoryContactDirectory) -> None:
        self._directory = directory

    async def get_contact_accounts(self, contact_id: int) -> list[PhoneAccount] | None:
        return self._directory.accounts_for(contact_id)


class InMemoryNumberBlockList:
    """Set of blocked numbers. Blocking twice or unblocking an absent number is a no-op."""

    def __init__(self, blocked: Iterable[str] = ()) -> None:
        self._blocked: set[str] = set(blocked)

    def block(self, number: str) -> None:
        self._blocked.add(number)

    def unblock(self, number: str) -> None:
        self._blocked.discard(number)

    def is_blocked(self, number: str) -> bool:
        return number in self._blocked

    def blocked_numbers(self) -> set[str]:
        return set(self._blocked)
