"""Contacts gateway: directory reads/writes, number blocking and contact navigation.

Stateless facade. Async operations are coroutines; awaiting one yields its
single result. Privileged operations check their capability before touching
any collaborator.
"""

import logging
from collections.abc import Callable

from dialer.application.dto import BatchResult
from dialer.application.errors import InvalidPhoneNumber, PermissionDenied
from dialer.application.ports import (
    CapabilityChecker,
    ContactDirectory,
    Navigator,
    NumberBlockList,
    PhoneAccountResolver,
)
from dialer.domain import Capability, Contact, NavigationRequest, ViewKind

logger = logging.getLogger(__name__)

CONTACTS_CONTENT_URI = "content://com.android.contacts/contacts"
CONTACT_MIME_TYPE = "vnd.android.cursor.dir/contact"
EXTRA_PHONE = "phone"
STARRED = "starred"


def contact_uri(contact_id: int) -> str:
    return f"{CONTACTS_CONTENT_URI}/{contact_id}"


class ContactsGateway:
    """Translates contact intents into directory, block-list and navigation calls."""

    def __init__(
        self,
        directory: ContactDirectory,
        accounts: PhoneAccountResolver,
        block_list: NumberBlockList,
        navigator: Navigator,
        capabilities: CapabilityChecker,
        *,
        normalize_number: Callable[[str | None], str],
    ) -> None:
        self._directory = directory
        self._accounts = accounts
        self._block_list = block_list
        self._navigator = navigator
        self._capabilities = capabilities
        self._normalize_number = normalize_number

    def _require(self, capability: Capability) -> None:
        if not self._capabilities.has(capability):
            logger.warning("Denied: %s not granted", capability.value)
            raise PermissionDenied(capability)

    async def fetch_contact(self, contact_id: int) -> Contact | None:
        """Return the contact with the given id, or None if there is none."""
        contacts = await self._directory.query(contact_id)
        return contacts[0] if contacts else None

    def delete_contact(self, contact_id: int) -> None:
        self._require(Capability.MODIFY_DIRECTORY)
        logger.info("Deleting contact %s", contact_id)
        self._directory.delete(contact_id)

    async def block_contact(
        self, contact_id: int, on_success: Callable[[], None] | None = None
    ) -> BatchResult:
        """Block every number of the contact, then call on_success once.

        Per-number failures do not stop the fan-out; they are collected in
        the returned BatchResult.
        """
        self._require(Capability.DEFAULT_DIALER)
        return await self._fan_out(contact_id, self._block_list.block, "block", on_success)

    async def unblock_contact(
        self, contact_id: int, on_success: Callable[[], None] | None = None
    ) -> BatchResult:
        """Unblock every number of the contact, then call on_success once."""
        return await self._fan_out(contact_id, self._block_list.unblock, "unblock", on_success)

    async def _fan_out(
        self,
        contact_id: int,
        action: Callable[[str], None],
        verb: str,
        on_success: Callable[[], None] | None,
    ) -> BatchResult:
        result = BatchResult()
        for account in await self._accounts.get_contact_accounts(contact_id) or []:
            try:
                action(account.number)
            except Exception as exc:
                logger.warning("Failed to %s %s: %s", verb, account.number, exc)
                result.failed[account.number] = exc
            else:
                result.succeeded.append(account.number)
        logger.info(
            "Contact %s: %s %d number(s), %d failed",
            contact_id,
            verb,
            len(result.succeeded),
            len(result.failed),
        )
        if on_success is not None:
            on_success()
        return result

    def toggle_contact_favorite(self, contact_id: int, is_favorite: bool) -> None:
        self._require(Capability.MODIFY_DIRECTORY)
        logger.info("Setting contact %s starred=%s", contact_id, is_favorite)
        self._directory.update(contact_id, {STARRED: bool(is_favorite)})

    async def get_is_contact_blocked(self, contact_id: int) -> bool:
        """True only when the contact has numbers and all of them are blocked."""
        accounts = await self._accounts.get_contact_accounts(contact_id)
        if not accounts:
            return False
        return all(self._block_list.is_blocked(a.number) for a in accounts)

    async def list_contacts(self) -> list[Contact]:
        return await self._directory.list_all()

    async def find_contacts_by_number(self, number: str) -> list[Contact]:
        """Return contacts owning the number. Blank input matches nothing."""
        if not number or not number.strip():
            return []
        return await self._directory.find_by_number(number.strip())

    async def get_caller_name(self, number: str) -> str | None:
        """Display name of the first contact owning the number, or None.

        Without READ_DIRECTORY it returns None without querying the directory.
        """
        if not self._capabilities.has(Capability.READ_DIRECTORY):
            logger.debug("Caller lookup skipped: read_directory not granted")
            return None
        for contact in await self.find_contacts_by_number(number):
            if contact.name:
                return contact.name
        return None

    def open_sms_view(self, number: str | None, *, ui_surface: bool = False) -> None:
        normalized = self._normalize_number(number)
        if not normalized:
            raise InvalidPhoneNumber(number)
        self._navigate(ViewKind.SEND_SMS, f"smsto:{normalized}", ui_surface)

    def open_contact_view(self, contact_id: int, *, ui_surface: bool = False) -> None:
        self._navigate(ViewKind.VIEW_CONTACT, contact_uri(contact_id), ui_surface)

    def open_add_contact_view(self, number: str, *, ui_surface: bool = False) -> None:
        self._navigate(
            ViewKind.INSERT_CONTACT,
            CONTACTS_CONTENT_URI,
            ui_surface,
            mime_type=CONTACT_MIME_TYPE,
            extras={EXTRA_PHONE: number},
        )

    def open_edit_contact_view(self, contact_id: int, *, ui_surface: bool = False) -> None:
        self._navigate(ViewKind.EDIT_CONTACT, contact_uri(contact_id), ui_surface)

    def _navigate(
        self,
        kind: ViewKind,
        target: str,
        ui_surface: bool,
        *,
        mime_type: str | None = None,
        extras: dict[str, str] | None = None,
    ) -> None:
        request = NavigationRequest(
            kind=kind,
            target=target,
            mime_type=mime_type,
            extras=extras or {},
            new_task=not ui_surface,
        )
        logger.debug("Navigating to %s (%s)", request.target, kind.value)
        self._navigator.start_view(request)
