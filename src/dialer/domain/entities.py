"""Domain entities: Contact, PhoneAccount, NavigationRequest and capabilities."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class Capability(Enum):
    """Preconditions gating privileged gateway operations."""

    READ_DIRECTORY = "read_directory"
    MODIFY_DIRECTORY = "modify_directory"
    DEFAULT_DIALER = "default_dialer"


class ViewKind(Enum):
    """Kind of host view a navigation request targets."""

    SEND_SMS = "send_sms"
    VIEW_CONTACT = "view_contact"
    INSERT_CONTACT = "insert_contact"
    EDIT_CONTACT = "edit_contact"


@dataclass(frozen=True)
class Contact:
    """
    A directory record for a person.
    Owned by the contact directory; instances are snapshots of one query.
    """

    id: int
    name: str = ""
    starred: bool = False
    phone_numbers: tuple[str, ...] = ()

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError("Contact id must be an integer.")
        object.__setattr__(self, "name", (self.name or "").strip())
        object.__setattr__(self, "phone_numbers", tuple(self.phone_numbers))


@dataclass(frozen=True)
class PhoneAccount:
    """A phone number associated with exactly one contact."""

    contact_id: int
    number: str
    label: str | None = None

    def __post_init__(self):
        if not self.number or not self.number.strip():
            raise ValueError("PhoneAccount number must be non-empty.")


@dataclass(frozen=True)
class NavigationRequest:
    """
    A request for the host environment to open a view.
    new_task is set when the caller is not itself a UI surface, so the host
    starts the view without an existing UI stack.
    """

    kind: ViewKind
    target: str
    mime_type: str | None = None
    extras: Mapping[str, str] = field(default_factory=dict)
    new_task: bool = False
