"""Host-facing adapters: capability grants and a navigator that records requests."""

import logging
from collections.abc import Iterable

from dialer.domain import Capability, NavigationRequest

logger = logging.getLogger(__name__)


class StaticCapabilities:
    """Capabilities granted up front by the host, adjustable at runtime."""

    def __init__(self, granted: Iterable[Capability] = ()) -> None:
        self._granted: set[Capability] = set(granted)

    def has(self, capability: Capability) -> bool:
        return capability in self._granted

    def grant(self, capability: Capability) -> None:
        self._granted.add(capability)

    def revoke(self, capability: Capability) -> None:
        self._granted.discard(capability)


class RecordingNavigator:
    """Keeps navigation requests in order instead of opening real views."""

    def __init__(self) -> None:
        self.requests: list[NavigationRequest] = []

    def start_view(self, request: NavigationRequest) -> None:
        logger.info("View requested: %s %s", request.kind.value, request.target)
        self.requests.append(request)

    @property
    def last(self) -> NavigationRequest | None:
        return self.requests[-1] if self.requests else None
