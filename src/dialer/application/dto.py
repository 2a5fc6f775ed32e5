"""Result DTOs returned by the gateway."""

from dataclasses import dataclass, field


@dataclass
class BatchResult:
    """Outcome of a block/unblock fan-out over a contact's numbers."""

    succeeded: list[str] = field(default_factory=list)
    failed: dict[str, Exception] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed
