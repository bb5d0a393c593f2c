from __future__ import annotations

from dataclasses import dataclass, replace
from uuid import UUID

from .state import TicketStatus
from .validation import TicketDescription, TicketTitle

TicketId = UUID


@dataclass(slots=True)
class Ticket:
    """A ticket as held by the store."""

    id: TicketId
    title: TicketTitle
    description: TicketDescription
    status: TicketStatus

    def copy(self) -> Ticket:
        return replace(self)


@dataclass(frozen=True, slots=True)
class TicketDraft:
    """Validated content for a ticket that does not exist yet."""

    title: TicketTitle
    description: TicketDescription


@dataclass(frozen=True, slots=True)
class TicketPatch:
    """Partial update. Title and description are validated when applied."""

    title: str | None = None
    description: str | None = None
    status: TicketStatus | None = None
