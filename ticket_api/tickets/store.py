from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4

from .locks import ReadWriteLock
from .models import Ticket, TicketDraft, TicketId, TicketPatch
from .state import TicketStatus
from .validation import TicketValidationError, validate_description, validate_title


class TicketStoreError(RuntimeError):
    """Base error for ticket store operations."""


class TicketNotFoundError(TicketStoreError):
    """Raised when an operation targets a ticket that does not exist."""

    def __init__(self, ticket_id: TicketId) -> None:
        super().__init__(f"Ticket with id {ticket_id} not found")
        self.ticket_id = ticket_id


class InvalidFieldError(TicketStoreError):
    """Raised when a patched field fails validation."""

    def __init__(self, field_name: str, reason: str) -> None:
        super().__init__(f"Invalid field: {field_name}: {reason}")
        self.field = field_name
        self.reason = reason


@dataclass(slots=True)
class _TicketSlot:
    ticket: Ticket
    lock: ReadWriteLock = field(default_factory=ReadWriteLock)


class TicketStore:
    """In-memory ticket collection with per-ticket locking.

    The structural lock guards the id -> slot mapping only and is always
    released before a slot lock is taken. Each slot lock guards the content of
    one ticket, so work on unrelated tickets never waits on each other.
    """

    def __init__(self) -> None:
        self._slots: dict[TicketId, _TicketSlot] = {}
        self._lock = ReadWriteLock()

    async def add_ticket(self, draft: TicketDraft) -> TicketId:
        ticket_id = uuid4()
        slot = _TicketSlot(
            Ticket(
                id=ticket_id,
                title=draft.title,
                description=draft.description,
                status=TicketStatus.initial_state(),
            )
        )
        async with self._lock.write():
            self._slots[ticket_id] = slot
        return ticket_id

    async def get_ticket(self, ticket_id: TicketId) -> Ticket:
        slot = await self._get_slot(ticket_id)
        async with slot.lock.read():
            return slot.ticket.copy()

    async def patch_ticket(self, ticket_id: TicketId, patch: TicketPatch) -> Ticket:
        """Apply ``patch`` to a ticket and return the updated copy.

        Fields are applied in order: title, description, status. A field that
        fails validation aborts the call and is not applied, but fields
        earlier in that order have already been written. Patching
        ``{"title": "C", "description": <too long>}`` therefore changes the
        title and raises :class:`InvalidFieldError` for the description.
        """

        slot = await self._get_slot(ticket_id)
        async with slot.lock.write():
            ticket = slot.ticket
            if patch.title is not None:
                try:
                    ticket.title = validate_title(patch.title)
                except TicketValidationError as exc:
                    raise InvalidFieldError("title", str(exc)) from exc

            if patch.description is not None:
                try:
                    ticket.description = validate_description(patch.description)
                except TicketValidationError as exc:
                    raise InvalidFieldError("description", str(exc)) from exc

            if patch.status is not None:
                ticket.status = patch.status

            return ticket.copy()

    async def list_tickets(self) -> list[Ticket]:
        async with self._lock.read():
            slots = list(self._slots.values())

        tickets: list[Ticket] = []
        for slot in slots:
            async with slot.lock.read():
                tickets.append(slot.ticket.copy())
        return tickets

    async def count(self) -> int:
        async with self._lock.read():
            return len(self._slots)

    async def _get_slot(self, ticket_id: TicketId) -> _TicketSlot:
        async with self._lock.read():
            slot = self._slots.get(ticket_id)
        if slot is None:
            raise TicketNotFoundError(ticket_id)
        return slot
