from __future__ import annotations

from enum import Enum


class TicketStatus(str, Enum):
    """Workflow states a ticket can be in."""

    TODO = "ToDo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    @classmethod
    def initial_state(cls) -> TicketStatus:
        return cls.TODO

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[TicketStatus, str] = {
    TicketStatus.TODO: "To Do",
    TicketStatus.IN_PROGRESS: "In Progress",
    TicketStatus.DONE: "Done",
}
