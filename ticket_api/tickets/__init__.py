"""Ticket domain models and the concurrent ticket store."""

from .locks import ReadWriteLock
from .models import Ticket, TicketDraft, TicketId, TicketPatch
from .state import TicketStatus
from .store import InvalidFieldError, TicketNotFoundError, TicketStore, TicketStoreError
from .validation import (
    DescriptionTooLongError,
    EmptyTitleError,
    TicketDescription,
    TicketTitle,
    TicketValidationError,
    TitleTooLongError,
    validate_description,
    validate_title,
)

__all__ = [
    "DescriptionTooLongError",
    "EmptyTitleError",
    "InvalidFieldError",
    "ReadWriteLock",
    "Ticket",
    "TicketDescription",
    "TicketDraft",
    "TicketId",
    "TicketNotFoundError",
    "TicketPatch",
    "TicketStatus",
    "TicketStore",
    "TicketStoreError",
    "TicketTitle",
    "TicketValidationError",
    "TitleTooLongError",
    "validate_description",
    "validate_title",
]
