"""Validated field values for tickets.

Lengths are measured in UTF-8 bytes, so a title made of multi-byte characters
reaches the limit sooner than its character count suggests.
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 1000

# Unicode White_Space. Unlike str.isspace(), U+001C..U+001F are not blank.
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class TicketValidationError(ValueError):
    """Base error for values that cannot become part of a ticket."""


class EmptyTitleError(TicketValidationError):
    """Raised when a title is empty or only whitespace."""

    def __init__(self) -> None:
        super().__init__("Title cannot be empty")


class TitleTooLongError(TicketValidationError):
    """Raised when a title exceeds the maximum length."""

    def __init__(self) -> None:
        super().__init__(f"Title cannot be longer than {MAX_TITLE_LENGTH} characters")


class DescriptionTooLongError(TicketValidationError):
    """Raised when a description exceeds the maximum length."""

    def __init__(self) -> None:
        super().__init__(f"Description cannot be longer than {MAX_DESCRIPTION_LENGTH} characters")


def _encoded_length(text: str) -> int:
    return len(text.encode("utf-8"))


@dataclass(frozen=True, slots=True)
class TicketTitle:
    """Non-empty ticket title. The untrimmed input is kept as the value."""

    value: str

    def __post_init__(self) -> None:
        if not self.value.strip(_WHITESPACE):
            raise EmptyTitleError()
        if _encoded_length(self.value) > MAX_TITLE_LENGTH:
            raise TitleTooLongError()


@dataclass(frozen=True, slots=True)
class TicketDescription:
    """Free-form ticket description, possibly empty."""

    value: str

    def __post_init__(self) -> None:
        if _encoded_length(self.value) > MAX_DESCRIPTION_LENGTH:
            raise DescriptionTooLongError()


def validate_title(raw: str) -> TicketTitle:
    return TicketTitle(raw)


def validate_description(raw: str) -> TicketDescription:
    return TicketDescription(raw)
