"""Event tickets kept in a CPF-ordered registry that can be re-sorted by date."""

from __future__ import annotations

import argparse
import functools
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import dropwhile, takewhile

_NAME_LIMIT = 49
_CPF_LIMIT = 12
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@functools.total_ordering
@dataclass(frozen=True)
class EventDate:
    """A calendar date of an event, ordered by year, then month, then day."""

    day: int
    month: int
    year: int

    @property
    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EventDate):
            return NotImplemented
        return self._key < other._key

    def __str__(self) -> str:
        return f"{self.day:02d} / {self.month:02d} / {self.year:04d}"


@dataclass(frozen=True)
class Ticket:
    """A ticket issued to a buyer for an event date."""

    name: str
    cpf: str
    date: EventDate

    def cpf_number(self) -> int:
        """The CPF read as a number from its leading digits; 0 if it has none."""
        match = _LEADING_INT.match(self.cpf)
        return int(match.group(1)) if match else 0


class DuplicateTicketError(ValueError):
    """Raised when a CPF already holds a ticket for the same date."""

    def __init__(self, ticket: Ticket) -> None:
        super().__init__(f"CPF {ticket.cpf} already has a ticket for {ticket.date}")
        self.ticket = ticket


def _booking(ticket: Ticket) -> tuple[int, EventDate]:
    return (ticket.cpf_number(), ticket.date)


def _quick_sort_by_date(tickets: Sequence[Ticket]) -> list[Ticket]:
    """Quicksort with the last ticket as pivot; later-dated tickets are moved past it."""
    result: list[Ticket] = []
    pending: list[list[Ticket]] = [list(tickets)]
    while pending:
        segment = pending.pop()
        if len(segment) <= 1:
            result.extend(segment)
            continue
        pivot = segment[-1]
        pivot_key = _booking(pivot)
        kept: list[Ticket] = []
        moved: list[Ticket] = []
        for position, ticket in enumerate(segment):
            if _booking(ticket) == pivot_key:
                kept.extend(segment[position:-1])
                break
            (moved if ticket.date > pivot.date else kept).append(ticket)
        pending.append(moved[::-1])
        pending.append([pivot])
        pending.append(kept)
    return result


class TicketRegistry:
    """Tickets kept in ascending CPF order, one per CPF and date."""

    def __init__(self) -> None:
        self._tickets: list[Ticket] = []

    def add(self, ticket: Ticket) -> None:
        """Insert ``ticket`` before the first ticket with a larger CPF.

        Raises :class:`DuplicateTicketError` if a ticket with the same CPF and
        date is met before the insertion point.
        """
        key = _booking(ticket)
        number = ticket.cpf_number()
        for index, existing in enumerate(self._tickets):
            if _booking(existing) == key:
                raise DuplicateTicketError(ticket)
            if number < existing.cpf_number():
                self._tickets.insert(index, ticket)
                return
        self._tickets.append(ticket)

    def by_cpf(self, cpf: str) -> list[Ticket]:
        """The first consecutive run of tickets whose CPF number matches ``cpf``."""
        wanted = Ticket("", cpf, EventDate(0, 0, 0)).cpf_number()

        def matches(ticket: Ticket) -> bool:
            return ticket.cpf_number() == wanted

        return list(takewhile(matches, dropwhile(lambda t: not matches(t), self._tickets)))

    def sort_by_date(self) -> None:
        """Reorder the tickets by event date."""
        self._tickets = _quick_sort_by_date(self._tickets)

    def counts_by_date(self) -> list[tuple[EventDate, int]]:
        """Sort by date, then return each date with the number of its tickets."""
        self.sort_by_date()
        counts: list[tuple[EventDate, int]] = []
        for ticket in self._tickets:
            if counts and counts[-1][0] == ticket.date:
                counts[-1] = (ticket.date, counts[-1][1] + 1)
            else:
                counts.append((ticket.date, 1))
        return counts

    def __iter__(self) -> Iterator[Ticket]:
        return iter(list(self._tickets))

    def __len__(self) -> int:
        return len(self._tickets)


_SAMPLE = (
    ("001", (17, 2, 2024)),
    ("011", (17, 2, 2024)),
    ("031", (17, 2, 2024)),
    ("011", (19, 2, 2024)),
    ("021", (15, 2, 2024)),
    ("031", (16, 2, 2024)),
    ("041", (9, 2, 2024)),
    ("021", (6, 2, 2024)),
    ("031", (6, 2, 2024)),
    ("051", (6, 2, 2024)),
    ("081", (6, 2, 2024)),
    ("001", (7, 2, 2024)),
    ("001", (10, 2, 2024)),
)

_MENU = (
    "\n#   MENU    #\n\n"
    "1. Issue a new ticket.\n"
    "2. Find tickets by CPF.\n"
    "3. Number of tickets per date.\n"
    "0. Exit.\n"
)


def _format_ticket(ticket: Ticket) -> str:
    return f"\nName: {ticket.name}.\nCPF: {ticket.cpf}.\nDate: {ticket.date}\n"


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt))
    except ValueError:
        return None


def _read_ticket() -> Ticket | None:
    name = input("\nName: ").strip()[:_NAME_LIMIT]
    cpf = input("CPF: ").strip()[:_CPF_LIMIT]
    print("\nEvent date:")
    day = _read_int("Day: ")
    month = _read_int("Month: ")
    year = _read_int("Year: ")
    if day is None or month is None or year is None:
        return None
    return Ticket(name, cpf, EventDate(day, month, year))


def _issue(registry: TicketRegistry) -> None:
    ticket = _read_ticket()
    if ticket is None:
        print("\nInvalid date.")
        return
    try:
        registry.add(ticket)
    except DuplicateTicketError:
        print(f"\nCould not issue a new ticket for the date:\n{ticket.date}")


def _search(registry: TicketRegistry) -> None:
    cpf = input("\nCPF: ").strip()[:_CPF_LIMIT]
    for ticket in registry.by_cpf(cpf):
        print(_format_ticket(ticket), end="")


def _report(registry: TicketRegistry) -> None:
    if not len(registry):
        print("\nNo tickets have been issued.")
        return
    print("\nEach date followed by the number of tickets issued:\n")
    for date, count in registry.counts_by_date():
        print(f"{date} - {count}.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive ticket menu over a registry seeded with sample tickets."""
    argparse.ArgumentParser(description="Issue and report event tickets.").parse_args(argv)
    registry = TicketRegistry()
    for cpf, (day, month, year) in _SAMPLE:
        registry.add(Ticket("aa", cpf, EventDate(day, month, year)))

    actions = {1: _issue, 2: _search, 3: _report}
    while True:
        print(_MENU)
        try:
            choice = _read_int("Option: ")
            if choice == 0:
                return 0
            action = actions.get(choice) if choice is not None else None
            if action is None:
                print("\nERROR.")
            else:
                action(registry)
        except EOFError:
            return 0