"""A box-office ledger of show tickets with three ways to sort sales by date."""

from __future__ import annotations

import argparse
import bisect
import functools
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@functools.total_ordering
@dataclass(frozen=True)
class ShowDate:
    """The date of a show, ordered by year, then month, then day."""

    day: int
    month: int
    year: int

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ShowDate):
            return NotImplemented
        return compare_dates(self, other) < 0

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


@dataclass(frozen=True)
class Sale:
    """One ticket bought by a buyer, identified by CPF, for a show date."""

    cpf: str
    name: str
    date: ShowDate


class AlreadyPurchasedError(ValueError):
    """Raised when a CPF already bought a ticket for the same show date."""

    def __init__(self, sale: Sale) -> None:
        super().__init__(f"CPF {sale.cpf} already bought a ticket for {sale.date}")
        self.sale = sale


def compare_dates(first: ShowDate, second: ShowDate) -> int:
    """Negative, zero or positive as ``first`` is before, equal to or after ``second``.

    The result is the difference of the first field (year, month, day) that differs.
    """
    if first.year != second.year:
        return first.year - second.year
    if first.month != second.month:
        return first.month - second.month
    return first.day - second.day


def _quick_sort(sales: list[Sale]) -> None:
    pending = [(0, len(sales) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = sales[high]
        boundary = low - 1
        for index in range(low, high):
            if compare_dates(sales[index].date, pivot.date) <= 0:
                boundary += 1
                sales[index], sales[boundary] = sales[boundary], sales[index]
        boundary += 1
        sales[boundary], sales[high] = sales[high], sales[boundary]
        pending.append((low, boundary - 1))
        pending.append((boundary + 1, high))


def _merge(left: list[Sale], right: list[Sale]) -> list[Sale]:
    merged: list[Sale] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if compare_dates(left[li].date, right[ri].date) < 0:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def _merge_sort(sales: list[Sale]) -> list[Sale]:
    if len(sales) <= 1:
        return list(sales)
    middle = (len(sales) + 1) // 2
    return _merge(_merge_sort(sales[:middle]), _merge_sort(sales[middle:]))


def _shell_sort(sales: list[Sale]) -> None:
    size = len(sales)
    gap = 1
    while gap < size // 3:
        gap = gap * 3 + 1
    while gap >= 1:
        for index in range(gap, size):
            key = sales[index]
            slot = index
            while slot >= gap and compare_dates(sales[slot - gap].date, key.date) > 0:
                sales[slot] = sales[slot - gap]
                slot -= gap
            sales[slot] = key
        gap //= 3


class SalesLedger:
    """Sales kept in CPF order, at most one per CPF and show date."""

    def __init__(self) -> None:
        self._sales: list[Sale] = []

    def has_purchase(self, cpf: str, date: ShowDate) -> bool:
        """Whether ``cpf`` already bought a ticket for ``date``."""
        return any(sale.cpf == cpf and sale.date == date for sale in self._sales)

    def add(self, sale: Sale) -> None:
        """Insert ``sale`` in CPF order.

        A CPF not greater than the first one goes to the front; otherwise the
        sale goes after every sale whose CPF is not greater than its own.
        Raises :class:`AlreadyPurchasedError` on a repeated CPF and date.
        """
        if self.has_purchase(sale.cpf, sale.date):
            raise AlreadyPurchasedError(sale)
        if not self._sales or sale.cpf <= self._sales[0].cpf:
            self._sales.insert(0, sale)
            return
        cpfs = [existing.cpf for existing in self._sales]
        self._sales.insert(bisect.bisect_right(cpfs, sale.cpf), sale)

    def find_by_cpf(self, cpf: str) -> list[Sale]:
        """Every sale made to ``cpf``, in ledger order."""
        return [sale for sale in self._sales if sale.cpf == cpf]

    def quick_sort_by_date(self) -> None:
        """Reorder by date with quicksort, the last sale of a range as pivot."""
        _quick_sort(self._sales)

    def merge_sort_by_date(self) -> None:
        """Reorder by date with merge sort; on equal dates the right half goes first."""
        self._sales = _merge_sort(self._sales)

    def shell_sort_by_date(self) -> None:
        """Reorder by date with shell sort over the 3g+1 gap sequence."""
        _shell_sort(self._sales)

    def __iter__(self) -> Iterator[Sale]:
        return iter(list(self._sales))

    def __len__(self) -> int:
        return len(self._sales)


_MENU = (
    "\nMenu"
    "\n1 - Insert"
    "\n2 - Print list"
    "\n3 - Find tickets by CPF"
    "\n4 - Sort by date (quick)"
    "\n5 - Sort by date (merge)"
    "\n6 - Sort by date (shell)"
    "\n0 - Exit"
)


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt))
    except ValueError:
        return None


def _read_sale() -> Sale | None:
    cpf = input("Buyer's CPF: ").strip()
    name = input("Buyer's name: ").strip()
    fields = input("Show date (day month year): ").split()
    try:
        day, month, year = (int(field) for field in fields)
    except ValueError:
        return None
    return Sale(cpf, name, ShowDate(day, month, year))


def _insert(ledger: SalesLedger) -> None:
    while True:
        sale = _read_sale()
        if sale is None:
            print("\nInvalid date.")
            continue
        try:
            ledger.add(sale)
            return
        except AlreadyPurchasedError:
            print("\nYou already bought this ticket!\n")


def _print_cpfs(ledger: SalesLedger) -> None:
    for sale in ledger:
        print(sale.cpf)


def _search(ledger: SalesLedger) -> None:
    cpf = input("CPF of the tickets to find: ").strip()
    for sale in ledger.find_by_cpf(cpf):
        print(f"\nname: {sale.name}\ndate: {sale.date}")


def _print_years(ledger: SalesLedger) -> None:
    for sale in ledger:
        print(sale.date.year)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive box-office menu."""
    argparse.ArgumentParser(description="Sell show tickets and sort them by date.").parse_args(argv)
    ledger = SalesLedger()
    sorters = {
        4: ledger.quick_sort_by_date,
        5: ledger.merge_sort_by_date,
        6: ledger.shell_sort_by_date,
    }
    while True:
        print(_MENU)
        try:
            choice = _read_int("Choice: ")
            if choice == 0:
                return 0
            if choice == 1:
                _insert(ledger)
            elif choice == 2:
                _print_cpfs(ledger)
            elif choice == 3:
                _search(ledger)
            elif choice in sorters:
                sorters[choice]()
                _print_years(ledger)
        except EOFError:
            return 0