# ticketsort

Classic sorting algorithms and data structures, with two small interactive
ticket registries built on the same ideas. Pure Python, no dependencies.

## Modules

- `ticketsort.sorting`: `bubble_sort`, `selection_sort`, `insertion_sort`,
  `quick_sort` (last element as pivot) and `shell_sort` (3g+1 gaps). Each takes
  any iterable of integers and returns a new sorted list.
  `bubble_sort_counted` and `optimized_bubble_sort_counted` return the sorted
  list together with a `SortStats(comparisons, swaps)`. `list_insertion_sort`
  builds a descending list and reads it back in reverse. `random_values(count,
  upper=100, seed=None)` returns integers in `[0, upper)` and raises
  `ValueError` for a negative count or a non-positive upper bound.
- `ticketsort.linked`: `LinkedList` of integers built from an iterable, with
  `append`, `pop_front` (raises `IndexError` when empty), iteration, `len`,
  and in-place `merge_sort` (relinks nodes) and `shell_sort` (rewrites
  values). The helpers `merge_nodes(first, second)` and
  `split_after(head, count)` work on chains of `Node`.
- `ticketsort.avl`: `AVLTree` of `Person(name, age, cpf)` keyed by `cpf`.
  `insert` raises `DuplicateKeyError` on a repeated CPF; `remove` raises
  `KeyError` when the CPF is absent. Supports `in`, in-order iteration, `len`,
  `height()`, `balance_factor()` and a sideways text drawing via `render()`.
- `ticketsort.redblack`: red-black node building blocks only: `Color`,
  `RBNode` with `flip_colors()`, and `node_color` / `node_height`, which treat
  a missing node as black with height -1.
- `ticketsort.events`: `TicketRegistry` of `Ticket(name, cpf, date)` with
  `EventDate(day, month, year)`. Tickets are kept in ascending numeric CPF
  order; `add` raises `DuplicateTicketError` for a second ticket with the same
  CPF and date. `by_cpf` returns the first consecutive run of matching tickets,
  `sort_by_date` reorders by date, and `counts_by_date` sorts and returns
  `(date, count)` pairs.
- `ticketsort.box_office`: `SalesLedger` of `Sale(cpf, name, date)` with
  `ShowDate(day, month, year)`, kept in CPF order. `add` raises
  `AlreadyPurchasedError` when the CPF already bought for that date;
  `has_purchase` and `find_by_cpf` query it; `quick_sort_by_date`,
  `merge_sort_by_date` and `shell_sort_by_date` reorder it.
  `compare_dates(first, second)` returns the difference of the first differing
  field (year, month, day).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line programs

```
ticketsort-sort quick --size 10 --upper 100 --seed 1
ticketsort-avl
ticketsort-events
ticketsort-box-office
```

`ticketsort-sort` takes one algorithm name (`bubble`, `bubble-counted`,
`bubble-optimized`, `insertion`, `list`, `quick`, `selection`, `shell`),
generates random values and prints them before and after sorting; the counted
variants also print comparisons and swaps. The other three are menus read from
standard input and stop at option `0` or end of input. `ticketsort-events`
starts with a set of sample tickets already issued.

## Library use

```python
from ticketsort.linked import LinkedList

numbers = LinkedList([4, 2, 3, 6])
numbers.merge_sort()
print(list(numbers))  # [2, 3, 4, 6]
```

```python
from ticketsort.sorting import optimized_bubble_sort_counted

result, stats = optimized_bubble_sort_counted([3, 1, 2])
print(result, stats.comparisons, stats.swaps)
```

## Limitations

- `ticketsort.redblack` provides node colour and height helpers only; there is
  no red-black tree with insertion, deletion or rebalancing.
- The ticket registries and the AVL tree live in memory only; nothing is saved
  between runs of the interactive programs.