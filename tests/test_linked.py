import pytest

from ticketsort.linked import LinkedList, Node, merge_nodes, split_after
from ticketsort.sorting import random_values


def _values(head):
    result = []
    while head is not None:
        result.append(head.value)
        head = head.next
    return result


def _chain(values):
    return LinkedList(values).head


SAMPLES = [
    [],
    [1],
    [4, 2, 3, 6],
    [18, 15, 17, 9, 13],
    [9, 9, 1, 1, 5],
    list(range(12, 0, -1)),
]


def test_append_and_iterate_round_trip():
    values = [18, 15, 17, 9, 13]
    linked = LinkedList()
    for value in values:
        linked.append(value)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_pop_front_returns_values_in_order():
    values = [4, 2, 3, 6]
    linked = LinkedList(values)
    popped = [linked.pop_front() for _ in range(len(values))]
    assert popped == values
    assert len(linked) == 0
    assert list(linked) == []


def test_pop_front_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_append_after_emptying():
    linked = LinkedList([1, 2])
    linked.pop_front()
    linked.pop_front()
    linked.append(7)
    linked.append(8)
    assert list(linked) == [7, 8]


@pytest.mark.parametrize("values", SAMPLES)
def test_merge_sort_sorts(values):
    linked = LinkedList(values)
    linked.merge_sort()
    assert list(linked) == sorted(values)
    assert len(linked) == len(values)


def test_merge_sort_relinks_same_nodes_and_keeps_tail():
    values = random_values(40, 20, seed=2)
    linked = LinkedList(values)
    before = {id(node) for node in linked._nodes()}
    linked.merge_sort()
    assert {id(node) for node in linked._nodes()} == before
    linked.append(-1)
    assert list(linked) == sorted(values) + [-1]


@pytest.mark.parametrize("values", SAMPLES)
def test_shell_sort_sorts(values):
    linked = LinkedList(values)
    linked.shell_sort()
    assert list(linked) == sorted(values)


def test_shell_sort_random():
    values = random_values(100, 1000, seed=5)
    linked = LinkedList(values)
    linked.shell_sort()
    assert list(linked) == sorted(values)


def test_merge_nodes_merges_sorted_chains():
    first = [1, 4, 9, 12]
    second = [2, 3, 10]
    merged = merge_nodes(_chain(first), _chain(second))
    assert _values(merged) == sorted(first + second)


def test_merge_nodes_with_empty_side():
    chain = _chain([3, 5])
    assert merge_nodes(None, chain) is chain
    assert merge_nodes(chain, None) is chain
    assert merge_nodes(None, None) is None


def test_merge_nodes_prefers_second_on_ties():
    a = Node(5)
    b = Node(5)
    merged = merge_nodes(a, b)
    assert merged is b
    assert merged.next is a


def test_split_after_cuts_chain():
    values = [10, 20, 30, 40, 50]
    head = _chain(values)
    rest = split_after(head, 2)
    assert _values(head) == values[:2]
    assert _values(rest) == values[2:]


def test_split_after_past_end_returns_none():
    values = [1, 2, 3]
    head = _chain(values)
    assert split_after(head, 10) is None
    assert _values(head) == values


def test_split_after_zero_leaves_chain_whole():
    values = [1, 2, 3]
    head = _chain(values)
    assert split_after(head, 0) is None
    assert _values(head) == values


def test_split_after_empty_chain_raises():
    with pytest.raises(ValueError):
        split_after(None, 1)