import math

import pytest

from ticketsort.avl import AVLTree, DuplicateKeyError, Person, main


def _tree(cpfs):
    tree = AVLTree()
    for cpf in cpfs:
        tree.insert(Person(f"p{cpf}", 30, cpf))
    return tree


def _assert_balanced(tree):
    n = len(tree)
    if n:
        assert tree.height() <= 1.45 * math.log2(n + 2)
    assert tree.balance_factor() in (-1, 0, 1)


def test_empty_tree():
    tree = AVLTree()
    assert len(tree) == 0
    assert tree.height() == -1
    assert tree.balance_factor() == 0
    assert list(tree) == []


def test_ascending_inserts_stay_balanced():
    tree = _tree(range(1, 8))
    assert [p.cpf for p in tree] == list(range(1, 8))
    assert tree.height() == 2
    _assert_balanced(tree)


@pytest.mark.parametrize("order", [range(100), range(100, 0, -1), [50, 10, 90, 30, 70, 20, 80, 5]])
def test_inorder_sorted_and_balanced(order):
    tree = _tree(order)
    assert [p.cpf for p in tree] == sorted(order)
    assert len(tree) == len(list(order))
    _assert_balanced(tree)


def test_duplicate_insert_raises_and_keeps_tree():
    tree = _tree([3, 1, 2])
    with pytest.raises(DuplicateKeyError):
        tree.insert(Person("other", 40, 2))
    assert len(tree) == 3
    assert [p.name for p in tree] == ["p1", "p2", "p3"]


def test_contains():
    tree = _tree([10, 20, 5])
    assert 20 in tree
    assert 7 not in tree


def test_remove_leaf_one_child_and_two_children():
    tree = _tree([50, 30, 70, 20, 40, 60, 80, 10])
    tree.remove(10)
    tree.remove(20)
    tree.remove(50)
    assert [p.cpf for p in tree] == [30, 40, 60, 70, 80]
    assert 50 not in tree
    assert len(tree) == 5
    _assert_balanced(tree)


def test_remove_many_stays_balanced():
    tree = _tree(range(64))
    for cpf in range(0, 64, 2):
        tree.remove(cpf)
    assert [p.cpf for p in tree] == list(range(1, 64, 2))
    _assert_balanced(tree)


def test_remove_missing_raises():
    tree = _tree([1, 2])
    with pytest.raises(KeyError):
        tree.remove(99)
    assert len(tree) == 2


def test_render_lists_every_person():
    tree = AVLTree()
    tree.insert(Person("Ana", 21, 5))
    tree.insert(Person("Bia", 33, 9))
    text = tree.render()
    assert "Name: Ana" in text
    assert "CPF: 9" in text
    assert "Age: 33" in text
    assert text.index("Bia") < text.index("Ana")
    assert text.endswith(f"Balance factor: {tree.balance_factor()}")


def test_main_insert_and_print(monkeypatch, capsys):
    answers = iter(["1", "Ana", "5", "21", "3", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Name: Ana" in out


def test_main_remove_missing_reports(monkeypatch, capsys):
    answers = iter(["2", "7", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    assert "Value not found!" in capsys.readouterr().out