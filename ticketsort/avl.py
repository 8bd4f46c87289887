"""A self-balancing AVL tree of people keyed by CPF."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass
class Person:
    """A person stored in the tree; ``cpf`` is the key."""

    name: str
    age: int
    cpf: int


class DuplicateKeyError(KeyError):
    """Raised when inserting a person whose CPF is already in the tree."""


@dataclass(eq=False)
class _Node:
    person: Person
    left: _Node | None = None
    right: _Node | None = None
    height: int = 0


def _height(node: _Node | None) -> int:
    return -1 if node is None else node.height


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_left(root: _Node) -> _Node:
    pivot = root.right
    assert pivot is not None
    root.right = pivot.left
    pivot.left = root
    _update(root)
    _update(pivot)
    return pivot


def _rotate_right(root: _Node) -> _Node:
    pivot = root.left
    assert pivot is not None
    root.left = pivot.right
    pivot.right = root
    _update(root)
    _update(pivot)
    return pivot


def _rebalance(root: _Node) -> _Node:
    factor = _balance(root)
    if factor < -1:
        if _balance(root.right) > 0:
            root.right = _rotate_right(root.right)  # type: ignore[arg-type]
        return _rotate_left(root)
    if factor > 1:
        if _balance(root.left) < 0:
            root.left = _rotate_left(root.left)  # type: ignore[arg-type]
        return _rotate_right(root)
    return root


def _insert(root: _Node | None, person: Person) -> _Node:
    if root is None:
        return _Node(person)
    if person.cpf < root.person.cpf:
        root.left = _insert(root.left, person)
    elif person.cpf > root.person.cpf:
        root.right = _insert(root.right, person)
    else:
        raise DuplicateKeyError(person.cpf)
    _update(root)
    return _rebalance(root)


def _remove(root: _Node | None, cpf: int) -> _Node | None:
    if root is None:
        raise KeyError(cpf)
    if cpf < root.person.cpf:
        root.left = _remove(root.left, cpf)
    elif cpf > root.person.cpf:
        root.right = _remove(root.right, cpf)
    elif root.left is None or root.right is None:
        return root.left if root.left is not None else root.right
    else:
        predecessor = root.left
        while predecessor.right is not None:
            predecessor = predecessor.right
        root.person = predecessor.person
        root.left = _remove(root.left, predecessor.person.cpf)
    _update(root)
    return _rebalance(root)


class AVLTree:
    """An AVL tree of :class:`Person` records ordered by CPF."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, person: Person) -> None:
        """Insert ``person``; raise :class:`DuplicateKeyError` if the CPF exists."""
        self._root = _insert(self._root, person)
        self._size += 1

    def remove(self, cpf: int) -> None:
        """Remove the person with ``cpf``; raise ``KeyError`` if absent."""
        self._root = _remove(self._root, cpf)
        self._size -= 1

    def __contains__(self, cpf: object) -> bool:
        node = self._root
        while node is not None:
            if cpf == node.person.cpf:
                return True
            node = node.left if cpf < node.person.cpf else node.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[Person]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.person
            node = node.right

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Height of the tree; -1 when empty."""
        return _height(self._root)

    def balance_factor(self) -> int:
        """Left height minus right height at the root; 0 when empty."""
        return _balance(self._root)

    def render(self) -> str:
        """Draw the tree sideways, right subtree on top, one tab per level."""
        parts: list[str] = []

        def walk(node: _Node | None, level: int) -> None:
            if node is None:
                return
            walk(node.right, level + 1)
            indent = "\t" * level
            person = node.person
            parts.append(
                f"\n\n{indent}Name: {person.name} \n"
                f"{indent}CPF: {person.cpf} \n"
                f"{indent}Age: {person.age}"
            )
            walk(node.left, level + 1)

        walk(self._root, 1)
        parts.append(f"\n\nBalance factor: {self.balance_factor()}")
        return "".join(parts)


_MENU = (
    "\n\n --------------MENU-------------"
    "\n|\t1 - Insert\t\t|"
    "\n|\t2 - Remove \t\t|"
    "\n|\t3 - Print \t\t|"
    "\n|\t0 - Exit \t\t|"
    "\n -------------------------------"
)


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt))
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu for a tree of people."""
    argparse.ArgumentParser(description="Interactive AVL tree of people.").parse_args(argv)
    tree = AVLTree()
    while True:
        print(_MENU)
        try:
            choice = _read_int("Option: ")
            if choice == 0:
                print("\n\nExiting...")
                return 0
            if choice == 1:
                name = input("Name: ").strip()
                cpf = _read_int("CPF: ")
                age = _read_int("Age: ")
                if cpf is None or age is None:
                    print("\nInvalid number!")
                    continue
                try:
                    tree.insert(Person(name, age, cpf))
                    print("\nElement inserted")
                except DuplicateKeyError:
                    print(f"\nNot inserted: element {cpf} already exists")
            elif choice == 2:
                print("\nTREE:" + tree.render())
                cpf = _read_int("\nCPF to remove: ")
                try:
                    if cpf is None:
                        raise KeyError(cpf)
                    tree.remove(cpf)
                    print(f"\nElement removed: {cpf}")
                except KeyError:
                    print("\nValue not found!")
            elif choice == 3:
                print(tree.render())
            else:
                print("\nInvalid option!\n")
        except EOFError:
            return 0