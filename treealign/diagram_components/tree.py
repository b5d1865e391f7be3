import uuid
from dataclasses import dataclass, field, replace
from typing import Generic, Iterator, Optional, Tuple, TypeVar

A = TypeVar("A")


@dataclass(frozen=True, eq=False)
class Tree(Generic[A]):
    """Immutable tree node.

    ``insert`` never mutates; it rebuilds the path down to the parent and
    shares every untouched subtree with the original value. Rebuilt nodes keep
    their identities, so an id stays valid across edits.
    """

    value: A
    children: Tuple["Tree[A]", ...] = ()
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def __len__(self) -> int:
        return 1 + sum(len(child) for child in self.children)

    def walk(self, depth: int = 0) -> Iterator[Tuple["Tree[A]", int]]:
        yield self, depth
        for child in self.children:
            yield from child.walk(depth + 1)

    def find(self, node_id: uuid.UUID) -> Optional["Tree[A]"]:
        for node, _ in self.walk():
            if node.id == node_id:
                return node
        return None

    def insert(self, value: A, parent_id: uuid.UUID) -> "Tree[A]":
        if self.id == parent_id:
            return replace(self, children=self.children + (Tree(value),))

        updated = [child.insert(value, parent_id) for child in self.children]
        if all(new is old for new, old in zip(updated, self.children)):
            return self
        return replace(self, children=tuple(updated))

    def same_shape(self, other: "Tree[A]") -> bool:
        if self.value != other.value or len(self.children) != len(other.children):
            return False
        return all(a.same_shape(b) for a, b in zip(self.children, other.children))

    def __repr__(self) -> str:
        if not self.children:
            return f"Tree({self.value!r})"
        return f"Tree({self.value!r}, children={list(self.children)!r})"
