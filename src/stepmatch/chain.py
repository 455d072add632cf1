from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Match:
    input_index: int
    token_index: int
    weight: int
    next: Match | None = None

    def __iter__(self) -> Generator[Match]:
        node = self
        while node is not None:
            yield node
            node = node.next

    def total(self) -> int:
        return sum(node.weight for node in self)


@dataclass(frozen=True, slots=True)
class WeightChain:
    """Best alignment of `input` against a template.

    `head` is None when nothing matched.
    """

    input: str
    head: Match | None

    @property
    def weight(self) -> int:
        if self.head is None:
            return 0
        return self.head.total()

    def is_zero(self) -> bool:
        return self.head is None

    def __iter__(self) -> Generator[Match]:
        if self.head is not None:
            yield from self.head

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def last(self) -> Match | None:
        last = None
        for last in self:
            pass
        return last

    def segments(self) -> list[tuple[int, str]]:
        """Split the input at node boundaries as (token_index, text) pairs."""
        nodes = list(self)
        out = []
        for node, following in zip(nodes, nodes[1:] + [None]):
            end = len(self.input) if following is None else following.input_index
            out.append((node.token_index, self.input[node.input_index : end]))
        return out
