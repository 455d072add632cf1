from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import NamedTuple

from stepmatch.chain import Match, WeightChain

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "$"

_WHITESPACE = re.compile(r"\s+")


def compile_placeholder_pattern(prefix: str) -> re.Pattern:
    return re.compile(rf"({re.escape(prefix)}\w+)(\W|\Z)", re.DOTALL)


def normalize(string: str) -> str:
    return _WHITESPACE.sub("", string).casefold()


class StringToken(NamedTuple):
    value: str
    is_identifier: bool


@dataclass(frozen=True, slots=True)
class Token:
    content: str = field(repr=False)
    offset: int
    length: int
    is_identifier: bool

    @property
    def value(self) -> str:
        return self.content[self.offset : self.offset + self.length]

    def region_matches(self, offset: int, other: str, other_offset: int, length: int) -> bool:
        """Compare `length` characters of this token and `other`.

        Whitespace is dropped and case is ignored; a region past either
        string's end never matches.
        """
        if offset + length > self.length or other_offset + length > len(other):
            return False
        start = self.offset + offset
        return normalize(self.content[start : start + length]) == normalize(
            other[other_offset : other_offset + length]
        )

    def __str__(self) -> str:
        return f"<<{'$' if self.is_identifier else ''}{self.value}>>"


@dataclass(frozen=True, slots=True)
class Template:
    content: str
    prefix: str = field(default=DEFAULT_PREFIX, compare=False)
    tokens: tuple[Token, ...] = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        if self.content is None:
            raise ValueError("content cannot be None")
        if not self.prefix:
            raise ValueError(f"invalid {self.prefix=}")
        object.__setattr__(self, "tokens", tuple(self.parse()))

    def parse(self) -> list[Token]:
        tokens = []
        pattern = compile_placeholder_pattern(self.prefix)

        prev = 0
        for match in pattern.finditer(self.content):
            start, end = match.span()
            if start > prev:
                tokens.append(Token(self.content, prev, start - prev, False))
            end -= len(match.group(2))
            start += len(self.prefix)
            tokens.append(Token(self.content, start, end - start, True))
            prev = end

        if prev < len(self.content):
            tokens.append(Token(self.content, prev, len(self.content) - prev, False))

        return tokens

    def align(self, string: str) -> WeightChain:
        memo: dict[tuple[int, int], Match | None] = {}
        chain = WeightChain(string, self._accepts(string, 0, 0, memo))
        logger.debug(f"{self.content=} {string=} {chain.weight=}")
        return chain

    def _accepts(
        self,
        string: str,
        index: int,
        token_index: int,
        memo: dict[tuple[int, int], Match | None],
    ) -> Match | None:
        if token_index >= len(self.tokens):
            return None

        key = (token_index, index)
        if key not in memo:
            token = self.tokens[token_index]
            if token.is_identifier:
                memo[key] = self._accepts_identifier(string, index, token_index, memo)
            else:
                memo[key] = self._accepts_literal(string, index, token_index, memo)
        return memo[key]

    def _accepts_identifier(self, string, index, token_index, memo) -> Match:
        # every split point is tried; the first of equally heavy branches wins
        best: Match | None = None
        for j in range(index + 1, len(string)):
            sub = self._accepts(string, j, token_index + 1, memo)
            if sub is not None and (best is None or sub.total() > best.total()):
                best = sub
        return Match(index, token_index, 1, best)

    def _accepts_literal(self, string, index, token_index, memo) -> Match | None:
        token = self.tokens[token_index]
        remaining = len(string) - index

        if remaining > token.length and token_index == len(self.tokens) - 1:
            # trailing input that no token can explain
            return None

        overlap = min(token.length, remaining)
        if overlap == 0:
            return None
        if not token.region_matches(0, string, index, overlap):
            return None

        if overlap < token.length:
            return Match(index, token_index, 1)
        if index + overlap == len(string):
            return Match(index, token_index, 2)

        rest = self._accepts(string, index + overlap, token_index + 1, memo)
        if rest is None:
            return None
        return Match(index, token_index, 2, rest)

    def tokenize(self, string: str) -> list[StringToken]:
        chain = self.align(string)
        return [
            StringToken(value, self.tokens[token_index].is_identifier)
            for token_index, value in chain.segments()
        ]

    def complete(self, string: str) -> str:
        last = self.align(string).last()
        if last is None:
            return ""

        out = []
        token = self.tokens[last.token_index]
        if not token.is_identifier:
            consumed = len(string) - last.input_index
            out.append(token.value[consumed:])

        for token in self.tokens[last.token_index + 1 :]:
            if token.is_identifier:
                out.append(self.prefix)
            out.append(token.value)

        return "".join(out)

    def __str__(self) -> str:
        return self.content
