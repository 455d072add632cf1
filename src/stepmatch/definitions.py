from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import NamedTuple, Protocol

from typeguard import CollectionCheckStrategy, check_type

from stepmatch.template import DEFAULT_PREFIX, Template

logger = logging.getLogger(__name__)


class StepType(Enum):
    GIVEN = "given"
    WHEN = "when"
    THEN = "then"


class StepDefinition(NamedTuple):
    step_type: StepType
    template: Template
    origin: str = ""

    def matches(self, step_type: StepType | None) -> bool:
        return step_type is None or step_type == self.step_type


class SourceUnit(Protocol):
    def step_definitions(self) -> Iterable[StepDefinition]: ...


def parse_definitions(
    raw: object, prefix: str = DEFAULT_PREFIX, origin: str = ""
) -> list[StepDefinition]:
    """Build definitions from decoded JSON.

    Expects a list of objects with "type" and "template" keys and an
    optional "origin"; an unknown type raises ValueError.
    """
    entries = check_type(
        raw,
        list[dict[str, str]],
        collection_check_strategy=CollectionCheckStrategy.ALL_ITEMS,
    )

    out = []
    for i, entry in enumerate(entries):
        try:
            step_type = StepType(entry["type"].lower())
            template = Template(entry["template"], prefix)
        except KeyError as error:
            raise ValueError(f"definition {i} is missing {error}") from error
        out.append(
            StepDefinition(step_type, template, entry.get("origin", f"{origin}[{i}]"))
        )
    return out


class DefinitionFile:
    """A JSON file of step definitions."""

    def __init__(self, path: str, prefix: str = DEFAULT_PREFIX):
        self.path = path
        self.prefix = prefix

    def step_definitions(self) -> list[StepDefinition]:
        with open(self.path, encoding="utf-8") as f:
            raw = json.load(f)
        definitions = parse_definitions(raw, self.prefix, origin=self.path)
        logger.debug(f"{self.path=} {len(definitions)=}")
        return definitions


def iterate_definitions(
    units: Iterable[SourceUnit],
    visitor: Callable[[StepDefinition], bool],
    step_type: StepType | None = None,
) -> bool:
    """Feed every definition of `step_type` to `visitor`.

    Stops and returns False as soon as the visitor returns False.
    """
    for unit in units:
        for definition in unit.step_definitions():
            if not definition.matches(step_type):
                continue
            if not visitor(definition):
                return False
    return True


def collect_definitions(
    units: Iterable[SourceUnit], step_type: StepType | None = None
) -> list[StepDefinition]:
    out: list[StepDefinition] = []
    iterate_definitions(units, lambda definition: out.append(definition) or True, step_type)
    return out
