import logging
import re
from collections.abc import Generator
from typing import NamedTuple

from stepmatch.definitions import StepDefinition, StepType
from stepmatch.resolver import StepResolver

logger = logging.getLogger(__name__)

NO_DEFINITION = "No definition found for the step"

STEP_PATTERN = re.compile(
    r"^[^\S\n]*(?P<keyword>Given|When|Then|And)[^\S\n]+(?P<text>\S.*?)[^\S\n]*$",
    re.MULTILINE,
)


class Step(NamedTuple):
    step_type: StepType
    text: str
    start: int
    end: int


class Diagnostic(NamedTuple):
    start: int
    end: int
    line: int
    column: int
    message: str
    suggestions: list[StepDefinition]


def position(story: str, offset: int) -> tuple[int, int]:
    """1-based line and column of `offset`."""
    line = story.count("\n", 0, offset) + 1
    column = offset - (story.rfind("\n", 0, offset) + 1) + 1
    return line, column


def parse_story(story: str) -> Generator[Step]:
    previous: StepType | None = None
    for match in STEP_PATTERN.finditer(story):
        keyword = match.group("keyword")
        if keyword == "And":
            if previous is None:
                logger.debug(f"skipping 'And' without a previous step at {match.start()=}")
                continue
            step_type = previous
        else:
            step_type = StepType(keyword.lower())
        previous = step_type
        yield Step(step_type, match.group("text"), *match.span("text"))


def annotate(story: str, resolver: StepResolver, suggestions: int = 3) -> list[Diagnostic]:
    diagnostics = []
    for step in parse_story(story):
        if resolver.resolve(step.text, step.step_type) is not None:
            continue
        line, column = position(story, step.start)
        diagnostics.append(
            Diagnostic(
                step.start,
                step.end,
                line,
                column,
                NO_DEFINITION,
                resolver.suggest(step.text, step.step_type, suggestions),
            )
        )
    return diagnostics
