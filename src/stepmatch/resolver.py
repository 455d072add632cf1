import logging
from collections.abc import Iterable

from stepmatch.chain import WeightChain
from stepmatch.definitions import StepDefinition, StepType
from stepmatch.suggest import nearest

logger = logging.getLogger(__name__)


class StepResolver:
    def __init__(self, definitions: Iterable[StepDefinition]):
        self.definitions: list[StepDefinition] = list(definitions)

    def candidates(self, step_type: StepType | None = None) -> list[StepDefinition]:
        return [d for d in self.definitions if d.matches(step_type)]

    def rank(
        self, string: str, step_type: StepType | None = None
    ) -> list[tuple[StepDefinition, WeightChain]]:
        """Definitions whose template aligns with `string`, heaviest first.

        Equal weights keep definition order.
        """
        ranked = []
        for definition in self.candidates(step_type):
            chain = definition.template.align(string)
            if not chain.is_zero():
                ranked.append((definition, chain))
        ranked.sort(key=lambda pair: pair[1].weight, reverse=True)
        return ranked

    def resolve(
        self, string: str, step_type: StepType | None = None
    ) -> StepDefinition | None:
        ranked = self.rank(string, step_type)
        if len(ranked) == 0:
            logger.debug(f"no definition for {string=} {step_type=}")
            return None
        definition, chain = ranked[0]
        logger.debug(f"{string=} resolved to {definition.origin=} {chain.weight=}")
        return definition

    def complete(self, string: str, step_type: StepType | None = None) -> str:
        if (definition := self.resolve(string, step_type)) is None:
            return ""
        return definition.template.complete(string)

    def suggest(
        self, string: str, step_type: StepType | None = None, n: int = 3
    ) -> list[StepDefinition]:
        candidates = self.candidates(step_type)
        return [candidates[i] for i in nearest(string, [d.template for d in candidates], n)]
