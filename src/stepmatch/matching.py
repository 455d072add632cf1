from stepmatch.chain import WeightChain
from stepmatch.template import Template


def as_template(template: Template | str) -> Template:
    if isinstance(template, Template):
        return template
    return Template(template)


def align(template: Template | str, string: str) -> WeightChain:
    return as_template(template).align(string)


def tokenize(template: Template | str, string: str) -> list[tuple[str, bool]]:
    return [tuple(token) for token in as_template(template).tokenize(string)]


def complete(template: Template | str, string: str) -> str:
    return as_template(template).complete(string)


def weight(chain: WeightChain) -> int:
    return chain.weight
