import json

import pytest
from stepmatch.definitions import StepDefinition, StepType
from stepmatch.template import Template

RAW_DEFINITIONS = [
    {"type": "given", "template": "I have $count cucumbers", "origin": "steps.py:10"},
    {"type": "given", "template": "I have $what", "origin": "steps.py:14"},
    {"type": "when", "template": "I eat $count cucumbers", "origin": "steps.py:18"},
    {"type": "then", "template": "I should have $count cucumbers", "origin": "steps.py:22"},
]

STORY = """Scenario: eating cucumbers

Given I have 5 cucumbers
When I eat 3 cucumbers
And I eat 1 cucumbers
Then I should have 1 cucumbers
And I am sad
"""


@pytest.fixture
def definitions() -> list[StepDefinition]:
    return [
        StepDefinition(StepType(raw["type"]), Template(raw["template"]), raw["origin"])
        for raw in RAW_DEFINITIONS
    ]


@pytest.fixture
def definitions_file(tmp_path):
    path = tmp_path / "steps.json"
    path.write_text(json.dumps(RAW_DEFINITIONS), encoding="utf-8")
    return path


@pytest.fixture
def story_file(tmp_path):
    path = tmp_path / "eating.story"
    path.write_text(STORY, encoding="utf-8")
    return path
