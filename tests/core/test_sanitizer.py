"""
Test suite for the diagram sanitizer entry point.

System role: Verification of the full fence -> extract -> quote pipeline
"""

import pytest

from workbench.core.mermaid import sanitize_diagram_source


SAMPLES = [
    "",
    "   ",
    "just some random text",
    "graph TD\nA-->B",
    "```mermaid\ngraph TD\n    A[User Login] --> B[Check Credentials]\n```",
    "Here is your diagram:\n\ngraph TD\n    A[Start] --> B[End]\n\nLet me know if you need changes.",
    'graph TD\n    A["Already quoted"] --> B[End]',
    "sequenceDiagram\n    participant A as Alice\n    A->>B: Hi\n\nthis is a greeting",
    "flowchart LR\n    a[say \"hi\" now] --> b(Two words)\n\n\n    b --> c{Decide it}",
    "Some intro\n```\nclassDiagram\n    Animal <|-- Duck\n```\ntrailing",
    "stateDiagram-v2\n    [*] --> Idle\n    Idle --> Busy: start job\n    Busy --> [*]",
    "no header here but A[two words] appears",
    "graph TD\n    A[Login (OAuth) flow] --> B[Check x[0] value]",
    "```mermaid graph TD; A-->B```",
]


def test_fenced_and_unfenced_inputs_agree() -> None:
    assert sanitize_diagram_source("```mermaid\ngraph TD\nA-->B\n```") == (
        sanitize_diagram_source("graph TD\nA-->B")
    )


def test_header_detection_strips_surrounding_prose() -> None:
    text = (
        "Here is your diagram:\n\ngraph TD\n    A[Start] --> B[End]\n\n"
        "Let me know if you need changes."
    )
    assert sanitize_diagram_source(text) == "graph TD\n    A[Start] --> B[End]"


def test_multi_word_labels_are_quoted() -> None:
    text = "graph TD\n    A[User Login] --> B[Check Credentials]"
    assert sanitize_diagram_source(text) == (
        'graph TD\n    A["User Login"] --> B["Check Credentials"]'
    )


def test_labels_containing_brackets_are_quoted() -> None:
    source = "graph TD\n    A[Login (OAuth) flow] --> B[Check x[0] value]"
    assert sanitize_diagram_source(source) == (
        'graph TD\n    A["Login (OAuth) flow"] --> B["Check x[0] value"]'
    )


def test_already_quoted_labels_are_untouched() -> None:
    text = 'graph TD\n    A["Already quoted"] --> B[End]'
    assert sanitize_diagram_source(text) == text


def test_text_without_diagram_is_returned_trimmed() -> None:
    assert sanitize_diagram_source("  just some random text\n") == "just some random text"


def test_text_without_diagram_still_gets_labels_quoted() -> None:
    assert sanitize_diagram_source("see A[two words]") == 'see A["two words"]'


def test_blank_line_before_prose_ends_diagram() -> None:
    text = "graph TD\n    A --> B\n\nthe arrow means A calls B"
    assert sanitize_diagram_source(text) == "graph TD\n    A --> B"


def test_empty_input_returns_empty_string() -> None:
    assert sanitize_diagram_source("") == ""
    assert sanitize_diagram_source(" \n\t") == ""


@pytest.mark.parametrize("sample", SAMPLES)
def test_sanitizing_is_idempotent(sample: str) -> None:
    once = sanitize_diagram_source(sample)
    assert sanitize_diagram_source(once) == once
