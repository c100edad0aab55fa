"""Tests for markdown code fence removal."""

from workbench.core.mermaid.fence_stripper import strip_code_fence


def test_strips_mermaid_fence() -> None:
    assert strip_code_fence("```mermaid\ngraph TD\nA-->B\n```") == "graph TD\nA-->B"


def test_strips_fence_without_language_tag() -> None:
    assert strip_code_fence("```\ngraph TD\nA-->B\n```") == "graph TD\nA-->B"


def test_language_tag_is_case_insensitive() -> None:
    assert strip_code_fence("```MERMAID\ngraph TD\n```") == "graph TD"


def test_handles_crlf_line_endings() -> None:
    assert strip_code_fence("```mermaid\r\ngraph TD\r\n```") == "graph TD"


def test_discards_text_around_fence() -> None:
    text = "Sure! Here it is:\n```mermaid\npie\n\"A\" : 1\n```\nEnjoy."
    assert strip_code_fence(text) == 'pie\n"A" : 1'


def test_first_fenced_block_wins() -> None:
    text = "```mermaid\ngraph TD\n```\n\n```mermaid\nsequenceDiagram\n```"
    assert strip_code_fence(text) == "graph TD"


def test_unfenced_text_is_trimmed() -> None:
    assert strip_code_fence("  graph TD\nA-->B \n") == "graph TD\nA-->B"


def test_unterminated_fence_passes_through() -> None:
    assert strip_code_fence("```mermaid\ngraph TD") == "```mermaid\ngraph TD"


def test_strips_single_line_tagged_fence() -> None:
    assert strip_code_fence("```mermaid graph TD; A-->B```") == "graph TD; A-->B"


def test_strips_single_line_untagged_fence() -> None:
    assert strip_code_fence("Here: ```graph TD; A-->B``` done") == "graph TD; A-->B"
