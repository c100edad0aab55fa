"""Tests for panel prompt builders."""

from workbench.core.prompts import (
    TUTOR_SYSTEM_PROMPT,
    build_diagram_request,
    build_tutor_system_prompt,
)


def test_tutor_prompt_without_coder_history_is_unchanged() -> None:
    assert build_tutor_system_prompt([]) == TUTOR_SYSTEM_PROMPT


def test_tutor_prompt_includes_last_five_coder_messages() -> None:
    messages = [("user", f"message {i}") for i in range(8)]

    prompt = build_tutor_system_prompt(messages)

    assert prompt.startswith(TUTOR_SYSTEM_PROMPT)
    assert "Context from the user's recent coding work:" in prompt
    assert "message 2" not in prompt
    for i in range(3, 8):
        assert f"user: message {i}" in prompt


def test_tutor_prompt_truncates_each_message() -> None:
    prompt = build_tutor_system_prompt([("assistant", "x" * 500)])

    assert "assistant: " + "x" * 200 in prompt
    assert "x" * 201 not in prompt


def test_diagram_request_without_context_is_prompt() -> None:
    assert build_diagram_request("login flow") == "login flow"
    assert build_diagram_request("login flow", "   ") == "login flow"


def test_diagram_request_prefixes_context() -> None:
    request = build_diagram_request("login flow", "We discussed OAuth.")

    assert request.index("We discussed OAuth.") < request.index("login flow")
