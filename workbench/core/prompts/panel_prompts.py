"""
Panel system prompts.

Defines the instructions sent with every Coder, Tutor and Artist request,
plus helpers that fold extra context into them.

Dependencies: None
System role: Prompt templates for panel behavior
"""

from collections.abc import Sequence

CODER_SYSTEM_PROMPT = (
    "You are an expert coding assistant. Help users write code, debug issues, "
    "and learn programming concepts. Provide clear explanations and code examples. "
    "Be concise but thorough."
)

TUTOR_SYSTEM_PROMPT = (
    "You are a personalized learning assistant. Provide clear explanations, "
    "tutorials, and guidance. Be patient and adapt your teaching to the "
    "learner's level."
)

DIAGRAM_SYSTEM_PROMPT = (
    "You are an expert at creating diagrams using Mermaid.js syntax. When given "
    "a description, generate valid Mermaid.js code for flowcharts, sequence "
    "diagrams, class diagrams, or other diagram types. Only respond with the "
    "Mermaid code, no explanations or markdown code blocks."
)

EMPTY_REPLY_FALLBACK = "I apologize, but I couldn't generate a response."

FALLBACK_DIAGRAM = "graph TD\nA[Error] --> B[Could not generate diagram]"

TUTOR_CONTEXT_MESSAGES = 5
TUTOR_CONTEXT_CHARS = 200


def build_tutor_system_prompt(coder_messages: Sequence[tuple[str, str]]) -> str:
    """
    Extend the tutor prompt with the user's recent coding conversation.

    Args:
        coder_messages: (role, content) pairs from the Coder panel, oldest first

    Returns:
        str: Tutor system prompt, with a context section when messages exist
    """
    recent = list(coder_messages)[-TUTOR_CONTEXT_MESSAGES:]
    if not recent:
        return TUTOR_SYSTEM_PROMPT

    summary = "\n".join(
        f"{role}: {content[:TUTOR_CONTEXT_CHARS]}" for role, content in recent
    )
    return f"{TUTOR_SYSTEM_PROMPT}\n\nContext from the user's recent coding work:\n{summary}"


def build_diagram_request(prompt: str, context: str | None = None) -> str:
    """Prefix the diagram description with prior conversation context, if any."""
    if context and context.strip():
        return f"Conversation context:\n{context.strip()}\n\nDiagram request:\n{prompt}"
    return prompt
