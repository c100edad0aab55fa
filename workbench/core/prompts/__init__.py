"""Panel prompt templates."""

from workbench.core.prompts.panel_prompts import (
    CODER_SYSTEM_PROMPT,
    DIAGRAM_SYSTEM_PROMPT,
    EMPTY_REPLY_FALLBACK,
    FALLBACK_DIAGRAM,
    TUTOR_SYSTEM_PROMPT,
    build_diagram_request,
    build_tutor_system_prompt,
)

__all__ = [
    "CODER_SYSTEM_PROMPT",
    "DIAGRAM_SYSTEM_PROMPT",
    "EMPTY_REPLY_FALLBACK",
    "FALLBACK_DIAGRAM",
    "TUTOR_SYSTEM_PROMPT",
    "build_diagram_request",
    "build_tutor_system_prompt",
]
