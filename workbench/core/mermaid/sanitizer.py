"""
Mermaid diagram source sanitizer.

Turns free-form LLM output into a diagram definition a renderer can parse:
strips a surrounding markdown fence, cuts the diagram block out of any
commentary, and quotes multi-word node labels.

Pure and deterministic; safe to call concurrently. Re-sanitizing its own
output returns the same string.

Dependencies: workbench.core.mermaid
System role: Diagram sanitization entry point

Usage:
    from workbench.core.mermaid import sanitize_diagram_source
    mermaid_code = sanitize_diagram_source(llm_output)
"""

import logging

from workbench.core.mermaid.diagram_extractor import extract_diagram
from workbench.core.mermaid.fence_stripper import strip_code_fence
from workbench.core.mermaid.label_quoter import quote_node_labels

logger = logging.getLogger(__name__)


def sanitize_diagram_source(raw_text: str) -> str:
    """
    Extract and repair a Mermaid diagram from generated text.

    Never raises. When no diagram declaration is present, the trimmed
    input is returned with its labels quoted.

    Args:
        raw_text: Text returned by the text-generation service

    Returns:
        str: Sanitized Mermaid source (empty for empty input)
    """
    if not raw_text:
        return ""

    unfenced = strip_code_fence(raw_text)
    extracted = extract_diagram(unfenced)
    sanitized = quote_node_labels(extracted)

    logger.debug(
        "Sanitized diagram source",
        extra={"raw_length": len(raw_text), "sanitized_length": len(sanitized)},
    )
    return sanitized
