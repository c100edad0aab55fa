"""
Diagram block extraction.

Locates the diagram-type declaration in generated text and walks forward
line by line, keeping diagram syntax and stopping at the first line of
trailing prose. Leading commentary before the declaration is discarded.

Dependencies: workbench.core.mermaid.diagram_syntax
System role: Second stage of diagram sanitization
"""

import logging

from workbench.core.mermaid.diagram_syntax import (
    BLOCK_CLOSE_PATTERN,
    BLOCK_OPEN_PATTERN,
    is_diagram_header,
    is_diagram_line,
)

logger = logging.getLogger(__name__)


def find_header_index(lines: list[str]) -> int | None:
    """
    Find the first line declaring a diagram type.

    Args:
        lines: Text split into lines

    Returns:
        int | None: Index of the declaration line, None if there is none
    """
    for index, line in enumerate(lines):
        if is_diagram_header(line):
            return index
    return None


def _next_non_blank(lines: list[str], start: int) -> str | None:
    """Return the first non-blank line at or after start."""
    for line in lines[start:]:
        if line.strip():
            return line
    return None


def _starts_with_lowercase(line: str) -> bool:
    first = line.strip()[:1]
    return "a" <= first <= "z"


def extract_diagram(text: str) -> str:
    """
    Extract the contiguous block of diagram syntax from text.

    Flow:
    1. Locate the diagram-type declaration (fallback: whole text)
    2. Keep every following line that classifies as diagram syntax
    3. On a blank line, stop if the next non-blank line is lowercase prose
    4. Stop at the first non-blank line that is not diagram syntax

    Args:
        text: Fence-stripped generated text

    Returns:
        str: Retained lines joined with newlines, trimmed
    """
    lines = text.splitlines()
    header_index = find_header_index(lines)
    if header_index is None:
        logger.debug("No diagram declaration found, keeping text as-is")
        return text.strip()

    retained = [lines[header_index]]
    depth = 0

    for position in range(header_index + 1, len(lines)):
        line = lines[position]
        stripped = line.strip()

        if not stripped:
            upcoming = _next_non_blank(lines, position + 1)
            if (
                upcoming is not None
                and _starts_with_lowercase(upcoming)
                and not is_diagram_line(upcoming)
            ):
                break
            retained.append(line)
            continue

        if not is_diagram_line(stripped):
            logger.debug(
                "Diagram extraction stopped at prose line",
                extra={"line_number": position + 1},
            )
            break

        if BLOCK_OPEN_PATTERN.match(stripped):
            depth += 1
        elif BLOCK_CLOSE_PATTERN.match(stripped):
            depth -= 1
        retained.append(line)

    if depth != 0:
        logger.warning(
            "Extracted diagram has unbalanced blocks",
            extra={"block_depth": depth},
        )

    return "\n".join(retained).strip()
