"""
Markdown code fence removal for generated diagram text.

Dependencies: re (stdlib)
System role: First stage of diagram sanitization
"""

import re

# Non-greedy body: the first closing fence ends the block. The opening fence
# is followed by a newline (any tag), by "mermaid" and a space, or directly by
# the diagram on a single line.
CODE_FENCE_PATTERN = re.compile(
    r"```[ \t]*"
    r"(?:(?:[a-z][\w+-]*)?[ \t]*\r?\n|mermaid[ \t]+|(?=\S))"
    r"(.*?)```",
    re.IGNORECASE | re.DOTALL,
)


def strip_code_fence(text: str) -> str:
    """
    Replace text with the contents of its first fenced code block.

    The opening fence may carry a language tag (```mermaid, ```MERMAID, ```).
    Single-line blocks such as ```mermaid graph TD; A-->B``` are accepted.
    Text without a complete fenced block passes through unchanged.

    Args:
        text: Raw generated text

    Returns:
        str: Fenced content if a block was found, otherwise the input, trimmed
    """
    match = CODE_FENCE_PATTERN.search(text)
    if match is None:
        return text.strip()
    return match.group(1).strip()
