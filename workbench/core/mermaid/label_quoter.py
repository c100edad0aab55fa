"""
Node label quoting.

Mermaid's strict grammar rejects unquoted labels containing whitespace in
some shapes and renderers. This module wraps such labels in double quotes.

Dependencies: re (stdlib)
System role: Final stage of diagram sanitization
"""

import re

QUOTE_CHARACTERS = ('"', "'")

# Labels starting with one of these belong to a compound shape such as
# A((circle)), A[(database)], A([stadium]), A{{hexagon}} or A[/slanted/].
SHAPE_OPENERS = ("(", "[", "{", "/", "\\")


def _bracketed(open_char: str, close_char: str, group: str) -> str:
    """Pattern for one bracket pair, allowing one level of the same pair inside."""
    o, c = re.escape(open_char), re.escape(close_char)
    body = rf"(?:[^{o}{c}\n]|{o}[^{o}{c}\n]*{c})*"
    return rf"{o}(?P<{group}>{body}){c}"


# A single alternation keeps the rewrite to one left-to-right pass, so text
# inside an already rewritten label is never matched again.
NODE_LABEL_PATTERN = re.compile(
    r"(?P<node>\w+)(?:"
    + "|".join(
        (
            _bracketed("[", "]", "square"),
            _bracketed("(", ")", "round"),
            _bracketed("{", "}", "curly"),
        )
    )
    + ")"
)

LABEL_GROUPS = ("square", "round", "curly")

_WHITESPACE = re.compile(r"\s")


def quote_label(label: str) -> str:
    """
    Quote a single label if it needs it.

    Args:
        label: Text found between a node's brackets

    Returns:
        str: The label wrapped in double quotes with interior quotes escaped,
        or the label unchanged if it has no whitespace or is already quoted
    """
    if not _WHITESPACE.search(label):
        return label
    if label.lstrip().startswith(QUOTE_CHARACTERS):
        return label
    return '"' + label.replace('"', '\\"') + '"'


def _rewrite(match: re.Match[str]) -> str:
    whole = match.group(0)
    node = match.group("node")
    label = next(match.group(g) for g in LABEL_GROUPS if match.group(g) is not None)
    if label.startswith(SHAPE_OPENERS):
        return whole
    open_bracket = whole[len(node)]
    close_bracket = whole[-1]
    return f"{node}{open_bracket}{quote_label(label)}{close_bracket}"


def quote_node_labels(source: str) -> str:
    """
    Quote every multi-word node label in a diagram definition.

    Args:
        source: Extracted diagram text

    Returns:
        str: Diagram text with labels such as A[User Login] rewritten
        to A["User Login"]
    """
    return NODE_LABEL_PATTERN.sub(_rewrite, source)
