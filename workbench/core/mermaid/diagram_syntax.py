"""
Mermaid line classification.

Decides whether a single line of generated text is Mermaid diagram syntax
or trailing prose. Rules are an ordered list of compiled patterns; a line is
diagram syntax as soon as one rule matches.

Dependencies: re (stdlib)
System role: Line-level vocabulary for the diagram extractor
"""

import re
from dataclasses import dataclass

DIAGRAM_TYPES: tuple[str, ...] = (
    "graph",
    "flowchart",
    "sequenceDiagram",
    "classDiagram",
    "stateDiagram",
    "stateDiagram-v2",
    "erDiagram",
    "journey",
    "gantt",
    "pie",
    "quadrantChart",
    "requirementDiagram",
    "gitGraph",
    "mindmap",
    "timeline",
    "zenuml",
    "sankey",
    "sankey-beta",
)

STRUCTURAL_KEYWORDS: tuple[str, ...] = (
    "subgraph",
    "end",
    "style",
    "classDef",
    "class",
    "click",
    "linkStyle",
    "direction",
    "title",
    "section",
    "accTitle",
    "accDescr",
)

SEQUENCE_KEYWORDS: tuple[str, ...] = (
    "participant",
    "actor",
    "activate",
    "deactivate",
    "note",
    "loop",
    "alt",
    "opt",
    "par",
    "and",
    "rect",
    "critical",
    "break",
    "autonumber",
)

CLASS_RELATION_TOKENS: tuple[str, ...] = ("<|--", ">|--", "*--", "o--", "<..", "*..")

# Keywords that open a block closed by a bare `end` line.
BLOCK_OPENERS: tuple[str, ...] = (
    "subgraph",
    "loop",
    "alt",
    "opt",
    "par",
    "rect",
    "critical",
    "break",
)


def _keyword_alternation(keywords: tuple[str, ...]) -> str:
    """Build a regex alternation, longest keyword first."""
    ordered = sorted(keywords, key=len, reverse=True)
    return "|".join(re.escape(keyword) for keyword in ordered)


DIAGRAM_HEADER_PATTERN = re.compile(
    rf"^(?:{_keyword_alternation(DIAGRAM_TYPES)})(?!\w)",
    re.IGNORECASE,
)

BLOCK_OPEN_PATTERN = re.compile(rf"^(?:{_keyword_alternation(BLOCK_OPENERS)})(?!\w)")
BLOCK_CLOSE_PATTERN = re.compile(r"^end$")


@dataclass(frozen=True)
class SyntaxRule:
    """A named pattern recognising one family of Mermaid line shapes."""

    name: str
    pattern: re.Pattern[str]

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None


SYNTAX_RULES: tuple[SyntaxRule, ...] = (
    SyntaxRule("diagram_type", DIAGRAM_HEADER_PATTERN),
    SyntaxRule(
        "structural_keyword",
        re.compile(rf"^(?:(?:{_keyword_alternation(STRUCTURAL_KEYWORDS)})(?!\w)|%%)"),
    ),
    SyntaxRule(
        "sequence_keyword",
        re.compile(rf"^(?:{_keyword_alternation(SEQUENCE_KEYWORDS)})(?!\w)"),
    ),
    # Sequence notes are conventionally capitalised: "Note right of Alice: ..."
    SyntaxRule(
        "sequence_note",
        re.compile(r"^note\s+(?:left of|right of|over)\b", re.IGNORECASE),
    ),
    SyntaxRule(
        "state_token",
        re.compile(r"^(?:state(?!\w)|hide empty description|\[\*\])"),
    ),
    SyntaxRule("node_definition", re.compile(r"[A-Za-z0-9_]+[\[({]")),
    # Flow/class links, sequence messages and their +/- activation modifiers.
    SyntaxRule(
        "edge_token",
        re.compile(r"[\w\])}]\s*(?:--|==|\.\.(?!\.)|-\.|->|-\)|-x)"),
    ),
    SyntaxRule("edge_label", re.compile(r"\|[^|\n]+\|")),
    SyntaxRule("actor_shorthand", re.compile(r"^\w+:")),
    SyntaxRule(
        "class_relation",
        re.compile(_keyword_alternation(CLASS_RELATION_TOKENS)),
    ),
)


def is_diagram_header(line: str) -> bool:
    """
    Check whether a line declares a Mermaid diagram type.

    Args:
        line: Raw line (surrounding whitespace is ignored)

    Returns:
        bool: True if the trimmed line starts with a diagram-type keyword
    """
    return DIAGRAM_HEADER_PATTERN.search(line.strip()) is not None


def classify_line(line: str) -> str | None:
    """
    Return the name of the first rule recognising the line as diagram syntax.

    Args:
        line: Raw line (surrounding whitespace is ignored)

    Returns:
        str | None: Rule name, or None when the line reads as prose
    """
    stripped = line.strip()
    if not stripped:
        return None
    for rule in SYNTAX_RULES:
        if rule.matches(stripped):
            return rule.name
    return None


def is_diagram_line(line: str) -> bool:
    """Check whether a line is Mermaid diagram syntax rather than prose."""
    return classify_line(line) is not None
