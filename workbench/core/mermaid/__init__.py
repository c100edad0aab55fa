"""
Mermaid diagram sanitization.

Exports:
  - sanitize_diagram_source: Full pipeline (fence -> extract -> quote)
  - strip_code_fence, extract_diagram, quote_node_labels: Individual stages
  - is_diagram_line, is_diagram_header: Line classification
"""

from workbench.core.mermaid.diagram_extractor import extract_diagram
from workbench.core.mermaid.diagram_syntax import (
    DIAGRAM_TYPES,
    classify_line,
    is_diagram_header,
    is_diagram_line,
)
from workbench.core.mermaid.fence_stripper import strip_code_fence
from workbench.core.mermaid.label_quoter import quote_label, quote_node_labels
from workbench.core.mermaid.sanitizer import sanitize_diagram_source

__all__ = [
    "DIAGRAM_TYPES",
    "classify_line",
    "extract_diagram",
    "is_diagram_header",
    "is_diagram_line",
    "quote_label",
    "quote_node_labels",
    "sanitize_diagram_source",
    "strip_code_fence",
]
