"""Hosted LLM access."""

from workbench.core.llm.text_generator import TextGenerator, message_text

__all__ = ["TextGenerator", "message_text"]
