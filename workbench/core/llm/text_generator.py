"""
Text generation client.

Thin wrapper over a LangChain chat model: given a system prompt and a
conversation, return the generated text or raise TextGenerationError.
Transient upstream failures are retried with exponential backoff.

Dependencies: langchain_core, langchain_google_genai, tenacity
System role: Hosted LLM access for all panels
"""

import logging
from collections.abc import Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from tenacity import AsyncRetrying, stop_after_attempt, wait_exponential_jitter

from workbench.core.exceptions import TextGenerationError

logger = logging.getLogger(__name__)


def message_text(message: BaseMessage) -> str:
    """
    Flatten a chat model reply into plain text.

    Gemini models may return a list of content blocks instead of a string.

    Args:
        message: Model reply

    Returns:
        str: Concatenated text content
    """
    content = message.content
    if isinstance(content, str):
        return content
    parts: list[str] = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type", "text") == "text":
            parts.append(str(block.get("text", "")))
    return "".join(parts)


class TextGenerator:
    """
    Chat-model backed text generator.

    One instance per panel configuration (model and temperature), shared
    across requests.
    """

    def __init__(
        self,
        model_id: str,
        temperature: float = 0.7,
        api_key: str | None = None,
        max_retries: int = 3,
        timeout: float | None = 60.0,
        retry_wait_initial: float = 1.0,
        chat_model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize generator.

        Args:
            model_id: Model identifier, e.g. gemini-2.5-flash
            temperature: Sampling temperature
            api_key: Google Generative AI key (falls back to GOOGLE_API_KEY)
            max_retries: Attempts per call before giving up
            timeout: Per-request timeout in seconds
            retry_wait_initial: First backoff delay in seconds
            chat_model: Pre-built chat model, mainly for tests
        """
        self.model_id = model_id
        self.temperature = temperature
        self._max_retries = max_retries
        self._retry_wait_initial = retry_wait_initial

        if chat_model is None:
            chat_model = ChatGoogleGenerativeAI(
                model=model_id,
                temperature=temperature,
                google_api_key=api_key,
                timeout=timeout,
                max_retries=1,
            )
        self._model = chat_model

    async def _ainvoke_with_retry(self, messages: list[BaseMessage]) -> BaseMessage:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential_jitter(
                initial=self._retry_wait_initial,
                max=10,
                jitter=self._retry_wait_initial,
            ),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:agenerate - Retry {retry_state.attempt_number}/{self._max_retries}"
            ),
            reraise=True,
        )
        return await retrying(self._model.ainvoke, messages)

    async def agenerate(
        self,
        system_prompt: str,
        messages: Sequence[BaseMessage],
    ) -> str:
        """
        Generate a reply to a conversation.

        Args:
            system_prompt: Instructions for the model
            messages: Conversation turns, oldest first

        Returns:
            str: Generated text (may be empty)

        Raises:
            TextGenerationError: If every attempt fails
        """
        prompt: list[BaseMessage] = [SystemMessage(content=system_prompt), *messages]

        logger.info(
            f"{__name__}:agenerate - START model={self.model_id}, messages={len(prompt)}"
        )
        try:
            reply = await self._ainvoke_with_retry(prompt)
        except Exception as e:
            logger.error(
                f"{__name__}:agenerate - Generation failed: {type(e).__name__}: {e}"
            )
            raise TextGenerationError(
                "Text generation failed",
                model_id=self.model_id,
                details={"error_type": type(e).__name__},
            ) from e

        text = message_text(reply)
        logger.info(f"{__name__}:agenerate - END response_len={len(text)}")
        return text
