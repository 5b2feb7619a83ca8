"""Completion client for the generative-AI endpoint used by Tier-1 extraction."""

from typing import Optional, Protocol

from openai import AsyncOpenAI, OpenAIError

from resume_match_ai.config import (
    AI_MAX_OUTPUT_TOKENS,
    AI_TEMPERATURE,
    AI_TIMEOUT_SECONDS,
    MODEL_NAME,
    OPENAI_API_KEY,
)
from resume_match_ai.errors import AIServiceError
from resume_match_ai.utils.logger import get_logger

logger = get_logger(__name__)

SYSTEM_PROMPT = "You are a professional resume parser. You reply with a single JSON object and nothing else."


class CompletionClient(Protocol):
    """Anything that turns a prompt into completion text (raises AIServiceError on failure)."""

    model: str

    async def complete(self, prompt: str) -> str: ...


class AICompletionClient:
    """
    Thin wrapper over AsyncOpenAI chat completions.
    One attempt per call: low temperature, bounded output, explicit timeout, no SDK retries.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: float = AI_TIMEOUT_SECONDS,
        temperature: float = AI_TEMPERATURE,
        max_tokens: int = AI_MAX_OUTPUT_TOKENS,
    ) -> None:
        self._api_key = api_key if api_key is not None else OPENAI_API_KEY
        self.model = model or MODEL_NAME
        self._timeout = timeout
        self._temperature = temperature
        self._max_tokens = max_tokens

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def complete(self, prompt: str) -> str:
        if not self.configured:
            raise AIServiceError("OPENAI_API_KEY is not set; AI parsing unavailable")
        client = AsyncOpenAI(api_key=self._api_key, timeout=self._timeout, max_retries=0)
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except OpenAIError as e:
            raise AIServiceError(f"Completion request failed: {e}") from e
        finally:
            await client.close()

        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message or not choice.message.content:
            raise AIServiceError("Completion returned no content")
        logger.info("AI response received: model=%s chars=%s", self.model, len(choice.message.content))
        return choice.message.content
