"""
Hints for the solution word, generated by a language model.

The model is reached through an OpenAI-compatible chat completions endpoint.
A single attempt is made; any failure surfaces as a HintGenerationError.
"""

import logging
from typing import Any, Optional, Protocol

import requests

from src.core.exceptions import HintGenerationError

logger = logging.getLogger(__name__)

HINT_ERROR_MESSAGE = "Failed to generate hint. Please try again later."

SYSTEM_PROMPT = (
    "You are an assistant who helps users guess words by providing hints. "
    "Please provide a hint for the given word in a clear and concise manner. "
    "Never include the word itself in the hint."
)


class HintGenerator(Protocol):
    def generate_hint(self, solution: str) -> str:
        """Natural language hint for `solution`."""
        ...


class DisabledHintGenerator:
    """Used when no hint endpoint is configured."""

    def generate_hint(self, solution: str) -> str:
        logger.warning("Hint requested, but no hint endpoint is configured.")
        raise HintGenerationError(HINT_ERROR_MESSAGE)


class LLMHintGenerator:
    def __init__(
        self,
        api_url: str,
        model: str,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_url = api_url
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def generate_hint(self, solution: str) -> str:
        try:
            response = self.session.post(
                self.api_url,
                headers=self._headers(),
                json=self._payload(solution),
                timeout=self.timeout,
            )
            response.raise_for_status()
            hint = self._extract_text(response.json())
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error("Failed to get hint from LLM: %s", e)
            raise HintGenerationError(HINT_ERROR_MESSAGE) from e

        if not hint:
            logger.error("LLM returned an empty hint.")
            raise HintGenerationError(HINT_ERROR_MESSAGE)
        return hint

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _payload(self, solution: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f"Give a hint for the word: {solution}"},
            ],
            "max_tokens": 100,
            "temperature": 0.7,
        }

    @staticmethod
    def _extract_text(result: Any) -> str:
        """Raises ValueError if the response does not look like a chat completion."""
        try:
            content = result["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ValueError(f"Unexpected LLM API response format: {result!r}") from e
        if content is None:
            return ""
        if not isinstance(content, str):
            raise ValueError(f"LLM API returned non-text content: {content!r}")
        return content.strip()
