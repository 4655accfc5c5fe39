"""
OpenAI API client with error handling.

Provides a wrapper around the OpenAI API for the cooking assistant chat.
"""

import logging
from typing import Any, Dict, List, Optional

from recipebox.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class OpenAIClientError(Exception):
    """Base exception for OpenAI client errors."""

    def __init__(self, message: str, configured: bool = True):
        self.configured = configured
        super().__init__(message)


class OpenAIClient:
    """
    Client for interacting with OpenAI API.

    The SDK client is built on first use, so constructing an OpenAIClient
    never fails even when no API key is configured.

    Example:
        >>> client = OpenAIClient()
        >>> reply = client.complete(
        ...     system_prompt="You are a helpful cooking assistant.",
        ...     user_prompt="What can I make with eggs?",
        ... )
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the OpenAI client.

        Args:
            settings: Settings to read the API key and model from.
                Defaults to the application settings.
        """
        self._settings = settings or default_settings
        self._client: Optional[Any] = None

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.openai_api_key)

    def _ensure_initialized(self) -> None:
        """Lazily initialize the OpenAI client."""
        if self._client is not None:
            return

        if not self.is_configured:
            raise OpenAIClientError(
                "OpenAI API key not configured. "
                "Set OPENAI_API_KEY environment variable.",
                configured=False,
            )

        from openai import OpenAI

        self._client = OpenAI(
            api_key=self._settings.openai_api_key,
            timeout=self._settings.openai_timeout_seconds,
            max_retries=self._settings.openai_max_retries,
        )

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """
        Send a completion request to OpenAI.

        Args:
            system_prompt: Instructions for the model behavior.
            user_prompt: The user's input to process.

        Returns:
            The model's response content as a string.

        Raises:
            OpenAIClientError: If the client is not configured or the API call fails.
        """
        self._ensure_initialized()

        messages: List[Dict[str, str]] = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

        try:
            response = self._client.chat.completions.create(
                model=self._settings.openai_model,
                messages=messages,
                temperature=self._settings.openai_temperature,
            )
        except Exception as e:
            logger.error(f"OpenAI API call failed: {e}")
            raise OpenAIClientError(f"OpenAI API call failed: {e}") from e

        return response.choices[0].message.content or ""
