"""
External API client modules.

This module contains clients for interacting with external services
such as OpenAI for the cooking assistant chat.
"""

from recipebox.clients.openai_client import OpenAIClient, OpenAIClientError

__all__ = ["OpenAIClient", "OpenAIClientError"]
