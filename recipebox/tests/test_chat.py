"""
Tests for the cooking assistant: prompt building, the chat service,
the OpenAI client wrapper and the /api/chat route.
"""

from unittest.mock import MagicMock, patch

import pytest

from recipebox.clients.openai_client import OpenAIClient, OpenAIClientError
from recipebox.config import get_settings
from recipebox.errors import ChatCompletionError, LLMNotConfiguredError
from recipebox.services.chat_service import (
    SYSTEM_PROMPT,
    ChatService,
    build_user_prompt,
    format_recipe,
)


class TestPromptFormatting:
    """Tests for format_recipe and build_user_prompt."""

    def test_format_recipe(self, test_recipe):
        assert format_recipe(test_recipe) == (
            "Recipe: Pancakes\n"
            "Ingredients: Flour, Milk, Eggs\n"
            "Taste: sweet\n"
            "Cuisine: American\n"
            "Prep Time: 20 minutes"
        )

    def test_format_recipe_without_details(self, recipe_factory):
        recipe = recipe_factory.create(name="Toast", ingredients=[], prep_time=0)

        text = format_recipe(recipe)

        assert "Ingredients: \n" in text
        assert text.endswith("Prep Time: 0 minutes")

    def test_build_user_prompt(self):
        prompt = build_user_prompt("Something sweet", "Recipe: Pancakes", "Flour, Milk")

        assert prompt == (
            "Available Ingredients:\n"
            "Flour, Milk\n"
            "\n"
            "Available Recipes:\n"
            "Recipe: Pancakes\n"
            "\n"
            "User Request: Something sweet"
        )


class TestChatService:
    """Tests for ChatService."""

    def test_build_context(self, db_session, test_recipes, test_ingredients, llm_client):
        service = ChatService(db_session, llm_client)

        recipe_context, available_ingredients = service.build_context()

        blocks = recipe_context.split("\n\n")
        assert len(blocks) == 3
        assert all(block.startswith("Recipe: ") for block in blocks)
        assert set(available_ingredients.split(", ")) == {"Flour", "Milk", "Eggs"}

    def test_build_context_empty(self, db_session, llm_client):
        assert ChatService(db_session, llm_client).build_context() == ("", "")

    def test_suggest_sends_context(self, db_session, test_recipe, test_ingredients, llm_client):
        service = ChatService(db_session, llm_client)

        reply = service.suggest("I want something sweet")

        assert reply == "Try the Pancakes: you have flour, milk and eggs."
        llm_client.complete.assert_called_once()
        kwargs = llm_client.complete.call_args.kwargs
        assert kwargs["system_prompt"] == SYSTEM_PROMPT
        assert "Recipe: Pancakes" in kwargs["user_prompt"]
        assert kwargs["user_prompt"].endswith("User Request: I want something sweet")

    def test_suggest_not_configured(self, db_session, llm_client):
        llm_client.complete.side_effect = OpenAIClientError("no key", configured=False)

        with pytest.raises(LLMNotConfiguredError):
            ChatService(db_session, llm_client).suggest("hello")

    def test_suggest_api_failure(self, db_session, llm_client):
        llm_client.complete.side_effect = OpenAIClientError("rate limited")

        with pytest.raises(ChatCompletionError) as exc_info:
            ChatService(db_session, llm_client).suggest("hello")

        assert exc_info.value.status_code == 502
        assert "rate limited" in exc_info.value.details["reason"]


class TestOpenAIClient:
    """Tests for the OpenAI client wrapper."""

    def test_not_configured(self):
        client = OpenAIClient(get_settings(openai_api_key=None))

        assert client.is_configured is False
        with pytest.raises(OpenAIClientError) as exc_info:
            client.complete(system_prompt="s", user_prompt="u")

        assert exc_info.value.configured is False

    def test_complete(self):
        settings = get_settings(openai_api_key="sk-test", openai_model="gpt-4o-mini", openai_temperature=0.2)
        client = OpenAIClient(settings)

        with patch("openai.OpenAI") as mock_sdk:
            create = mock_sdk.return_value.chat.completions.create
            create.return_value.choices = [MagicMock(message=MagicMock(content="Make pancakes"))]

            reply = client.complete(system_prompt="system", user_prompt="user")

        assert reply == "Make pancakes"
        kwargs = create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["temperature"] == 0.2
        assert kwargs["messages"] == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ]
        assert mock_sdk.call_args.kwargs["api_key"] == "sk-test"

    def test_api_failure(self):
        client = OpenAIClient(get_settings(openai_api_key="sk-test"))

        with patch("openai.OpenAI") as mock_sdk:
            mock_sdk.return_value.chat.completions.create.side_effect = RuntimeError("timeout")

            with pytest.raises(OpenAIClientError) as exc_info:
                client.complete(system_prompt="s", user_prompt="u")

        assert exc_info.value.configured is True
        assert "timeout" in str(exc_info.value)


class TestChatRoute:
    """Tests for POST /api/chat endpoint."""

    def test_chat(self, client, test_recipe, llm_client):
        response = client.post("/api/chat", json={"message": "Something for breakfast"})

        assert response.status_code == 200
        assert response.json() == {"reply": "Try the Pancakes: you have flour, milk and eggs."}
        assert "Recipe: Pancakes" in llm_client.complete.call_args.kwargs["user_prompt"]

    def test_chat_empty_message(self, client):
        response = client.post("/api/chat", json={"message": ""})

        assert response.status_code == 422

    def test_chat_not_configured(self, client, llm_client):
        llm_client.complete.side_effect = OpenAIClientError("no key", configured=False)

        response = client.post("/api/chat", json={"message": "hello"})

        assert response.status_code == 503
        assert response.json()["detail"]["error_code"] == "EXTERNAL_LLM_NOT_CONFIGURED"

    def test_chat_api_failure(self, client, llm_client):
        llm_client.complete.side_effect = OpenAIClientError("upstream error")

        response = client.post("/api/chat", json={"message": "hello"})

        assert response.status_code == 502
        assert response.json()["detail"]["error_code"] == "EXTERNAL_LLM_FAILED"
