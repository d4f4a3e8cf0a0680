from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from sitebuilder.agent.llm_client import LLMClient, strip_code_fences


def _mock_openai(content):
    mock_message = MagicMock()
    mock_message.content = content

    mock_choice = MagicMock()
    mock_choice.message = mock_message

    mock_response = MagicMock()
    mock_response.choices = [mock_choice]

    mock_completions = MagicMock()
    mock_completions.create = AsyncMock(return_value=mock_response)

    mock_chat = MagicMock()
    mock_chat.completions = mock_completions

    mock_client_instance = AsyncMock()
    mock_client_instance.chat = mock_chat
    return mock_client_instance, mock_completions


@pytest.mark.asyncio
async def test_generate_text_sends_prompt_as_user_message():
    mock_client_instance, mock_completions = _mock_openai("  Hello there  ")

    with patch("sitebuilder.agent.llm_client.AsyncOpenAI", return_value=mock_client_instance):
        client = LLMClient(model_name="test-model")

        result = await client.generate_text("Say hi", max_tokens=50, temperature=0.1)

    assert result == "  Hello there  "
    mock_completions.create.assert_called_once_with(
        model="test-model",
        messages=[{"role": "user", "content": "Say hi"}],
        temperature=0.1,
        max_tokens=50,
    )


@pytest.mark.asyncio
async def test_generate_text_raises_on_empty_content():
    mock_client_instance, _ = _mock_openai("")

    with patch("sitebuilder.agent.llm_client.AsyncOpenAI", return_value=mock_client_instance):
        client = LLMClient(model_name="test-model")

        with pytest.raises(ValueError):
            await client.generate_text("Say hi", max_tokens=50)


def test_client_disables_sdk_retries():
    with patch("sitebuilder.agent.llm_client.AsyncOpenAI") as openai_cls:
        LLMClient(model_name="test-model", base_url="http://llm.local/v1", api_key="k")

    kwargs = openai_cls.call_args.kwargs
    assert kwargs["max_retries"] == 0
    assert kwargs["base_url"] == "http://llm.local/v1"
    assert kwargs["api_key"] == "k"


def test_strip_code_fences():
    assert strip_code_fences("```jsx\n<div>Hi</div>\n```") == "<div>Hi</div>"
    assert strip_code_fences("<div>Hi</div>") == "<div>Hi</div>"
    assert strip_code_fences("") == ""
