"""Unit tests for src/services/hint_service.py"""

from typing import Any
from unittest.mock import Mock

import pytest
import requests

from src.core.exceptions import HintGenerationError
from src.services.hint_service import (
    HINT_ERROR_MESSAGE,
    DisabledHintGenerator,
    LLMHintGenerator,
)

API_URL = "https://llm.example.test/v1/chat/completions"


def completion(content: Any) -> dict[str, Any]:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def mock_session(json_body: Any = None, status_code: int = 200) -> Mock:
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.json.return_value = json_body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} error"
        )
    session = Mock(spec=requests.Session)
    session.post.return_value = response
    return session


def test_hint_from_completion() -> None:
    session = mock_session(completion("  Often red or green, grows on trees.  "))
    generator = LLMHintGenerator(API_URL, "llama2-chat", api_key="secret", session=session)

    hint = generator.generate_hint("apple")

    assert hint == "Often red or green, grows on trees."
    _, kwargs = session.post.call_args
    assert session.post.call_args.args[0] == API_URL
    assert kwargs["headers"]["Authorization"] == "Bearer secret"
    assert kwargs["json"]["model"] == "llama2-chat"
    assert kwargs["json"]["messages"][-1] == {
        "role": "user",
        "content": "Give a hint for the word: apple",
    }
    assert kwargs["timeout"] == 30.0


def test_no_authorization_header_without_key() -> None:
    session = mock_session(completion("hint"))
    LLMHintGenerator(API_URL, "llama2-chat", session=session).generate_hint("apple")
    assert "Authorization" not in session.post.call_args.kwargs["headers"]


def test_single_attempt_on_connection_error() -> None:
    session = Mock(spec=requests.Session)
    session.post.side_effect = requests.exceptions.ConnectionError("refused")
    generator = LLMHintGenerator(API_URL, "llama2-chat", session=session)

    with pytest.raises(HintGenerationError, match=HINT_ERROR_MESSAGE):
        generator.generate_hint("apple")
    assert session.post.call_count == 1


@pytest.mark.parametrize(
    "json_body, status_code",
    [
        (completion("hint"), 500),  # HTTP error
        ({"unexpected": "format"}, 200),  # not a chat completion
        ({"choices": []}, 200),  # no choices
        (completion(None), 200),  # no content
        (completion("   "), 200),  # blank content
        (completion([{"type": "text", "text": "x"}]), 200),  # list of content parts
        (completion(42), 200),  # not text at all
    ],
)
def test_bad_responses(json_body: Any, status_code: int) -> None:
    generator = LLMHintGenerator(
        API_URL, "llama2-chat", session=mock_session(json_body, status_code)
    )
    with pytest.raises(HintGenerationError):
        generator.generate_hint("apple")


def test_invalid_json_body() -> None:
    session = mock_session()
    session.post.return_value.json.side_effect = requests.exceptions.JSONDecodeError(
        "Expecting value", "<html>", 0
    )
    generator = LLMHintGenerator(API_URL, "llama2-chat", session=session)
    with pytest.raises(HintGenerationError):
        generator.generate_hint("apple")


def test_disabled_generator() -> None:
    with pytest.raises(HintGenerationError, match=HINT_ERROR_MESSAGE):
        DisabledHintGenerator().generate_hint("apple")
