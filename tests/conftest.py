"""Shared test fixtures."""

import pytest
import respx

from vuesense.completion import Completion, CompletionClient, CompletionError
from vuesense.config import Settings
from vuesense.knowledge_base import VOLUMES, KnowledgeBase

OPENAI_BASE_URL = "http://openai.test/v1"
API_KEY = "sk-test-123"

KB_TEXT = "# TEST KNOWLEDGE BASE\n" + ("Mendoza Line rules. " * 80)


def openai_completion(
    content: str = "Team Atlas is at risk.",
    model: str = "gpt-4o-mini-2024-07-18",
    prompt_tokens: int = 1200,
    completion_tokens: int = 80,
) -> dict:
    """A chat.completion body as returned by the OpenAI API."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            "total_tokens": prompt_tokens + completion_tokens,
        },
    }


def openai_error(message: str, type_: str = "invalid_request_error", code: str | None = None) -> dict:
    return {"error": {"message": message, "type": type_, "param": None, "code": code}}


class FakeBackend:
    """Records outbound message lists and returns a canned completion."""

    def __init__(self, result: Completion | None = None, error: Exception | None = None):
        self.result = result or Completion(
            content="Team Atlas is at risk.",
            model="gpt-4o-mini-2024-07-18",
            usage={"input_tokens": 1200, "output_tokens": 80, "total_tokens": 1280},
        )
        self.error = error
        self.calls: list[list[dict]] = []

    async def complete(self, messages: list[dict]) -> Completion:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def settings():
    return Settings(openai_api_key=API_KEY, openai_base_url=OPENAI_BASE_URL)


@pytest.fixture
def dev_settings():
    return Settings(
        openai_api_key=API_KEY,
        openai_base_url=OPENAI_BASE_URL,
        environment="development",
    )


@pytest.fixture
def knowledge_base():
    return KnowledgeBase(text=KB_TEXT, volumes=tuple(title for _, title in VOLUMES))


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def failing_backend():
    def _make(status_code: int | None, message: str = "upstream failed"):
        return FakeBackend(error=CompletionError(message, status_code=status_code))

    return _make


@pytest.fixture
def mock_openai():
    """RESPX router scoped to the test OpenAI base URL."""
    with respx.mock(base_url=OPENAI_BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def completion_client(settings, mock_openai):
    """CompletionClient wired to the mocked base URL."""
    return CompletionClient(settings)
