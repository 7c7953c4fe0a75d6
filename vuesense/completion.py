import logging
from dataclasses import dataclass, field

import openai
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from .config import Settings
from .observability import extract_usage, get_run_config

logger = logging.getLogger("vuesense.completion")

_MESSAGE_TYPES = {
    "system": SystemMessage,
    "user": HumanMessage,
    "assistant": AIMessage,
}


class CompletionError(Exception):
    """Raised when the completion provider call fails for any reason."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


@dataclass
class Completion:
    content: str
    model: str
    usage: dict = field(default_factory=dict)


def to_langchain_messages(messages: list[dict]) -> list[BaseMessage]:
    """Convert ``{"role", "content"}`` dicts to LangChain message objects."""
    converted = []
    for msg in messages:
        message_cls = _MESSAGE_TYPES.get(msg["role"])
        if message_cls is None:
            raise ValueError(f"Unsupported message role: {msg['role']!r}")
        converted.append(message_cls(content=msg["content"]))
    return converted


class CompletionClient:
    """Chat completion client for the OpenAI API.

    Generation parameters are fixed per process from Settings. Retries are
    disabled so provider errors reach the caller unchanged.
    """

    def __init__(self, settings: Settings):
        self.model = settings.model
        self._llm = ChatOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            model=settings.model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            top_p=1,
            frequency_penalty=0,
            presence_penalty=0,
            max_retries=0,
            request_timeout=settings.request_timeout,
        )

    async def complete(self, messages: list[dict]) -> Completion:
        run_config = get_run_config(
            tags=["chat"],
            metadata={"message_count": len(messages), "model": self.model},
        )
        try:
            result = await self._llm.ainvoke(
                to_langchain_messages(messages),
                config=run_config,
            )
        except openai.APIStatusError as e:
            logger.warning("OpenAI HTTP %d: %s", e.status_code, e.message)
            raise CompletionError(e.message, status_code=e.status_code) from e
        except openai.APITimeoutError as e:
            logger.error("OpenAI request timed out")
            raise CompletionError(f"Request timed out: {e}") from e
        except openai.APIConnectionError as e:
            logger.error("OpenAI connection error: %s", e)
            raise CompletionError(f"Cannot connect to OpenAI: {e}") from e

        content = result.content if isinstance(result.content, str) else str(result.content)
        model = (result.response_metadata or {}).get("model_name") or self.model
        return Completion(content=content, model=model, usage=extract_usage(result))
