"""Prompt assembly and relay of one chat request to the completion provider."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Protocol, Sequence

from .completion import Completion, CompletionError
from .config import Settings
from .errors import (
    InputValidationError,
    UpstreamAuthError,
    UpstreamRateLimitError,
    UpstreamServiceError,
)
from .extraction import extract_portfolio_data
from .knowledge_base import KnowledgeBase
from .observability import calculate_cost
from .prompts import build_system_prompt
from .schemas import ChatMessage, ChatRequest, ChatResponse, TokenUsage

logger = logging.getLogger("vuesense.relay")


class CompletionBackend(Protocol):
    async def complete(self, messages: list[dict]) -> Completion: ...


def build_outbound_messages(system_prompt: str, messages: Sequence[ChatMessage]) -> list[dict]:
    """Prepend the assembled system message and drop every caller system message.

    The remaining caller messages keep their relative order.
    """
    outbound = [{"role": "system", "content": system_prompt}]
    outbound.extend(
        {"role": m.role, "content": m.content}
        for m in messages
        if m.role != "system"
    )
    return outbound


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Relay:
    """Turns a ChatRequest into a single provider call and shapes the reply.

    Holds only read-only state, so one instance serves all requests.
    """

    def __init__(self, knowledge_base: KnowledgeBase, backend: CompletionBackend, settings: Settings):
        self.knowledge_base = knowledge_base
        self.backend = backend
        self.settings = settings

    def system_prompt_for(self, request: ChatRequest) -> str:
        portfolio_data = (request.context or "").strip()
        if not portfolio_data:
            portfolio_data = extract_portfolio_data(request.messages or [])
        return build_system_prompt(self.knowledge_base.get_text(), portfolio_data)

    async def handle(self, request: ChatRequest) -> ChatResponse:
        if request.messages is None:
            raise InputValidationError()

        outbound = build_outbound_messages(self.system_prompt_for(request), request.messages)
        logger.info("Sending request to OpenAI (%d messages)", len(outbound))

        try:
            completion = await self.backend.complete(outbound)
        except CompletionError as e:
            logger.error("Completion failed status=%s: %s", e.status_code, e)
            if e.status_code == 429:
                raise UpstreamRateLimitError() from e
            if e.status_code == 401:
                raise UpstreamAuthError() from e
            raise self._service_error(e) from e
        except Exception as e:
            logger.exception("Unexpected error calling completion backend")
            raise self._service_error(e) from e

        usage = TokenUsage(
            input_tokens=completion.usage.get("input_tokens", 0),
            output_tokens=completion.usage.get("output_tokens", 0),
            total_tokens=completion.usage.get("total_tokens", 0),
        )
        cost = calculate_cost(usage.input_tokens, usage.output_tokens, model=completion.model)
        logger.info(
            "OpenAI response received model=%s tokens=%d cost=$%.6f",
            completion.model,
            usage.total_tokens,
            cost["total_cost_usd"],
        )

        return ChatResponse(
            response=completion.content,
            usage=usage,
            model=completion.model,
            timestamp=utc_timestamp(),
        )

    def _service_error(self, error: Exception) -> UpstreamServiceError:
        details = str(error) if self.settings.expose_error_details else None
        return UpstreamServiceError(details=details)
