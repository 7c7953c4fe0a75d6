from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    messages: Optional[list[ChatMessage]] = None
    # Replaces the portfolio block extracted from the caller's system message
    context: Optional[str] = None


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TokenUsage(_CamelModel):
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


class ChatResponse(_CamelModel):
    response: str
    usage: TokenUsage
    model: str
    timestamp: str


class HealthResponse(_CamelModel):
    status: str = "ok"
    message: str
    timestamp: str
    kb_loaded: bool
    kb_size: str
    volumes: int


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
