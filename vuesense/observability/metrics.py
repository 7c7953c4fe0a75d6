"""Extract token usage from a chat model result."""

from __future__ import annotations


def extract_usage(message) -> dict:
    """Pull token counts from the AI message returned by ``ChatOpenAI.ainvoke``.

    Prefers the standard ``usage_metadata``; falls back to the raw OpenAI
    ``token_usage`` block in ``response_metadata``. Missing counts are 0.

    Returns:
        A dict with input_tokens, output_tokens and total_tokens.
    """
    usage = getattr(message, "usage_metadata", None)
    if usage:
        input_tokens = usage.get("input_tokens", 0)
        output_tokens = usage.get("output_tokens", 0)
        total_tokens = usage.get("total_tokens", input_tokens + output_tokens)
    else:
        metadata = getattr(message, "response_metadata", None) or {}
        token_usage = metadata.get("token_usage") or {}
        input_tokens = token_usage.get("prompt_tokens", 0)
        output_tokens = token_usage.get("completion_tokens", 0)
        total_tokens = token_usage.get("total_tokens", input_tokens + output_tokens)

    return {
        "input_tokens": input_tokens,
        "output_tokens": output_tokens,
        "total_tokens": total_tokens,
    }
