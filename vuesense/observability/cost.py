"""Estimated cost of a completion call.

Pricing per OpenAI published rates (per 1M tokens). Adjust MODEL_PRICING when
rates change; unknown models are priced as the default model.
"""

from __future__ import annotations

# Pricing per 1M tokens (USD)
MODEL_PRICING: dict[str, dict[str, float]] = {
    "gpt-4o-mini": {
        "input": 0.15,
        "output": 0.60,
    },
    "gpt-4o": {
        "input": 2.50,
        "output": 10.00,
    },
    "gpt-4.1-mini": {
        "input": 0.40,
        "output": 1.60,
    },
    "gpt-4.1": {
        "input": 2.00,
        "output": 8.00,
    },
}

DEFAULT_MODEL = "gpt-4o-mini"


def _pricing_for(model: str) -> dict[str, float]:
    if model in MODEL_PRICING:
        return MODEL_PRICING[model]
    # Provider-reported names carry a snapshot suffix, e.g. gpt-4o-mini-2024-07-18
    for name in sorted(MODEL_PRICING, key=len, reverse=True):
        if model.startswith(name + "-"):
            return MODEL_PRICING[name]
    return MODEL_PRICING[DEFAULT_MODEL]


def calculate_cost(
    input_tokens: int,
    output_tokens: int,
    model: str = DEFAULT_MODEL,
) -> dict:
    """Calculate the cost of a single completion call.

    Returns:
        dict with input_cost_usd, output_cost_usd, total_cost_usd,
        and the model and token counts used.
    """
    pricing = _pricing_for(model)

    input_cost = (input_tokens / 1_000_000) * pricing["input"]
    output_cost = (output_tokens / 1_000_000) * pricing["output"]
    total_cost = input_cost + output_cost

    return {
        "model": model,
        "input_tokens": input_tokens,
        "output_tokens": output_tokens,
        "input_cost_usd": round(input_cost, 6),
        "output_cost_usd": round(output_cost, 6),
        "total_cost_usd": round(total_cost, 6),
    }
