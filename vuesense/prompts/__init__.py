from .system import (
    CRITICAL_INSTRUCTIONS,
    FALLBACK_KNOWLEDGE_BASE,
    PORTFOLIO_DATA_HEADER,
    SYSTEM_PREAMBLE,
    build_system_prompt,
)

__all__ = [
    "CRITICAL_INSTRUCTIONS",
    "FALLBACK_KNOWLEDGE_BASE",
    "PORTFOLIO_DATA_HEADER",
    "SYSTEM_PREAMBLE",
    "build_system_prompt",
]
