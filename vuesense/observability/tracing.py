"""LangSmith tracing for completion calls.

langchain-core picks up LangSmith on its own once LANGCHAIN_TRACING_V2=true
and LANGCHAIN_API_KEY are set (LANGCHAIN_PROJECT selects the project). Each
relayed chat request becomes one "vuesense-chat" run carrying the outbound
message count and the configured model.
"""

from __future__ import annotations

import os
import uuid


def configure_tracing() -> bool:
    """Report whether completion calls will be traced; logged at startup."""
    enabled = os.getenv("LANGCHAIN_TRACING_V2", "").lower() == "true"
    has_key = bool(os.getenv("LANGCHAIN_API_KEY"))
    return enabled and has_key


def get_run_config(
    *,
    tags: list[str] | None = None,
    metadata: dict | None = None,
) -> dict:
    """Run config for one ``ChatOpenAI.ainvoke`` call.

    Every run is tagged "vuesense"; *tags* and *metadata* are added on top.
    The run id is also copied into the metadata as a string so relay logs
    can be matched to traces.
    """
    run_id = uuid.uuid4()

    all_tags = ["vuesense"]
    if tags:
        all_tags.extend(tags)

    all_metadata = {"run_id": str(run_id)}
    if metadata:
        all_metadata.update(metadata)

    return {
        "run_id": run_id,
        "run_name": "vuesense-chat",
        "tags": all_tags,
        "metadata": all_metadata,
    }
