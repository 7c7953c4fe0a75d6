"""Static knowledge base assembled from the volume files at startup.

The result is immutable and shared by every request for the lifetime of the
process. A failed read never aborts startup; the short fallback prompt is
used instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .prompts.system import FALLBACK_KNOWLEDGE_BASE

logger = logging.getLogger("vuesense.kb")

# (file name, volume title) in the order they are concatenated
VOLUMES: tuple[tuple[str, str], ...] = (
    ("kb-vol1-core.txt", "Core"),
    ("kb-vol2-strategic.txt", "Strategic"),
    ("kb-vol3-analysis.txt", "Analysis"),
    ("kb-vol4-reference.txt", "Reference"),
    ("kb-vol5-userguide.txt", "User Guide"),
    ("kb-vol6-whatif.txt", "What-If"),
    ("kb-vol7-prompts.txt", "Prompts"),
)

KB_HEADING = f"# VUESENSE AI - COMPLETE KNOWLEDGE BASE ({len(VOLUMES)} VOLUMES)"

# Below this length the knowledge base is reported as not loaded
LOADED_MIN_CHARS = 1000


@dataclass(frozen=True)
class KnowledgeBase:
    text: str
    volumes: tuple[str, ...] = ()
    is_fallback: bool = False

    def get_text(self) -> str:
        return self.text

    @property
    def is_loaded(self) -> bool:
        return len(self.text) > LOADED_MIN_CHARS

    @property
    def size_kb(self) -> str:
        return f"{len(self.text) / 1024:.2f} KB"


def fallback_knowledge_base() -> KnowledgeBase:
    return KnowledgeBase(text=FALLBACK_KNOWLEDGE_BASE, is_fallback=True)


def load_knowledge_base(directory: str | Path) -> KnowledgeBase:
    """Read every volume from *directory* and join them in fixed order.

    Any read or decode failure on any volume falls back to the minimal
    built-in prompt, so a partial knowledge base is never served.
    """
    base = Path(directory)
    try:
        texts = [
            (base / filename).read_text(encoding="utf-8")
            for filename, _ in VOLUMES
        ]
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading knowledge base from %s: %s", base, e)
        logger.warning("Using fallback knowledge base")
        return fallback_knowledge_base()

    text = "\n" + KB_HEADING + "\n\n" + "\n\n".join(texts) + "\n"
    kb = KnowledgeBase(text=text, volumes=tuple(title for _, title in VOLUMES))

    logger.info("Knowledge base loaded (%d volumes)", len(kb.volumes))
    logger.info("Total KB size: %s", kb.size_kb)
    logger.info("Volumes loaded: %s", ", ".join(kb.volumes))
    return kb
