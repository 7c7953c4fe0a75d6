"""VueSense AI backend: knowledge-base prompt assembly and OpenAI chat relay."""

__version__ = "0.1.0"
