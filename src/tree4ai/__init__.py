"""Tree4AI: LLM-friendly project tree listings."""

__version__ = "1.0.0"
