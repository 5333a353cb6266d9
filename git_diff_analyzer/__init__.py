"""Summarize the changes between two git tags with an LLM."""

__version__ = "0.1.0"
