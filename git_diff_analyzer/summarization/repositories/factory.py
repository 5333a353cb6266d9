"""Factory for creating LLM agent instances."""

from git_diff_analyzer.config import AppConfig, normalize_provider
from git_diff_analyzer.summarization.repositories.implementations import (
    LangChainClaudeAgent,
    LangChainOpenAIAgent,
)
from git_diff_analyzer.summarization.repositories.interfaces import SummaryService


def create_llm_agent(config: AppConfig) -> SummaryService:
    """
    Create an LLM agent instance based on configuration.

    Args:
        config: Loaded application configuration

    Returns:
        LLM agent instance (OpenAI or Claude)

    Raises:
        ConfigError: If the configured provider is not supported
    """
    provider = normalize_provider(config.llm.provider)

    if provider == "anthropic":
        return LangChainClaudeAgent(config.llm, template_path=config.template_path)
    return LangChainOpenAIAgent(config.llm, template_path=config.template_path)
