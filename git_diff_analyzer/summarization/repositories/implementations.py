"""Concrete implementations of LLM summarization using LangChain."""

from pathlib import Path
from typing import Any

from langchain_anthropic import ChatAnthropic
from langchain_openai import ChatOpenAI

from git_diff_analyzer.config import LLMSettings
from git_diff_analyzer.summarization.repositories.base_langchain_agent import (
    BaseLangChainAgent,
)


class LangChainOpenAIAgent(BaseLangChainAgent):
    """LangChain implementation using OpenAI for diff summarization."""

    def __init__(
        self,
        settings: LLMSettings,
        template_path: Path | None = None,
        **client_kwargs: Any,
    ) -> None:
        """
        Initialize the OpenAI agent.

        Args:
            settings: Credential, model and request limits
            template_path: Optional custom summary template file
            **client_kwargs: Extra keyword arguments for ChatOpenAI
                             (for example a custom http_client)
        """
        self._llm = ChatOpenAI(  # type: ignore[call-arg]
            model=settings.model,
            api_key=settings.api_key,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            timeout=settings.timeout,
            max_retries=0,
            **client_kwargs,
        )

        super().__init__(template_path=template_path)


class LangChainClaudeAgent(BaseLangChainAgent):
    """LangChain implementation using Claude for diff summarization."""

    def __init__(
        self,
        settings: LLMSettings,
        template_path: Path | None = None,
        **client_kwargs: Any,
    ) -> None:
        """
        Initialize the Claude agent.

        Args:
            settings: Credential, model and request limits
            template_path: Optional custom summary template file
            **client_kwargs: Extra keyword arguments for ChatAnthropic
        """
        self._llm = ChatAnthropic(  # type: ignore[call-arg]
            model=settings.model,
            api_key=settings.api_key,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            timeout=settings.timeout,
            max_retries=0,
            **client_kwargs,
        )

        super().__init__(template_path=template_path)
