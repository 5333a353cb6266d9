"""Base class for LangChain-based LLM agents."""

from abc import ABC
from pathlib import Path
from typing import TYPE_CHECKING

from langchain_core.messages import HumanMessage, SystemMessage

from git_diff_analyzer.errors import ConfigError, SummarizationError
from git_diff_analyzer.summarization.domain.value_objects import DiffSummaryInput
from git_diff_analyzer.summarization.repositories.interfaces import SummaryService
from git_diff_analyzer.summarization.templates import DEFAULT_TEMPLATE_PATH

if TYPE_CHECKING:
    from langchain_core.language_models.chat_models import BaseChatModel


class BaseLangChainAgent(SummaryService, ABC):
    """Base class for LangChain-based diff summarization agents."""

    def __init__(self, template_path: Path | None = None) -> None:
        """Initialize the base agent with common configuration.

        Args:
            template_path: Path to a custom summary template file.
                          Defaults to the built-in template.
        """
        self._template_path = template_path or DEFAULT_TEMPLATE_PATH
        self._output_format_template = self._load_output_format_template()
        self._system_prompt = self._create_system_prompt()
        self._llm: BaseChatModel  # Set by subclasses

    def _load_output_format_template(self) -> str:
        """Load the output format template from file.

        Returns:
            The content of the template file.

        Raises:
            ConfigError: If the template file is missing or cannot be read.
        """
        try:
            return self._template_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigError(
                f"Summary template file not found: {self._template_path}"
            ) from None
        except OSError as e:
            raise ConfigError(
                f"Failed to read summary template file: {self._template_path}: {e}"
            ) from e

    @property
    def system_prompt(self) -> str:
        return self._system_prompt

    def summarize_diff(self, input_data: DiffSummaryInput) -> str:
        """
        Generate a markdown summary of a diff between two tags.

        A single request is made; failures are not retried.

        Args:
            input_data: Project name and the diff to summarize

        Returns:
            Markdown-formatted summary of the diff

        Raises:
            SummarizationError: If the API call fails or the response has no text
        """
        messages = [
            SystemMessage(content=self._system_prompt),
            HumanMessage(content=self.format_diff_input(input_data)),
        ]

        try:
            response = self._llm.invoke(messages)
        except Exception as e:
            raise self._to_summarization_error(e) from e

        content = getattr(response, "content", None)
        if isinstance(content, list):
            # If content is a list, extract text from it
            content = "".join(
                item if isinstance(item, str) else str(item.get("text", ""))
                for item in content
            )
        if not isinstance(content, str) or not content.strip():
            raise SummarizationError(
                "Malformed response from the summarization API: no summary text"
            )
        return content

    def _create_system_prompt(self) -> str:
        """Create the system prompt for diff summarization."""
        return f"""You are an expert software engineer analyzing git diffs between \
two release tags. Your role is to explain, for developers who depend on the \
project, what changed between the two releases and what side effects an \
update may have.

Your task:
1. Analyze the diff content between the two tags
2. Focus on changes that affect behavior, public API, performance or configuration
3. Ignore formatting, comments and other changes with no runtime effect
4. Mention the file name and the concrete code change for each finding
5. Classify each change:
   - New feature: A new functionality or component is being added
   - Bug fix: A bug or issue is being corrected
   - Enhancement: An existing feature is being improved
   - Upgrade/Dependency: Version updates or dependency changes
   - Refactoring: Code restructuring without behavior changes
   - Minor change: Small updates, documentation, or trivial changes

6. Generate a structured summary following the exact format below.
Do not prompt for further questions or comments.

Output format:
{self._output_format_template}"""

    @staticmethod
    def format_diff_input(input_data: DiffSummaryInput) -> str:
        """Format diff data into a prompt for the LLM."""
        prompt = f"""Diff Information:

Project: {input_data.project}
From tag: {input_data.from_tag}
To tag: {input_data.to_tag}

Diff Content:
{input_data.diff.diff_content}

Please analyze this diff and generate a markdown summary following the instructions provided."""

        return prompt

    @staticmethod
    def _to_summarization_error(error: Exception) -> SummarizationError:
        """Translate a provider SDK exception, keeping HTTP details when present."""
        status_code = getattr(error, "status_code", None)
        if not isinstance(status_code, int):
            status_code = None

        body: str | None = None
        response = getattr(error, "response", None)
        if response is not None:
            try:
                body = response.text
            except Exception:
                body = None
        if not body:
            raw_body = getattr(error, "body", None)
            body = str(raw_body) if raw_body else None

        message = f"Summarization request failed: {type(error).__name__}"
        if status_code is None:
            message = f"{message}: {error}"
        return SummarizationError(message, status_code=status_code, body=body)
