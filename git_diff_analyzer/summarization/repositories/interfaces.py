"""Repository interfaces for LLM summarization operations."""

from abc import ABC, abstractmethod

from git_diff_analyzer.summarization.domain.value_objects import DiffSummaryInput


class SummaryService(ABC):
    """Interface for LLM-based diff summarization."""

    @abstractmethod
    def summarize_diff(self, input_data: DiffSummaryInput) -> str:
        """
        Generate a markdown summary of a diff between two tags.

        Args:
            input_data: Project name and the diff to summarize

        Returns:
            Markdown-formatted summary of the diff

        Raises:
            SummarizationError: If the request fails or the response is unusable
        """
        ...
