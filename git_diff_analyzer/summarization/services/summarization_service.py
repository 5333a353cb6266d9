"""Summarization service for orchestrating diff analysis."""

from git_diff_analyzer.errors import SummarizationError
from git_diff_analyzer.git.domain.value_objects import TagDiff
from git_diff_analyzer.summarization.domain.value_objects import (
    DiffSizeConfig,
    DiffSummaryInput,
)
from git_diff_analyzer.summarization.repositories.interfaces import SummaryService

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Roughly estimate the token count of a text (about 4 characters per token)."""
    return max(1, len(text) // CHARS_PER_TOKEN) if text else 0


class SummarizationService:
    """Service for orchestrating diff summarization."""

    def __init__(
        self,
        summary_service: SummaryService,
        diff_size_config: DiffSizeConfig | None = None,
    ) -> None:
        """
        Initialize SummarizationService.

        Args:
            summary_service: Repository for LLM-based summarization
            diff_size_config: Configuration for diff size limits. Defaults to DiffSizeConfig()
        """
        self._summary_service = summary_service
        self._diff_size_config = diff_size_config or DiffSizeConfig()

    def summarize_diff(self, project: str, diff: TagDiff) -> str:
        """
        Generate a markdown summary for a diff between two tags.

        Args:
            project: Name of the project the diff belongs to
            diff: TagDiff containing the diff content

        Returns:
            Markdown-formatted summary of the diff

        Raises:
            SummarizationError: If the diff exceeds the size limit or the
                                summarization fails
        """
        max_size = self._diff_size_config.max_diff_size
        diff_size = len(diff.diff_content)
        if max_size and diff_size > max_size:
            raise SummarizationError(
                f"Diff between {diff.tag_range.from_tag} and {diff.tag_range.to_tag} "
                f"is {diff_size} characters, above the limit of {max_size}. "
                "Raise --max-diff-size or narrow the tag range."
            )

        input_data = DiffSummaryInput(project=project, diff=diff)
        return self._summary_service.summarize_diff(input_data)
