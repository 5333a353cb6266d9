"""Git service for coordinating Git operations."""

from pathlib import Path

from git_diff_analyzer.git.domain.value_objects import TagDiff, TagRange
from git_diff_analyzer.git.repositories.interfaces import DiffSource


class GitService:
    """Service for Git operations."""

    def __init__(self, diff_source: DiffSource) -> None:
        """
        Initialize GitService.

        Args:
            diff_source: Implementation used to produce diffs
        """
        self._diff_source = diff_source

    def get_tag_diff(self, repo_path: Path, from_tag: str, to_tag: str) -> TagDiff:
        """
        Get the diff content between two tags.

        Args:
            repo_path: Path to the git repository
            from_tag: Older tag
            to_tag: Newer tag

        Returns:
            TagDiff containing the diff content between the two tags
        """
        tag_range = TagRange(repo_path=repo_path, from_tag=from_tag, to_tag=to_tag)
        return self._diff_source.get_tag_diff(tag_range)
