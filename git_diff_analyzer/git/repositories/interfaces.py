"""Repository interfaces for Git operations."""

from abc import ABC, abstractmethod

from git_diff_analyzer.git.domain.value_objects import TagDiff, TagRange


class DiffSource(ABC):
    """Interface for retrieving the diff between two tags."""

    @abstractmethod
    def get_tag_diff(self, tag_range: TagRange) -> TagDiff:
        """
        Get the diff content between two tags.

        Args:
            tag_range: Repository path and the two tags to compare

        Returns:
            TagDiff containing the complete diff text (empty if the tags
            point at identical trees)

        Raises:
            RetrievalError: If the diff cannot be produced
        """
        ...
