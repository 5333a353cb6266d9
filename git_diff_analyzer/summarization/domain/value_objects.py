"""Value objects for Summarization domain."""

from dataclasses import dataclass

from git_diff_analyzer.git.domain.value_objects import TagDiff


@dataclass(frozen=True)
class DiffSummaryInput:
    """Input data for diff summarization between two tags."""

    project: str
    diff: TagDiff

    @property
    def from_tag(self) -> str:
        return self.diff.tag_range.from_tag

    @property
    def to_tag(self) -> str:
        return self.diff.tag_range.to_tag


@dataclass(frozen=True)
class DiffSizeConfig:
    """Size limit applied to a diff before it is sent for summarization.

    Attributes:
        max_diff_size: Maximum diff size in characters. 0 disables the check
    """

    max_diff_size: int = 0

    def __post_init__(self) -> None:
        if self.max_diff_size < 0:
            raise ValueError("max_diff_size cannot be negative")
