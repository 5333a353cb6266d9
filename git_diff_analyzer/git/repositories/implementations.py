"""Concrete implementation of diff retrieval using the git executable."""

import subprocess

from git_diff_analyzer.errors import RetrievalError
from git_diff_analyzer.git.domain.value_objects import DiffExclusions, TagDiff, TagRange
from git_diff_analyzer.git.repositories.interfaces import DiffSource


class GitDiffSource(DiffSource):
    """Diff source that shells out to ``git diff``."""

    def __init__(
        self,
        exclusions: DiffExclusions | None = None,
        git_executable: str = "git",
    ) -> None:
        """
        Initialize GitDiffSource.

        Args:
            exclusions: File patterns to leave out of the diff. Defaults to
                        lock files and generated artifacts
            git_executable: Name or path of the git binary
        """
        self._exclusions = exclusions if exclusions is not None else DiffExclusions()
        self._git_executable = git_executable

    def build_command(self, tag_range: TagRange) -> list[str]:
        """Return the argument vector used to diff the two tags."""
        command = [self._git_executable, "diff", tag_range.from_tag, tag_range.to_tag]
        pathspecs = self._exclusions.to_pathspecs()
        if pathspecs:
            command.append("--")
            command.extend(pathspecs)
        return command

    def get_tag_diff(self, tag_range: TagRange) -> TagDiff:
        """
        Get the diff content between two tags.

        Args:
            tag_range: Repository path and the two tags to compare

        Returns:
            TagDiff containing the captured stdout of git diff

        Raises:
            RetrievalError: If the path is not a directory, git cannot be
                            started, or git exits with a non-zero status
        """
        repo_path = tag_range.repo_path
        if not repo_path.exists():
            raise RetrievalError(f"Repository path does not exist: {repo_path}")
        if not repo_path.is_dir():
            raise RetrievalError(f"Repository path is not a directory: {repo_path}")

        try:
            result = subprocess.run(
                self.build_command(tag_range),
                cwd=repo_path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise RetrievalError(
                f"Failed to get diff {tag_range} in {repo_path} "
                f"(exit code {e.returncode})",
                stderr=e.stderr,
            ) from e
        except OSError as e:
            raise RetrievalError(
                f"Failed to run '{self._git_executable}': {e}"
            ) from e

        return TagDiff(tag_range=tag_range, diff_content=result.stdout)
