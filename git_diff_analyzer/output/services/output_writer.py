"""Service for writing diff and summary files."""

from pathlib import Path

from git_diff_analyzer.errors import WriteError
from git_diff_analyzer.output.domain.value_objects import OutputPaths


class OutputWriter:
    """Writes analysis results to plain-text files."""

    def __init__(self, output_dir: Path | None = None) -> None:
        """
        Initialize OutputWriter.

        Args:
            output_dir: Directory for output files. Defaults to the current
                        working directory
        """
        self._output_dir = output_dir if output_dir is not None else Path(".")

    def paths_for(self, project: str, from_tag: str, to_tag: str) -> OutputPaths:
        return OutputPaths.for_range(self._output_dir, project, from_tag, to_tag)

    def write_diff(self, paths: OutputPaths, diff_text: str) -> Path:
        """Write the raw diff, replacing any existing file."""
        self._write_text(paths.diff_file, diff_text)
        return paths.diff_file

    def write_summary(self, paths: OutputPaths, summary_text: str) -> Path:
        """Write the summary, replacing any existing file."""
        self._write_text(paths.summary_file, summary_text)
        return paths.summary_file

    def write(
        self,
        project: str,
        from_tag: str,
        to_tag: str,
        diff_text: str,
        summary_text: str,
    ) -> OutputPaths:
        """
        Write both the diff and the summary files.

        Args:
            project: Project name
            from_tag: Older tag
            to_tag: Newer tag
            diff_text: Raw diff content
            summary_text: Summary content

        Returns:
            The paths of the written files

        Raises:
            WriteError: If either file cannot be written
        """
        paths = self.paths_for(project, from_tag, to_tag)
        self.write_diff(paths, diff_text)
        self.write_summary(paths, summary_text)
        return paths

    @staticmethod
    def _write_text(path: Path, text: str) -> None:
        try:
            # newline="" keeps the content byte-for-byte on every platform
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            raise WriteError(f"Failed to write {path}: {e}") from e
