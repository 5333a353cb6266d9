"""Value objects for the output domain."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class OutputPaths:
    """Locations of the diff and summary files for one tag range."""

    diff_file: Path
    summary_file: Path

    @classmethod
    def for_range(
        cls, output_dir: Path, project: str, from_tag: str, to_tag: str
    ) -> "OutputPaths":
        """
        Build the file names for a tag range.

        Tag names are used verbatim, so a tag containing a path separator
        produces a path that cannot be written.

        Args:
            output_dir: Directory the files are written to
            project: Project name
            from_tag: Older tag
            to_tag: Newer tag

        Returns:
            OutputPaths named {project}_{from_tag}__{to_tag}.txt and
            {project}_{from_tag}__{to_tag}_summary.txt
        """
        stem = f"{project}_{from_tag}__{to_tag}"
        return cls(
            diff_file=output_dir / f"{stem}.txt",
            summary_file=output_dir / f"{stem}_summary.txt",
        )
