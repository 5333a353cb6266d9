"""Linear retrieve -> summarize -> write pipeline for one tag range."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from git_diff_analyzer.git.services.git_service import GitService
from git_diff_analyzer.output.domain.value_objects import OutputPaths
from git_diff_analyzer.output.services.output_writer import OutputWriter
from git_diff_analyzer.summarization.services.summarization_service import (
    SummarizationService,
    estimate_tokens,
)


def default_repo_path(project: str) -> Path:
    """Repository location used when --path is not given."""
    return Path("./repositories") / project


@dataclass(frozen=True)
class AnalysisRequest:
    """Parameters of one analysis run."""

    project: str
    from_tag: str
    to_tag: str
    repo_path: Path


class AnalysisStatus(str, Enum):
    """Outcome of a successful pipeline run."""

    SUMMARIZED = "summarized"
    NO_CHANGES = "no_changes"


@dataclass(frozen=True)
class AnalysisResult:
    """Result of a pipeline run."""

    status: AnalysisStatus
    paths: OutputPaths | None = None
    summary: str | None = None


class AnalysisPipeline:
    """Runs the diff retrieval, summarization and output stages in order."""

    def __init__(
        self,
        git_service: GitService,
        summarization_service: SummarizationService,
        output_writer: OutputWriter,
        progress: Callable[[str], None] | None = None,
    ) -> None:
        """
        Initialize AnalysisPipeline.

        Args:
            git_service: Service producing the tag diff
            summarization_service: Service summarizing the diff
            output_writer: Writer for the diff and summary files
            progress: Optional callback receiving progress messages
        """
        self._git_service = git_service
        self._summarization_service = summarization_service
        self._output_writer = output_writer
        self._progress = progress or (lambda message: None)

    def run(self, request: AnalysisRequest) -> AnalysisResult:
        """
        Run the pipeline once.

        The diff file is written before summarization starts, so it is kept
        when a later stage fails. An empty diff stops the run before any file
        is written or any API call is made.

        Args:
            request: Project, tags and repository path

        Returns:
            AnalysisResult describing what was produced

        Raises:
            RetrievalError: If the diff cannot be produced
            SummarizationError: If the summary cannot be generated
            WriteError: If an output file cannot be written
        """
        self._progress(
            f"📝 Generating diff for {request.project}: "
            f"{request.from_tag} → {request.to_tag} ({request.repo_path})"
        )
        diff = self._git_service.get_tag_diff(
            request.repo_path, request.from_tag, request.to_tag
        )

        if diff.is_empty:
            self._progress(
                f"No changes between {request.from_tag} and {request.to_tag}; "
                "nothing to summarize."
            )
            return AnalysisResult(status=AnalysisStatus.NO_CHANGES)

        paths = self._output_writer.paths_for(
            request.project, request.from_tag, request.to_tag
        )
        self._output_writer.write_diff(paths, diff.diff_content)
        self._progress(f"✓ Diff written to {paths.diff_file}")

        self._progress(
            f"📄 Generating summary (~{estimate_tokens(diff.diff_content)} diff tokens)..."
        )
        summary = self._summarization_service.summarize_diff(request.project, diff)

        self._output_writer.write_summary(paths, summary)
        self._progress(f"✓ Summary written to {paths.summary_file}")

        return AnalysisResult(
            status=AnalysisStatus.SUMMARIZED,
            paths=paths,
            summary=summary,
        )
