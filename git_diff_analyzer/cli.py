"""
Command-line entry point: summarize the changes between two git tags.

Usage:
    git-diff-analyzer --project NAME --from-tag OLD --to-tag NEW [--path REPO]

Writes {project}_{from}__{to}.txt (raw diff) and
{project}_{from}__{to}_summary.txt (LLM summary) to the output directory.
"""

import argparse
import sys
from pathlib import Path

from git_diff_analyzer.config import AppConfig
from git_diff_analyzer.errors import AnalyzerError, ConfigError
from git_diff_analyzer.git.domain.value_objects import DiffExclusions
from git_diff_analyzer.git.repositories.implementations import GitDiffSource
from git_diff_analyzer.git.services.git_service import GitService
from git_diff_analyzer.output.services.output_writer import OutputWriter
from git_diff_analyzer.pipeline import (
    AnalysisPipeline,
    AnalysisRequest,
    AnalysisStatus,
    default_repo_path,
)
from git_diff_analyzer.summarization.domain.value_objects import DiffSizeConfig
from git_diff_analyzer.summarization.repositories.factory import create_llm_agent
from git_diff_analyzer.summarization.services.summarization_service import (
    SummarizationService,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-diff-analyzer",
        description=(
            "Generate the git diff between two tags and summarize the changes "
            "using AI-powered analysis"
        ),
    )
    parser.add_argument(
        "--project",
        "-p",
        type=str,
        required=True,
        help="Project name, used for the default repository path and output file names",
    )
    parser.add_argument(
        "--from-tag",
        "-f",
        type=str,
        required=True,
        help="Older tag",
    )
    parser.add_argument(
        "--to-tag",
        "-t",
        type=str,
        required=True,
        help="Newer tag",
    )
    parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Path to the git repository (default: ./repositories/{project})",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=Path("."),
        help="Directory for the diff and summary files (default: current directory)",
    )
    parser.add_argument(
        "--provider",
        type=str,
        default=None,
        help="LLM provider: openai or anthropic (default: LLM_PROVIDER or openai)",
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Model name override (default: OPENAI_MODEL / ANTHROPIC_MODEL)",
    )
    parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="Path to a custom summary template file",
    )
    parser.add_argument(
        "--max-diff-size",
        type=int,
        default=0,
        help="Refuse to summarize diffs larger than this many characters (default: 0, no limit)",
    )
    parser.add_argument(
        "--include-generated",
        action="store_true",
        help="Keep lock files and generated artifacts in the diff",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to a .env file holding the API key (default: ./.env)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main function to parse arguments and run the analysis pipeline."""
    args = build_parser().parse_args(argv)
    repo_path = args.path if args.path is not None else default_repo_path(args.project)

    try:
        if args.max_diff_size < 0:
            raise ConfigError("--max-diff-size cannot be negative")

        config = AppConfig.load(
            env_file=args.env_file,
            provider=args.provider,
            model=args.model,
            template_path=args.template,
        )

        print(f"✓ Project: {args.project}")
        print(f"  Repository: {repo_path}")
        print(f"  Tags: {args.from_tag} → {args.to_tag}")
        print(f"  Model: {config.llm.provider}/{config.llm.model}")

        exclusions = DiffExclusions.none() if args.include_generated else DiffExclusions()
        git_service = GitService(GitDiffSource(exclusions=exclusions))
        summarization_service = SummarizationService(
            create_llm_agent(config),
            diff_size_config=DiffSizeConfig(max_diff_size=args.max_diff_size),
        )
        pipeline = AnalysisPipeline(
            git_service,
            summarization_service,
            OutputWriter(args.output_dir),
            progress=print,
        )

        result = pipeline.run(
            AnalysisRequest(
                project=args.project,
                from_tag=args.from_tag,
                to_tag=args.to_tag,
                repo_path=repo_path,
            )
        )
    except ConfigError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except AnalyzerError as e:
        print(f"✗ {e}", file=sys.stderr)
        sys.exit(1)

    if result.status is AnalysisStatus.SUMMARIZED and result.paths is not None:
        print("\n✓ Analysis complete!")
        print(f"  Diff file: {result.paths.diff_file}")
        print(f"  Summary file: {result.paths.summary_file}")
    sys.exit(0)


if __name__ == "__main__":
    main()
