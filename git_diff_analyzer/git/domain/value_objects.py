"""Value objects for Git domain."""

from dataclasses import dataclass
from pathlib import Path

# Lock files and generated artifacts that only add noise to a summary.
# Glob pathspecs: ``*`` stays within one path component, ``**/`` matches any depth.
DEFAULT_EXCLUDED_PATTERNS: tuple[str, ...] = (
    "**/package-lock.json",
    "**/yarn.lock",
    "**/pnpm-lock.yaml",
    "**/composer.lock",
    "**/Gemfile.lock",
    "**/poetry.lock",
    "**/Pipfile.lock",
    "**/go.sum",
    "**/*.min.js",
    "**/*.min.css",
    "**/*.bundle.js",
    "**/*.bundle.css",
    "**/*.map",
    "**/dist/**",
    "**/build/**",
    "**/out/**",
    "**/output/**",
    "**/CHANGELOG.md",
    "**/.vscode/**",
    "**/.idea/**",
    "**/.DS_Store",
    "**/Thumbs.db",
)


@dataclass(frozen=True)
class TagRange:
    """Range between two tags of a repository."""

    repo_path: Path
    from_tag: str
    to_tag: str

    def __str__(self) -> str:
        return f"{self.from_tag}..{self.to_tag}"


@dataclass(frozen=True)
class DiffExclusions:
    """File patterns left out of the diff.

    Attributes:
        patterns: Git glob pathspecs, matched against paths relative to the
                  repository root
    """

    patterns: tuple[str, ...] = DEFAULT_EXCLUDED_PATTERNS

    @classmethod
    def none(cls) -> "DiffExclusions":
        """Exclusions that keep every file in the diff."""
        return cls(patterns=())

    def to_pathspecs(self) -> list[str]:
        """Render the patterns as git ``:(exclude,glob)`` pathspec arguments."""
        return [f":(exclude,glob){pattern}" for pattern in self.patterns]


@dataclass(frozen=True)
class TagDiff:
    """Diff content between two tags."""

    tag_range: TagRange
    diff_content: str

    @property
    def is_empty(self) -> bool:
        return not self.diff_content.strip()
