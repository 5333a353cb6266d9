"""Allow running the analyzer with ``python -m git_diff_analyzer``."""

from git_diff_analyzer.cli import main

if __name__ == "__main__":
    main()
